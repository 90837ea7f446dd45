"""Type aliases for stored documents and provider payloads."""

from __future__ import annotations

from typing import Any, TypeAlias

# A document as stored in the key-value namespace (camelCase keys)
Record: TypeAlias = dict[str, Any]
# Result envelope returned by outbound provider calls
JsonObject: TypeAlias = dict[str, object]
