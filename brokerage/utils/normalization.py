"""Normalization helpers for identities, display prices and record ids."""

import math
import re
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Optional

_BASE36 = string.digits + string.ascii_lowercase
_NON_DIGITS = re.compile(r"[^\d]")


def normalize_email(email: Optional[str]) -> str:
    """Lowercase and strip an email for comparisons."""
    if not email:
        return ""
    return email.strip().lower()


def normalize_search(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def price_to_number(display_price: Optional[str]) -> Optional[float]:
    """
    Extract the numeric amount from a free-text display price.

    Every non-digit is dropped, so "₦3,500,000/yr" -> 3500000.0 and
    "$1,200.50" -> 120050.0. Returns None when no digit is present.
    """
    digits = _NON_DIGITS.sub("", display_price or "")
    if not digits:
        return None
    return float(digits)


def parse_price_bound(value: Optional[str]) -> Optional[float]:
    """
    Read a numeric price bound from a query string.

    Unlike display prices, bounds are plain numbers ("1000.50", "1.5e6").
    Anything that does not parse to a finite number means no bound.
    """
    if not value or not value.strip():
        return None
    try:
        bound = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(bound):
        return None
    return bound


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def new_record_id(prefix: str) -> str:
    """
    Build a key of the form <prefix><epoch millis>_<9 base36 chars>.

    Millisecond timestamps keep a fixed width, so ids under one prefix sort
    in creation order.
    """
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"{prefix}{int(time.time() * 1000)}_{suffix}"


def newest_first(records: list[dict]) -> list[dict]:
    """Sort stored documents by createdAt, most recent first."""
    return sorted(records, key=lambda r: r.get("createdAt") or "", reverse=True)
