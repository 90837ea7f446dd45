"""Bearer-token parsing and the admin allow-list check."""

from typing import Optional

from brokerage.core.config import settings
from brokerage.utils.normalization import normalize_email


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Return the token of an `Authorization: Bearer <token>` header.

    None when the header is absent, uses another scheme, or has no token.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


def is_admin(email: Optional[str]) -> bool:
    """Case-insensitive membership test against ADMIN_EMAILS."""
    normalized = normalize_email(email)
    return bool(normalized) and normalized in settings.admin_emails_set
