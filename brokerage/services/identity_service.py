"""Supabase Auth identity provider.

Every authorized call re-validates its token against the provider; nothing is
cached between requests.
"""

import logging

import httpx

from brokerage.core.config import settings
from brokerage.core.exceptions import AuthenticationError, DependencyFailure
from brokerage.schemas.auth import Identity, UserSummary

logger = logging.getLogger(__name__)

USERS_PAGE_SIZE = 1000


def _auth_url(path: str) -> str:
    return f"{settings.SUPABASE_URL.rstrip('/')}/auth/v1{path}"


async def resolve_token(token: str) -> Identity:
    """
    Introspect a bearer token and return the caller identity.

    Raises:
        AuthenticationError: token rejected by the provider
        DependencyFailure: provider unreachable or misconfigured
    """
    if not settings.SUPABASE_URL:
        raise DependencyFailure("Identity provider not configured")

    headers = {
        "Authorization": f"Bearer {token}",
        "apikey": settings.SUPABASE_ANON_KEY,
    }
    try:
        async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
            response = await client.get(_auth_url("/user"), headers=headers)
    except httpx.HTTPError as exc:
        logger.warning("Identity provider request failed: %s", exc.__class__.__name__)
        raise DependencyFailure("Identity provider unavailable") from exc

    if response.status_code in (400, 401, 403, 404, 422):
        raise AuthenticationError("Unauthorized")
    if response.status_code >= 300:
        logger.error("Identity provider returned %s", response.status_code)
        raise DependencyFailure("Identity provider unavailable")

    try:
        data = response.json()
    except ValueError as exc:
        logger.error("Identity provider returned a non-JSON body")
        raise DependencyFailure("Identity provider unavailable") from exc

    user_id = data.get("id") if isinstance(data, dict) else None
    if not user_id:
        raise AuthenticationError("Unauthorized")

    email = data.get("email") or ""
    return Identity(id=user_id, email=email)


async def list_users() -> list[UserSummary]:
    """List every registered user via the admin API (service-role key)."""
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise DependencyFailure("Identity provider not configured")

    headers = {
        "Authorization": f"Bearer {settings.SUPABASE_SERVICE_ROLE_KEY}",
        "apikey": settings.SUPABASE_SERVICE_ROLE_KEY,
    }
    users: list[UserSummary] = []
    page = 1
    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
        while True:
            response = await client.get(
                _auth_url("/admin/users"),
                headers=headers,
                params={"page": page, "per_page": USERS_PAGE_SIZE},
            )
            response.raise_for_status()
            batch = response.json().get("users") or []
            users.extend(
                UserSummary(id=u["id"], email=u.get("email") or "") for u in batch
            )
            if len(batch) < USERS_PAGE_SIZE:
                break
            page += 1
    return users
