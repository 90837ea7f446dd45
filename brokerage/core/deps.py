"""FastAPI dependencies for authentication, authorization, and database access."""

import logging
from typing import Generator, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from brokerage.core.exceptions import AuthenticationError, AuthorizationError
from brokerage.core.security import extract_bearer_token, is_admin
from brokerage.db.session import SessionLocal
from brokerage.schemas.auth import Identity
from brokerage.services import identity_service

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.

    Yields a database session and ensures it's closed after the request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


async def get_current_identity(
    authorization: Optional[str] = Header(default=None),
) -> Identity:
    """
    Resolve the bearer token into an identity (requireAuth).

    Raises:
        AuthenticationError 401: header absent/malformed or token rejected
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise AuthenticationError("Unauthorized")
    return await identity_service.resolve_token(token)


async def require_admin(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """
    Authenticated identity whose email is on the admin allow-list (requireAdmin).

    Raises:
        AuthenticationError 401: not authenticated
        AuthorizationError 403: authenticated but not an admin
    """
    if not is_admin(identity.email):
        logger.info("Admin route refused for user %s", identity.id)
        raise AuthorizationError("Forbidden")
    return identity
