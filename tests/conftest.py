"""
Test configuration and fixtures.

Provides:
- In-memory SQLite store, emptied after each test
- Fake identity provider keyed by bearer token
- Captured outbox in place of the Resend dispatcher
- HTTPX AsyncClient against the ASGI app
"""
import os
from dataclasses import dataclass, field
from typing import AsyncGenerator, Generator

# Must be set before the app (and its settings) are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["TESTING"] = "1"
os.environ["ENV"] = "test"
os.environ["ADMIN_EMAILS"] = "Admin@Letify.test, owner@letify.test"
os.environ["SUPABASE_URL"] = "https://auth.letify.test"
os.environ["SUPABASE_ANON_KEY"] = "anon-key"
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "service-role-key"
os.environ["RESEND_API_KEY"] = ""
os.environ["ADMIN_NOTIFICATION_EMAIL"] = "office@letify.test"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import delete
from sqlalchemy.orm import Session

from brokerage.core.config import settings
from brokerage.core.deps import get_db
from brokerage.core.exceptions import AuthenticationError
from brokerage.db.base import Base
from brokerage.db.models import KVEntry
from brokerage.db.session import SessionLocal, engine
from brokerage.main import app
from brokerage.schemas.auth import Identity
from brokerage.services import email_service, identity_service

API = settings.API_PREFIX

ADMIN = Identity(id="admin-1", email="admin@letify.test")
USER = Identity(id="user-1", email="ada@example.com")
OTHER_USER = Identity(id="user-2", email="tunde@example.com")

TOKENS = {
    "admin-token": ADMIN,
    "user-token": USER,
    "other-token": OTHER_USER,
}

Base.metadata.create_all(bind=engine)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Session on the shared in-memory store; every key is removed afterwards."""
    session = SessionLocal()
    yield session
    session.rollback()
    session.execute(delete(KVEntry))
    session.commit()
    session.close()


@pytest.fixture(autouse=True)
def override_db(db: Session) -> Generator[None, None, None]:
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.pop(get_db, None)


# =============================================================================
# Provider Fakes
# =============================================================================


@pytest.fixture(autouse=True)
def fake_identity(monkeypatch):
    """Resolve the tokens in TOKENS; anything else is rejected."""

    async def resolve_token(token: str) -> Identity:
        identity = TOKENS.get(token)
        if identity is None:
            raise AuthenticationError("Unauthorized")
        return identity

    monkeypatch.setattr(identity_service, "resolve_token", resolve_token)


@dataclass
class SentEmail:
    to: list[str]
    subject: str
    html: str
    bcc: list[str] = field(default_factory=list)


@pytest.fixture(autouse=True)
def outbox(monkeypatch) -> list[SentEmail]:
    """Every email the app dispatches, in order."""
    sent: list[SentEmail] = []

    async def send_email(to, subject, html, bcc=None):
        recipients = [to] if isinstance(to, str) else list(to)
        sent.append(SentEmail(to=recipients, subject=subject, html=html, bcc=list(bcc or [])))
        return {"success": True, "data": {"id": f"email_{len(sent)}"}}

    monkeypatch.setattr(email_service, "send_email", send_email)
    return sent


# =============================================================================
# HTTP Client
# =============================================================================


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth("admin-token")


@pytest.fixture
def user_headers() -> dict[str, str]:
    return auth("user-token")


@pytest.fixture
def other_user_headers() -> dict[str, str]:
    return auth("other-token")
