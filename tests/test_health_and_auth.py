import pytest
from httpx import ASGITransport, AsyncClient

from brokerage import main
from brokerage.core.config import settings
from brokerage.core.security import extract_bearer_token, is_admin

API = settings.API_PREFIX


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_under_prefix(self, client):
        response = await client.get(f"{API}/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == settings.VERSION
        assert "env" not in body

    @pytest.mark.asyncio
    async def test_health_reports_env_in_dev(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ENV", "dev")
        response = await client.get("/health")
        assert response.json()["env"] == "dev"

    @pytest.mark.asyncio
    async def test_database_failure_uses_error_shape(self, monkeypatch):
        class BrokenEngine:
            def connect(self):
                raise RuntimeError("database is down")

        monkeypatch.setattr(main, "engine", BrokenEngine())
        # Starlette re-raises after the handler responds; keep the response instead
        transport = ASGITransport(app=main.app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as raw:
            response = await raw.get("/health")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    @pytest.mark.asyncio
    async def test_health_at_root(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client):
        response = await client.get("/health")
        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_shape(self, client):
        response = await client.get(f"{API}/nope")
        assert response.status_code == 404
        assert "error" in response.json()


class TestAuthGuards:
    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, client):
        response = await client.get(f"{API}/requests/me")
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    @pytest.mark.asyncio
    async def test_rejected_token_is_401(self, client):
        response = await client.get(
            f"{API}/requests/me", headers={"Authorization": "Bearer forged"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_non_bearer_scheme_is_401(self, client):
        response = await client.get(
            f"{API}/requests/me", headers={"Authorization": "Basic user-token"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_admin_route_without_token_is_401(self, client):
        response = await client.get(f"{API}/contact/all")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_admin_route_with_user_token_is_403(self, client, user_headers):
        response = await client.get(f"{API}/contact/all", headers=user_headers)
        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}

    @pytest.mark.asyncio
    async def test_admin_route_with_admin_token(self, client, admin_headers):
        response = await client.get(f"{API}/contact/all", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"inquiries": []}

    @pytest.mark.asyncio
    async def test_auth_checked_before_body(self, client, user_headers):
        response = await client.post(f"{API}/properties", json={}, headers=user_headers)
        assert response.status_code == 403


class TestSecurityHelpers:
    def test_is_admin_is_case_insensitive(self):
        assert is_admin("admin@letify.test")
        assert is_admin("  ADMIN@letify.TEST ")
        assert is_admin("owner@letify.test")

    def test_is_admin_rejects_others(self):
        assert not is_admin("ada@example.com")
        assert not is_admin("")
        assert not is_admin(None)

    def test_extract_bearer_token(self):
        assert extract_bearer_token("Bearer abc") == "abc"
        assert extract_bearer_token("bearer   abc ") == "abc"
        assert extract_bearer_token("Bearer ") is None
        assert extract_bearer_token("Token abc") is None
        assert extract_bearer_token(None) is None
