import httpx
import pytest

from brokerage.core.config import settings
from brokerage.services import email_templates, http_service
from brokerage.services.email_service import RESEND_SEND_URL, html_to_text

# The autouse outbox fixture replaces the module attribute, so keep the real one
from brokerage.services.email_service import send_email as real_send_email


def _response(status_code: int, payload: dict) -> httpx.Response:
    return httpx.Response(status_code, json=payload, request=httpx.Request("POST", RESEND_SEND_URL))


@pytest.fixture
def resend_configured(monkeypatch):
    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test_key")
    monkeypatch.setattr(http_service, "_backoff", lambda attempt, base, cap: 0)


class TestSendEmail:
    @pytest.mark.asyncio
    async def test_not_configured(self, monkeypatch):
        calls = []

        async def fake_post(self, url, **kwargs):
            calls.append(url)
            return _response(200, {"id": "x"})

        monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)
        result = await real_send_email("ada@example.com", "Hi", "<p>Hi</p>")
        assert result == {"success": False, "error": "Email service not configured"}
        assert calls == []

    @pytest.mark.asyncio
    async def test_no_recipients(self, resend_configured):
        result = await real_send_email([], "Hi", "<p>Hi</p>")
        assert result == {"success": False, "error": "No recipients"}

    @pytest.mark.asyncio
    async def test_success_payload(self, resend_configured, monkeypatch):
        captured = {}

        async def fake_post(self, url, headers=None, json=None, **kwargs):
            captured.update(url=url, headers=headers, json=json)
            return _response(200, {"id": "email_123"})

        monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)
        result = await real_send_email(["a@example.com", "b@example.com"], "Subject", "<p>Hello<br>there</p>")

        assert result == {"success": True, "data": {"id": "email_123"}}
        assert captured["url"] == RESEND_SEND_URL
        assert captured["headers"]["Authorization"] == "Bearer re_test_key"
        assert captured["json"]["to"] == ["a@example.com", "b@example.com"]
        assert captured["json"]["from"] == settings.EMAIL_FROM
        assert captured["json"]["text"] == "Hello\nthere"
        assert "bcc" not in captured["json"]

    @pytest.mark.asyncio
    async def test_bcc_recipients_are_hidden(self, resend_configured, monkeypatch, caplog):
        captured = {}

        async def fake_post(self, url, headers=None, json=None, **kwargs):
            captured.update(json=json)
            return _response(200, {"id": "email_456"})

        monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)
        subscribers = [f"user{i}@example.com" for i in range(51)]
        result = await real_send_email("onboarding@resend.dev", "News", "<p>News</p>", bcc=subscribers + [""])

        assert result["success"] is True
        assert captured["json"]["to"] == ["onboarding@resend.dev"]
        assert captured["json"]["bcc"] == subscribers
        assert "over the provider limit of 50" in caplog.text

    @pytest.mark.asyncio
    async def test_retries_transient_status(self, resend_configured, monkeypatch):
        responses = [_response(503, {"message": "busy"}), _response(200, {"id": "email_1"})]

        async def fake_post(self, url, **kwargs):
            return responses.pop(0)

        monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)
        result = await real_send_email("a@example.com", "S", "<p>x</p>")
        assert result["success"] is True
        assert responses == []

    @pytest.mark.asyncio
    async def test_provider_error_is_returned_not_raised(self, resend_configured, monkeypatch):
        async def fake_post(self, url, **kwargs):
            return _response(422, {"message": "invalid from"})

        monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)
        result = await real_send_email("a@example.com", "S", "<p>x</p>")
        assert result == {"success": False, "error": {"message": "invalid from"}}

    @pytest.mark.asyncio
    async def test_transport_error_is_returned_not_raised(self, resend_configured, monkeypatch):
        async def fake_post(self, url, **kwargs):
            raise httpx.ConnectError("refused")

        monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)
        result = await real_send_email("a@example.com", "S", "<p>x</p>")
        assert result["success"] is False
        assert "ConnectError" in result["error"]


class TestTemplates:
    def test_html_to_text(self):
        assert html_to_text("<h2>Title</h2><p>a &amp; b</p>") == "Title\na & b"

    def test_booking_status_mentions_slot(self):
        subject, html = email_templates.booking_status(
            "inspection",
            {"name": "Ada", "status": "confirmed", "confirmedDate": "2026-11-03", "confirmedTime": "10:00"},
        )
        assert subject == "Your inspection request is confirmed"
        assert "2026-11-03" in html
        assert "10:00" in html

    def test_mailing_escapes_body(self):
        subject, html = email_templates.mailing("News", "<b>bold</b>")
        assert subject == "News"
        assert "&lt;b&gt;" in html
