import pytest

from brokerage.core.config import settings
from brokerage.services import kv_store, request_service

API = settings.API_PREFIX

PROFILE = {
    "fullName": "Ada Obi",
    "gender": "female",
    "age": 30,
    "address": "12 Admiralty Way",
    "phone": "+2348000000000",
    "location": "Lekki",
    "interests": {"propertyTypes": ["Rent"], "serviceTypes": ["Property Management"]},
}

SERVICE_REQUEST = {
    "requestType": "service",
    "serviceType": "Property Management",
    "propertyType": "Apartment",
    "message": "Please manage my flat.",
}


class TestProfiles:
    @pytest.mark.asyncio
    async def test_no_profile_yet(self, client, user_headers):
        response = await client.get(f"{API}/profiles/me", headers=user_headers)
        assert response.status_code == 200
        assert response.json() == {"profile": None}

    @pytest.mark.asyncio
    async def test_save_and_read_back(self, client, user_headers):
        response = await client.post(f"{API}/profiles", json=PROFILE, headers=user_headers)
        assert response.status_code == 200
        profile = response.json()["profile"]
        assert profile["userId"] == "user-1"
        assert profile["email"] == "ada@example.com"
        assert profile["interests"]["propertyTypes"] == ["Rent"]
        assert profile["updatedAt"]

        for path in ("/profiles", "/profiles/me"):
            read = await client.get(f"{API}{path}", headers=user_headers)
            assert read.json()["profile"] == profile

    @pytest.mark.asyncio
    async def test_underage_rejected_and_not_stored(self, client, user_headers, db):
        response = await client.post(f"{API}/profiles/me", json={**PROFILE, "age": 17}, headers=user_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "You must be at least 18 years old"}
        assert kv_store.get(db, "profile_user-1") is None

    @pytest.mark.asyncio
    async def test_underage_keeps_existing_profile(self, client, user_headers):
        await client.post(f"{API}/profiles", json=PROFILE, headers=user_headers)
        await client.post(f"{API}/profiles", json={**PROFILE, "age": 12, "location": "Ikeja"}, headers=user_headers)
        read = await client.get(f"{API}/profiles/me", headers=user_headers)
        assert read.json()["profile"]["location"] == "Lekki"

    @pytest.mark.asyncio
    async def test_age_eighteen_accepted(self, client, user_headers):
        response = await client.post(f"{API}/profiles", json={**PROFILE, "age": "18"}, headers=user_headers)
        assert response.status_code == 200
        assert response.json()["profile"]["age"] == 18

    @pytest.mark.asyncio
    async def test_non_numeric_age_rejected(self, client, user_headers):
        response = await client.post(f"{API}/profiles", json={**PROFILE, "age": "old"}, headers=user_headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_requires_auth(self, client):
        response = await client.post(f"{API}/profiles", json=PROFILE)
        assert response.status_code == 401


class TestServiceRequests:
    @pytest.mark.asyncio
    async def test_create_notifies_admin_user_and_office(self, client, user_headers, admin_headers, outbox):
        response = await client.post(f"{API}/requests", json=SERVICE_REQUEST, headers=user_headers)
        assert response.status_code == 200
        request_id = response.json()["requestId"]
        assert request_id.startswith("request_user-1_")

        admin_feed = (await client.get(f"{API}/admin/notifications", headers=admin_headers)).json()
        assert len(admin_feed["notifications"]) == 1
        user_feed = (await client.get(f"{API}/notifications", headers=user_headers)).json()
        assert len(user_feed["notifications"]) == 1
        assert user_feed["notifications"][0]["userId"] == "user-1"

        assert [email.to for email in outbox] == [["office@letify.test"]]

    @pytest.mark.asyncio
    async def test_own_requests_newest_first(self, client, user_headers, other_user_headers, monkeypatch):
        stamps = iter(["2026-10-01T10:00:00.000Z", "2026-10-02T10:00:00.000Z", "2026-10-03T10:00:00.000Z"])
        monkeypatch.setattr(request_service, "utc_now_iso", lambda: next(stamps))

        await client.post(f"{API}/requests", json={**SERVICE_REQUEST, "message": "first"}, headers=user_headers)
        await client.post(f"{API}/requests", json={**SERVICE_REQUEST, "message": "second"}, headers=user_headers)
        await client.post(f"{API}/requests", json={**SERVICE_REQUEST, "message": "theirs"}, headers=other_user_headers)

        mine = (await client.get(f"{API}/requests/me", headers=user_headers)).json()["requests"]
        assert [r["message"] for r in mine] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_admin_sees_all(self, client, user_headers, other_user_headers, admin_headers):
        await client.post(f"{API}/requests", json=SERVICE_REQUEST, headers=user_headers)
        await client.post(
            f"{API}/requests", json={**SERVICE_REQUEST, "requestType": "purchase"}, headers=other_user_headers
        )
        response = await client.get(f"{API}/requests/all", headers=admin_headers)
        assert len(response.json()["requests"]) == 2

    @pytest.mark.asyncio
    async def test_invalid_request_type(self, client, user_headers):
        response = await client.post(
            f"{API}/requests", json={**SERVICE_REQUEST, "requestType": "rental"}, headers=user_headers
        )
        assert response.status_code == 400
        assert "requestType" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, client):
        response = await client.post(f"{API}/requests", json=SERVICE_REQUEST)
        assert response.status_code == 401


class TestMessages:
    @pytest.mark.asyncio
    async def test_thread_round_trip(self, client, user_headers, admin_headers, outbox):
        sent = await client.post(f"{API}/messages", json={"content": "Is the villa available?"}, headers=user_headers)
        assert sent.status_code == 200
        assert sent.json()["messageId"].startswith("message_user-1_")

        reply = await client.post(
            f"{API}/admin/messages",
            json={"userId": "user-1", "email": "ada@example.com", "content": "Yes it is."},
            headers=admin_headers,
        )
        assert reply.status_code == 200

        thread = (await client.get(f"{API}/messages", headers=user_headers)).json()["messages"]
        assert sorted(m["from"] for m in thread) == ["admin", "user"]

        user_feed = (await client.get(f"{API}/notifications", headers=user_headers)).json()["notifications"]
        assert len(user_feed) == 1

        assert [email.to for email in outbox] == [["office@letify.test"], ["ada@example.com"]]

    @pytest.mark.asyncio
    async def test_threads_are_private(self, client, user_headers, other_user_headers):
        await client.post(f"{API}/messages", json={"content": "Hello"}, headers=user_headers)
        theirs = (await client.get(f"{API}/messages", headers=other_user_headers)).json()
        assert theirs == {"messages": []}

    @pytest.mark.asyncio
    async def test_admin_reply_falls_back_to_profile_email(self, client, user_headers, admin_headers, outbox):
        await client.post(f"{API}/profiles", json=PROFILE, headers=user_headers)
        await client.post(
            f"{API}/admin/messages", json={"userId": "user-1", "content": "Hi"}, headers=admin_headers
        )
        assert outbox[-1].to == ["ada@example.com"]

    @pytest.mark.asyncio
    async def test_admin_reply_without_known_email_sends_nothing(self, client, admin_headers, outbox):
        response = await client.post(
            f"{API}/admin/messages", json={"userId": "ghost", "content": "Hi"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert outbox == []

    @pytest.mark.asyncio
    async def test_admin_lists_every_thread(self, client, user_headers, other_user_headers, admin_headers):
        await client.post(f"{API}/messages", json={"content": "One"}, headers=user_headers)
        await client.post(f"{API}/messages", json={"content": "Two"}, headers=other_user_headers)
        response = await client.get(f"{API}/admin/messages", headers=admin_headers)
        assert len(response.json()["messages"]) == 2

    @pytest.mark.asyncio
    async def test_empty_message_rejected(self, client, user_headers):
        response = await client.post(f"{API}/messages", json={"content": ""}, headers=user_headers)
        assert response.status_code == 400
