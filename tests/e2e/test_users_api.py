"""End-to-end tests for user and webhook endpoints."""

import base64
import json
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from svix.webhooks import Webhook

from virtue.interface.api.app import create_app
from tests.di import build_test_container

WEBHOOK_SECRET = "whsec_" + base64.b64encode(b"e2e-webhook-signing-secret").decode()


@pytest.fixture
def client(monkeypatch):
    """Create test client with test container."""
    monkeypatch.setenv("AUTH__WEBHOOK_SECRET", WEBHOOK_SECRET)
    return TestClient(create_app(build_test_container()))


def auth(token: str) -> dict[str, str]:
    """Bearer header for the mock identity verifier."""
    return {"Authorization": f"Bearer {token}"}


def deliver(client, event: dict, secret: str = WEBHOOK_SECRET):
    """POST a signed webhook delivery."""
    body = json.dumps(event)
    msg_id = "msg_e2e"
    sent_at = datetime.now(timezone.utc)
    return client.post(
        "/webhooks",
        content=body,
        headers={
            "Content-Type": "application/json",
            "svix-id": msg_id,
            "svix-timestamp": str(int(sent_at.timestamp())),
            "svix-signature": Webhook(secret).sign(msg_id, sent_at, body),
        },
    )


def user_event(external_id: str, **data) -> dict:
    payload = {
        "id": external_id,
        "first_name": "Ada",
        "last_name": "Lovelace",
        "primary_email_address_id": "em_1",
        "email_addresses": [
            {"id": "em_0", "email_address": "old@example.com"},
            {"id": "em_1", "email_address": f"{external_id}@example.com"},
        ],
    }
    payload.update(data)
    return {"type": "user.created", "data": payload}


class TestCurrentUser:
    """End-to-end tests for /users/me and /users/sync."""

    def test_get_me_provisions_user(self, client):
        """The first authenticated request creates the user."""
        response = client.get("/users/me", headers=auth("alice"))

        assert response.status_code == 200
        data = response.json()
        assert data["externalId"] == "alice"
        assert data["email"] == "alice@example.com"
        assert data["username"] == "alice"
        assert data["avatarUrl"] == ""
        assert data["avatarUrlResolved"].endswith("seed=alice")

    def test_get_me_without_auth_fails(self, client):
        response = client.get("/users/me")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    def test_sync_required_without_lazy_provisioning(self, client, monkeypatch):
        """Unknown users must sync before other calls succeed."""
        monkeypatch.setenv("AUTH__LAZY_PROVISIONING", "false")

        before = client.get("/users/me", headers=auth("carol"))
        synced = client.post("/users/sync", headers=auth("carol"))
        after = client.get("/users/me", headers=auth("carol"))

        assert before.status_code == 404
        assert before.json()["message"] == "User not found. Call /users/sync first."
        assert synced.status_code == 200
        assert after.status_code == 200
        assert after.json()["id"] == synced.json()["id"]

    def test_sync_without_auth_fails(self, client):
        response = client.post("/users/sync")

        assert response.status_code == 401

    def test_update_me(self, client):
        """Username and avatar can be changed; edits survive later requests."""
        response = client.patch(
            "/users/me",
            json={"username": "  Alice A.  ", "avatarUrl": "https://img/a.png"},
            headers=auth("alice"),
        )

        assert response.status_code == 200
        assert response.json()["username"] == "Alice A."
        me = client.get("/users/me", headers=auth("alice")).json()
        assert me["username"] == "Alice A."
        assert me["avatarUrlResolved"] == "https://img/a.png"

    def test_update_me_rejects_blank_username(self, client):
        response = client.patch(
            "/users/me", json={"username": "   "}, headers=auth("alice")
        )

        assert response.status_code == 400
        assert response.json()["message"] == "username cannot be empty"


class TestPublicProfile:
    """End-to-end tests for /users/{id}."""

    def test_get_profile(self, client):
        """Public profiles omit private fields."""
        me = client.get("/users/me", headers=auth("alice")).json()

        response = client.get(f"/users/{me['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "alice"
        assert "email" not in data
        assert "externalId" not in data

    def test_get_missing_profile_returns_404(self, client):
        response = client.get("/users/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}


class TestWebhook:
    """End-to-end tests for identity provider webhooks."""

    def test_user_created_event_creates_user(self, client):
        """The user arrives with their primary email and full name."""
        response = deliver(client, user_event("user_ada"))

        assert response.status_code == 200
        assert response.json() == {"message": "Webhook received"}
        me = client.get("/users/me", headers=auth("user_ada")).json()
        assert me["username"] == "Ada Lovelace"
        assert me["email"] == "user_ada@example.com"

    def test_profile_image_url_is_used_as_avatar(self, client):
        deliver(
            client,
            user_event("user_pic", profile_image_url="https://img/pic.png"),
        )

        me = client.get("/users/me", headers=auth("user_pic")).json()
        assert me["avatarUrl"] == "https://img/pic.png"

    def test_other_events_are_acknowledged(self, client):
        response = deliver(client, {"type": "session.created", "data": {}})

        assert response.status_code == 200
        assert response.json() == {"message": "Webhook received"}

    def test_missing_email_is_rejected(self, client):
        response = deliver(client, user_event("user_noemail", email_addresses=[]))

        assert response.status_code == 400
        assert response.json() == {"message": "Missing email address"}

    def test_non_object_user_data_is_rejected(self, client):
        response = deliver(client, {"type": "user.created", "data": ["x"]})

        assert response.status_code == 400
        assert response.json() == {"message": "Malformed user payload"}

    def test_bad_signature_is_rejected(self, client):
        wrong_secret = "whsec_" + base64.b64encode(b"wrong-secret").decode()

        response = deliver(client, user_event("user_ada"), secret=wrong_secret)

        assert response.status_code == 400
        assert response.json() == {"message": "Error verifying webhook"}
