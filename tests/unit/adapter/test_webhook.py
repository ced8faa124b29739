"""Unit tests for WebhookVerifier."""

import base64
import json
from datetime import datetime, timedelta, timezone

import pytest
from svix.webhooks import Webhook

from virtue.adapter.error import WebhookSecretError, WebhookVerificationError
from virtue.adapter.webhook import WebhookVerifier
from virtue.config import AuthSettings

SECRET = "whsec_" + base64.b64encode(b"super-secret-signing-key").decode()


def signed_headers(
    body: bytes, msg_id: str = "msg_1", sent_at: datetime | None = None
) -> dict[str, str]:
    """Headers for a delivery signed the way the identity provider signs it."""
    sent_at = sent_at or datetime.now(timezone.utc)
    return {
        "svix-id": msg_id,
        "svix-timestamp": str(int(sent_at.timestamp())),
        "svix-signature": Webhook(SECRET).sign(msg_id, sent_at, body.decode()),
    }


@pytest.fixture
def verifier() -> WebhookVerifier:
    return WebhookVerifier(AuthSettings(webhook_secret=SECRET))


class TestWebhookVerifier:
    """Tests for delivery verification."""

    def test_valid_signature_returns_payload(self, verifier):
        """A correctly signed body is decoded."""
        body = json.dumps({"type": "user.created", "data": {"id": "u1"}}).encode()

        payload = verifier.verify(body, signed_headers(body))

        assert payload["type"] == "user.created"

    def test_any_matching_signature_is_accepted(self, verifier):
        """Several signatures may be sent during secret rotation."""
        body = b'{"type": "session.created"}'
        headers = signed_headers(body)
        headers["svix-signature"] = "v1,bm90LXRoaXMtb25l " + headers["svix-signature"]

        assert verifier.verify(body, headers)["type"] == "session.created"

    def test_header_names_are_case_insensitive(self, verifier):
        body = b'{"type": "user.created"}'
        headers = {k.title(): v for k, v in signed_headers(body).items()}

        assert verifier.verify(body, headers)["type"] == "user.created"

    def test_tampered_body_is_rejected(self, verifier):
        """Changing the body after signing invalidates it."""
        headers = signed_headers(b'{"type": "user.created"}')

        with pytest.raises(WebhookVerificationError):
            verifier.verify(b'{"type": "user.deleted"}', headers)

    def test_signature_from_another_secret_is_rejected(self, verifier):
        body = b'{"type": "user.created"}'
        headers = signed_headers(body)
        other = "whsec_" + base64.b64encode(b"someone-else").decode()
        headers["svix-signature"] = Webhook(other).sign(
            "msg_1", datetime.now(timezone.utc), body.decode()
        )

        with pytest.raises(WebhookVerificationError):
            verifier.verify(body, headers)

    def test_garbled_signature_header_is_rejected(self, verifier):
        body = b'{"type": "user.created"}'
        headers = signed_headers(body)
        headers["svix-signature"] = "not-a-signature"

        with pytest.raises(WebhookVerificationError):
            verifier.verify(body, headers)

    def test_missing_headers_are_rejected(self, verifier):
        """Unsigned deliveries are rejected."""
        with pytest.raises(WebhookVerificationError, match="Missing required headers"):
            verifier.verify(b"{}", {})

    def test_stale_timestamp_is_rejected(self, verifier):
        """Deliveries older than five minutes are treated as replays."""
        body = b'{"type": "user.created"}'
        an_hour_ago = datetime.now(timezone.utc) - timedelta(hours=1)

        with pytest.raises(WebhookVerificationError, match="too old"):
            verifier.verify(body, signed_headers(body, sent_at=an_hour_ago))

    def test_non_object_payload_is_rejected(self, verifier):
        """The payload must be a JSON object."""
        body = b"[1, 2, 3]"

        with pytest.raises(WebhookVerificationError, match="JSON object"):
            verifier.verify(body, signed_headers(body))

    def test_missing_secret_is_a_configuration_error(self):
        """Without a secret nothing can be verified."""
        verifier = WebhookVerifier(AuthSettings(webhook_secret=None))
        body = b"{}"

        with pytest.raises(WebhookSecretError):
            verifier.verify(body, signed_headers(body))
