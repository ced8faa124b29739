"""Identity provider webhook signature verification.

Deliveries are signed with svix (``svix-id``, ``svix-timestamp`` and
``svix-signature`` headers, ``whsec_`` secrets); the svix library checks the
signature and the five minute timestamp window.
"""

from typing import Any, Mapping

from svix.webhooks import Webhook
from svix.webhooks import WebhookVerificationError as SvixVerificationError

from virtue.adapter.error import WebhookSecretError, WebhookVerificationError
from virtue.config import AuthSettings


class WebhookVerifier:
    """Verifies and decodes signed webhook deliveries."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize verifier.

        Args:
            auth_settings: Authentication settings (webhook secret)
        """
        self.auth_settings = auth_settings

    def verify(self, body: bytes, headers: Mapping[str, str]) -> dict[str, Any]:
        """Check the signature of a delivery and return its JSON payload.

        Args:
            body: Raw request body, exactly as received
            headers: Request headers

        Returns:
            Decoded JSON payload

        Raises:
            WebhookSecretError: If no usable webhook secret is configured
            WebhookVerificationError: If headers are missing, the timestamp is
                out of tolerance, no signature matches, or the payload is not
                a JSON object
        """
        webhook = self._webhook()

        try:
            payload = webhook.verify(body, dict(headers))
        except SvixVerificationError as e:
            raise WebhookVerificationError(str(e)) from e
        except ValueError as e:
            # Garbled signature entries, or a signed body that is not JSON
            raise WebhookVerificationError("Malformed webhook delivery") from e

        if not isinstance(payload, dict):
            raise WebhookVerificationError("Payload is not a JSON object")
        return payload

    def _webhook(self) -> Webhook:
        secret = self.auth_settings.webhook_secret
        if not secret:
            raise WebhookSecretError("Webhook secret is not configured")
        try:
            return Webhook(secret)
        except ValueError as e:
            raise WebhookSecretError("Webhook secret is not valid base64") from e
