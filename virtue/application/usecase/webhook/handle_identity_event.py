"""Handle identity provider webhook use case."""

from typing import Any, Mapping

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from virtue.adapter.webhook import WebhookVerifier
from virtue.domain.error import ValidationError
from virtue.domain.service import UserService
from virtue.domain.value import IdentityClaims

# Events that carry a full user profile
USER_EVENTS = frozenset({"user.created", "user.updated"})


class HandleIdentityEventRequest(BaseModel):
    """Raw webhook delivery."""

    body: bytes  # Exact request body; the signature covers these bytes
    headers: dict[str, str]  # Lowercased header names


class HandleIdentityEventResponse(BaseModel):
    """Webhook acknowledgement."""

    message: str = "Webhook received"


def primary_email(data: Mapping[str, Any]) -> str | None:
    """Pick the primary email address from a provider user payload.

    Falls back to the first address when no primary is marked.

    Raises:
        ValidationError: If the address list is not a list of objects
    """
    emails = data.get("email_addresses") or []
    if not isinstance(emails, list) or not all(isinstance(e, dict) for e in emails):
        raise ValidationError("Malformed email addresses")
    if not emails:
        return None

    primary_id = data.get("primary_email_address_id")
    primary = next((e for e in emails if primary_id and e.get("id") == primary_id), None)
    address = (primary or emails[0]).get("email_address")
    return address if isinstance(address, str) and address else None


def claims_from_payload(data: Mapping[str, Any], email: str) -> IdentityClaims:
    """Convert a provider user payload into identity claims.

    Raises:
        ValidationError: If a profile field has the wrong type
    """
    try:
        return IdentityClaims(
            external_id=data["id"],
            email=email,
            username=data.get("username"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            image_url=data.get("image_url") or data.get("profile_image_url"),
        )
    except PydanticValidationError as e:
        raise ValidationError("Malformed user payload") from e


class HandleIdentityEventUseCase:
    """Use case for keeping local users in step with the identity provider."""

    def __init__(
        self, webhook_verifier: WebhookVerifier, user_service: UserService
    ) -> None:
        """Initialize webhook use case.

        Args:
            webhook_verifier: Delivery signature verifier
            user_service: User domain service
        """
        self.webhook_verifier = webhook_verifier
        self.user_service = user_service

    async def execute(
        self, request: HandleIdentityEventRequest
    ) -> HandleIdentityEventResponse:
        """Execute webhook flow.

        Steps:
        1. Verify the delivery signature
        2. Ignore events that don't describe a user
        3. Upsert the user from the payload

        Raises:
            WebhookVerificationError: If the signature is invalid
            ValidationError: If a user event is malformed or has no email
                address
        """
        event = self.webhook_verifier.verify(request.body, request.headers)
        event_type = event.get("type")

        with logfire.span("handle_identity_event.execute", event_type=event_type):
            if event_type not in USER_EVENTS:
                logfire.info("Ignoring webhook event", event_type=event_type)
                return HandleIdentityEventResponse()

            data = event.get("data") or {}
            if not isinstance(data, dict):
                raise ValidationError("Malformed user payload")
            if not isinstance(data.get("id"), str) or not data["id"]:
                raise ValidationError("Missing user id")

            email = primary_email(data)
            if not email:
                logfire.warn("Webhook user has no email", external_id=data["id"])
                raise ValidationError("Missing email address")

            user = await self.user_service.sync_from_claims(
                claims_from_payload(data, email)
            )
            logfire.info(
                "User synced from webhook",
                user_id=str(user.id),
                event_type=event_type,
            )
            return HandleIdentityEventResponse()
