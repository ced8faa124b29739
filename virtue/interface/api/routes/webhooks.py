"""Identity provider webhook routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from virtue.adapter.error import WebhookSecretError, WebhookVerificationError
from virtue.application.usecase.webhook import (
    HandleIdentityEventRequest,
    HandleIdentityEventResponse,
    HandleIdentityEventUseCase,
)
from virtue.domain.error import ValidationError

router = APIRouter(prefix="/webhooks", tags=["webhooks"], route_class=DishkaRoute)


@router.post("", response_model=HandleIdentityEventResponse)
async def receive_webhook(
    request: Request,
    handle_identity_event_use_case: FromDishka[HandleIdentityEventUseCase],
) -> HandleIdentityEventResponse:
    """Receive a signed identity provider event.

    The raw body is verified before it is parsed, so it is read directly
    from the request.

    Raises:
        HTTPException: If the signature is invalid or the payload is unusable
    """
    body = await request.body()

    try:
        return await handle_identity_event_use_case.execute(
            HandleIdentityEventRequest(body=body, headers=dict(request.headers))
        )
    except WebhookVerificationError as e:
        logfire.warn("Webhook verification failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Error verifying webhook",
        )
    except WebhookSecretError as e:
        logfire.error("Webhook received but not configured", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Error verifying webhook",
        )
    except ValidationError as e:
        logfire.warn("Webhook payload rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
