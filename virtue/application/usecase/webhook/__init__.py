"""Webhook use cases."""

from .handle_identity_event import (
    HandleIdentityEventRequest,
    HandleIdentityEventResponse,
    HandleIdentityEventUseCase,
)

__all__ = [
    "HandleIdentityEventRequest",
    "HandleIdentityEventResponse",
    "HandleIdentityEventUseCase",
]
