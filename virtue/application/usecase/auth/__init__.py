"""Auth use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
]
