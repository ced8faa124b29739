"""User use cases."""

from .common import AuthorSummary, CurrentUserResponse
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)
from .sync_user import SyncUserRequest, SyncUserUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "AuthorSummary",
    "CurrentUserResponse",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "SyncUserRequest",
    "SyncUserUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UserProfileResponse",
]
