"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.application.usecase.user.common import CurrentUserResponse
from virtue.domain.service import UserService
from virtue.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str  # From authenticated user
    username: str | None = None
    avatar_url: str | None = None  # Empty string clears the avatar


class UpdateProfileUseCase:
    """Use case for editing the current user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> CurrentUserResponse:
        """Execute update profile flow.

        Args:
            request: Profile changes

        Returns:
            Updated user

        Raises:
            ValidationError: If the username is blank
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            username=request.username,
            avatar_url=request.avatar_url,
        )
        return CurrentUserResponse.from_user(user, self.user_service)
