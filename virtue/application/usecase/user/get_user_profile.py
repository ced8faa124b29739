"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from virtue.application.usecase.base import CamelModel
from virtue.domain.error import NotFoundError
from virtue.domain.service import UserService
from virtue.domain.value import UserId, parse_id


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class UserProfileResponse(CamelModel):
    """Public projection of a user."""

    id: str
    username: str
    avatar_url: str
    avatar_url_resolved: str
    created_at: datetime


class GetUserProfileUseCase:
    """Use case for viewing another user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Request with user ID

        Returns:
            Public profile

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user_id = parse_id(request.user_id, UserId)
        if user_id is None:
            raise NotFoundError("User", request.user_id)

        user = await self.user_service.get_by_id(user_id)

        return UserProfileResponse(
            id=str(user.id),
            username=user.username,
            avatar_url=user.avatar_url,
            avatar_url_resolved=self.user_service.avatar_for(
                user.avatar_url, str(user.id)
            ),
            created_at=user.created_at,
        )
