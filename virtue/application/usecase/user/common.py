"""User response models shared by user use cases."""

from datetime import datetime

from virtue.application.usecase.base import CamelModel
from virtue.domain.model import User
from virtue.domain.service import UserService


class CurrentUserResponse(CamelModel):
    """The authenticated user's own record."""

    id: str
    external_id: str
    email: str | None
    username: str
    avatar_url: str
    avatar_url_resolved: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User, user_service: UserService) -> "CurrentUserResponse":
        """Build the response, resolving the avatar seeded by external id."""
        return cls(
            id=str(user.id),
            external_id=user.external_id,
            email=user.email,
            username=user.username,
            avatar_url=user.avatar_url,
            avatar_url_resolved=user_service.avatar_for(
                user.avatar_url, user.external_id
            ),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthorSummary(CamelModel):
    """Author fields embedded in posts and comments."""

    id: str
    username: str
    avatar_url: str

    @classmethod
    def from_user(cls, user: User, user_service: UserService) -> "AuthorSummary":
        """Build the summary with the resolved avatar."""
        return cls(
            id=str(user.id),
            username=user.username,
            avatar_url=user_service.avatar_for(user.avatar_url, str(user.id)),
        )
