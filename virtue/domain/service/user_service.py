"""User domain service."""

from typing import Sequence
from urllib.parse import quote
from uuid import uuid4

import logfire

from virtue.config import FeedSettings
from virtue.domain.error import NotFoundError
from virtue.domain.model.common import utcnow
from virtue.domain.model.user import User
from virtue.domain.repository import UserRepository
from virtue.domain.value import IdentityClaims, UserId

from .base import Service
from .content_service import require_text


def resolve_avatar_url(avatar_url: str | None, seed: str, fallback_template: str) -> str:
    """Return the avatar to display for a user.

    A non-blank avatar URL wins. Otherwise a generated image is derived
    from ``seed`` so the same user always gets the same fallback.

    Args:
        avatar_url: Stored avatar URL (may be empty)
        seed: Stable seed value (user id or external id)
        fallback_template: URL template with a ``{seed}`` placeholder

    Returns:
        Avatar URL
    """
    url = (avatar_url or "").strip()
    if url:
        return url
    return fallback_template.format(seed=quote(seed, safe=""))


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, feed_settings: FeedSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            feed_settings: Feed settings (avatar fallback)
        """
        self.user_repository = user_repository
        self.feed_settings = feed_settings

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User

        Raises:
            NotFoundError: If user doesn't exist
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load several users keyed by ID.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user for the users that exist
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def get_by_external_id(self, external_id: str) -> User | None:
        """Get user by identity provider id.

        Args:
            external_id: Identity provider user id

        Returns:
            User if provisioned, None otherwise
        """
        with logfire.span("user_service.get_by_external_id", external_id=external_id):
            return await self.user_repository.find_by_external_id(external_id)

    async def provision(self, claims: IdentityClaims) -> User:
        """Return the local user for an identity, creating it on first contact.

        An existing user is returned untouched so that profile edits made
        through this API are not overwritten on every request.

        Args:
            claims: Verified identity claims

        Returns:
            Local user
        """
        existing = await self.user_repository.find_by_external_id(claims.external_id)
        if existing:
            return existing
        return await self.sync_from_claims(claims)

    async def sync_from_claims(self, claims: IdentityClaims) -> User:
        """Create or refresh a user from identity provider data.

        Upsert keyed by external id, falling back to an email match. The
        provider's email, display name and avatar overwrite the stored ones.

        Args:
            claims: Identity provider profile

        Returns:
            Saved user
        """
        with logfire.span("user_service.sync_from_claims", external_id=claims.external_id):
            user = await self.user_repository.find_by_external_id(claims.external_id)
            if not user and claims.email:
                user = await self.user_repository.find_by_email(claims.email)
                if user:
                    logfire.info(
                        "Linking user by email",
                        user_id=str(user.id),
                        external_id=claims.external_id,
                    )

            avatar_url = (claims.image_url or "").strip()
            if user:
                user = user.model_copy(
                    update={
                        "external_id": claims.external_id,
                        "email": claims.email or user.email,
                        "username": claims.display_name,
                        "avatar_url": avatar_url,
                        "updated_at": utcnow(),
                    }
                )
                saved = await self.user_repository.save(user)
                logfire.info("User synced", user_id=str(saved.id))
                return saved

            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                external_id=claims.external_id,
                email=claims.email,
                username=claims.display_name,
                avatar_url=avatar_url,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User provisioned", user_id=str(saved.id), external_id=claims.external_id
            )
            return saved

    async def update_profile(
        self,
        user_id: UserId,
        username: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Update a user's display name and/or avatar.

        Args:
            user_id: User ID
            username: New display name (None to keep)
            avatar_url: New avatar URL (None to keep, empty string to clear)

        Returns:
            Updated user

        Raises:
            NotFoundError: If user doesn't exist
            ValidationError: If the username is blank
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            updates: dict[str, object] = {}
            if username is not None:
                updates["username"] = require_text(username, "username")
            if avatar_url is not None:
                updates["avatar_url"] = avatar_url.strip()

            if not updates:
                return user

            updates["updated_at"] = utcnow()
            saved = await self.user_repository.save(user.model_copy(update=updates))
            logfire.info(
                "User profile updated", user_id=str(user_id), fields=sorted(updates)
            )
            return saved

    def avatar_for(self, avatar_url: str | None, seed: str) -> str:
        """Resolve an avatar using the configured fallback image."""
        return resolve_avatar_url(avatar_url, seed, self.feed_settings.avatar_fallback_url)

