"""Reaction domain service.

Clients send one of two intents (UP or DOWN) but only UP is ever stored,
so a reaction row means "this user reacted to this post" and the post's
reaction count is the number of users who reacted at all.
"""

from typing import Sequence
from uuid import uuid4

import logfire

from virtue.domain.model.common import utcnow
from virtue.domain.model.reaction import Reaction
from virtue.domain.repository import PostRepository, ReactionRepository
from virtue.domain.value import PostId, ReactionId, ReactionIntent, UserId

from .base import PostChildService


class ReactionService(PostChildService):
    """Domain service for reaction operations."""

    child_kind = "reaction"

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            post_repository: Post repository (existence checks)
        """
        self.reaction_repository = reaction_repository
        self.post_repository = post_repository

    async def get_reaction(self, post_id: PostId, user_id: UserId) -> Reaction | None:
        """Get a user's reaction to a post.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "reaction_service.get_reaction", post_id=str(post_id), user_id=str(user_id)
        ):
            await self._require_post(post_id)
            return await self.reaction_repository.find_by_post_and_user(
                post_id, user_id
            )

    async def set_reaction(
        self, post_id: PostId, user_id: UserId, intent: ReactionIntent
    ) -> Reaction:
        """Record a reaction, whichever intent the client sent.

        Args:
            post_id: Post ID
            user_id: User ID
            intent: Client intent; stored as ``intent.stored_type``

        Returns:
            Stored reaction

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "reaction_service.set_reaction",
            post_id=str(post_id),
            user_id=str(user_id),
            intent=intent.value,
        ):
            await self._require_post(post_id)
            reaction = await self.reaction_repository.upsert(
                self._new_reaction(post_id, user_id, intent)
            )
            logfire.info(
                "Reaction stored",
                post_id=str(post_id),
                user_id=str(user_id),
                intent=intent.value,
                stored_type=reaction.stored_type.value,
            )
            return reaction

    async def toggle_reaction(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove the user's reaction if present, otherwise add one.

        Calling this twice leaves the post as it was.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            True if the user now has a reaction, False if it was removed

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "reaction_service.toggle_reaction",
            post_id=str(post_id),
            user_id=str(user_id),
        ):
            await self._require_post(post_id)

            if await self.reaction_repository.delete_by_post_and_user(post_id, user_id):
                logfire.info(
                    "Reaction toggled off", post_id=str(post_id), user_id=str(user_id)
                )
                return False

            created = await self.reaction_repository.create_if_absent(
                self._new_reaction(post_id, user_id, ReactionIntent.UP)
            )
            if not created:
                # A concurrent request created the row first
                logfire.warn(
                    "Duplicate reaction attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
            logfire.info("Reaction toggled on", post_id=str(post_id), user_id=str(user_id))
            return True

    async def remove_reaction(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove any reaction by the user on the post.

        Missing reactions (or posts) are not an error.

        Returns:
            True if a reaction was removed
        """
        with logfire.span(
            "reaction_service.remove_reaction",
            post_id=str(post_id),
            user_id=str(user_id),
        ):
            deleted = await self.reaction_repository.delete_by_post_and_user(
                post_id, user_id
            )
            if deleted:
                logfire.info(
                    "Reaction removed", post_id=str(post_id), user_id=str(user_id)
                )
            else:
                logfire.info(
                    "No reaction to remove", post_id=str(post_id), user_id=str(user_id)
                )
            return deleted

    async def count_reactions(self, post_id: PostId) -> int:
        """Count reactions on a post."""
        counts = await self.reaction_repository.count_by_posts([post_id])
        return counts.get(post_id, 0)

    async def get_reacted_post_ids(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Find which of the given posts the user has reacted to.

        Args:
            user_id: User ID
            post_ids: Post IDs to check

        Returns:
            IDs of posts the user reacted to
        """
        if not post_ids:
            return set()

        # Batch query to avoid one lookup per post
        reactions = await self.reaction_repository.find_by_user_and_posts(
            user_id, post_ids
        )
        return {reaction.post_id for reaction in reactions}

    @staticmethod
    def _new_reaction(
        post_id: PostId, user_id: UserId, intent: ReactionIntent
    ) -> Reaction:
        return Reaction(
            id=ReactionId(uuid4()),
            post_id=post_id,
            user_id=user_id,
            stored_type=intent.stored_type,
            created_at=utcnow(),
        )
