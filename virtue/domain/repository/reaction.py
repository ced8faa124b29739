"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from virtue.domain.model.reaction import Reaction
from virtue.domain.value import PostId, UserId


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    Reactions are keyed by (post_id, user_id); implementations must keep at
    most one row per pair even under concurrent requests.
    """

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Reaction]:
        """Find a user's reaction to a post.

        Args:
            post_id: The post's ID
            user_id: The user's ID

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Reaction]:
        """Find a user's reactions to several posts (batch query).

        Args:
            user_id: The user's ID
            post_ids: Post IDs to check

        Returns:
            Reactions by the user on the given posts
        """
        pass

    @abstractmethod
    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert a reaction, or overwrite the stored type of the existing one.

        Runs as a single statement keyed on (post_id, user_id).

        Args:
            reaction: Reaction to store

        Returns:
            The stored reaction (the existing row's id and created_at are kept)
        """
        pass

    @abstractmethod
    async def create_if_absent(self, reaction: Reaction) -> bool:
        """Insert a reaction unless the pair already has one.

        Args:
            reaction: Reaction to store

        Returns:
            True if a row was inserted, False if one already existed
        """
        pass

    @abstractmethod
    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete any reaction by a user on a post.

        Args:
            post_id: The post's ID
            user_id: The user's ID

        Returns:
            True if a reaction was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count reactions on several posts (batch query).

        Args:
            post_ids: Post IDs to count for

        Returns:
            Mapping of post ID to reaction count (zero counts included)
        """
        pass
