"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from virtue.domain.model.comment import Comment
from virtue.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page_for_post(
        self, post_id: PostId, cursor: Optional[CommentId], limit: int
    ) -> List[Comment]:
        """Find a post's comments in listing order, resuming after a cursor.

        Comments are ordered by (created_at DESC, id DESC). An unknown
        cursor, or a cursor belonging to another post, yields an empty list.

        Args:
            post_id: The post's ID
            cursor: ID of the last comment already seen
            limit: Maximum number of comments to return

        Returns:
            Up to ``limit`` comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if it didn't exist
        """
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count comments on several posts (batch query).

        Args:
            post_ids: Post IDs to count for

        Returns:
            Mapping of post ID to comment count (zero counts included)
        """
        pass
