"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from virtue.domain.model.post import Post
from virtue.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(self, cursor: Optional[PostId], limit: int) -> List[Post]:
        """Find posts in feed order, resuming after a cursor.

        Posts are ordered by (created_at DESC, id DESC). When a cursor is
        given, only posts strictly after the cursor post in that order are
        returned. An unknown cursor yields an empty list.

        Args:
            cursor: ID of the last post already seen
            limit: Maximum number of posts to return

        Returns:
            Up to ``limit`` posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post together with its comments and reactions.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if it didn't exist
        """
        pass
