"""In-memory post repository for testing."""

from typing import List, Optional

from virtue.domain.model import Post
from virtue.domain.repository import PostRepository
from virtue.domain.value import PostId

from .store import InMemoryStore, seek_page


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_page(self, cursor: Optional[PostId], limit: int) -> List[Post]:
        """Find posts in feed order, resuming after a cursor."""
        return seek_page(self._store.posts.values(), cursor, limit)

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        self._store.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and cascade to its comments and reactions."""
        if self._store.posts.pop(post_id, None) is None:
            return False

        self._store.comments = {
            cid: c for cid, c in self._store.comments.items() if c.post_id != post_id
        }
        self._store.reactions = {
            key: r for key, r in self._store.reactions.items() if r.post_id != post_id
        }
        return True
