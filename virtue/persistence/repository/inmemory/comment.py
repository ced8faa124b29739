"""In-memory comment repository for testing."""

from typing import Dict, List, Optional, Sequence

from virtue.domain.model import Comment
from virtue.domain.repository import CommentRepository
from virtue.domain.value import CommentId, PostId

from .store import InMemoryStore, seek_page


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_page_for_post(
        self, post_id: PostId, cursor: Optional[CommentId], limit: int
    ) -> List[Comment]:
        """Find a post's comments in listing order, resuming after a cursor."""
        rows = [c for c in self._store.comments.values() if c.post_id == post_id]
        return seek_page(rows, cursor, limit)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        self._store.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._store.comments.pop(comment_id, None) is not None

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count comments on several posts."""
        counts: Dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        for comment in self._store.comments.values():
            if comment.post_id in counts:
                counts[comment.post_id] += 1
        return counts
