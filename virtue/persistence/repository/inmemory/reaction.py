"""In-memory reaction repository for testing."""

from typing import Dict, List, Optional, Sequence

from virtue.domain.model import Reaction
from virtue.domain.repository import ReactionRepository
from virtue.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing.

    Reactions are keyed by (post_id, user_id), mirroring the unique
    constraint of the relational schema.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Reaction]:
        """Find a user's reaction to a post."""
        return self._store.reactions.get((post_id, user_id))

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Reaction]:
        """Find a user's reactions to several posts."""
        return [
            self._store.reactions[(post_id, user_id)]
            for post_id in set(post_ids)
            if (post_id, user_id) in self._store.reactions
        ]

    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert a reaction, or overwrite the stored type of the existing one."""
        key = (reaction.post_id, reaction.user_id)
        existing = self._store.reactions.get(key)
        if existing:
            reaction = existing.model_copy(
                update={"stored_type": reaction.stored_type}
            )
        self._store.reactions[key] = reaction
        return reaction

    async def create_if_absent(self, reaction: Reaction) -> bool:
        """Insert a reaction unless the pair already has one."""
        key = (reaction.post_id, reaction.user_id)
        if key in self._store.reactions:
            return False
        self._store.reactions[key] = reaction
        return True

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete any reaction by a user on a post."""
        return self._store.reactions.pop((post_id, user_id), None) is not None

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count reactions on several posts."""
        counts: Dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        for post_id, _ in self._store.reactions:
            if post_id in counts:
                counts[post_id] += 1
        return counts
