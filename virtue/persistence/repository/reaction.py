"""PostgreSQL implementation of Reaction repository.

Upsert and toggle rely on the (post_id, user_id) unique constraint with
``INSERT .. ON CONFLICT``, so concurrent requests for the same pair never
create a second row.
"""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from virtue.domain.model import Reaction
from virtue.domain.repository import ReactionRepository
from virtue.domain.value import PostId, UserId
from virtue.persistence.mappers import reaction_to_dict, row_to_reaction
from virtue.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _insert(self):
        # ON CONFLICT support lives in the dialect-specific insert()
        if self.session.bind.dialect.name == "sqlite":
            return sqlite.insert(reactions_table)
        return postgresql.insert(reactions_table)

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Reaction]:
        """Find a user's reaction to a post."""
        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.post_id == post_id,
                reactions_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reaction(row._asdict()) if row else None

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Reaction]:
        """Find a user's reactions to several posts (batch query)."""
        if not post_ids:
            return []

        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.user_id == user_id,
                reactions_table.c.post_id.in_(post_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert a reaction, or overwrite the stored type of the existing one."""
        insert_stmt = self._insert().values(**reaction_to_dict(reaction))
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[reactions_table.c.post_id, reactions_table.c.user_id],
            set_={"stored_type": insert_stmt.excluded.stored_type},
        ).returning(*reactions_table.c)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_reaction(row._asdict())

    async def create_if_absent(self, reaction: Reaction) -> bool:
        """Insert a reaction unless the pair already has one."""
        stmt = (
            self._insert()
            .values(**reaction_to_dict(reaction))
            .on_conflict_do_nothing(
                index_elements=[reactions_table.c.post_id, reactions_table.c.user_id]
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete any reaction by a user on a post."""
        stmt = delete(reactions_table).where(
            and_(
                reactions_table.c.post_id == post_id,
                reactions_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count reactions on several posts (batch query)."""
        counts: Dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        if not post_ids:
            return counts

        stmt = (
            select(reactions_table.c.post_id, func.count().label("total"))
            .where(reactions_table.c.post_id.in_(post_ids))
            .group_by(reactions_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            counts[PostId(row.post_id)] = row.total
        return counts
