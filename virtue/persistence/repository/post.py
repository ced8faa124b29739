"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from virtue.domain.model import Post
from virtue.domain.repository import PostRepository
from virtue.domain.value import PostId
from virtue.persistence.mappers import post_to_dict, row_to_post
from virtue.persistence.pagination import select_page
from virtue.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_page(self, cursor: Optional[PostId], limit: int) -> List[Post]:
        """Find posts in feed order, resuming after a cursor."""
        with logfire.span(
            "post_repository.find_page",
            cursor=str(cursor) if cursor else None,
            limit=limit,
        ):
            stmt = await select_page(self.session, posts_table, cursor, limit)
            if stmt is None:
                logfire.warn("Post cursor not found", cursor=str(cursor))
                return []

            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            existing = await self.find_by_id(post.id)

            post_dict = post_to_dict(post)

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = posts_table.insert().values(**post_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Comments and reactions go with it via ON DELETE CASCADE.
        """
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
