"""Keyset pagination over (created_at DESC, id DESC).

Listing tables paginate the same way: the cursor row is looked up to get its
position, and the page continues with rows strictly after that position.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, Select, Table, and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession


async def select_page(
    session: AsyncSession,
    table: Table,
    cursor: UUID | None,
    limit: int,
    *criteria: ColumnElement[bool],
) -> Select | None:
    """Build a select for one page of ``table`` in feed order.

    Args:
        session: Session used to load the cursor row
        table: Table being listed (needs ``id`` and ``created_at``)
        cursor: ID of the last row already seen
        limit: Maximum number of rows
        criteria: Filters applied to the listing and to the cursor lookup

    Returns:
        Paginated select, or None when the cursor row doesn't exist
        (or falls outside the filters)
    """
    stmt = select(table).where(*criteria)

    if cursor is not None:
        anchor = (
            await session.execute(
                select(table.c.created_at, table.c.id).where(
                    table.c.id == cursor, *criteria
                )
            )
        ).fetchone()
        if anchor is None:
            return None
        stmt = stmt.where(_after(table, anchor.created_at, anchor.id))

    return stmt.order_by(table.c.created_at.desc(), table.c.id.desc()).limit(limit)


def _after(table: Table, created_at: Any, row_id: UUID) -> ColumnElement[bool]:
    return or_(
        table.c.created_at < created_at,
        and_(table.c.created_at == created_at, table.c.id < row_id),
    )
