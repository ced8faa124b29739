"""Shared state for the in-memory repositories.

The in-memory repositories all read and write one store so that cascades
(post → comments, reactions) and cross-table counts behave like the
relational schema.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, TypeVar
from uuid import UUID

from virtue.domain.model import Comment, Post, Reaction, User
from virtue.domain.value import CommentId, PostId, UserId

ListedT = TypeVar("ListedT", Post, Comment)


@dataclass
class InMemoryStore:
    """Tables held as dicts."""

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    reactions: dict[tuple[PostId, UserId], Reaction] = field(default_factory=dict)


def seek_page(
    rows: Iterable[ListedT], cursor: Optional[UUID], limit: int
) -> list[ListedT]:
    """Return up to ``limit`` rows after ``cursor`` in (created_at, id) DESC order.

    An unknown cursor gives an empty list.
    """
    ordered = sorted(rows, key=lambda row: (row.created_at, row.id), reverse=True)

    if cursor is not None:
        anchor = next((row for row in ordered if row.id == cursor), None)
        if anchor is None:
            return []
        position = (anchor.created_at, anchor.id)
        ordered = [row for row in ordered if (row.created_at, row.id) < position]

    return ordered[:limit]
