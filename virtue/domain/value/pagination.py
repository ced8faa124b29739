"""Cursor pagination value objects.

Listings are ordered by ``(created_at DESC, id DESC)``. A cursor is the id
of the last item on the previous page; the next page starts strictly after
that row. Repositories return up to ``limit + 1`` rows and ``Page`` trims
the extra row to decide whether another page exists.
"""

from typing import Generic, Sequence, TypeVar

from virtue.domain.value.common import ValueObject


# Items are domain models with an ``id`` attribute
ItemT = TypeVar("ItemT")


class PageRequest(ValueObject):
    """Cursor and clamped limit for one page."""

    cursor: str | None = None
    limit: int

    @classmethod
    def clamped(
        cls, cursor: str | None, limit: int | None, default: int, maximum: int
    ) -> "PageRequest":
        """Build a request with ``limit`` clamped to ``[1, maximum]``.

        Args:
            cursor: Id of the last item seen, if any
            limit: Client-supplied limit (None for the default)
            default: Limit used when the client sends none
            maximum: Largest allowed limit

        Returns:
            Page request
        """
        value = default if limit is None else limit
        return cls(cursor=cursor or None, limit=min(max(value, 1), maximum))

    @property
    def fetch_size(self) -> int:
        """Rows to fetch: one extra to detect the next page."""
        return self.limit + 1


class Page(ValueObject, Generic[ItemT]):
    """One page of a cursor-paginated listing."""

    items: list[ItemT]
    next_cursor: str | None = None
    has_next_page: bool = False

    @classmethod
    def from_rows(cls, rows: Sequence[ItemT], limit: int) -> "Page[ItemT]":
        """Build a page from an over-fetched row list.

        Args:
            rows: Up to ``limit + 1`` rows in listing order
            limit: Requested page size

        Returns:
            Page with the extra row trimmed
        """
        has_next_page = len(rows) > limit
        items = list(rows[:limit])
        next_cursor = str(items[-1].id) if has_next_page and items else None
        return cls(items=items, next_cursor=next_cursor, has_next_page=has_next_page)

    @classmethod
    def empty(cls) -> "Page[ItemT]":
        """Page with no items."""
        return cls(items=[])
