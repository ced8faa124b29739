"""Strongly typed identifiers for feed entities.

Using NewType keeps post, comment and user ids from being mixed up
while staying plain UUIDs at runtime.
"""

from typing import Callable, NewType, TypeVar
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
ReactionId = NewType("ReactionId", UUID)

IdT = TypeVar("IdT")


def parse_id(raw: str | None, id_type: Callable[[UUID], IdT]) -> IdT | None:
    """Parse a client-supplied id.

    Returns None for missing or malformed values so callers can treat them
    the same way as an id that doesn't exist.
    """
    if not raw:
        return None
    try:
        return id_type(UUID(raw))
    except ValueError:
        return None
