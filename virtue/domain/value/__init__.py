"""Domain value objects for the feed."""

from virtue.domain.value.identifiers import (
    CommentId,
    PostId,
    ReactionId,
    UserId,
    parse_id,
)
from virtue.domain.value.pagination import Page, PageRequest
from virtue.domain.value.types import (
    IdentityClaims,
    PostCounts,
    ReactionIntent,
    ReactionType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReactionId",
    "parse_id",
    # Pagination
    "Page",
    "PageRequest",
    # Types
    "IdentityClaims",
    "PostCounts",
    "ReactionIntent",
    "ReactionType",
]
