"""Reaction entity.

A reaction is a single user's thumbs-up on a single post.
Business rules:
- At most one reaction per (post, user), enforced by a unique constraint
- Only ``ReactionType.UP`` is ever stored, whatever the client asked for
"""

from datetime import datetime

from pydantic import Field

from virtue.domain.model.common import DomainModel, utcnow
from virtue.domain.value import PostId, ReactionId, ReactionType, UserId


class Reaction(DomainModel):
    """Reaction entity."""

    id: ReactionId
    post_id: PostId
    user_id: UserId
    stored_type: ReactionType = ReactionType.UP
    created_at: datetime = Field(default_factory=utcnow)
