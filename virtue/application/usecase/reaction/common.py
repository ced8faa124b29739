"""Reaction response models."""

from datetime import datetime

from virtue.application.usecase.base import CamelModel
from virtue.domain.model import Reaction


class ReactionItem(CamelModel):
    """Stored reaction."""

    id: str
    post_id: str
    user_id: str
    stored_type: str
    created_at: datetime

    @classmethod
    def from_reaction(cls, reaction: Reaction) -> "ReactionItem":
        return cls(
            id=str(reaction.id),
            post_id=str(reaction.post_id),
            user_id=str(reaction.user_id),
            stored_type=reaction.stored_type.value,
            created_at=reaction.created_at,
        )
