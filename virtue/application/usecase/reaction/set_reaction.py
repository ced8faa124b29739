"""Set reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.application.usecase.base import CamelModel
from virtue.application.usecase.reaction.common import ReactionItem
from virtue.domain.error import NotFoundError, ValidationError
from virtue.domain.service import ReactionService
from virtue.domain.value import PostId, ReactionIntent, UserId, parse_id


class SetReactionRequest(BaseModel):
    """Set reaction request."""

    post_id: str
    user_id: str  # From authenticated user
    type: str | None = None  # "UP" or "DOWN"


class SetReactionResponse(CamelModel):
    """Set reaction response.

    ``clicked_type`` echoes the client's intent; ``stored_type`` is what
    was persisted, which is always UP.
    """

    clicked_type: str
    stored_type: str
    reaction: ReactionItem


class SetReactionUseCase:
    """Use case for recording a reaction idempotently."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize set reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: SetReactionRequest) -> SetReactionResponse:
        """Execute set reaction flow.

        Raises:
            ValidationError: If the type is not UP or DOWN
            NotFoundError: If the post doesn't exist
        """
        try:
            intent = ReactionIntent(request.type)
        except ValueError:
            raise ValidationError('type must be "UP" or "DOWN"')

        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            raise NotFoundError("Post", request.post_id)

        reaction = await self.reaction_service.set_reaction(
            post_id, UserId(UUID(request.user_id)), intent
        )
        return SetReactionResponse(
            clicked_type=intent.value,
            stored_type=reaction.stored_type.value,
            reaction=ReactionItem.from_reaction(reaction),
        )
