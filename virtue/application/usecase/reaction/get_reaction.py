"""Get reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.application.usecase.base import CamelModel
from virtue.application.usecase.reaction.common import ReactionItem
from virtue.domain.error import NotFoundError
from virtue.domain.service import ReactionService
from virtue.domain.value import PostId, UserId, parse_id


class GetReactionRequest(BaseModel):
    """Get reaction request."""

    post_id: str
    user_id: str  # From authenticated user


class GetReactionResponse(CamelModel):
    """The caller's reaction state for a post."""

    has_reacted: bool
    reaction: ReactionItem | None


class GetReactionUseCase:
    """Use case for reading the caller's reaction to a post."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize get reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: GetReactionRequest) -> GetReactionResponse:
        """Execute get reaction flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            raise NotFoundError("Post", request.post_id)

        reaction = await self.reaction_service.get_reaction(
            post_id, UserId(UUID(request.user_id))
        )
        return GetReactionResponse(
            has_reacted=reaction is not None,
            reaction=ReactionItem.from_reaction(reaction) if reaction else None,
        )
