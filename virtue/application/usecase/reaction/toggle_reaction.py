"""Toggle reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.application.usecase.base import CamelModel
from virtue.domain.error import NotFoundError
from virtue.domain.service import ReactionService
from virtue.domain.value import PostId, UserId, parse_id


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request."""

    post_id: str
    user_id: str  # From authenticated user


class ToggleReactionResponse(CamelModel):
    """Toggle reaction response."""

    reacted: bool
    reaction_count: int


class ToggleReactionUseCase:
    """Use case for the like button: react if not reacted, otherwise undo."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize toggle reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle flow.

        Returns:
            Whether the caller now has a reaction, and the post's new count

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            raise NotFoundError("Post", request.post_id)

        reacted = await self.reaction_service.toggle_reaction(
            post_id, UserId(UUID(request.user_id))
        )
        count = await self.reaction_service.count_reactions(post_id)
        return ToggleReactionResponse(reacted=reacted, reaction_count=count)
