"""Remove reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.domain.service import ReactionService
from virtue.domain.value import PostId, UserId, parse_id


class RemoveReactionRequest(BaseModel):
    """Remove reaction request."""

    post_id: str
    user_id: str  # From authenticated user


class RemoveReactionUseCase:
    """Use case for removing the caller's reaction.

    Removing a reaction that doesn't exist is not an error.
    """

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: RemoveReactionRequest) -> None:
        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            # Nothing can be stored under a malformed id
            return

        await self.reaction_service.remove_reaction(
            post_id, UserId(UUID(request.user_id))
        )
