"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.domain.error import NotFoundError
from virtue.domain.service import CommentService
from virtue.domain.value import CommentId, UserId, parse_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # From authenticated user


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        comment_id = parse_id(request.comment_id, CommentId)
        if comment_id is None:
            raise NotFoundError("Comment", request.comment_id)

        await self.comment_service.delete_comment(
            comment_id, UserId(UUID(request.user_id))
        )
