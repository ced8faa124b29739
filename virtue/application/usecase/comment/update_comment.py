"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.application.usecase.comment.common import CommentItem, build_comment_items
from virtue.domain.error import NotFoundError
from virtue.domain.service import CommentService, UserService
from virtue.domain.value import CommentId, UserId, parse_id


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    user_id: str  # From authenticated user
    content: str | None = None


class UpdateCommentUseCase:
    """Use case for editing a comment.

    Only the author can edit their own comment.
    """

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If content is missing, blank or too long
        """
        comment_id = parse_id(request.comment_id, CommentId)
        if comment_id is None:
            raise NotFoundError("Comment", request.comment_id)

        comment = await self.comment_service.update_comment(
            comment_id, UserId(UUID(request.user_id)), request.content
        )
        items = await build_comment_items([comment], self.user_service, request.user_id)
        return items[0]
