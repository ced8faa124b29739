"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from virtue.application.usecase.comment.common import CommentItem, build_comment_items
from virtue.domain.error import NotFoundError
from virtue.domain.service import CommentService, UserService
from virtue.domain.value import PostId, UserId, parse_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    author_id: str  # From authenticated user
    content: str | None = None


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post doesn't exist
            ValidationError: If content is missing, blank or too long
        """
        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            raise NotFoundError("Post", request.post_id)

        with logfire.span("create_comment.execute", post_id=request.post_id):
            comment = await self.comment_service.create_comment(
                post_id, UserId(UUID(request.author_id)), request.content
            )
            items = await build_comment_items(
                [comment], self.user_service, request.author_id
            )
            return items[0]
