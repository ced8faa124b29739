"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.domain.error import NotFoundError
from virtue.domain.service import PostService
from virtue.domain.value import PostId, UserId, parse_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # From authenticated user


class DeletePostUseCase:
    """Use case for deleting a post with its comments and reactions."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            raise NotFoundError("Post", request.post_id)

        await self.post_service.delete_post(post_id, UserId(UUID(request.user_id)))
