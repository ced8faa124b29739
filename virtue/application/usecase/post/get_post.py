"""Get post use case."""

from pydantic import BaseModel

from virtue.application.usecase.post.common import PostItem, PostItemBuilder
from virtue.domain.error import NotFoundError
from virtue.domain.service import PostService
from virtue.domain.value import PostId, parse_id


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            post_item_builder: Post response builder
        """
        self.post_service = post_service
        self.post_item_builder = post_item_builder

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Args:
            request: Get post request with post ID and optional user ID

        Returns:
            Post details

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            raise NotFoundError("Post", request.post_id)

        post = await self.post_service.get_post(post_id)
        return await self.post_item_builder.build_one(post, request.user_id)
