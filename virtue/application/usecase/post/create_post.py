"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.application.usecase.post.common import PostItem, PostItemBuilder
from virtue.domain.service import PostService
from virtue.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # From authenticated user
    content: str | None = None
    image_url: str | None = None


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            post_item_builder: Post response builder
        """
        self.post_service = post_service
        self.post_item_builder = post_item_builder

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Steps:
        1. Validate and rewrite the content
        2. Save the post
        3. Return it in the feed shape (no comments or reactions yet)

        Raises:
            ValidationError: If content or image URL is invalid
        """
        post = await self.post_service.create_post(
            UserId(UUID(request.author_id)),
            content=request.content,
            image_url=request.image_url,
        )
        return await self.post_item_builder.build_one(post, request.author_id)
