"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from virtue.application.usecase.post.common import PostItem, PostItemBuilder
from virtue.domain.error import NotFoundError
from virtue.domain.service import PostService
from virtue.domain.value import PostId, UserId, parse_id


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str
    user_id: str  # From authenticated user
    content: str | None = None
    image_url: str | None = None


class UpdatePostUseCase:
    """Use case for editing a post.

    Only the author can edit their own post.
    """

    def __init__(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            post_item_builder: Post response builder
        """
        self.post_service = post_service
        self.post_item_builder = post_item_builder

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If no field is given or a field is blank
        """
        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            raise NotFoundError("Post", request.post_id)

        post = await self.post_service.update_post(
            post_id,
            UserId(UUID(request.user_id)),
            content=request.content,
            image_url=request.image_url,
        )
        return await self.post_item_builder.build_one(post, request.user_id)
