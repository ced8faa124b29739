"""List comments use case."""

from pydantic import BaseModel

from virtue.application.usecase.base import CamelModel, PageInfo
from virtue.application.usecase.comment.common import CommentItem, build_comment_items
from virtue.config import FeedSettings
from virtue.domain.error import NotFoundError
from virtue.domain.service import CommentService, UserService
from virtue.domain.value import PageRequest, PostId, parse_id


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str
    cursor: str | None = None
    limit: int | None = None  # Clamped to the configured range
    user_id: str | None = None  # Current user ID (if authenticated)


class ListCommentsResponse(CamelModel):
    """List comments response."""

    items: list[CommentItem]
    page_info: PageInfo


class ListCommentsUseCase:
    """Use case for listing a post's comments newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            feed_settings: Feed limits
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = parse_id(request.post_id, PostId)
        if post_id is None:
            raise NotFoundError("Post", request.post_id)

        page_request = PageRequest.clamped(
            request.cursor,
            request.limit,
            default=self.feed_settings.comment_page_default,
            maximum=self.feed_settings.comment_page_max,
        )
        page = await self.comment_service.list_comments(post_id, page_request)
        items = await build_comment_items(
            page.items, self.user_service, request.user_id
        )

        return ListCommentsResponse(
            items=items,
            page_info=PageInfo(
                next_cursor=page.next_cursor, has_next_page=page.has_next_page
            ),
        )
