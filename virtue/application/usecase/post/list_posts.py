"""List posts use case."""

from pydantic import BaseModel

from virtue.application.usecase.base import CamelModel, PageInfo
from virtue.application.usecase.post.common import PostItem, PostItemBuilder
from virtue.config import FeedSettings
from virtue.domain.service import PostService
from virtue.domain.value import PageRequest


class ListPostsRequest(BaseModel):
    """List posts request."""

    cursor: str | None = None
    limit: int | None = None  # Clamped to the configured range
    user_id: str | None = None  # Current user ID (if authenticated)


class ListPostsResponse(CamelModel):
    """List posts response."""

    items: list[PostItem]
    page_info: PageInfo


class ListPostsUseCase:
    """Use case for the newest-first post feed."""

    def __init__(
        self,
        post_service: PostService,
        post_item_builder: PostItemBuilder,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            post_item_builder: Post response builder
            feed_settings: Feed limits
        """
        self.post_service = post_service
        self.post_item_builder = post_item_builder
        self.feed_settings = feed_settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Cursor, limit and optional viewer

        Returns:
            One page of posts
        """
        page_request = PageRequest.clamped(
            request.cursor,
            request.limit,
            default=self.feed_settings.post_page_default,
            maximum=self.feed_settings.post_page_max,
        )
        page = await self.post_service.list_posts(page_request)
        items = await self.post_item_builder.build(page.items, request.user_id)

        return ListPostsResponse(
            items=items,
            page_info=PageInfo(
                next_cursor=page.next_cursor, has_next_page=page.has_next_page
            ),
        )
