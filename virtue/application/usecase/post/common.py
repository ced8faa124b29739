"""Post response models shared by post use cases."""

from datetime import datetime
from typing import Sequence
from uuid import UUID

import logfire
from pydantic import Field

from virtue.application.usecase.base import CamelModel
from virtue.application.usecase.user.common import AuthorSummary
from virtue.domain.model import Post
from virtue.domain.service import PostService, ReactionService, UserService
from virtue.domain.value import PostCounts, UserId


class PostCountsResponse(CamelModel):
    """Comment and reaction totals."""

    comments: int
    reactions: int


class PostItem(CamelModel):
    """Post as returned by every post endpoint."""

    id: str
    image_url: str | None
    content: str
    created_at: datetime
    updated_at: datetime
    author_id: str
    author: AuthorSummary
    count: PostCountsResponse = Field(alias="_count")
    liked_by_current_user: bool


class PostItemBuilder:
    """Builds post items with authors, counts and the viewer's reactions.

    Each lookup is a single batch query for the whole list of posts.
    """

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def build(
        self, posts: Sequence[Post], viewer_id: str | None = None
    ) -> list[PostItem]:
        """Build items for posts in the given order.

        Args:
            posts: Posts to render
            viewer_id: Current user ID, if any

        Returns:
            Post items
        """
        post_ids = [post.id for post in posts]
        counts = await self.post_service.get_counts(post_ids)
        authors = await self.user_service.get_users_by_ids(
            [post.author_id for post in posts]
        )

        liked: set = set()
        if viewer_id:
            liked = await self.reaction_service.get_reacted_post_ids(
                UserId(UUID(viewer_id)), post_ids
            )

        items = []
        for post in posts:
            post_counts = counts.get(post.id, PostCounts())
            items.append(
                PostItem(
                    id=str(post.id),
                    image_url=post.image_url,
                    content=post.content,
                    created_at=post.created_at,
                    updated_at=post.updated_at,
                    author_id=str(post.author_id),
                    author=self._author(post, authors),
                    count=PostCountsResponse(
                        comments=post_counts.comments,
                        reactions=post_counts.reactions,
                    ),
                    liked_by_current_user=post.id in liked,
                )
            )
        return items

    async def build_one(self, post: Post, viewer_id: str | None = None) -> PostItem:
        """Build a single post item."""
        items = await self.build([post], viewer_id)
        return items[0]

    def _author(self, post: Post, authors: dict) -> AuthorSummary:
        author = authors.get(post.author_id)
        if author:
            return AuthorSummary.from_user(author, self.user_service)

        logfire.warn("Post author missing", post_id=str(post.id))
        return AuthorSummary(
            id=str(post.author_id),
            username="",
            avatar_url=self.user_service.avatar_for(None, str(post.author_id)),
        )
