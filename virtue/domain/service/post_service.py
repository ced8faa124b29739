"""Post domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from virtue.config import FeedSettings
from virtue.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from virtue.domain.model.common import utcnow
from virtue.domain.model.post import Post
from virtue.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
)
from virtue.domain.value import Page, PageRequest, PostCounts, PostId, UserId, parse_id

from .base import Service
from .content_service import ContentService, require_text


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        reaction_repository: ReactionRepository,
        content_service: ContentService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (counts)
            reaction_repository: Reaction repository (counts)
            content_service: Text validation and rewrite
            feed_settings: Feed limits
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.reaction_repository = reaction_repository
        self.content_service = content_service
        self.feed_settings = feed_settings

    async def list_posts(self, page: PageRequest) -> Page[Post]:
        """List posts newest first, one cursor page at a time.

        Args:
            page: Cursor and clamped limit

        Returns:
            Page of posts
        """
        with logfire.span(
            "post_service.list_posts", cursor=page.cursor, limit=page.limit
        ):
            cursor = parse_id(page.cursor, PostId)
            if page.cursor and cursor is None:
                logfire.warn("Malformed post cursor", cursor=page.cursor)
                return Page[Post].empty()

            rows = await self.post_repository.find_page(cursor, page.fetch_size)
            result = Page[Post].from_rows(rows, page.limit)
            logfire.info(
                "Posts listed",
                count=len(result.items),
                has_next_page=result.has_next_page,
            )
            return result

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID or fail.

        Raises:
            NotFoundError: If post doesn't exist
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def create_post(
        self, author_id: UserId, content: str | None, image_url: str | None = None
    ) -> Post:
        """Create a post.

        Content is trimmed, validated and rewritten before it is stored.

        Args:
            author_id: Author's user ID
            content: Post text
            image_url: Image URL (optional unless the feed requires images)

        Returns:
            Created post

        Raises:
            ValidationError: If content or image URL is missing or invalid
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            # New posts report blank text as missing; edits say "cannot be empty"
            cleaned = self.content_service.prepare(
                content,
                "content",
                self.feed_settings.max_post_length,
                blank_is_missing=True,
            )
            image = self._clean_image_url(image_url)
            if image is None and self.feed_settings.require_post_image:
                raise ValidationError("imageUrl is required")

            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                image_url=image,
                content=cleaned,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), author_id=str(author_id))
            return saved

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        content: str | None = None,
        image_url: str | None = None,
    ) -> Post:
        """Update a post's content and/or image.

        Existence is checked before ownership, so a missing post is "not
        found" for everyone and an existing post is "forbidden" for non-authors.

        Args:
            post_id: Post ID
            user_id: User making the change
            content: New content (None to keep)
            image_url: New image URL (None to keep)

        Returns:
            Updated post

        Raises:
            NotFoundError: If post doesn't exist
            NotAuthorizedError: If user is not the author
            ValidationError: If no field is given or a field is blank
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self._get_owned_post(post_id, user_id)

            updates: dict[str, object] = {}
            if image_url is not None:
                updates["image_url"] = require_text(image_url, "imageUrl")
            if content is not None:
                updates["content"] = self.content_service.prepare(
                    content, "content", self.feed_settings.max_post_length
                )
            if not updates:
                raise ValidationError("No valid fields to update")

            updates["updated_at"] = utcnow()
            saved = await self.post_repository.save(post.model_copy(update=updates))
            logfire.info("Post updated", post_id=str(post_id), fields=sorted(updates))
            return saved

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post with its comments and reactions.

        Raises:
            NotFoundError: If post doesn't exist
            NotAuthorizedError: If user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            await self._get_owned_post(post_id, user_id)
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def get_counts(self, post_ids: Sequence[PostId]) -> dict[PostId, PostCounts]:
        """Count comments and reactions for several posts.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post ID to counts
        """
        if not post_ids:
            return {}

        # Two batch queries instead of two per post
        comments = await self.comment_repository.count_by_posts(post_ids)
        reactions = await self.reaction_repository.count_by_posts(post_ids)
        return {
            post_id: PostCounts(
                comments=comments.get(post_id, 0),
                reactions=reactions.get(post_id, 0),
            )
            for post_id in post_ids
        }

    async def _get_owned_post(self, post_id: PostId, user_id: UserId) -> Post:
        post = await self.get_post(post_id)
        if post.author_id != user_id:
            logfire.warn(
                "Post ownership check failed",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post

    @staticmethod
    def _clean_image_url(image_url: str | None) -> str | None:
        if image_url is None:
            return None
        return require_text(image_url, "imageUrl")
