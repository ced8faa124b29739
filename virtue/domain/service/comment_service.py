"""Comment domain service."""

from uuid import uuid4

import logfire

from virtue.config import FeedSettings
from virtue.domain.error import NotAuthorizedError, NotFoundError
from virtue.domain.model.comment import Comment
from virtue.domain.model.common import utcnow
from virtue.domain.repository import CommentRepository, PostRepository
from virtue.domain.value import CommentId, Page, PageRequest, PostId, UserId, parse_id

from .base import PostChildService
from .content_service import ContentService


class CommentService(PostChildService):
    """Domain service for comment operations."""

    child_kind = "comment"

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        content_service: ContentService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (parent checks)
            content_service: Text validation and rewrite
            feed_settings: Feed limits
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.content_service = content_service
        self.feed_settings = feed_settings

    async def list_comments(self, post_id: PostId, page: PageRequest) -> Page[Comment]:
        """List a post's comments newest first, one cursor page at a time.

        Args:
            post_id: Parent post ID
            page: Cursor and clamped limit

        Returns:
            Page of comments

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.list_comments",
            post_id=str(post_id),
            cursor=page.cursor,
            limit=page.limit,
        ):
            await self._require_post(post_id)

            cursor = parse_id(page.cursor, CommentId)
            if page.cursor and cursor is None:
                logfire.warn("Malformed comment cursor", cursor=page.cursor)
                return Page[Comment].empty()

            rows = await self.comment_repository.find_page_for_post(
                post_id, cursor, page.fetch_size
            )
            return Page[Comment].from_rows(rows, page.limit)

    async def create_comment(
        self, post_id: PostId, author_id: UserId, content: str | None
    ) -> Comment:
        """Create a comment on an existing post.

        Args:
            post_id: Parent post ID
            author_id: Author's user ID
            content: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post doesn't exist
            ValidationError: If content is missing, blank or too long
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            await self._require_post(post_id)
            cleaned = self.content_service.prepare(
                content, "content", self.feed_settings.max_comment_length
            )

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=cleaned,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post_id)
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            return await self.comment_repository.find_by_id(comment_id)

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, content: str | None
    ) -> Comment:
        """Replace a comment's content.

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If user is not the author
            ValidationError: If content is missing, blank or too long
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self._get_owned_comment(comment_id, user_id)
            cleaned = self.content_service.prepare(
                content, "content", self.feed_settings.max_comment_length
            )
            saved = await self.comment_repository.save(
                comment.model_copy(update={"content": cleaned, "updated_at": utcnow()})
            )
            logfire.info("Comment updated", comment_id=str(comment_id))
            return saved

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            await self._get_owned_comment(comment_id, user_id)
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def _get_owned_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        if comment.author_id != user_id:
            logfire.warn(
                "Comment ownership check failed",
                comment_id=str(comment_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))
        return comment
