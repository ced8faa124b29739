"""Unit tests for CommentService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from virtue.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from virtue.domain.model import Comment
from virtue.domain.repository import CommentRepository
from virtue.domain.service import CommentService, PostService
from virtue.domain.value import CommentId, PageRequest, PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


async def create_post(unit_env, author_id: UserId):
    post_service = await unit_env.get(PostService)
    return await post_service.create_post(author_id, "a post")


async def add_comment(unit_env, post_id: PostId, minutes: int) -> Comment:
    """Store a comment written ``minutes`` after the base time."""
    created_at = BASE_TIME + timedelta(minutes=minutes)
    comment = Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=UserId(uuid4()),
        content=f"comment at {minutes}",
        created_at=created_at,
        updated_at=created_at,
    )
    comment_repo = await unit_env.get(CommentRepository)
    return await comment_repo.save(comment)


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_content_at_limit_is_accepted(self, unit_env):
        """2000 characters after trimming is allowed."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        post = await create_post(unit_env, author_id)

        comment = await comment_service.create_comment(
            post.id, author_id, "  " + "a" * 2000 + "  "
        )

        assert len(comment.content) == 2000

    @pytest.mark.asyncio
    async def test_content_over_limit_is_rejected(self, unit_env):
        """2001 characters after trimming is too long."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        post = await create_post(unit_env, author_id)

        with pytest.raises(ValidationError, match=r"content too long \(max 2000 chars\)"):
            await comment_service.create_comment(post.id, author_id, "a" * 2001)

    @pytest.mark.asyncio
    async def test_blank_content_is_rejected(self, unit_env):
        """Whitespace-only comments are rejected."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        post = await create_post(unit_env, author_id)

        with pytest.raises(ValidationError, match="content cannot be empty"):
            await comment_service.create_comment(post.id, author_id, " \n ")

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        """Commenting on a post that doesn't exist fails."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                PostId(uuid4()), UserId(uuid4()), "hello"
            )


class TestListComments:
    """Tests for list_comments."""

    @pytest.mark.asyncio
    async def test_lists_only_the_posts_comments(self, unit_env):
        """Comments on other posts are not included."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        post = await create_post(unit_env, author_id)
        other = await create_post(unit_env, author_id)

        mine = await comment_service.create_comment(post.id, author_id, "here")
        await comment_service.create_comment(other.id, author_id, "elsewhere")

        page = await comment_service.list_comments(post.id, PageRequest(limit=20))

        assert [comment.id for comment in page.items] == [mine.id]
        assert page.has_next_page is False

    @pytest.mark.asyncio
    async def test_pages_follow_cursor(self, unit_env):
        """Two pages of two should cover three comments without overlap."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        post = await create_post(unit_env, author_id)
        for text in ("one", "two", "three"):
            await comment_service.create_comment(post.id, author_id, text)

        first = await comment_service.list_comments(post.id, PageRequest(limit=2))
        second = await comment_service.list_comments(
            post.id, PageRequest(cursor=first.next_cursor, limit=2)
        )

        assert first.has_next_page is True
        assert second.has_next_page is False
        ids = [c.id for c in first.items] + [c.id for c in second.items]
        assert len(ids) == len(set(ids)) == 3

    @pytest.mark.asyncio
    async def test_limit_plus_one_comments_take_two_pages(self, unit_env):
        """One comment past the limit spills onto a second, final page."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(unit_env, UserId(uuid4()))
        comments = [await add_comment(unit_env, post.id, m) for m in range(5)]

        first = await comment_service.list_comments(post.id, PageRequest(limit=4))
        second = await comment_service.list_comments(
            post.id, PageRequest(cursor=first.next_cursor, limit=4)
        )

        assert [c.id for c in first.items] == [c.id for c in reversed(comments[1:])]
        assert first.has_next_page is True
        assert [c.id for c in second.items] == [comments[0].id]
        assert second.has_next_page is False
        assert second.next_cursor is None

    @pytest.mark.asyncio
    async def test_comments_added_between_pages_do_not_appear_later(self, unit_env):
        """Following a cursor never yields comments newer than the first page."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(unit_env, UserId(uuid4()))
        original = [await add_comment(unit_env, post.id, m) for m in range(4)]

        first = await comment_service.list_comments(post.id, PageRequest(limit=2))
        latecomer = await add_comment(unit_env, post.id, 60)
        second = await comment_service.list_comments(
            post.id, PageRequest(cursor=first.next_cursor, limit=2)
        )

        seen = [c.id for c in first.items + second.items]
        assert latecomer.id not in seen
        assert sorted(seen) == sorted(c.id for c in original)
        assert second.has_next_page is False

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        """Listing comments of a missing post fails."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.list_comments(PostId(uuid4()), PageRequest(limit=20))


class TestCommentOwnership:
    """Tests for update_comment and delete_comment."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """The author's edit replaces the content."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        post = await create_post(unit_env, author_id)
        comment = await comment_service.create_comment(post.id, author_id, "typo")

        updated = await comment_service.update_comment(comment.id, author_id, "fixed")

        assert updated.content == "fixed"

    @pytest.mark.asyncio
    async def test_non_author_cannot_edit(self, unit_env):
        """Editing someone else's comment is forbidden."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        post = await create_post(unit_env, author_id)
        comment = await comment_service.create_comment(post.id, author_id, "mine")

        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(comment.id, UserId(uuid4()), "no")

    @pytest.mark.asyncio
    async def test_missing_comment_is_checked_before_ownership(self, unit_env):
        """A missing comment is not found, not forbidden."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """The author can delete their comment."""
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        post = await create_post(unit_env, author_id)
        comment = await comment_service.create_comment(post.id, author_id, "gone")

        await comment_service.delete_comment(comment.id, author_id)

        assert await comment_service.get_comment_by_id(comment.id) is None
