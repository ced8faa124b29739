"""Unit tests for ListCommentsUseCase."""

from uuid import uuid4

import pytest

from virtue.application.usecase.comment import (
    ListCommentsRequest,
    ListCommentsUseCase,
)
from virtue.domain.error import NotFoundError
from virtue.domain.service import CommentService, PostService, UserService
from tests.conftest import make_claims
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_marks_viewer_comments(self, unit_env):
        """isAuthor is true only on the viewer's own comments."""
        # Arrange
        user_service = await unit_env.get(UserService)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(ListCommentsUseCase)

        alice = await user_service.provision(make_claims("ext_alice"))
        bob = await user_service.provision(make_claims("ext_bob"))
        post = await post_service.create_post(alice.id, "hello")
        await comment_service.create_comment(post.id, alice.id, "mine")
        await comment_service.create_comment(post.id, bob.id, "theirs")

        # Act
        response = await use_case.execute(
            ListCommentsRequest(post_id=str(post.id), user_id=str(alice.id))
        )

        # Assert
        flags = {item.content: item.is_author for item in response.items}
        assert flags == {"mine": True, "theirs": False}
        assert {item.author.username for item in response.items} == {
            "ext_alice",
            "ext_bob",
        }

    @pytest.mark.asyncio
    async def test_pages_through_comments(self, unit_env):
        user_service = await unit_env.get(UserService)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(ListCommentsUseCase)

        alice = await user_service.provision(make_claims("ext_alice"))
        post = await post_service.create_post(alice.id, "hello")
        for i in range(3):
            await comment_service.create_comment(post.id, alice.id, f"c{i}")

        first = await use_case.execute(ListCommentsRequest(post_id=str(post.id), limit=2))
        second = await use_case.execute(
            ListCommentsRequest(
                post_id=str(post.id), limit=2, cursor=first.page_info.next_cursor
            )
        )

        assert len(first.items) == 2
        assert first.page_info.has_next_page is True
        assert len(second.items) == 1
        assert second.page_info.has_next_page is False
        seen = {item.id for item in first.items + second.items}
        assert len(seen) == 3

    @pytest.mark.asyncio
    async def test_unknown_post_raises(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListCommentsRequest(post_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_post_id_raises(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListCommentsRequest(post_id="not-a-uuid"))
