"""Integration tests for the SQL repositories.

These run the real SQLAlchemy statements against an in-memory SQLite
database built from the same table metadata as production.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
import pytest_asyncio

from virtue.config import DatabaseSettings, Settings
from virtue.domain.model import Comment, Post, Reaction, User
from virtue.domain.value import CommentId, PostId, ReactionId, ReactionType, UserId
from virtue.persistence.database import create_engine, create_session_factory
from virtue.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresReactionRepository,
    PostgresUserRepository,
)
from virtue.persistence.tables import metadata

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def session():
    """Fresh SQLite database per test."""
    settings = Settings(database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:"))
    engine = create_engine(settings)

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session

    await engine.dispose()


async def add_user(session, name: str = "alice") -> User:
    user = User(
        id=UserId(uuid4()),
        external_id=f"ext_{name}",
        email=f"{name}@example.com",
        username=name,
    )
    return await PostgresUserRepository(session).save(user)


async def add_post(session, author: User, minutes: int = 0, content: str = "hi") -> Post:
    created = BASE_TIME + timedelta(minutes=minutes)
    post = Post(
        id=PostId(uuid4()),
        author_id=author.id,
        content=content,
        created_at=created,
        updated_at=created,
    )
    return await PostgresPostRepository(session).save(post)


class TestUserRepository:
    """Tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_lookups(self, session):
        """Users are found by id, external id and email."""
        repo = PostgresUserRepository(session)
        user = await add_user(session, "alice")

        assert (await repo.find_by_id(user.id)).username == "alice"
        assert (await repo.find_by_external_id("ext_alice")).id == user.id
        assert (await repo.find_by_email("alice@example.com")).id == user.id
        assert await repo.find_by_external_id("ext_nobody") is None

    @pytest.mark.asyncio
    async def test_save_updates_existing_row(self, session):
        """Saving a known user updates it in place."""
        repo = PostgresUserRepository(session)
        user = await add_user(session, "alice")

        await repo.save(user.model_copy(update={"username": "alice2"}))

        found = await repo.find_by_ids([user.id])
        assert [u.username for u in found] == ["alice2"]


class TestPostRepository:
    """Tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_find_page_orders_newest_first(self, session):
        """Pages follow (created_at DESC, id DESC) and resume after the cursor."""
        repo = PostgresPostRepository(session)
        author = await add_user(session)
        posts = [await add_post(session, author, minutes=i) for i in range(5)]
        newest_first = [p.id for p in reversed(posts)]

        first = await repo.find_page(None, 2)
        second = await repo.find_page(first[-1].id, 2)
        third = await repo.find_page(second[-1].id, 2)

        assert [p.id for p in first + second + third] == newest_first

    @pytest.mark.asyncio
    async def test_equal_timestamps_break_ties_by_id(self, session):
        """Posts created at the same instant still page without gaps."""
        repo = PostgresPostRepository(session)
        author = await add_user(session)
        posts = [await add_post(session, author, minutes=0) for _ in range(4)]
        expected = sorted((p.id for p in posts), reverse=True)

        first = await repo.find_page(None, 2)
        second = await repo.find_page(first[-1].id, 2)

        assert [p.id for p in first + second] == expected

    @pytest.mark.asyncio
    async def test_unknown_cursor_returns_empty_page(self, session):
        """A cursor that matches no post ends the listing."""
        repo = PostgresPostRepository(session)
        author = await add_user(session)
        await add_post(session, author)

        assert await repo.find_page(PostId(uuid4()), 10) == []

    @pytest.mark.asyncio
    async def test_delete_cascades_to_comments_and_reactions(self, session):
        """Deleting a post removes its comments and reactions."""
        author = await add_user(session)
        post = await add_post(session, author)
        comments = PostgresCommentRepository(session)
        reactions = PostgresReactionRepository(session)
        await comments.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                author_id=author.id,
                content="nice",
            )
        )
        await reactions.create_if_absent(
            Reaction(id=ReactionId(uuid4()), post_id=post.id, user_id=author.id)
        )

        assert await PostgresPostRepository(session).delete(post.id) is True

        assert await comments.count_by_posts([post.id]) == {post.id: 0}
        assert await reactions.count_by_posts([post.id]) == {post.id: 0}
        assert await PostgresPostRepository(session).delete(post.id) is False


class TestCommentRepository:
    """Tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_page_is_scoped_to_post(self, session):
        """Only the requested post's comments are listed, newest first."""
        repo = PostgresCommentRepository(session)
        author = await add_user(session)
        post = await add_post(session, author)
        other = await add_post(session, author, minutes=1)
        saved = []
        for i in range(3):
            created = BASE_TIME + timedelta(minutes=i)
            saved.append(
                await repo.save(
                    Comment(
                        id=CommentId(uuid4()),
                        post_id=post.id,
                        author_id=author.id,
                        content=f"c{i}",
                        created_at=created,
                        updated_at=created,
                    )
                )
            )
        await repo.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=other.id,
                author_id=author.id,
                content="elsewhere",
            )
        )

        page = await repo.find_page_for_post(post.id, None, 10)

        assert [c.content for c in page] == ["c2", "c1", "c0"]
        assert await repo.count_by_posts([post.id, other.id]) == {
            post.id: 3,
            other.id: 1,
        }

    @pytest.mark.asyncio
    async def test_cursor_from_another_post_returns_empty_page(self, session):
        """A comment cursor must belong to the listed post."""
        repo = PostgresCommentRepository(session)
        author = await add_user(session)
        post = await add_post(session, author)
        other = await add_post(session, author, minutes=1)
        foreign = await repo.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=other.id,
                author_id=author.id,
                content="elsewhere",
            )
        )

        assert await repo.find_page_for_post(post.id, foreign.id, 10) == []


class TestReactionRepository:
    """Tests for PostgresReactionRepository."""

    @pytest.mark.asyncio
    async def test_upsert_keeps_one_row_per_pair(self, session):
        """A second upsert for the same user and post reuses the row."""
        repo = PostgresReactionRepository(session)
        user = await add_user(session)
        post = await add_post(session, user)

        first = await repo.upsert(
            Reaction(id=ReactionId(uuid4()), post_id=post.id, user_id=user.id)
        )
        second = await repo.upsert(
            Reaction(id=ReactionId(uuid4()), post_id=post.id, user_id=user.id)
        )

        assert second.id == first.id
        assert second.stored_type == ReactionType.UP
        assert await repo.count_by_posts([post.id]) == {post.id: 1}

    @pytest.mark.asyncio
    async def test_create_if_absent_reports_insert(self, session):
        """Only the first insert for a pair creates a row."""
        repo = PostgresReactionRepository(session)
        user = await add_user(session)
        post = await add_post(session, user)

        created = await repo.create_if_absent(
            Reaction(id=ReactionId(uuid4()), post_id=post.id, user_id=user.id)
        )
        again = await repo.create_if_absent(
            Reaction(id=ReactionId(uuid4()), post_id=post.id, user_id=user.id)
        )

        assert created is True
        assert again is False

    @pytest.mark.asyncio
    async def test_batch_lookups_and_delete(self, session):
        """Reactions are found per user across posts and removed per pair."""
        repo = PostgresReactionRepository(session)
        user = await add_user(session, "alice")
        other = await add_user(session, "bob")
        liked = await add_post(session, user)
        unliked = await add_post(session, user, minutes=1)
        await repo.create_if_absent(
            Reaction(id=ReactionId(uuid4()), post_id=liked.id, user_id=user.id)
        )
        await repo.create_if_absent(
            Reaction(id=ReactionId(uuid4()), post_id=liked.id, user_id=other.id)
        )

        mine = await repo.find_by_user_and_posts(user.id, [liked.id, unliked.id])
        assert [r.post_id for r in mine] == [liked.id]
        assert await repo.count_by_posts([liked.id, unliked.id]) == {
            liked.id: 2,
            unliked.id: 0,
        }

        assert await repo.delete_by_post_and_user(liked.id, user.id) is True
        assert await repo.delete_by_post_and_user(liked.id, user.id) is False
        assert await repo.find_by_post_and_user(liked.id, user.id) is None
        assert await repo.find_by_post_and_user(liked.id, other.id) is not None
