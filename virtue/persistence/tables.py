"""SQLAlchemy table definitions for the feed.

They match the schema defined in Alembic migrations. Column types are the
generic SQLAlchemy ones so the same metadata runs on PostgreSQL in
production and SQLite in repository tests.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("external_id", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=True, unique=True),
    Column("username", String(255), nullable=False),
    Column("avatar_url", Text, nullable=False, server_default=""),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "author_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("image_url", Text, nullable=True),
    Column("content", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

# Feed order: (created_at DESC, id DESC)
Index("idx_posts_created_at_id", posts_table.c.created_at, posts_table.c.id)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "post_id",
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index(
    "idx_comments_post_created_at_id",
    comments_table.c.post_id,
    comments_table.c.created_at,
    comments_table.c.id,
)

# ============================================================================
# REACTIONS TABLE
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "post_id",
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("stored_type", String(10), nullable=False, server_default="UP"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    # One reaction per user per post
    UniqueConstraint("post_id", "user_id", name="uq_reactions_post_user"),
    CheckConstraint("stored_type = 'UP'", name="ck_reactions_stored_type"),
)

Index("idx_reactions_user_id", reactions_table.c.user_id)
