"""PostgreSQL repository implementations."""

from virtue.persistence.repository.comment import PostgresCommentRepository
from virtue.persistence.repository.post import PostgresPostRepository
from virtue.persistence.repository.reaction import PostgresReactionRepository
from virtue.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresReactionRepository",
]
