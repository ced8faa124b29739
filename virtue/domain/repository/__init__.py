"""Repository interfaces for the feed domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from virtue.domain.repository.comment import CommentRepository
from virtue.domain.repository.post import PostRepository
from virtue.domain.repository.reaction import ReactionRepository
from virtue.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ReactionRepository",
]
