"""Domain model entities for the feed."""

from virtue.domain.model.comment import Comment
from virtue.domain.model.post import Post
from virtue.domain.model.reaction import Reaction
from virtue.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Reaction",
]
