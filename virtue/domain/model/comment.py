"""Comment entity."""

from datetime import datetime

from pydantic import Field

from virtue.domain.model.common import DomainModel, utcnow
from virtue.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post.

    Deleting the post deletes its comments.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
