"""Post entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from virtue.domain.model.common import DomainModel, utcnow
from virtue.domain.value import PostId, UserId


class Post(DomainModel):
    """Image/text post owned by its author.

    Comment and reaction counts are not stored on the post; they are
    counted from their own tables whenever a post is read.
    """

    id: PostId
    author_id: UserId
    image_url: Optional[str] = None
    content: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
