"""Comment response models shared by comment use cases."""

from datetime import datetime
from typing import Sequence

from virtue.application.usecase.base import CamelModel
from virtue.application.usecase.user.common import AuthorSummary
from virtue.domain.model import Comment
from virtue.domain.service import UserService


class CommentItem(CamelModel):
    """Comment as returned by every comment endpoint."""

    id: str
    post_id: str
    author_id: str
    content: str
    created_at: datetime
    updated_at: datetime
    author: AuthorSummary
    is_author: bool


async def build_comment_items(
    comments: Sequence[Comment], user_service: UserService, viewer_id: str | None
) -> list[CommentItem]:
    """Build comment items with authors in one batch lookup.

    Args:
        comments: Comments to render
        user_service: User domain service
        viewer_id: Current user ID, if any

    Returns:
        Comment items in the given order
    """
    authors = await user_service.get_users_by_ids(
        [comment.author_id for comment in comments]
    )

    items = []
    for comment in comments:
        author = authors.get(comment.author_id)
        if author:
            summary = AuthorSummary.from_user(author, user_service)
        else:
            summary = AuthorSummary(
                id=str(comment.author_id),
                username="",
                avatar_url=user_service.avatar_for(None, str(comment.author_id)),
            )
        items.append(
            CommentItem(
                id=str(comment.id),
                post_id=str(comment.post_id),
                author_id=str(comment.author_id),
                content=comment.content,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
                author=summary,
                is_author=viewer_id is not None and str(comment.author_id) == viewer_id,
            )
        )
    return items
