"""Base classes for domain services."""

import logfire

from virtue.domain.error import NotFoundError
from virtue.domain.repository import PostRepository
from virtue.domain.value import PostId


class Service:
    """Base class for all domain services."""


class PostChildService(Service):
    """Base for services whose records belong to a post.

    Comments and reactions both refuse to touch a post that doesn't exist.
    Subclasses assign ``post_repository`` in their initializer.
    """

    post_repository: PostRepository
    child_kind: str = "record"

    async def _require_post(self, post_id: PostId) -> None:
        if not await self.post_repository.find_by_id(post_id):
            logfire.warn(
                "Parent post not found for {child_kind}",
                child_kind=self.child_kind,
                post_id=str(post_id),
            )
            raise NotFoundError("Post", str(post_id))
