"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .content_service import ContentRewriter, ContentService
from .identity_service import IdentityService, IdentityVerifier
from .post_service import PostService
from .reaction_service import ReactionService
from .user_service import UserService, resolve_avatar_url

__all__ = [
    "CommentService",
    "ContentRewriter",
    "ContentService",
    "IdentityService",
    "IdentityVerifier",
    "PostService",
    "ReactionService",
    "Service",
    "UserService",
    "resolve_avatar_url",
]
