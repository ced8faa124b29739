"""Domain layer DI providers."""

from dishka import Scope, provide

from virtue.config import AuthSettings, FeedSettings
from virtue.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from virtue.domain.service import (
    CommentService,
    ContentService,
    IdentityService,
    IdentityVerifier,
    PostService,
    ReactionService,
    UserService,
)
from virtue.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(
        self, user_repository: UserRepository, feed_settings: FeedSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, feed_settings=feed_settings)

    @provide
    def get_identity_service(
        self,
        verifier: IdentityVerifier,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            verifier=verifier, user_service=user_service, auth_settings=auth_settings
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        reaction_repository: ReactionRepository,
        content_service: ContentService,
        feed_settings: FeedSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            reaction_repository=reaction_repository,
            content_service=content_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        content_service: ContentService,
        feed_settings: FeedSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            content_service=content_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        post_repository: PostRepository,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository, post_repository=post_repository
        )
