"""Application layer DI providers."""

from dishka import Scope, provide

from virtue.adapter.webhook import WebhookVerifier
from virtue.application.usecase.auth import GetCurrentUserUseCase
from virtue.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from virtue.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostItemBuilder,
    UpdatePostUseCase,
)
from virtue.application.usecase.reaction import (
    GetReactionUseCase,
    RemoveReactionUseCase,
    SetReactionUseCase,
    ToggleReactionUseCase,
)
from virtue.application.usecase.user import (
    GetUserProfileUseCase,
    SyncUserUseCase,
    UpdateProfileUseCase,
)
from virtue.application.usecase.webhook import HandleIdentityEventUseCase
from virtue.config import FeedSettings
from virtue.domain.service import (
    CommentService,
    IdentityService,
    PostService,
    ReactionService,
    UserService,
)
from virtue.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, identity_service: IdentityService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            identity_service=identity_service, user_service=user_service
        )

    # Post use cases
    @provide
    def get_post_item_builder(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> PostItemBuilder:
        """Provide post response builder."""
        return PostItemBuilder(
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        post_item_builder: PostItemBuilder,
        feed_settings: FeedSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            post_item_builder=post_item_builder,
            feed_settings=feed_settings,
        )

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service, post_item_builder=post_item_builder
        )

    @provide
    def get_create_post_use_case(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service, post_item_builder=post_item_builder
        )

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, post_item_builder=post_item_builder
        )

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            user_service=user_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Reaction use cases
    @provide
    def get_get_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> GetReactionUseCase:
        """Provide get reaction use case."""
        return GetReactionUseCase(reaction_service=reaction_service)

    @provide
    def get_set_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> SetReactionUseCase:
        """Provide set reaction use case."""
        return SetReactionUseCase(reaction_service=reaction_service)

    @provide
    def get_toggle_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> ToggleReactionUseCase:
        """Provide toggle reaction use case."""
        return ToggleReactionUseCase(reaction_service=reaction_service)

    @provide
    def get_remove_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> RemoveReactionUseCase:
        """Provide remove reaction use case."""
        return RemoveReactionUseCase(reaction_service=reaction_service)

    # User use cases
    @provide
    def get_sync_user_use_case(
        self, identity_service: IdentityService, user_service: UserService
    ) -> SyncUserUseCase:
        """Provide sync user use case."""
        return SyncUserUseCase(
            identity_service=identity_service, user_service=user_service
        )

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    @provide
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    # Webhook use cases
    @provide
    def get_handle_identity_event_use_case(
        self, webhook_verifier: WebhookVerifier, user_service: UserService
    ) -> HandleIdentityEventUseCase:
        """Provide identity webhook use case."""
        return HandleIdentityEventUseCase(
            webhook_verifier=webhook_verifier, user_service=user_service
        )
