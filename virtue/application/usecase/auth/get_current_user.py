"""Get current user use case."""

from pydantic import BaseModel

from virtue.application.usecase.user.common import CurrentUserResponse
from virtue.domain.service import IdentityService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # Bearer token from the request
    optional: bool = False  # Public endpoints: anonymous instead of an error


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user of a request."""

    def __init__(
        self, identity_service: IdentityService, user_service: UserService
    ) -> None:
        """Initialize get current user use case.

        Args:
            identity_service: Identity domain service
            user_service: User domain service
        """
        self.identity_service = identity_service
        self.user_service = user_service

    async def execute(
        self, request: GetCurrentUserRequest
    ) -> CurrentUserResponse | None:
        """Execute get current user flow.

        Steps:
        1. Verify the identity provider token
        2. Load the local user (provisioning it on first contact)
        3. Return user info

        For optional requests, a missing or invalid token or an unknown
        user gives None instead of an error, and no user is created.

        Args:
            request: Request with bearer token

        Returns:
            Current user, or None for anonymous optional requests

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            UserNotProvisionedError: If the user must sync first
        """
        if request.optional:
            user = await self.identity_service.identify(request.token)
            if not user:
                return None
        else:
            user = await self.identity_service.authenticate(request.token)

        return CurrentUserResponse.from_user(user, self.user_service)
