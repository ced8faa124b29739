"""Sync user use case."""

import logfire
from pydantic import BaseModel

from virtue.application.usecase.user.common import CurrentUserResponse
from virtue.domain.service import IdentityService, UserService


class SyncUserRequest(BaseModel):
    """Sync user request."""

    token: str | None


class SyncUserUseCase:
    """Use case for refreshing the local user from identity provider data."""

    def __init__(
        self, identity_service: IdentityService, user_service: UserService
    ) -> None:
        """Initialize sync user use case.

        Args:
            identity_service: Identity domain service
            user_service: User domain service
        """
        self.identity_service = identity_service
        self.user_service = user_service

    async def execute(self, request: SyncUserRequest) -> CurrentUserResponse:
        """Execute sync flow.

        Creates the user if needed and overwrites email, display name and
        avatar with the provider's values.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
        """
        claims = self.identity_service.verify_token(request.token)
        with logfire.span("sync_user.execute", external_id=claims.external_id):
            user = await self.user_service.sync_from_claims(claims)
            return CurrentUserResponse.from_user(user, self.user_service)
