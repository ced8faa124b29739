"""Identity domain service.

Authentication itself is delegated to the identity provider. This service
turns a verified provider token into a local ``User``.
"""

from abc import ABC, abstractmethod

import logfire

from virtue.config import AuthSettings
from virtue.domain.error import NotAuthenticatedError, UserNotProvisionedError
from virtue.domain.model.user import User
from virtue.domain.value import IdentityClaims

from .base import Service
from .user_service import UserService


class IdentityVerifier(ABC):
    """Verifies identity provider tokens."""

    @abstractmethod
    def verify(self, token: str) -> IdentityClaims:
        """Verify a token and return its claims.

        Args:
            token: Bearer token from the request

        Returns:
            Verified identity claims

        Raises:
            NotAuthenticatedError: If the token is invalid or expired
        """
        pass


class IdentityService(Service):
    """Domain service resolving request identities to local users."""

    def __init__(
        self,
        verifier: IdentityVerifier,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize identity service.

        Args:
            verifier: Identity provider token verifier
            user_service: User domain service
            auth_settings: Authentication settings
        """
        self.verifier = verifier
        self.user_service = user_service
        self.auth_settings = auth_settings

    def verify_token(self, token: str | None) -> IdentityClaims:
        """Verify a bearer token.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
        """
        if not token:
            raise NotAuthenticatedError()
        with logfire.span("identity_service.verify_token"):
            return self.verifier.verify(token)

    async def authenticate(self, token: str | None) -> User:
        """Resolve a token to a provisioned local user.

        With lazy provisioning enabled, the user is created from the token
        claims on first contact.

        Args:
            token: Bearer token (None when the request has none)

        Returns:
            Local user

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            UserNotProvisionedError: If the user is unknown and lazy
                provisioning is disabled
        """
        claims = self.verify_token(token)
        with logfire.span(
            "identity_service.authenticate", external_id=claims.external_id
        ):
            if self.auth_settings.lazy_provisioning:
                return await self.user_service.provision(claims)

            user = await self.user_service.get_by_external_id(claims.external_id)
            if not user:
                logfire.warn(
                    "Identity not provisioned", external_id=claims.external_id
                )
                raise UserNotProvisionedError(claims.external_id)
            return user

    async def identify(self, token: str | None) -> User | None:
        """Resolve a token to a local user if possible.

        Used by public endpoints that only personalise their output. Never
        creates a user and never fails: a missing or invalid token, or an
        unknown user, gives None.

        Args:
            token: Bearer token (optional)

        Returns:
            Local user or None
        """
        if not token:
            return None
        try:
            claims = self.verifier.verify(token)
        except NotAuthenticatedError as e:
            logfire.debug(
                "Token verification failed, treating as anonymous", error=str(e)
            )
            return None
        return await self.user_service.get_by_external_id(claims.external_id)
