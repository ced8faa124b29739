"""Identity provider token verification."""

import logfire

from virtue.config import AuthSettings
from virtue.domain.error import NotAuthenticatedError
from virtue.domain.service.identity_service import IdentityVerifier
from virtue.domain.value import IdentityClaims
from virtue.util.jwt import JWTError, verify_token


class JWTIdentityVerifier(IdentityVerifier):
    """Verifies identity provider JWTs with PyJWT.

    Profile claims are optional; providers include whatever their session
    token template adds (``email``, ``username``, ``first_name``,
    ``last_name``, ``image_url``).
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize verifier.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify(self, token: str) -> IdentityClaims:
        """Verify a token and return its claims."""
        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Identity token rejected", error=str(e))
            raise NotAuthenticatedError(str(e)) from e

        return IdentityClaims(
            external_id=str(payload["sub"]),
            email=payload.get("email"),
            username=payload.get("username"),
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
            image_url=payload.get("image_url"),
        )
