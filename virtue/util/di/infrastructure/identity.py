"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from virtue.adapter.identity import JWTIdentityVerifier
from virtue.config import AuthSettings
from virtue.domain.service import IdentityVerifier
from virtue.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider verifying real provider JWTs."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_verifier(self, auth_settings: AuthSettings) -> IdentityVerifier:
        """Provide identity token verifier.

        Uses the JWKS endpoint when configured, otherwise the shared secret.
        """
        return JWTIdentityVerifier(auth_settings=auth_settings)
