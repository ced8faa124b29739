"""Mock identity providers for testing."""

from dishka import Scope, provide

from virtue.adapter.identity import MockIdentityVerifier
from virtue.domain.service import IdentityVerifier
from virtue.util.di.infrastructure.identity import IdentityProvider


class MockIdentityProvider(IdentityProvider):
    """Mock identity provider: the bearer token is the external user id."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_identity_verifier(self) -> IdentityVerifier:
        """Provide mock identity verifier."""
        return MockIdentityVerifier()
