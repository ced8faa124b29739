"""Mock identity verifier for development and testing."""

from virtue.domain.error import NotAuthenticatedError
from virtue.domain.service.identity_service import IdentityVerifier
from virtue.domain.value import IdentityClaims


class MockIdentityVerifier(IdentityVerifier):
    """Treats the bearer token itself as the external user id.

    ``Authorization: Bearer alice`` authenticates as external id ``alice``
    with email ``alice@example.com``. Tokens starting with ``invalid`` are
    rejected.
    """

    def verify(self, token: str) -> IdentityClaims:
        """Return claims derived from the token text."""
        if not token or token.startswith("invalid"):
            raise NotAuthenticatedError("Invalid token")
        return IdentityClaims(
            external_id=token,
            email=f"{token}@example.com",
            username=token,
        )
