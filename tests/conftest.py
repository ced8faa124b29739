"""Test configuration and fixtures."""

import logfire
import pytest

from virtue.domain.value import IdentityClaims

# Local-only telemetry; spans and logs are still recorded and discarded
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def test_environment(monkeypatch):
    """Pin settings that tests rely on, whatever the local .env says."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__LAZY_PROVISIONING", "true")


def make_claims(external_id: str, **overrides) -> IdentityClaims:
    """Identity claims as the mock verifier would produce them.

    Args:
        external_id: Identity provider user id
        **overrides: Profile fields to replace

    Returns:
        Identity claims
    """
    fields = {
        "external_id": external_id,
        "email": f"{external_id}@example.com",
        "username": external_id,
    }
    fields.update(overrides)
    return IdentityClaims(**fields)
