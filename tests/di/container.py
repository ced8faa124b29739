"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from virtue.util.di import MOCKABLE_COMPONENTS, Component
from virtue.util.di.container import build_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked.

    Settings are loaded from environment variables, so tests adjust them
    with ``monkeypatch.setenv`` before the first resolve.

    Args:
        unmock: Components to run with their production implementation

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Everything in memory
        container = build_test_container()

        # Real token verification, in-memory storage
        container = build_test_container(unmock={"identity"})
    """
    unmock = set(unmock or ())
    unknown = unmock - MOCKABLE_COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return build_container(mocked=MOCKABLE_COMPONENTS - unmock)
