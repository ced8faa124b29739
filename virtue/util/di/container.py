"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from virtue.util.di import PROVIDERS, Component


def build_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build a container from the registered providers.

    Args:
        mocked: Components to replace with their mock implementations.
            The mock providers must already be imported.

    Returns:
        Container that also serves FastAPI request objects
    """
    providers = [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables when first requested.
    """
    return build_container()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve dishka dependencies for the app's routes from ``container``."""
    setup_dishka(container, app)
