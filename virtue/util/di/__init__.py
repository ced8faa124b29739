"""Dependency injection module."""

from virtue.util.di.adapter import ProdAdapterProvider
from virtue.util.di.application import ProdApplicationProvider
from virtue.util.di.base import Component, ProviderBase
from virtue.util.di.core import ProdConfigProvider
from virtue.util.di.domain import ProdDomainProvider
from virtue.util.di.infrastructure import IdentityProvider, PersistenceProvider

# Every container is built from this list; swappable components are listed
# by their base class
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdAdapterProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    IdentityProvider,
    PersistenceProvider,
]

MOCKABLE_COMPONENTS: frozenset[Component] = frozenset(
    provider.__mock_component__
    for provider in PROVIDERS
    if provider.__mock_component__ is not None
)

__all__ = [
    "Component",
    "MOCKABLE_COMPONENTS",
    "PROVIDERS",
    "ProviderBase",
]
