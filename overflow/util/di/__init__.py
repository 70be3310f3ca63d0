"""Dependency injection wiring for the Overflow API."""

from overflow.util.di.application import ProdApplicationProvider
from overflow.util.di.base import Component, ProviderBase
from overflow.util.di.core import ProdConfigProvider
from overflow.util.di.domain import ProdDomainProvider
from overflow.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Installed in this order; components are resolved to a variant per container
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(base: type[ProviderBase], use_mock: bool = False) -> type[ProviderBase]:
    """Resolve ``base`` to the provider class a container should install."""
    return base.variant(use_mock)


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
