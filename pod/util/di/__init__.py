"""Dependency injection wiring for pod people."""

from typing import Type

from pod.util.di.application import ProdApplicationProvider
from pod.util.di.base import (
    Component,
    ProviderBase,
    get_provider,
    is_swappable,
    swappable_components,
)
from pod.util.di.core import ProdConfigProvider
from pod.util.di.domain import ProdDomainProvider
from pod.util.di.infrastructure import (
    FederationProvider,
    PersistenceProvider,
    ProdFederationProvider,
    ProdPersistenceProvider,
)

# Order is irrelevant to dishka; concrete layers first for readability
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    FederationProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_swappable",
    "swappable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "FederationProvider",
    "PersistenceProvider",
    "ProdFederationProvider",
    "ProdPersistenceProvider",
]
