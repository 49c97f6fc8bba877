"""Dependency injection wiring.

``PROVIDERS`` lists one entry per concern. Infrastructure entries are
abstract bases with a production and a mock subclass; ``get_provider`` picks
between them.
"""

from typing import Type

from vouch.util.di.application import ProdApplicationProvider
from vouch.util.di.base import Component, ProviderBase
from vouch.util.di.core import ProdConfigProvider
from vouch.util.di.domain import ProdDomainProvider
from vouch.util.di.infrastructure import (
    MailProvider,
    PersistenceProvider,
    ProdMailProvider,
    ProdPersistenceProvider,
    ProdRealtimeProvider,
    ProdReputationProvider,
    RealtimeProvider,
    ReputationProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
    MailProvider,
    RealtimeProvider,
    ReputationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve ``base`` to the provider class to instantiate.

    A base without subclasses is concrete and returned unchanged.

    Raises:
        ValueError: If a mockable base lacks the requested implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "MailProvider",
    "PersistenceProvider",
    "RealtimeProvider",
    "ReputationProvider",
    "ProdMailProvider",
    "ProdPersistenceProvider",
    "ProdRealtimeProvider",
    "ProdReputationProvider",
]
