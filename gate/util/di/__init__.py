"""Dependency injection wiring.

Providers for external systems (Facebook, PostgreSQL, S3) are mockable: each has
a base class naming its component and one production and one mock subclass.
Everything else is wired the same way in every environment.
"""

from typing import Type

from gate.util.di.application import ProdApplicationProvider
from gate.util.di.base import Component, ProviderBase
from gate.util.di.core import ProdConfigProvider
from gate.util.di.domain import ProdDomainProvider
from gate.util.di.infrastructure import (
    FacebookProvider,
    PersistenceProvider,
    ProdFacebookProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    FacebookProvider,
    PersistenceProvider,
    StorageProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have mock implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of ``base``.

    Concrete providers (no subclasses) are returned as they are.

    Raises:
        ValueError: If the requested implementation is not registered
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for impl in subclasses:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


def resolve_providers(mocked: set[Component] | None = None) -> list[ProviderBase]:
    """Instantiate one provider per entry in PROVIDERS.

    Args:
        mocked: Components to back with their mock implementation

    Returns:
        Provider instances ready for ``make_async_container``
    """
    mocked = mocked or set()
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "resolve_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "FacebookProvider",
    "PersistenceProvider",
    "ProdFacebookProvider",
    "StorageProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
