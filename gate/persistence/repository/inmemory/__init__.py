"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository, InMemoryAccountStore
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryAccountStore",
    "InMemoryTransactionManager",
]
