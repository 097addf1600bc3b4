"""Repository interfaces for Gate domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from gate.domain.repository.account import AccountRepository
from gate.domain.repository.transaction import TransactionManager

__all__ = [
    "AccountRepository",
    "TransactionManager",
]
