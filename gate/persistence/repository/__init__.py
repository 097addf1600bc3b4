"""PostgreSQL repository implementations."""

from gate.persistence.repository.account import PostgresAccountRepository

__all__ = [
    "PostgresAccountRepository",
]
