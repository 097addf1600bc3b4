"""In-memory transaction manager for testing."""

from gate.domain.repository import TransactionManager
from gate.persistence.error import TransactionNotOpenError

from .account import InMemoryAccountRepository


class InMemoryTransactionManager(TransactionManager):
    """Transaction manager over one in-memory account repository.

    Rolling back reverts the writes made through that repository since the
    transaction opened. Writes of other repositories on the same store are
    left alone.
    """

    def __init__(self, account_repository: InMemoryAccountRepository) -> None:
        self.account_repository = account_repository
        self._open = False

    async def open_transaction(self) -> None:
        """Start journaling the repository's writes."""
        self.account_repository.open_journal()
        self._open = True

    async def commit(self) -> None:
        """Keep the journaled writes."""
        self._ensure_open()
        self.account_repository.close_journal()

    async def rollback(self) -> None:
        """Revert the journaled writes."""
        self._ensure_open()
        self.account_repository.undo_journal()

    async def close(self) -> None:
        """Stop journaling."""
        self._ensure_open()
        self.account_repository.close_journal()
        self._open = False

    def _ensure_open(self) -> None:
        if not self._open:
            raise TransactionNotOpenError()
