"""Transaction manager interface."""

from abc import ABC, abstractmethod


class TransactionManager(ABC):
    """Unit-of-work boundary around repository writes.

    One instance serves one invocation: ``open_transaction`` first, then
    exactly one of ``commit`` or ``rollback``, then ``close``.
    """

    @abstractmethod
    async def open_transaction(self) -> None:
        """Open the transaction scope."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make writes since ``open_transaction`` permanent."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard writes since ``open_transaction``."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the scope and its connection."""
        pass
