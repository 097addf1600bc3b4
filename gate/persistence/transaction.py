"""SQLAlchemy transaction manager."""

from sqlalchemy.ext.asyncio import AsyncSession

from gate.domain.repository import TransactionManager
from gate.persistence.error import TransactionNotOpenError


class SqlAlchemyTransactionManager(TransactionManager):
    """Transaction manager over the request's async session.

    Repositories built for the same request share ``session``, so their
    writes land in the transaction opened here.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize transaction manager.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session
        self._open = False

    async def open_transaction(self) -> None:
        """Begin a transaction on the session."""
        if not self.session.in_transaction():
            await self.session.begin()
        self._open = True

    async def commit(self) -> None:
        """Commit the open transaction.

        Raises:
            TransactionNotOpenError: If no transaction was opened
        """
        self._ensure_open()
        await self.session.commit()

    async def rollback(self) -> None:
        """Roll back the open transaction.

        Raises:
            TransactionNotOpenError: If no transaction was opened
        """
        self._ensure_open()
        await self.session.rollback()

    async def close(self) -> None:
        """Close the session and return its connection to the pool.

        Raises:
            TransactionNotOpenError: If no transaction was opened
        """
        self._ensure_open()
        await self.session.close()
        self._open = False

    def _ensure_open(self) -> None:
        if not self._open:
            raise TransactionNotOpenError()
