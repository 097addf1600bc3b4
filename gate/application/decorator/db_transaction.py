"""Database transaction decorator for use cases."""

import logfire

from gate.application.usecase.base import BaseUseCase, RequestT, ResponseT
from gate.domain.repository import TransactionManager


class DbTransactionDecorator(BaseUseCase[RequestT, ResponseT]):
    """Runs a use case inside a database transaction.

    Writes made by the wrapped use case are committed when it returns and
    rolled back when it raises. The transaction is closed exactly once on
    either path. Results and errors pass through unchanged.
    """

    def __init__(
        self,
        decoratee: BaseUseCase[RequestT, ResponseT],
        transaction: TransactionManager,
    ) -> None:
        """Initialize decorator.

        Args:
            decoratee: Use case to run inside the transaction
            transaction: Transaction manager for this invocation
        """
        self.decoratee = decoratee
        self.transaction = transaction

    async def execute(self, request: RequestT) -> ResponseT:
        """Open a transaction, run the decoratee, then commit or roll back.

        Args:
            request: Request passed through to the decoratee

        Returns:
            The decoratee's result

        Raises:
            Exception: Whatever the decoratee raised, after rollback and close
        """
        use_case = type(self.decoratee).__name__
        await self.transaction.open_transaction()
        try:
            result = await self.decoratee.execute(request)
        except Exception as e:
            await self.transaction.rollback()
            logfire.warn("Transaction rolled back", use_case=use_case, error=str(e))
            raise
        else:
            await self.transaction.commit()
            logfire.debug("Transaction committed", use_case=use_case)
            return result
        finally:
            await self.transaction.close()
