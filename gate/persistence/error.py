"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class TransactionNotOpenError(PersistenceError):
    """Raised when a transaction is finished before it was opened."""

    def __init__(self) -> None:
        super().__init__("No open transaction")
