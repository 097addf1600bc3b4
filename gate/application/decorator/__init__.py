"""Use case decorators."""

from .db_transaction import DbTransactionDecorator

__all__ = ["DbTransactionDecorator"]
