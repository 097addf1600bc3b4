"""Unit tests for DbTransactionDecorator."""

from unittest.mock import AsyncMock, Mock

import pytest

from gate.application.decorator import DbTransactionDecorator
from gate.application.usecase.base import BaseUseCase
from gate.domain.model import FacebookAccount
from gate.domain.repository import TransactionManager
from gate.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryTransactionManager,
)


class SaveAccountUseCase(BaseUseCase):
    """Saves an account, then optionally fails."""

    def __init__(self, repo: InMemoryAccountRepository, fail: bool = False) -> None:
        self.repo = repo
        self.fail = fail

    async def execute(self, request: FacebookAccount) -> str:
        account_id = await self.repo.save_with_facebook(request)
        if self.fail:
            raise RuntimeError("failed after write")
        return account_id


def spy_transaction() -> Mock:
    """Transaction manager that records its calls."""
    transaction = Mock(spec=TransactionManager)
    transaction.open_transaction = AsyncMock()
    transaction.commit = AsyncMock()
    transaction.rollback = AsyncMock()
    transaction.close = AsyncMock()
    return transaction


def spy_use_case(**kwargs) -> Mock:
    use_case = Mock(spec=BaseUseCase)
    use_case.execute = AsyncMock(**kwargs)
    return use_case


class TestDbTransactionDecorator:
    """Tests for DbTransactionDecorator."""

    @pytest.mark.asyncio
    async def test_success_commits_and_returns_result(self):
        """Should open, commit and close once, returning the decoratee's result."""
        # Arrange
        transaction = spy_transaction()
        decoratee = spy_use_case(return_value="result")
        decorator = DbTransactionDecorator(decoratee, transaction)

        # Act
        result = await decorator.execute("request")

        # Assert
        assert result == "result"
        decoratee.execute.assert_awaited_once_with("request")
        transaction.open_transaction.assert_awaited_once()
        transaction.commit.assert_awaited_once()
        transaction.rollback.assert_not_awaited()
        transaction.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failure_rolls_back_and_rethrows(self):
        """Should roll back, close once and re-raise the same error."""
        # Arrange
        transaction = spy_transaction()
        error = ValueError("boom")
        decorator = DbTransactionDecorator(spy_use_case(side_effect=error), transaction)

        # Act
        with pytest.raises(ValueError) as exc_info:
            await decorator.execute("request")

        # Assert
        assert exc_info.value is error
        transaction.open_transaction.assert_awaited_once()
        transaction.rollback.assert_awaited_once()
        transaction.commit.assert_not_awaited()
        transaction.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_commit_failure_closes_without_rollback(self):
        """A failing commit should propagate and still close."""
        transaction = spy_transaction()
        transaction.commit.side_effect = RuntimeError("commit failed")
        decorator = DbTransactionDecorator(spy_use_case(return_value="ok"), transaction)

        with pytest.raises(RuntimeError, match="commit failed"):
            await decorator.execute("request")

        transaction.rollback.assert_not_awaited()
        transaction.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_open_failure_skips_decoratee(self):
        """If the transaction cannot open, nothing else should run."""
        transaction = spy_transaction()
        transaction.open_transaction.side_effect = ConnectionError("no db")
        decoratee = spy_use_case(return_value="ok")
        decorator = DbTransactionDecorator(decoratee, transaction)

        with pytest.raises(ConnectionError):
            await decorator.execute("request")

        decoratee.execute.assert_not_awaited()
        transaction.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rollback_discards_writes(self):
        """Writes made before a failure should not survive."""
        # Arrange
        repo = InMemoryAccountRepository()
        decorator = DbTransactionDecorator(
            SaveAccountUseCase(repo, fail=True), InMemoryTransactionManager(repo)
        )

        # Act
        with pytest.raises(RuntimeError):
            await decorator.execute(
                FacebookAccount(name="Alice", email="alice@x.com", facebook_id="fb_1")
            )

        # Assert
        assert repo.count() == 0

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self):
        """Writes should be visible after a successful run."""
        repo = InMemoryAccountRepository()
        decorator = DbTransactionDecorator(
            SaveAccountUseCase(repo), InMemoryTransactionManager(repo)
        )

        account_id = await decorator.execute(
            FacebookAccount(name="Alice", email="alice@x.com", facebook_id="fb_1")
        )

        assert await repo.find_by_id(account_id) is not None

    @pytest.mark.asyncio
    async def test_decorator_is_reusable(self):
        """Each call should bracket its own transaction."""
        transaction = spy_transaction()
        decorator = DbTransactionDecorator(spy_use_case(return_value="ok"), transaction)

        await decorator.execute("first")
        await decorator.execute("second")

        assert transaction.open_transaction.await_count == 2
        assert transaction.commit.await_count == 2
        assert transaction.close.await_count == 2
