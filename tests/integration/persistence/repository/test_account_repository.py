"""Integration tests for PostgresAccountRepository.

Requires a running, migrated PostgreSQL (see DATABASE__URL). Enable with
RUN_INTEGRATION_TESTS=1.
"""

import os

from dishka import AsyncContainer
import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from gate.application.usecase.auth import TransactionalFacebookLogin
from gate.application.usecase.auth.facebook_login import FacebookLoginRequest
from gate.domain.error import NotFoundError
from gate.domain.model import FacebookAccount, ProfilePicture
from gate.domain.repository import AccountRepository, TransactionManager
from gate.domain.service import JWTService
from gate.domain.value import AccountId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("RUN_INTEGRATION_TESTS"),
    reason="set RUN_INTEGRATION_TESTS=1 with a migrated database",
)

# Integration test fixture - real PostgreSQL, mocked Facebook
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env: AsyncContainer):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(text("TRUNCATE TABLE accounts"))
    await session.commit()
    yield


def alice(**overrides) -> FacebookAccount:
    fields = {
        "name": "Alice",
        "email": "alice@x.com",
        "facebook_id": "fb_1",
        "picture_url": "http://x/a.png",
    }
    fields.update(overrides)
    return FacebookAccount(**fields)


class TestPostgresAccountRepository:
    """Integration tests for account persistence."""

    @pytest.mark.asyncio
    async def test_insert_then_find(self, integration_env: AsyncContainer):
        """Should assign an ID and store a normalized email."""
        repo = await integration_env.get(AccountRepository)

        account_id = await repo.save_with_facebook(alice(email="Alice@X.com"))

        account = await repo.find_by_id(account_id)
        assert account is not None
        assert account.email == "alice@x.com"
        assert (await repo.find_by_email(" ALICE@x.com")).id == account_id

    @pytest.mark.asyncio
    async def test_insert_for_stored_email_updates(self, integration_env: AsyncContainer):
        """The email unique constraint should turn a second insert into an update."""
        repo = await integration_env.get(AccountRepository)
        first = await repo.save_with_facebook(alice())

        second = await repo.save_with_facebook(alice(name="Alice B"))

        assert second == first
        assert (await repo.find_by_id(first)).name == "Alice B"

    @pytest.mark.asyncio
    async def test_update_unknown_id_raises(self, integration_env: AsyncContainer):
        repo = await integration_env.get(AccountRepository)

        with pytest.raises(NotFoundError):
            await repo.save_with_facebook(
                alice(id=AccountId("00000000-0000-0000-0000-000000000000"))
            )

    @pytest.mark.asyncio
    async def test_rollback_discards_insert(self, integration_env: AsyncContainer):
        """Writes inside a rolled back transaction should not persist."""
        repo = await integration_env.get(AccountRepository)
        transaction = await integration_env.get(TransactionManager)

        await transaction.open_transaction()
        await repo.save_with_facebook(alice())
        await transaction.rollback()
        await transaction.close()

        assert await repo.find_by_email("alice@x.com") is None

    @pytest.mark.asyncio
    async def test_transactional_login_commits(self, integration_env: AsyncContainer):
        """A full login should leave a committed account behind."""
        login = await integration_env.get(TransactionalFacebookLogin)
        jwt_service = await integration_env.get(JWTService)
        repo = await integration_env.get(AccountRepository)

        response = await login.execute(FacebookLoginRequest(token="any_token"))

        account = await repo.find_by_email("mock@facebook.com")
        assert account is not None
        assert jwt_service.validate(response.access_token) == account.id

    @pytest.mark.asyncio
    async def test_account_without_picture_stores_initials(
        self, integration_env: AsyncContainer
    ):
        repo = await integration_env.get(AccountRepository)

        account_id = await repo.save_with_facebook(
            alice(name="Alice Smith", picture_url=None)
        )

        profile = await repo.load_profile(account_id)
        assert profile.picture_url is None
        assert profile.initials == "AS"
        assert (await repo.find_by_id(account_id)).initials == "AS"

    @pytest.mark.asyncio
    async def test_save_picture_replaces_initials(self, integration_env: AsyncContainer):
        repo = await integration_env.get(AccountRepository)
        account_id = await repo.save_with_facebook(alice(picture_url=None))

        await repo.save_picture(account_id, ProfilePicture(picture_url="http://x/b.png"))

        profile = await repo.load_profile(account_id)
        assert profile.picture_url == "http://x/b.png"
        assert profile.initials is None

    @pytest.mark.asyncio
    async def test_picture_of_unknown_account(self, integration_env: AsyncContainer):
        repo = await integration_env.get(AccountRepository)
        missing = AccountId("00000000-0000-0000-0000-000000000000")

        assert await repo.load_profile(missing) is None
        with pytest.raises(NotFoundError):
            await repo.save_picture(missing, ProfilePicture(initials="AL"))
