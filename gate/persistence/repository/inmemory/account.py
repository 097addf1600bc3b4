"""In-memory account repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from gate.domain.error import NotFoundError
from gate.domain.model import (
    Account,
    AccountProfile,
    FacebookAccount,
    ProfilePicture,
)
from gate.domain.repository import AccountRepository
from gate.domain.value import AccountId, normalize_email


class InMemoryAccountStore:
    """Accounts shared by every repository of one test application."""

    def __init__(self) -> None:
        self.accounts: dict[AccountId, Account] = {}

    def count(self) -> int:
        """Number of stored accounts."""
        return len(self.accounts)


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Like a database session, one repository serves one request. While a
    journal is open every write records the account's previous state, so
    ``undo_journal`` reverts this repository's writes and nobody else's.
    """

    def __init__(self, store: InMemoryAccountStore | None = None) -> None:
        self.store = store or InMemoryAccountStore()
        self._journal: dict[AccountId, Optional[Account]] | None = None

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self.store.accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by its normalized email."""
        normalized = normalize_email(email)
        for account in self.store.accounts.values():
            if account.email == normalized:
                return account
        return None

    async def save_with_facebook(self, account: FacebookAccount) -> AccountId:
        """Create or update an account from Facebook data.

        Like the unique email constraint in Postgres, an insert for an email
        that is already stored updates that account instead.
        """
        existing = (
            self.store.accounts.get(account.id)
            if account.id
            else await self.find_by_email(account.email)
        )
        if account.id and existing is None:
            raise NotFoundError("Account", account.id)

        picture = ProfilePicture.for_account(account.picture_url, account.name)
        now = datetime.now()
        if existing:
            self._write(
                existing.model_copy(
                    update={
                        "name": account.name,
                        "facebook_id": account.facebook_id,
                        "picture_url": picture.picture_url,
                        "initials": picture.initials,
                        "updated_at": now,
                    }
                )
            )
            return existing.id

        account_id = AccountId(str(uuid4()))
        self._write(
            Account(
                id=account_id,
                name=account.name,
                email=normalize_email(account.email),
                facebook_id=account.facebook_id,
                picture_url=picture.picture_url,
                initials=picture.initials,
                created_at=now,
                updated_at=now,
            )
        )
        return account_id

    async def load_profile(self, account_id: AccountId) -> Optional[AccountProfile]:
        """Load the public profile fields of an account."""
        account = self.store.accounts.get(account_id)
        if account is None:
            return None
        return AccountProfile(
            id=account.id,
            name=account.name,
            picture_url=account.picture_url,
            initials=account.initials,
        )

    async def save_picture(self, account_id: AccountId, picture: ProfilePicture) -> None:
        """Replace the picture URL and initials of an account."""
        account = self.store.accounts.get(account_id)
        if account is None:
            raise NotFoundError("Account", account_id)
        self._write(
            account.model_copy(
                update={
                    "picture_url": picture.picture_url,
                    "initials": picture.initials,
                    "updated_at": datetime.now(),
                }
            )
        )

    def count(self) -> int:
        """Number of stored accounts."""
        return self.store.count()

    def open_journal(self) -> None:
        """Start recording the previous state of written accounts."""
        self._journal = {}

    def close_journal(self) -> None:
        """Stop recording and forget what was recorded."""
        self._journal = None

    def undo_journal(self) -> None:
        """Revert every write recorded since the journal was opened."""
        for account_id, previous in (self._journal or {}).items():
            if previous is None:
                self.store.accounts.pop(account_id, None)
            else:
                self.store.accounts[account_id] = previous
        self._journal = {}

    def _write(self, account: Account) -> None:
        if self._journal is not None and account.id not in self._journal:
            self._journal[account.id] = self.store.accounts.get(account.id)
        self.store.accounts[account.id] = account
