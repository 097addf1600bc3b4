"""PostgreSQL implementation of Account repository."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gate.domain.error import NotFoundError
from gate.domain.model import Account, AccountProfile, FacebookAccount, ProfilePicture
from gate.domain.repository import AccountRepository
from gate.domain.value import AccountId, normalize_email
from gate.persistence.mappers import (
    facebook_account_to_dict,
    row_to_account,
    row_to_profile,
)
from gate.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: Account ID to look up

        Returns:
            Account if found, None otherwise
        """
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by its normalized email.

        Args:
            email: Email to search for

        Returns:
            Account if found, None otherwise
        """
        stmt = select(accounts_table).where(
            accounts_table.c.email == normalize_email(email)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def save_with_facebook(self, account: FacebookAccount) -> AccountId:
        """Create or update an account from Facebook data.

        Inserts resolve email conflicts as updates, so two first logins racing
        for the same email end up on one row.

        Args:
            account: Account write model

        Returns:
            ID of the saved account

        Raises:
            NotFoundError: If ``account.id`` is set but no such account exists
        """
        values = facebook_account_to_dict(account)

        if account.id:
            # Update - email is the lookup key and stays as stored
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(
                    name=values["name"],
                    facebook_id=values["facebook_id"],
                    picture_url=values["picture_url"],
                    initials=values["initials"],
                    updated_at=values["updated_at"],
                )
                .returning(accounts_table.c.id)
            )
        else:
            # Insert
            insert_stmt = insert(accounts_table).values(**values)
            stmt = insert_stmt.on_conflict_do_update(
                index_elements=[accounts_table.c.email],
                set_={
                    "name": insert_stmt.excluded.name,
                    "facebook_id": insert_stmt.excluded.facebook_id,
                    "picture_url": insert_stmt.excluded.picture_url,
                    "initials": insert_stmt.excluded.initials,
                    "updated_at": insert_stmt.excluded.updated_at,
                },
            ).returning(accounts_table.c.id)

        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            raise NotFoundError("Account", str(account.id))

        await self.session.flush()
        return AccountId(str(row.id))

    async def load_profile(self, account_id: AccountId) -> Optional[AccountProfile]:
        """Load the public profile fields of an account.

        Returns:
            The profile if the account exists, None otherwise
        """
        stmt = select(
            accounts_table.c.id,
            accounts_table.c.name,
            accounts_table.c.picture_url,
            accounts_table.c.initials,
        ).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def save_picture(self, account_id: AccountId, picture: ProfilePicture) -> None:
        """Replace the picture URL and initials of an account.

        Raises:
            NotFoundError: If the account does not exist
        """
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .values(
                picture_url=picture.picture_url,
                initials=picture.initials,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(accounts_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Account", account_id)
        await self.session.flush()
