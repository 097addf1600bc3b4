"""Account domain service."""

import logfire

from gate.domain.error import NotFoundError
from gate.domain.model import Account, AccountProfile, FacebookAccount, ProfilePicture
from gate.domain.repository import AccountRepository
from gate.domain.value import AccountId

from .base import Service


class AccountService(Service):
    """Domain service for account operations."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=account_id):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=account_id)
                raise NotFoundError("Account", account_id)
            return account

    async def get_by_email(self, email: str) -> Account | None:
        """Get account by email.

        Args:
            email: Email address

        Returns:
            Account if found, None otherwise
        """
        with logfire.span("account_service.get_by_email"):
            account = await self.account_repository.find_by_email(email)
            if account:
                logfire.info("Account found", account_id=account.id)
            else:
                logfire.info("No account for email")
            return account

    async def save_with_facebook(self, account: FacebookAccount) -> AccountId:
        """Save an account from Facebook data (create or update).

        Args:
            account: Account write model

        Returns:
            ID of the saved account
        """
        with logfire.span(
            "account_service.save_with_facebook",
            is_new_account=account.id is None,
            facebook_id=account.facebook_id,
        ):
            account_id = await self.account_repository.save_with_facebook(account)
            logfire.info(
                "Account saved",
                account_id=account_id,
                created=account.id is None,
            )
            return account_id

    async def load_profile(self, account_id: AccountId) -> AccountProfile:
        """Load the public profile of an account.

        Raises:
            NotFoundError: If account not found
        """
        profile = await self.account_repository.load_profile(account_id)
        if profile is None:
            raise NotFoundError("Account", account_id)
        return profile

    async def save_picture(self, account_id: AccountId, picture: ProfilePicture) -> None:
        """Replace what an account shows as its picture.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.save_picture", account_id=account_id):
            await self.account_repository.save_picture(account_id, picture)
            logfire.info(
                "Picture saved",
                account_id=account_id,
                has_picture=picture.picture_url is not None,
            )
