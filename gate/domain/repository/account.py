"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gate.domain.model.account import Account, FacebookAccount
from gate.domain.model.profile import AccountProfile, ProfilePicture
from gate.domain.value import AccountId


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Defines the contract for account persistence operations.
    Implementations live in the infrastructure layer and must apply
    ``normalize_email`` on both lookups and writes.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email.

        Args:
            email: Email address, matched after normalization

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save_with_facebook(self, account: FacebookAccount) -> AccountId:
        """Create or update an account from Facebook data.

        With ``account.id`` set, name, picture and Facebook ID of that account
        are updated and the same ID is returned. Without it, a new account is
        inserted and its newly assigned ID returned.

        Args:
            account: Account write model

        Returns:
            ID of the saved account
        """
        pass

    @abstractmethod
    async def load_profile(self, account_id: AccountId) -> Optional[AccountProfile]:
        """Load the public profile fields of an account.

        Returns:
            The profile if the account exists, None otherwise
        """
        pass

    @abstractmethod
    async def save_picture(self, account_id: AccountId, picture: ProfilePicture) -> None:
        """Replace the picture URL and initials of an account.

        Raises:
            NotFoundError: If the account does not exist
        """
        pass
