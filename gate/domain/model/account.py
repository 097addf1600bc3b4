"""Account aggregate root.

Accounts are keyed by email and created on the first Facebook login.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from gate.domain.model.common import DomainModel
from gate.domain.value import AccountId, FacebookIdentity


class Account(DomainModel):
    """Local account record.

    At most one account exists per (normalized) email.
    """

    id: AccountId
    name: str
    email: str
    facebook_id: Optional[str] = None
    picture_url: Optional[str] = None
    initials: Optional[str] = None  # Set while there is no picture
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class FacebookAccount(DomainModel):
    """Write model for saving an account from Facebook profile data.

    ``id`` is the existing account's ID when updating, ``None`` when the
    repository should create a new account.
    """

    id: Optional[AccountId] = None
    name: str
    email: str
    facebook_id: str
    picture_url: Optional[str] = None


def build_facebook_account(
    identity: FacebookIdentity, existing: Account | None = None
) -> FacebookAccount:
    """Build the write model for a Facebook login.

    Name and picture are always refreshed from Facebook. The email of an
    existing account is kept as stored.

    Args:
        identity: Profile data returned by Facebook
        existing: Account already stored for the identity's email, if any

    Returns:
        Account write model carrying the existing ID or None
    """
    return FacebookAccount(
        id=existing.id if existing else None,
        name=identity.name,
        email=existing.email if existing else identity.email,
        facebook_id=identity.provider_id,
        picture_url=identity.picture_url,
    )
