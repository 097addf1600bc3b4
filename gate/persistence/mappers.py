"""Mappers for converting between database rows and domain models."""

from datetime import datetime, timezone
from typing import Any, Dict

from gate.domain.model import Account, AccountProfile, FacebookAccount, ProfilePicture
from gate.domain.value import AccountId, normalize_email


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(str(row["id"])),
        name=row["name"],
        email=row["email"],
        facebook_id=row.get("facebook_id"),
        picture_url=row.get("picture_url"),
        initials=row.get("initials"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def facebook_account_to_dict(account: FacebookAccount) -> Dict[str, Any]:
    """Convert a Facebook account write model to database values.

    The ID is left out; the database assigns it on insert. Without a picture
    the account gets initials of its name.

    Args:
        account: Account write model

    Returns:
        Dict suitable for database insertion/update
    """
    picture = ProfilePicture.for_account(account.picture_url, account.name)
    return {
        "name": account.name,
        "email": normalize_email(account.email),
        "facebook_id": account.facebook_id,
        "picture_url": picture.picture_url,
        "initials": picture.initials,
        "updated_at": datetime.now(timezone.utc),
    }


def row_to_profile(row: Dict[str, Any]) -> AccountProfile:
    """Convert database row to AccountProfile."""
    return AccountProfile(
        id=AccountId(str(row["id"])),
        name=row["name"],
        picture_url=row.get("picture_url"),
        initials=row.get("initials"),
    )
