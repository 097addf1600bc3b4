"""Profile picture of an account.

An account shows either an uploaded picture or, without one, initials
derived from its name.
"""

from typing import Optional

from gate.domain.model.common import DomainModel
from gate.domain.value import AccountId


def initials_from_name(name: Optional[str]) -> Optional[str]:
    """Initials shown in place of a picture.

    First letters of the first and last words, or the first two letters of a
    single-word name, uppercased.

    Examples:
        >>> initials_from_name("Alice Maria Smith")
        'AS'
        >>> initials_from_name("alice")
        'AL'
    """
    words = (name or "").split()
    if not words:
        return None
    if len(words) > 1:
        return f"{words[0][0]}{words[-1][0]}".upper()
    return words[0][:2].upper()


class ProfilePicture(DomainModel):
    """What an account shows as its picture. Exactly one field is set."""

    picture_url: Optional[str] = None
    initials: Optional[str] = None

    @classmethod
    def for_account(
        cls, picture_url: Optional[str], name: Optional[str]
    ) -> "ProfilePicture":
        """Use ``picture_url`` if there is one, otherwise initials of ``name``."""
        if picture_url:
            return cls(picture_url=picture_url)
        return cls(initials=initials_from_name(name))


class AccountProfile(DomainModel):
    """Public profile fields of an account."""

    id: AccountId
    name: str
    picture_url: Optional[str] = None
    initials: Optional[str] = None
