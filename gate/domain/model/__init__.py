"""Domain model entities for Gate."""

from gate.domain.model.access_token import AccessToken
from gate.domain.model.account import Account, FacebookAccount, build_facebook_account
from gate.domain.model.profile import AccountProfile, ProfilePicture, initials_from_name

__all__ = [
    "AccessToken",
    "Account",
    "AccountProfile",
    "FacebookAccount",
    "ProfilePicture",
    "build_facebook_account",
    "initials_from_name",
]
