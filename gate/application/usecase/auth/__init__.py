"""Authentication use cases."""

from .facebook_login import FacebookLoginUseCase, TransactionalFacebookLogin
from .get_current_account import GetCurrentAccountUseCase

__all__ = ["FacebookLoginUseCase", "GetCurrentAccountUseCase", "TransactionalFacebookLogin"]
