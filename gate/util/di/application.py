"""Application layer DI providers."""

from dishka import Scope, provide

from gate.application.decorator import DbTransactionDecorator
from gate.application.usecase.account import (
    ChangeProfilePictureUseCase,
    TransactionalChangeProfilePicture,
)
from gate.application.usecase.auth import (
    FacebookLoginUseCase,
    GetCurrentAccountUseCase,
    TransactionalFacebookLogin,
)
from gate.domain.repository import TransactionManager
from gate.domain.service import (
    AccountService,
    AuthService,
    JWTService,
    PictureService,
)
from gate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_facebook_login_use_case(
        self,
        auth_service: AuthService,
        account_service: AccountService,
        jwt_service: JWTService,
    ) -> FacebookLoginUseCase:
        """Provide Facebook login use case."""
        return FacebookLoginUseCase(
            auth_service=auth_service,
            account_service=account_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_transactional_facebook_login(
        self,
        facebook_login_use_case: FacebookLoginUseCase,
        transaction: TransactionManager,
    ) -> TransactionalFacebookLogin:
        """Provide Facebook login wrapped in a database transaction."""
        return TransactionalFacebookLogin(
            DbTransactionDecorator(facebook_login_use_case, transaction)
        )

    @provide(scope=Scope.REQUEST)
    def get_current_account_use_case(
        self, jwt_service: JWTService, account_service: AccountService
    ) -> GetCurrentAccountUseCase:
        """Provide get current account use case."""
        return GetCurrentAccountUseCase(
            jwt_service=jwt_service, account_service=account_service
        )

    @provide(scope=Scope.REQUEST)
    def get_change_profile_picture_use_case(
        self, picture_service: PictureService, account_service: AccountService
    ) -> ChangeProfilePictureUseCase:
        """Provide change profile picture use case."""
        return ChangeProfilePictureUseCase(
            picture_service=picture_service, account_service=account_service
        )

    @provide(scope=Scope.REQUEST)
    def get_transactional_change_profile_picture(
        self,
        change_profile_picture_use_case: ChangeProfilePictureUseCase,
        transaction: TransactionManager,
    ) -> TransactionalChangeProfilePicture:
        """Provide the picture change wrapped in a database transaction."""
        return TransactionalChangeProfilePicture(
            DbTransactionDecorator(change_profile_picture_use_case, transaction)
        )
