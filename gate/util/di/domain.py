"""Domain layer DI providers."""

from dishka import Scope, provide

from gate.config import AuthSettings
from gate.domain.repository import AccountRepository
from gate.domain.service import (
    AccountService,
    AuthService,
    FacebookGateway,
    FileStorage,
    JWTService,
    PictureService,
)
from gate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, facebook_gateway: FacebookGateway) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(facebook_gateway=facebook_gateway)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self, account_repository: AccountRepository
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(account_repository=account_repository)

    @provide
    def get_picture_service(self, file_storage: FileStorage) -> PictureService:
        """Provide profile picture domain service."""
        return PictureService(file_storage=file_storage)
