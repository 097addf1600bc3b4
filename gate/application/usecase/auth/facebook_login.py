"""Facebook login use case."""

from typing import NewType

import logfire
from pydantic import BaseModel, Field

from gate.application.decorator import DbTransactionDecorator
from gate.application.usecase.base import BaseUseCase
from gate.domain.error import AuthenticationError
from gate.domain.model import AccessToken, build_facebook_account
from gate.domain.service import AccountService, AuthService, JWTService


class FacebookLoginRequest(BaseModel):
    """Login request carrying the token from the Facebook SDK."""

    token: str = Field(min_length=1)


class FacebookLoginResponse(BaseModel):
    """Login response."""

    access_token: str


class FacebookLoginUseCase(BaseUseCase[FacebookLoginRequest, FacebookLoginResponse]):
    """Use case for logging in with a Facebook client token."""

    def __init__(
        self,
        auth_service: AuthService,
        account_service: AccountService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize Facebook login use case.

        Args:
            auth_service: Authentication domain service
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: FacebookLoginRequest) -> FacebookLoginResponse:
        """Execute Facebook login flow.

        Steps:
        1. Resolve the Facebook identity for the token
        2. Create the account for its email, or refresh the existing one
        3. Issue an access token for the account

        Args:
            request: Login request with the Facebook client token

        Returns:
            Login response with a fresh access token

        Raises:
            AuthenticationError: If Facebook returns no identity for the token
        """
        identity = await self.auth_service.load_facebook_user(request.token)
        if identity is None:
            raise AuthenticationError()

        existing = await self.account_service.get_by_email(identity.email)

        with logfire.span(
            "facebook_login",
            provider_id=identity.provider_id,
            is_new_account=existing is None,
        ):
            account_id = await self.account_service.save_with_facebook(
                build_facebook_account(identity, existing)
            )

            access_token = AccessToken(
                value=self.jwt_service.generate(
                    key=account_id, expiration_in_ms=AccessToken.expiration_in_ms
                )
            )

            logfire.info("Facebook login succeeded", account_id=account_id)

            return FacebookLoginResponse(access_token=access_token.value)


# Facebook login bracketed by a database transaction, the HTTP entry point
TransactionalFacebookLogin = NewType("TransactionalFacebookLogin", DbTransactionDecorator)
