"""Get current account use case."""

from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.domain.service import AccountService, JWTService
from gate.domain.value import AccountId


class GetCurrentAccountRequest(BaseModel):
    """Get current account request."""

    token: str  # Access token issued at login


class GetCurrentAccountResponse(BaseModel):
    """Get current account response."""

    id: str
    name: str
    email: str
    picture_url: str | None
    initials: str | None = None


class GetCurrentAccountUseCase(
    BaseUseCase[GetCurrentAccountRequest, GetCurrentAccountResponse]
):
    """Use case for loading the account behind an access token."""

    def __init__(self, jwt_service: JWTService, account_service: AccountService) -> None:
        self.jwt_service = jwt_service
        self.account_service = account_service

    async def execute(
        self, request: GetCurrentAccountRequest
    ) -> GetCurrentAccountResponse:
        """Validate the token and load its account.

        Raises:
            InvalidTokenError: If token is invalid or expired
            NotFoundError: If the account no longer exists
        """
        account_id = AccountId(self.jwt_service.validate(request.token))
        account = await self.account_service.get_by_id(account_id)

        return GetCurrentAccountResponse(
            id=account.id,
            name=account.name,
            email=account.email,
            picture_url=account.picture_url,
            initials=account.initials,
        )
