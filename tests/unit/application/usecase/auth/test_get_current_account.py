"""Unit tests for GetCurrentAccountUseCase."""

from dishka import AsyncContainer
import pytest

from gate.application.usecase.auth import FacebookLoginUseCase, GetCurrentAccountUseCase
from gate.application.usecase.auth.facebook_login import FacebookLoginRequest
from gate.application.usecase.auth.get_current_account import GetCurrentAccountRequest
from gate.domain.error import NotFoundError
from gate.domain.model import AccessToken
from gate.domain.service import JWTService
from gate.util.jwt import InvalidTokenError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCurrentAccountUseCase:
    """Tests for GetCurrentAccountUseCase."""

    @pytest.mark.asyncio
    async def test_returns_account_for_login_token(self, unit_env: AsyncContainer):
        """Should load the account a login token was issued for."""
        # Arrange
        login = await unit_env.get(FacebookLoginUseCase)
        use_case = await unit_env.get(GetCurrentAccountUseCase)
        login_response = await login.execute(FacebookLoginRequest(token="any_token"))

        # Act
        response = await use_case.execute(
            GetCurrentAccountRequest(token=login_response.access_token)
        )

        # Assert
        assert response.name == "Mock Facebook User"
        assert response.email == "mock@facebook.com"
        assert response.picture_url == "https://example.com/mock.png"

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, unit_env: AsyncContainer):
        """Should reject tokens that fail validation."""
        use_case = await unit_env.get(GetCurrentAccountUseCase)

        with pytest.raises(InvalidTokenError):
            await use_case.execute(GetCurrentAccountRequest(token="garbage"))

    @pytest.mark.asyncio
    async def test_unknown_account_raises(self, unit_env: AsyncContainer):
        """Should raise NotFoundError when the account no longer exists."""
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(GetCurrentAccountUseCase)
        token = jwt_service.generate(
            key="deleted", expiration_in_ms=AccessToken.expiration_in_ms
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentAccountRequest(token=token))
