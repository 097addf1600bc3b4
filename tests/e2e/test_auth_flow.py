"""End-to-end tests for the Facebook login flow."""

from unittest.mock import patch

from dishka import AsyncContainer
from fastapi.testclient import TestClient
import httpx
import pytest

from gate.adapter.facebook import MockFacebookGateway
from gate.config import Settings
from gate.domain.model import AccessToken
from gate.domain.service import JWTService
from gate.interface.api.app import create_app
from gate.persistence.repository.inmemory import InMemoryAccountStore
from tests.di import build_test_container


@pytest.fixture
def container() -> AsyncContainer:
    """Fresh, fully mocked container per test."""
    return build_test_container(with_fastapi=True)


@pytest.fixture
def client(container: AsyncContainer):
    """Create test client."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def accounts(client: TestClient, container: AsyncContainer) -> InMemoryAccountStore:
    """The account store behind the test client."""
    return client.portal.call(container.get, InMemoryAccountStore)


def login(client: TestClient, token: str = "any_token") -> httpx.Response:
    return client.post("/auth/facebook", json={"token": token})


class TestFacebookLogin:
    """End-to-end tests for POST /auth/facebook."""

    def test_login_returns_access_token(self, client):
        """Should return an access token for a valid Facebook token."""
        # Act
        response = login(client)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"access_token"}
        assert data["access_token"]

    def test_rejected_facebook_token_is_unauthorized(self, client):
        """Should answer 401 when Facebook rejects the token."""
        response = login(client, token="invalid_token")

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication failed"

    def test_empty_token_is_unprocessable(self, client):
        """Should reject an empty token before calling Facebook."""
        response = client.post("/auth/facebook", json={"token": ""})

        assert response.status_code == 422

    def test_missing_token_is_unprocessable(self, client):
        response = client.post("/auth/facebook", json={})

        assert response.status_code == 422

    def test_facebook_outage_is_server_error(self, client):
        """Transport failures should become a generic 500."""
        with patch.object(
            MockFacebookGateway,
            "load_user",
            side_effect=httpx.ConnectError("connection refused"),
        ):
            response = login(client)

        assert response.status_code == 500
        assert response.json()["detail"] == "Unexpected error"

    def test_failed_login_leaves_no_account(self, client, accounts):
        """A login that fails after the write should be rolled back."""
        # Act
        with patch.object(
            JWTService, "generate", side_effect=RuntimeError("signing failed")
        ):
            response = login(client)

        # Assert
        assert response.status_code == 500
        assert accounts.count() == 0

    def test_successful_login_stores_account(self, client, accounts):
        """The account write should be committed."""
        response = login(client)

        assert response.status_code == 200
        assert accounts.count() == 1


class TestCurrentAccount:
    """End-to-end tests for GET /accounts/me."""

    def test_login_then_fetch_account(self, client):
        """The access token should identify the logged-in account."""
        # Arrange
        token = login(client).json()["access_token"]

        # Act
        response = client.get("/accounts/me", headers={"Authorization": f"Bearer {token}"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Mock Facebook User"
        assert data["email"] == "mock@facebook.com"
        assert data["picture_url"] == "https://example.com/mock.png"
        assert data["id"]

    def test_repeated_login_same_account(self, client):
        """Logging in again should resolve to the same account."""
        first = login(client).json()["access_token"]
        second = login(client).json()["access_token"]

        first_me = client.get("/accounts/me", headers={"Authorization": f"Bearer {first}"})
        second_me = client.get("/accounts/me", headers={"Authorization": f"Bearer {second}"})

        assert first_me.json()["id"] == second_me.json()["id"]

    def test_missing_header_is_forbidden(self, client):
        response = client.get("/accounts/me")

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied"

    def test_invalid_token_is_forbidden(self, client):
        response = client.get("/accounts/me", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 403

    def test_token_for_unknown_account_is_not_found(self, client):
        """A valid token for an account that does not exist should be 404."""
        token = JWTService(Settings().auth).generate(
            key="deleted", expiration_in_ms=AccessToken.expiration_in_ms
        )

        response = client.get("/accounts/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 404


class TestHealth:
    """End-to-end tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
