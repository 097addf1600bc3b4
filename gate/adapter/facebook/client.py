"""Facebook Graph API gateway.

Resolves a client token issued by the Facebook SDK into profile data:

1. Obtain an app access token with the client credentials grant
2. Inspect the client token with ``debug_token`` to learn the user ID
3. Fetch the user's profile with the client token
"""

import httpx
import logfire

from gate.adapter.error import ProviderError
from gate.domain.service.auth_service import FacebookGateway
from gate.domain.value.types import FacebookIdentity


class FacebookApiError(ProviderError):
    """Facebook answered a request that must succeed with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__("facebook", message, status_code)


class RealFacebookGateway(FacebookGateway):
    """Facebook gateway backed by the Graph API."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        graph_url: str = "https://graph.facebook.com",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Facebook gateway.

        Args:
            client_id: Facebook app ID
            client_secret: Facebook app secret
            graph_url: Graph API base URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests inject a mock one)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.graph_url = graph_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def load_user(self, token: str) -> FacebookIdentity | None:
        """Load the Facebook profile behind a client token.

        Args:
            token: Client token from the Facebook SDK

        Returns:
            Facebook identity, or None if Facebook rejects the token or the
            profile has no email

        Raises:
            FacebookApiError: If the app token cannot be obtained
            httpx.HTTPError: On transport failures
        """
        async with httpx.AsyncClient(
            base_url=self.graph_url,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            try:
                app_token = await self._get_app_token(client)
                user_id = await self._get_user_id(client, app_token, token)
                if not user_id:
                    return None
                profile = await self._get_profile(client, user_id, token)
            except httpx.HTTPError as e:
                logfire.error("Facebook Graph API HTTP error", error=str(e))
                raise

        if not profile or not profile.get("email"):
            logfire.warn("Facebook profile has no email", user_id=user_id)
            return None

        picture = profile.get("picture") or {}
        return FacebookIdentity(
            provider_id=profile["id"],
            name=profile.get("name", ""),
            email=profile["email"],
            picture_url=(picture.get("data") or {}).get("url"),
        )

    async def _get_app_token(self, client: httpx.AsyncClient) -> str:
        """Get an app access token via the client credentials grant.

        Raises:
            FacebookApiError: If Facebook refuses the app credentials
        """
        response = await client.get(
            "/oauth/access_token",
            params={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "grant_type": "client_credentials",
            },
        )

        if response.status_code != 200:
            logfire.error(
                "Facebook app token request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise FacebookApiError(
                "app token request failed", status_code=response.status_code
            )

        return response.json()["access_token"]

    async def _get_user_id(
        self, client: httpx.AsyncClient, app_token: str, token: str
    ) -> str | None:
        """Inspect the client token and return its Facebook user ID.

        Returns:
            User ID, or None if the token is invalid or expired
        """
        response = await client.get(
            "/debug_token",
            params={"access_token": app_token, "input_token": token},
        )

        if response.status_code != 200:
            logfire.warn(
                "Facebook rejected client token",
                status_code=response.status_code,
            )
            return None

        data = response.json().get("data") or {}
        if data.get("is_valid") is False or not data.get("user_id"):
            logfire.warn("Facebook client token is not valid")
            return None

        return str(data["user_id"])

    async def _get_profile(
        self, client: httpx.AsyncClient, user_id: str, token: str
    ) -> dict | None:
        """Fetch the user's profile fields.

        Returns:
            Profile dictionary, or None if Facebook refuses the request
        """
        response = await client.get(
            f"/{user_id}",
            params={
                "fields": "id,name,email,picture.type(large)",
                "access_token": token,
            },
        )

        if response.status_code != 200:
            logfire.warn(
                "Facebook profile request failed",
                status_code=response.status_code,
                user_id=user_id,
            )
            return None

        return response.json()


class MockFacebookGateway(FacebookGateway):
    """Mock Facebook gateway for testing.

    Returns deterministic test data without making real API calls. The token
    ``invalid_token`` is rejected.
    """

    invalid_token = "invalid_token"

    async def load_user(self, token: str) -> FacebookIdentity | None:
        """Return mock profile data.

        Args:
            token: Client token (only checked against ``invalid_token``)

        Returns:
            Mock Facebook identity, or None for ``invalid_token``
        """
        if token == self.invalid_token:
            return None

        return FacebookIdentity(
            provider_id="mockfacebook123",
            name="Mock Facebook User",
            email="mock@facebook.com",
            picture_url="https://example.com/mock.png",
        )
