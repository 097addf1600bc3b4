"""Authentication domain service."""

import logfire

from gate.domain.value.types import FacebookIdentity

from .base import Service


class FacebookGateway:
    """Facebook identity gateway interface."""

    async def load_user(self, token: str) -> FacebookIdentity | None:
        """Exchange a client token for Facebook profile data.

        Args:
            token: Access token issued to the client by the Facebook SDK

        Returns:
            Profile data, or None when Facebook rejects the token. Transport
            failures are raised, not mapped to None.
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service resolving external identities."""

    def __init__(self, facebook_gateway: FacebookGateway) -> None:
        """Initialize auth service.

        Args:
            facebook_gateway: Facebook identity gateway implementation
        """
        self.facebook_gateway = facebook_gateway

    async def load_facebook_user(self, token: str) -> FacebookIdentity | None:
        """Resolve a Facebook client token to profile data.

        Args:
            token: Facebook client token

        Returns:
            Facebook identity, or None if the token was rejected
        """
        with logfire.span("auth_service.load_facebook_user"):
            identity = await self.facebook_gateway.load_user(token)
            if identity:
                logfire.info(
                    "Facebook identity resolved", provider_id=identity.provider_id
                )
            else:
                logfire.warn("Facebook rejected token")
            return identity
