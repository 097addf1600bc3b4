"""JWT token domain service."""

import logfire

from gate.config import AuthSettings
from gate.util.jwt import create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def generate(self, key: str, expiration_in_ms: int) -> str:
        """Create a signed token for ``key``.

        Args:
            key: Value to embed, usually an account ID
            expiration_in_ms: Token lifetime in milliseconds

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.generate", key=key):
            token = create_token(key, expiration_in_ms, self.auth_settings)
            logfire.info(
                "JWT token created", key=key, expiration_in_ms=expiration_in_ms
            )
            return token

    def validate(self, token: str) -> str:
        """Verify a token and return its key.

        Args:
            token: JWT token string

        Returns:
            The ``key`` claim

        Raises:
            InvalidTokenError: If token is invalid, expired or malformed
        """
        with logfire.span("jwt_service.validate"):
            try:
                payload = verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token validation failed", error=str(e))
                raise
            logfire.info("JWT token validated", key=payload.key)
            return payload.key
