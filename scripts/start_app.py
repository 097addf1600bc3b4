#!/usr/bin/env python3
"""Serve the Gate API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from gate.config import AuthSettings, ConfigurationError, FacebookSettings, Settings
from gate.util.logging import setup_logging
from gate.util.observability import configure_logfire


def check_secrets(settings: Settings) -> None:
    """Refuse to serve production traffic with placeholder credentials.

    Raises:
        ConfigurationError: If a secret still has its development default
    """
    if settings.environment != "production":
        return

    if settings.auth.jwt_secret == AuthSettings().jwt_secret:
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
    if settings.facebook.client_secret == FacebookSettings().client_secret:
        raise ConfigurationError("FACEBOOK__CLIENT_SECRET must be set in production")


def main() -> int:
    """Validate settings, then hand over to uvicorn."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_secrets(settings)
        logfire.info(
            "Serving Gate API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "gate.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Gate API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
