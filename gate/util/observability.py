"""Logfire setup for the Gate API.

Facebook client tokens and access tokens are credentials. They are never
passed as span attributes, and the scrubber redacts any attribute whose name
looks like one.

Usage:
    import logfire

    logfire.info("Account saved", account_id=account_id)

    with logfire.span("facebook_login", provider_id=identity.provider_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from gate.config import Settings

# Attribute names redacted on top of Logfire's defaults
SCRUBBED_ATTRIBUTES = ["access_token", "input_token", "client_secret", "jwt"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Spans go to Logfire only when OBSERVABILITY__SEND_TO_LOGFIRE says so, or,
    when that is unset, when OBSERVABILITY__LOGFIRE_TOKEN is present. The
    console always gets them.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    logfire.configure(
        token=observability.logfire_token,
        service_name="gate-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Only method and path are recorded; headers carry bearer tokens.
    """

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path,
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace account queries issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace Graph API calls."""
    logfire.instrument_httpx()
