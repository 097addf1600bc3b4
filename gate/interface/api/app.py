"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from gate.interface.api.routes import accounts, auth, health
from gate.util.di.container import (
    close_container_on_shutdown,
    create_container,
    setup_di,
)
from gate.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; defaults to the production container
    """
    instrument_httpx()

    app_instance = FastAPI(
        title="Gate API",
        description="Facebook login and access token issuance",
        version="0.1.0",
        lifespan=close_container_on_shutdown,
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(accounts.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
