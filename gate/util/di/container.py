"""Production DI container and its FastAPI integration."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from gate.util.di import resolve_providers


def create_container() -> AsyncContainer:
    """Build the container with every production implementation."""
    return make_async_container(*resolve_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve ``app``'s dependencies from ``container``."""
    setup_dishka(container, app)


@asynccontextmanager
async def close_container_on_shutdown(app: FastAPI):
    """Lifespan that releases APP-scoped resources such as the engine."""
    yield
    await app.state.dishka_container.close()
