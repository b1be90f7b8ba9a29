"""
FastAPI application factory.

Creates the application instance, wires the service container into
`app.state` and registers error handling. Routers are mounted by the
deployment that embeds this core.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from shared.config import get_settings
from shared.exceptions import FoodOrderError
from .dependencies import ServiceContainer, create_container
from .errors import handle_app_error

logger = logging.getLogger(__name__)


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        container: Prebuilt service container. When omitted, one is built
            from settings at startup.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if getattr(app.state, "container", None) is None:
            app.state.container = await create_container(settings)
        logger.info(f"Starting {settings.app_name}")
        yield
        # Shutdown
        logger.info(f"Shutting down {settings.app_name}")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.container = container
    app.add_exception_handler(FoodOrderError, handle_app_error)

    return app
