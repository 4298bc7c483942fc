"""
FastAPI application - Panel server

Builds the app around an explicit Settings record and ContainerController.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from container_panel import __version__
from container_panel.api.errors import register_error_handlers
from container_panel.api.middleware import verify_basic_auth
from container_panel.api.routers import panel_router
from container_panel.control.controller import ContainerController
from container_panel.core.config import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"System online on port :{settings.port}")
    logger.info(f"Target container: {settings.container_name}")
    yield
    logger.info("Panel shutting down")


def create_app(settings: Settings, controller: ContainerController) -> FastAPI:
    """
    Create the panel application

    Args:
        settings: Immutable settings record
        controller: Controller for the configured container

    Returns:
        FastAPI app with every route behind the basic-auth gate
    """
    app = FastAPI(
        title=settings.app_title,
        version=__version__,
        lifespan=lifespan,
        # Only the panel routes are served
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        dependencies=[Depends(verify_basic_auth)],
    )
    app.state.settings = settings
    app.state.controller = controller

    register_error_handlers(app)
    app.include_router(panel_router)

    return app
