"""
FastAPI dependency injection functions

Provides access to the settings and controller the app was built with.
"""

from fastapi import Request

from container_panel.control.controller import ContainerController
from container_panel.core.config import Settings


def get_settings(request: Request) -> Settings:
    """
    Get Settings from app state

    Raises:
        RuntimeError: If the app was not built with create_app
    """
    if not hasattr(request.app.state, "settings"):
        raise RuntimeError("Application settings not initialized")

    return request.app.state.settings


def get_controller(request: Request) -> ContainerController:
    """
    Get ContainerController from app state

    Raises:
        RuntimeError: If the app was not built with create_app
    """
    if not hasattr(request.app.state, "controller"):
        raise RuntimeError("Container controller not initialized")

    return request.app.state.controller
