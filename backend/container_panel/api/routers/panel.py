"""
Panel Router

Serves the control page, the polled status fragment and the
start/stop/restart endpoints for the configured container.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from container_panel.api.dependencies import get_controller, get_settings
from container_panel.control.controller import ContainerController
from container_panel.core.config import Settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Control routes accept every method; anything other than POST is a no-op
CONTROL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(tags=["panel"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, settings: Settings = Depends(get_settings)):
    """Full page shell. The status area polls /status every 2 seconds."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": settings.app_title, "container_name": settings.container_name},
    )


@router.get("/status", response_class=HTMLResponse)
async def status(request: Request, controller: ContainerController = Depends(get_controller)):
    """Online or offline fragment, from a fresh inspect call."""
    running = await asyncio.to_thread(controller.is_running)
    return templates.TemplateResponse(request, "status.html", {"running": running})


async def _control(request: Request, operation: Callable[[], None]) -> Response:
    if request.method != "POST":
        return Response()

    # ContainerOperationError is turned into a 500 by the app's error handler
    await asyncio.to_thread(operation)
    return Response()


@router.api_route("/start", methods=CONTROL_METHODS)
async def start(request: Request, controller: ContainerController = Depends(get_controller)):
    return await _control(request, controller.start)


@router.api_route("/stop", methods=CONTROL_METHODS)
async def stop(request: Request, controller: ContainerController = Depends(get_controller)):
    return await _control(request, controller.stop)


@router.api_route("/restart", methods=CONTROL_METHODS)
async def restart(request: Request, controller: ContainerController = Depends(get_controller)):
    return await _control(request, controller.restart)
