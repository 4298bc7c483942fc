"""
Error handling for the API

Maps daemon failures to plain-text HTTP responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from container_panel.core.exceptions import ContainerOperationError

logger = logging.getLogger(__name__)


async def container_operation_error_handler(
    request: Request, exc: ContainerOperationError
) -> PlainTextResponse:
    """Return the daemon's error text with a 500 status."""
    logger.debug(f"{request.method} {request.url.path} failed: {exc.message}")
    return PlainTextResponse(exc.message, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ContainerOperationError, container_operation_error_handler)
