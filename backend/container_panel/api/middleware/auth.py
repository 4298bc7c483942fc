"""
HTTP Basic Authentication

Gates every route behind a single username/password pair.
Authentication is disabled unless both AUTH_USER and AUTH_PASS are set.
"""

import base64
import binascii
import logging
import secrets

from fastapi import HTTPException, Request
from fastapi.security import HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from container_panel.api.dependencies import get_settings
from container_panel.core.config import Settings

logger = logging.getLogger(__name__)

AUTH_REALM = "Restricted"


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=401,
        detail="Unauthorized",
        headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'},
    )


def _matches(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def parse_basic_credentials(authorization: str | None) -> HTTPBasicCredentials | None:
    """
    Parse a Basic Authorization header.

    Credentials are decoded as UTF-8, so non-ASCII usernames and
    passwords are accepted.

    Returns:
        Credentials, or None if the header is missing, not Basic or malformed
    """
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic":
        return None

    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (ValueError, UnicodeDecodeError, binascii.Error):
        return None

    username, separator, password = decoded.partition(":")
    if not separator:
        return None

    return HTTPBasicCredentials(username=username, password=password)


async def verify_basic_auth(request: Request) -> str | None:
    """
    Verify HTTP basic credentials against the configured pair.

    Credentials are only parsed when auth is enabled, so any
    Authorization header is ignored while the gate is open.

    Returns:
        The authenticated username, or None when auth is disabled

    Raises:
        HTTPException: 401 with a WWW-Authenticate challenge
    """
    settings = get_settings(request)
    if not settings.auth_enabled:
        return None

    credentials = parse_basic_credentials(request.headers.get("Authorization"))
    if credentials is None:
        raise _unauthorized()

    # Both comparisons always run
    user_ok = _matches(credentials.username, settings.auth_user)
    pass_ok = _matches(credentials.password, settings.auth_pass)
    if not (user_ok and pass_ok):
        logger.warning(f"Rejected credentials for user {credentials.username!r}")
        raise _unauthorized()

    return credentials.username


def print_auth_info(settings: Settings, console: Console | None = None) -> None:
    """
    Print authentication status at startup.

    SECURITY: the password is never printed.
    """
    console = console or Console()
    if settings.auth_enabled:
        console.print(
            Panel.fit(
                "[bold]HTTP basic authentication enabled[/bold]\n"
                f"User: {escape(settings.auth_user)}",
                title="Authentication",
                border_style="green",
            )
        )
        return

    lines = ["[bold]HTTP basic authentication DISABLED[/bold]"]
    if settings.auth_user or settings.auth_pass:
        lines.append("Only one of AUTH_USER / AUTH_PASS is set - both are required.")
    lines.append("Anyone who can reach this port can control the container.")
    console.print(Panel.fit("\n".join(lines), title="Warning", border_style="yellow"))
