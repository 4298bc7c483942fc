"""
Configuration management

Settings using Pydantic BaseSettings for type-safe configuration
with environment variable and .env file support.

The settings object is built once at startup and handed to the app and
the container controller; it is frozen and never read from module state.
"""

import logging
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from container_panel.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


class Settings(BaseSettings):
    """
    Application settings with environment variable support

    Settings can be overridden via environment variables:
    - CONTAINER_NAME=mc-server
    - PORT=8080
    - APP_TITLE="MINECRAFT SERVER"
    - AUTH_USER / AUTH_PASS (auth is enabled only when both are set)
    """

    # Target container
    container_name: str = "mc-server"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)
    app_title: str = "MINECRAFT SERVER"

    # Basic auth
    auth_user: str = ""
    auth_pass: str = ""

    # Docker daemon
    # Seconds per API call; None means no client-side timeout
    docker_timeout: int | None = Field(None, gt=0)

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @property
    def auth_enabled(self) -> bool:
        """Auth is enforced only when both username and password are non-empty."""
        return bool(self.auth_user) and bool(self.auth_pass)


def load_settings(env_file: Path | str | None = DEFAULT_ENV_FILE, **overrides) -> Settings:
    """
    Build the settings record

    Process environment takes priority over the .env file. A missing
    .env file is not an error.

    Args:
        env_file: Path to an optional .env file (None to skip)
        **overrides: Explicit values (e.g. from CLI options) that win over both

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a value fails validation
    """
    overrides = {key: value for key, value in overrides.items() if value is not None}
    try:
        settings = Settings(_env_file=env_file, **overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e

    logger.debug(
        f"Loaded settings: container={settings.container_name} "
        f"port={settings.port} auth_enabled={settings.auth_enabled}"
    )
    return settings
