"""
Command-line interface for the container control panel
"""

import logging
import sys
from pathlib import Path

import click
import uvicorn
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from container_panel import __version__
from container_panel.api.app import create_app
from container_panel.api.middleware import print_auth_info
from container_panel.control import ContainerController, DockerRuntime
from container_panel.core.config import DEFAULT_ENV_FILE, Settings, load_settings
from container_panel.core.exceptions import ConfigurationError, DaemonConnectionError

console = Console()
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

env_file_option = click.option(
    "--env-file",
    default=DEFAULT_ENV_FILE,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional .env file read before the process environment",
)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def _load(env_file: Path, **overrides) -> Settings:
    try:
        return load_settings(env_file, **overrides)
    except ConfigurationError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)


def _connect(settings: Settings) -> DockerRuntime:
    """Connect to the Docker daemon or exit with status 1."""
    try:
        runtime = DockerRuntime.from_env(timeout=settings.docker_timeout)
        runtime.connect()
    except DaemonConnectionError as e:
        logger.error(f"Critical Docker connection error: {e}")
        sys.exit(1)
    return runtime


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Container Control Panel - start, stop and restart one container from the browser"""
    pass


@main.command()
@click.option("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
@click.option("--port", default=None, type=int, help="Listen port (default: PORT or 8080)")
@click.option("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
@env_file_option
def serve(host: str | None, port: int | None, log_level: str | None, env_file: Path) -> None:
    """Start the panel web server"""
    settings = _load(env_file, host=host, port=port, log_level=log_level)
    configure_logging(settings.log_level)

    console.print(
        Panel.fit(
            f"[bold cyan]{escape(settings.app_title)}[/bold cyan]\n"
            f"Target container: {settings.container_name}\n"
            f"Server starting on http://{settings.host}:{settings.port}",
            border_style="cyan",
        )
    )
    print_auth_info(settings, console)

    runtime = _connect(settings)
    controller = ContainerController(runtime, settings.container_name)
    app = create_app(settings, controller)

    try:
        # uvicorn exits with status 1 itself if the port cannot be bound
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            access_log=True,
        )
    finally:
        runtime.close()


@main.command()
@env_file_option
def status(env_file: Path) -> None:
    """Show the current state of the configured container"""
    settings = _load(env_file)
    configure_logging("WARNING")

    runtime = _connect(settings)
    try:
        state = ContainerController(runtime, settings.container_name).get_state()
    finally:
        runtime.close()

    if state is None:
        console.print(f"[yellow]{settings.container_name}: not found or not inspectable[/yellow]")
        sys.exit(1)

    color = "green" if state.running else "red"
    label = "ONLINE" if state.running else "OFFLINE"
    console.print(f"{state.name}: [{color}]{label}[/{color}] ({state.status})")


if __name__ == "__main__":
    main()
