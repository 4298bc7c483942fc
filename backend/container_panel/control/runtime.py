"""
Container runtime adapters.

Handles:
- The capability interface the controller depends on (inspect/start/stop/restart)
- The Docker Engine implementation over the docker SDK
- Translating SDK and transport errors into ContainerOperationError
"""

import logging
from typing import Protocol

import docker
import requests
from docker.errors import DockerException

from container_panel.control.models import ContainerState
from container_panel.core.exceptions import ContainerOperationError, DaemonConnectionError

logger = logging.getLogger(__name__)

# Errors the SDK can raise for a single API call. Transport failures
# (daemon gone, socket closed) surface as requests exceptions, not DockerException.
DAEMON_ERRORS = (DockerException, requests.exceptions.RequestException)


class ContainerRuntime(Protocol):
    """Protocol for container runtime implementations"""

    def inspect(self, name: str) -> ContainerState:
        """
        Inspect a container

        Raises:
            ContainerOperationError: If the daemon call fails
        """
        ...

    def start(self, name: str) -> None:
        """Start a container"""
        ...

    def stop(self, name: str) -> None:
        """Stop a container using the daemon's default grace period"""
        ...

    def restart(self, name: str) -> None:
        """Restart a container using the daemon's default grace period"""
        ...


def _error_text(error: Exception) -> str:
    """Daemon error text, preferring the API's explanation over the HTTP wrapper."""
    explanation = getattr(error, "explanation", None)
    if explanation:
        return explanation if isinstance(explanation, str) else explanation.decode("utf-8", "replace")
    return str(error) or type(error).__name__


class DockerRuntime:
    """
    Docker Engine runtime.

    One DockerClient is shared by all requests. Its low-level APIClient is a
    requests session with a connection pool, so concurrent calls from
    worker threads are safe.
    """

    def __init__(self, client: docker.DockerClient):
        self.client = client

    @classmethod
    def from_env(cls, timeout: int | None = None) -> "DockerRuntime":
        """
        Create a runtime configured from DOCKER_HOST / DOCKER_TLS_VERIFY /
        DOCKER_CERT_PATH with API version negotiation.

        Raises:
            DaemonConnectionError: If the client cannot be created
        """
        try:
            client = docker.from_env(version="auto", timeout=timeout)
        except DAEMON_ERRORS as e:
            raise DaemonConnectionError(f"Could not connect to Docker daemon: {e}") from e
        return cls(client)

    def connect(self) -> str:
        """
        Verify the daemon answers.

        Returns:
            Negotiated API version

        Raises:
            DaemonConnectionError: If the daemon does not respond
        """
        try:
            self.client.ping()
        except DAEMON_ERRORS as e:
            raise DaemonConnectionError(f"Docker daemon did not respond: {e}") from e

        api_version = self.client.api.api_version
        logger.info(f"Connected to Docker daemon (API {api_version})")
        return api_version

    def close(self) -> None:
        self.client.close()

    def inspect(self, name: str) -> ContainerState:
        try:
            attrs = self.client.api.inspect_container(name)
        except DAEMON_ERRORS as e:
            raise ContainerOperationError("inspect", name, _error_text(e)) from e
        return ContainerState.from_inspect(name, attrs)

    def start(self, name: str) -> None:
        try:
            self.client.api.start(name)
        except DAEMON_ERRORS as e:
            raise ContainerOperationError("start", name, _error_text(e)) from e

    def stop(self, name: str) -> None:
        try:
            self.client.api.stop(name)
        except DAEMON_ERRORS as e:
            raise ContainerOperationError("stop", name, _error_text(e)) from e

    def restart(self, name: str) -> None:
        try:
            self.client.api.restart(name)
        except DAEMON_ERRORS as e:
            raise ContainerOperationError("restart", name, _error_text(e)) from e
