"""
Shared fixtures for panel tests
"""

import pytest
from fastapi.testclient import TestClient

from container_panel.api.app import create_app
from container_panel.control.controller import ContainerController
from container_panel.control.models import ContainerState
from container_panel.core.config import Settings
from container_panel.core.exceptions import ContainerOperationError

CONTAINER = "mc-test"
TITLE = "TEST SERVER PANEL"

SETTINGS_ENV_VARS = [
    "CONTAINER_NAME",
    "HOST",
    "PORT",
    "APP_TITLE",
    "AUTH_USER",
    "AUTH_PASS",
    "DOCKER_TIMEOUT",
    "LOG_LEVEL",
]


class FakeRuntime:
    """In-memory ContainerRuntime that records every call."""

    def __init__(self, running: bool = False):
        self.running = running
        self.inspect_error: str | None = None
        self.operation_error: str | None = None
        self.calls: list[tuple[str, str]] = []

    def inspect(self, name: str) -> ContainerState:
        self.calls.append(("inspect", name))
        if self.inspect_error:
            raise ContainerOperationError("inspect", name, self.inspect_error)
        return ContainerState(
            name=name,
            status="running" if self.running else "exited",
            running=self.running,
        )

    def _operate(self, operation: str, name: str) -> None:
        self.calls.append((operation, name))
        if self.operation_error:
            raise ContainerOperationError(operation, name, self.operation_error)

    def start(self, name: str) -> None:
        self._operate("start", name)

    def stop(self, name: str) -> None:
        self._operate("stop", name)

    def restart(self, name: str) -> None:
        self._operate("restart", name)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables out of Settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        values = {"container_name": CONTAINER, "app_title": TITLE}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def runtime():
    return FakeRuntime()


@pytest.fixture
def controller(runtime):
    return ContainerController(runtime, CONTAINER)


@pytest.fixture
def make_client(make_settings, controller):
    def _make(**overrides) -> TestClient:
        return TestClient(create_app(make_settings(**overrides), controller))

    return _make


@pytest.fixture
def client(make_client):
    """Client for an app with authentication disabled."""
    return make_client()
