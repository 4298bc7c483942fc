"""
Tests for the Docker runtime adapter

The docker SDK is mocked; no daemon is needed.
"""

from unittest.mock import MagicMock, patch

import docker
import pytest
import requests
from docker.errors import APIError, DockerException, NotFound

from container_panel.control.models import ContainerState
from container_panel.control.runtime import DockerRuntime
from container_panel.core.exceptions import ContainerOperationError, DaemonConnectionError


@pytest.fixture
def docker_client():
    client = MagicMock()
    client.api.api_version = "1.44"
    return client


@pytest.fixture
def docker_runtime(docker_client):
    return DockerRuntime(docker_client)


class TestFromEnv:
    """Tests for DockerRuntime.from_env"""

    def test_negotiates_api_version(self):
        """Test the client is created from the environment with version negotiation"""
        with patch("container_panel.control.runtime.docker.from_env") as from_env:
            runtime = DockerRuntime.from_env(timeout=30)

        from_env.assert_called_once_with(version="auto", timeout=30)
        assert runtime.client is from_env.return_value

    def test_default_has_no_client_timeout(self):
        """Test the default client waits on the daemon without a read timeout"""
        with patch("container_panel.control.runtime.docker.from_env") as from_env:
            DockerRuntime.from_env()

        from_env.assert_called_once_with(version="auto", timeout=None)

    def test_unreachable_daemon_raises(self):
        with patch(
            "container_panel.control.runtime.docker.from_env",
            side_effect=DockerException("Error while fetching server API version"),
        ):
            with pytest.raises(DaemonConnectionError) as exc_info:
                DockerRuntime.from_env()

        assert "server API version" in str(exc_info.value)


class TestConnect:
    """Tests for DockerRuntime.connect"""

    def test_returns_api_version(self, docker_runtime, docker_client):
        assert docker_runtime.connect() == "1.44"
        docker_client.ping.assert_called_once_with()

    @pytest.mark.parametrize(
        "error",
        [
            DockerException("daemon gone"),
            requests.exceptions.ConnectionError("connection refused"),
        ],
    )
    def test_ping_failure_raises(self, docker_runtime, docker_client, error):
        docker_client.ping.side_effect = error
        with pytest.raises(DaemonConnectionError):
            docker_runtime.connect()


class TestInspect:
    """Tests for DockerRuntime.inspect"""

    def test_running_container(self, docker_runtime, docker_client):
        docker_client.api.inspect_container.return_value = {
            "Name": "/mc-server",
            "State": {"Status": "running", "Running": True},
        }

        state = docker_runtime.inspect("mc-server")

        docker_client.api.inspect_container.assert_called_once_with("mc-server")
        assert state == ContainerState(name="mc-server", status="running", running=True)

    def test_exited_container(self, docker_runtime, docker_client):
        docker_client.api.inspect_container.return_value = {
            "State": {"Status": "exited", "Running": False},
        }
        state = docker_runtime.inspect("mc-server")
        assert state.running is False
        assert state.status == "exited"

    def test_missing_state_block(self, docker_runtime, docker_client):
        docker_client.api.inspect_container.return_value = {}
        state = docker_runtime.inspect("mc-server")
        assert state.running is False
        assert state.status == "unknown"

    def test_not_found_raises_with_explanation(self, docker_runtime, docker_client):
        docker_client.api.inspect_container.side_effect = NotFound(
            "404 Client Error", explanation="No such container: mc-server"
        )

        with pytest.raises(ContainerOperationError) as exc_info:
            docker_runtime.inspect("mc-server")

        assert exc_info.value.message == "No such container: mc-server"
        assert exc_info.value.operation == "inspect"

    def test_transport_error_raises(self, docker_runtime, docker_client):
        docker_client.api.inspect_container.side_effect = requests.exceptions.ConnectionError(
            "Connection aborted"
        )
        with pytest.raises(ContainerOperationError) as exc_info:
            docker_runtime.inspect("mc-server")
        assert "Connection aborted" in exc_info.value.message


class TestCommands:
    """Tests for start/stop/restart"""

    @pytest.mark.parametrize("operation", ["start", "stop", "restart"])
    def test_calls_api_with_name_only(self, docker_runtime, docker_client, operation):
        """Test no grace-period override is sent"""
        getattr(docker_runtime, operation)("mc-server")
        getattr(docker_client.api, operation).assert_called_once_with("mc-server")

    @pytest.mark.parametrize("operation", ["start", "stop", "restart"])
    def test_api_error_translated(self, docker_runtime, docker_client, operation):
        getattr(docker_client.api, operation).side_effect = APIError(
            "500 Server Error", explanation="driver failed programming external connectivity"
        )

        with pytest.raises(ContainerOperationError) as exc_info:
            getattr(docker_runtime, operation)("mc-server")

        assert exc_info.value.message == "driver failed programming external connectivity"
        assert exc_info.value.operation == operation
        assert exc_info.value.container == "mc-server"

    def test_error_without_explanation_uses_message(self, docker_runtime, docker_client):
        docker_client.api.start.side_effect = DockerException("something broke")
        with pytest.raises(ContainerOperationError) as exc_info:
            docker_runtime.start("mc-server")
        assert exc_info.value.message == "something broke"

    def test_close_closes_client(self, docker_runtime, docker_client):
        docker_runtime.close()
        docker_client.close.assert_called_once_with()


class TestGracePeriodTimeout:
    """Tests that stop/restart requests outlast the daemon's grace period

    Uses a real SDK client with a pinned API version, so nothing connects
    until a request is sent; the HTTP layer is patched.
    """

    DAEMON_GRACE_SECONDS = 10

    @pytest.fixture
    def sdk_client(self):
        def make(timeout):
            return docker.DockerClient(
                base_url="tcp://127.0.0.1:2375", version="1.44", timeout=timeout
            )

        return make

    @pytest.mark.parametrize("operation", ["stop", "restart"])
    def test_default_request_has_no_timeout(self, sdk_client, operation):
        """Test a slow stop is never cut off by a client read timeout"""
        client = sdk_client(None)
        with patch.object(client.api, "_post") as post, patch.object(client.api, "_raise_for_status"):
            getattr(DockerRuntime(client), operation)("mc-server")

        assert post.call_args.kwargs["timeout"] is None
        client.close()

    @pytest.mark.parametrize("operation", ["stop", "restart"])
    def test_configured_timeout_extends_past_grace(self, sdk_client, operation):
        """Test an explicit DOCKER_TIMEOUT still leaves room for the grace period"""
        client = sdk_client(5)
        with patch.object(client.api, "_post") as post, patch.object(client.api, "_raise_for_status"):
            getattr(DockerRuntime(client), operation)("mc-server")

        assert post.call_args.kwargs["timeout"] >= 5 + self.DAEMON_GRACE_SECONDS
        client.close()
