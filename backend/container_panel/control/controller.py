"""
Container Controller - single-container lifecycle facade

Translates panel intents into runtime calls for the one configured container.
"""

import logging

from container_panel.control.models import ContainerState
from container_panel.control.runtime import ContainerRuntime
from container_panel.core.exceptions import ContainerOperationError

logger = logging.getLogger(__name__)


class ContainerController:
    """
    Controls the configured container through a ContainerRuntime.

    Holds no state besides the runtime handle and the container name, so a
    single instance serves any number of concurrent requests.
    """

    def __init__(self, runtime: ContainerRuntime, container_name: str):
        self.runtime = runtime
        self.container_name = container_name

    def get_state(self) -> ContainerState | None:
        """
        Inspect the container.

        Returns:
            ContainerState, or None if the daemon call failed
        """
        try:
            return self.runtime.inspect(self.container_name)
        except ContainerOperationError as e:
            logger.debug(f"Inspect failed for {self.container_name}: {e.message}")
            return None

    def is_running(self) -> bool:
        """
        Check whether the container is running.

        Inspection errors (missing container, unreachable daemon) are
        reported as not running.
        """
        state = self.get_state()
        return state is not None and state.running

    def start(self) -> None:
        logger.info("Command: START")
        self._run("start", self.runtime.start)

    def stop(self) -> None:
        logger.info("Command: STOP")
        self._run("stop", self.runtime.stop)

    def restart(self) -> None:
        logger.info("Command: RESTART")
        self._run("restart", self.runtime.restart)

    def _run(self, operation: str, call) -> None:
        try:
            call(self.container_name)
        except ContainerOperationError as e:
            logger.error(f"{operation.capitalize()} error: {e.message}")
            raise
