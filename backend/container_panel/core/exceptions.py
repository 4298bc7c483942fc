"""
Base exception hierarchy

Provides a consistent exception structure across the panel
with clear error messages and recovery hints.
"""


class PanelError(Exception):
    """
    Base exception for all panel errors

    Attributes:
        message: Error message
        component: Component that raised the error
        recovery_hint: Optional hint for recovery
    """

    def __init__(self, message: str, component: str = "", recovery_hint: str = ""):
        self.message = message
        self.component = component
        self.recovery_hint = recovery_hint
        super().__init__(message)

    def __str__(self) -> str:
        msg = super().__str__()
        if self.component:
            msg = f"[{self.component}] {msg}"
        if self.recovery_hint:
            msg += f"\nRecovery: {self.recovery_hint}"
        return msg


class ConfigurationError(PanelError):
    """Configuration-related errors"""

    def __init__(self, message: str, recovery_hint: str = ""):
        super().__init__(
            message,
            component="Configuration",
            recovery_hint=recovery_hint or "Check your .env file and environment variables",
        )


class DaemonConnectionError(PanelError):
    """The container daemon could not be reached at startup"""

    def __init__(self, message: str, recovery_hint: str = ""):
        super().__init__(
            message,
            component="Docker",
            recovery_hint=recovery_hint
            or "Check that the Docker daemon is running and DOCKER_HOST is correct",
        )


class ContainerOperationError(PanelError):
    """
    A daemon call for the target container failed

    ``message`` holds the daemon's error text unchanged, so it can be
    returned to the HTTP caller as-is.
    """

    def __init__(self, operation: str, container: str, message: str):
        self.operation = operation
        self.container = container
        super().__init__(message, component="Container")
