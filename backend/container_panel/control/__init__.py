"""
Control module - Docker-backed control of the configured container

Provides:
- ContainerRuntime protocol and its Docker Engine implementation
- ContainerController facade used by the HTTP layer
"""

from container_panel.control.controller import ContainerController
from container_panel.control.models import ContainerState, ContainerStatus
from container_panel.control.runtime import ContainerRuntime, DockerRuntime

__all__ = [
    "ContainerController",
    "ContainerRuntime",
    "ContainerState",
    "ContainerStatus",
    "DockerRuntime",
]
