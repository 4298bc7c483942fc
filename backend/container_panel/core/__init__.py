"""
Core module - Base abstractions

Provides foundational components used across the panel:
- Base exception hierarchy
- Configuration management
"""

from container_panel.core.config import Settings, load_settings
from container_panel.core.exceptions import (
    ConfigurationError,
    ContainerOperationError,
    DaemonConnectionError,
    PanelError,
)

__all__ = [
    "Settings",
    "load_settings",
    "PanelError",
    "ConfigurationError",
    "ContainerOperationError",
    "DaemonConnectionError",
]
