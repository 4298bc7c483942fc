"""
Container control data models.

Contains dataclasses for container run state.
"""

from dataclasses import dataclass
from typing import Literal

ContainerStatus = Literal[
    "created", "running", "paused", "restarting", "removing", "exited", "dead", "unknown"
]


@dataclass(frozen=True)
class ContainerState:
    """Container state as reported by one inspect call."""

    name: str
    status: ContainerStatus = "unknown"
    running: bool = False

    @classmethod
    def from_inspect(cls, name: str, attrs: dict) -> "ContainerState":
        """Build from the daemon's inspect payload (``State`` block)."""
        state = attrs.get("State") or {}
        return cls(
            name=name,
            status=state.get("Status", "unknown"),
            running=bool(state.get("Running", False)),
        )
