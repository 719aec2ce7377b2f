"""
ToolController - Active interaction mode and in-progress gesture state.

The gesture is a tagged variant rather than a free nullable slot: a pending
wire start only exists as ``AwaitingSecondPort`` while the wire tool is
active, so a stale start port can never outlive a tool switch.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from models.connection import Port

logger = logging.getLogger(__name__)


class ToolMode(str, Enum):
    """Interaction modes. DELETE is stored and reported; callers decide how to use it."""

    SELECT = "select"
    WIRE = "wire"
    DELETE = "delete"


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""


@dataclass(frozen=True)
class AwaitingSecondPort:
    """A wire has been started at ``port`` and waits for its other end."""

    port: Port


GestureState = Union[Idle, AwaitingSecondPort]


class ToolController:
    """Holds the active tool and the current gesture."""

    def __init__(self, mode: ToolMode = ToolMode.SELECT):
        self._mode = ToolMode(mode)
        self._gesture: GestureState = Idle()

    @property
    def active_tool(self) -> ToolMode:
        return self._mode

    @property
    def gesture(self) -> GestureState:
        return self._gesture

    def set_active_tool(self, mode) -> None:
        """
        Switch tools.

        Always abandons any gesture in progress, even when the tool does not change.
        """
        mode = ToolMode(mode)
        if isinstance(self._gesture, AwaitingSecondPort):
            logger.debug("Abandoning pending wire from %s", self._gesture.port)
        self._mode = mode
        self._gesture = Idle()

    @property
    def wire_start_port(self) -> Optional[Port]:
        """The pending wire start, or None when idle."""
        if isinstance(self._gesture, AwaitingSecondPort):
            return self._gesture.port
        return None

    def set_wire_start_port(self, port: Optional[Port]) -> bool:
        """
        Capture (or with None, clear) the pending wire start.

        A start port is only accepted while the wire tool is active.

        Returns:
            True if the gesture state now matches the request
        """
        if port is None:
            self._gesture = Idle()
            return True
        if self._mode is not ToolMode.WIRE:
            logger.debug("Ignoring wire start %s in %s mode", port, self._mode.value)
            return False
        self._gesture = AwaitingSecondPort(port)
        return True

    def clear_wire_start_port(self) -> None:
        self._gesture = Idle()

    def reset(self) -> None:
        """Return to the select tool with no gesture."""
        self._mode = ToolMode.SELECT
        self._gesture = Idle()
