"""Editor constants, user settings and keyboard shortcuts."""

from .constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_EXPORT_SCALE,
    DEFAULT_GRID_SIZE,
    HISTORY_CAPACITY,
    PORT_OFFSET,
    PORT_POSITIONS,
    REQUEST_TIMEOUT,
    ZOOM_FACTOR,
    ZOOM_MAX,
    ZOOM_MIN,
)
from .editor_settings import SettingsStore
from .keybindings import KeybindingsRegistry

__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_EXPORT_SCALE",
    "DEFAULT_GRID_SIZE",
    "HISTORY_CAPACITY",
    "PORT_OFFSET",
    "PORT_POSITIONS",
    "REQUEST_TIMEOUT",
    "ZOOM_FACTOR",
    "ZOOM_MAX",
    "ZOOM_MIN",
    "SettingsStore",
    "KeybindingsRegistry",
]
