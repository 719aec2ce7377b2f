"""
editor_settings.py - User-adjustable editor and export settings.

Defaults come from constants.py; user overrides live in a JSON config file
next to the keybindings.
"""

import json
import logging
from pathlib import Path

from .constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_EXPORT_SCALE,
    DEFAULT_GRID_SIZE,
    HISTORY_CAPACITY,
    REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)

DEFAULTS = {
    "api_base_url": DEFAULT_API_BASE_URL,
    "request_timeout": REQUEST_TIMEOUT,
    "grid_size": DEFAULT_GRID_SIZE,
    "history_capacity": HISTORY_CAPACITY,
    "export_scale": DEFAULT_EXPORT_SCALE,
    "include_header": False,
}

# Positive numeric settings; anything else loaded for these keys is rejected
_POSITIVE_NUMBERS = {"request_timeout", "grid_size", "history_capacity", "export_scale"}

_CONFIG_DIR = Path.home() / ".circuit-diagram-editor"
_CONFIG_FILE = _CONFIG_DIR / "settings.json"


def _is_valid(key, value) -> bool:
    if key in _POSITIVE_NUMBERS:
        return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0
    return isinstance(value, type(DEFAULTS[key]))


class SettingsStore:
    """Editor settings with load/save support."""

    def __init__(self, config_path=None):
        self._values = dict(DEFAULTS)
        self._config_path = Path(config_path) if config_path else _CONFIG_FILE
        self.load()

    def get(self, key):
        """Return the current value of a setting (None for unknown keys)."""
        return self._values.get(key)

    def set(self, key, value):
        """
        Change a setting.

        Raises:
            KeyError: If the key is not a known setting.
            ValueError: If the value has the wrong type or is out of range.
        """
        if key not in DEFAULTS:
            raise KeyError(key)
        if not _is_valid(key, value):
            raise ValueError(f"Invalid value for {key}: {value!r}")
        self._values[key] = value

    def get_all(self):
        """Return a copy of all current settings."""
        return dict(self._values)

    def reset_defaults(self):
        """Reset all settings to defaults."""
        self._values = dict(DEFAULTS)

    @property
    def api_base_url(self) -> str:
        return self._values["api_base_url"]

    @property
    def request_timeout(self) -> float:
        return self._values["request_timeout"]

    @property
    def grid_size(self) -> int:
        return self._values["grid_size"]

    @property
    def history_capacity(self) -> int:
        return int(self._values["history_capacity"])

    @property
    def export_scale(self) -> float:
        return self._values["export_scale"]

    @property
    def include_header(self) -> bool:
        return self._values["include_header"]

    def save(self):
        """Save user overrides to JSON config file."""
        overrides = {k: v for k, v in self._values.items() if v != DEFAULTS.get(k)}
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_path, "w") as f:
                json.dump(overrides, f, indent=2)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def load(self):
        """Load user overrides from JSON config file, skipping invalid entries."""
        if not self._config_path.exists():
            return
        try:
            with open(self._config_path) as f:
                overrides = json.load(f)
            for key, value in overrides.items():
                if key not in DEFAULTS:
                    continue
                if _is_valid(key, value):
                    self._values[key] = value
                else:
                    logger.warning("Ignoring invalid setting %s=%r", key, value)
        except (OSError, json.JSONDecodeError, AttributeError) as e:
            logger.warning("Failed to load settings config: %s", e)
