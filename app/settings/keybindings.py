"""
keybindings.py - Central registry for configurable keyboard shortcuts.

Stores default bindings and user overrides in a JSON config file.
"""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Default keybindings: action_name -> shortcut string
DEFAULTS = {
    # Edit
    "edit.undo": "Ctrl+Z",
    "edit.redo": "Ctrl+Y",
    "edit.redo_alt": "Ctrl+Shift+Z",
    "edit.delete": "Delete",
    "edit.delete_alt": "Backspace",
    "edit.rotate_cw": "R",
    "edit.rotate_ccw": "Shift+R",
    "edit.clear_selection": "Escape",
    # Tools
    "tool.select": "V",
    "tool.wire": "W",
    "tool.delete": "D",
    # View
    "view.pan": "Space",
    "view.zoom_reset": "Ctrl+0",
}

# Human-readable labels for each action
ACTION_LABELS = {
    "edit.undo": "Undo",
    "edit.redo": "Redo",
    "edit.redo_alt": "Redo (alternate)",
    "edit.delete": "Delete Selected",
    "edit.delete_alt": "Delete Selected (alternate)",
    "edit.rotate_cw": "Rotate Clockwise",
    "edit.rotate_ccw": "Rotate Counter-Clockwise",
    "edit.clear_selection": "Clear Selection",
    "tool.select": "Select Tool",
    "tool.wire": "Wire Tool",
    "tool.delete": "Delete Tool",
    "view.pan": "Pan (hold)",
    "view.zoom_reset": "Reset Zoom",
}

_CONFIG_DIR = Path.home() / ".circuit-diagram-editor"
_CONFIG_FILE = _CONFIG_DIR / "keybindings.json"


def normalize_shortcut(shortcut: str) -> str:
    """Canonical form for comparing shortcuts: lower case, no spaces, 'Cmd' treated as 'Ctrl'."""
    key = shortcut.replace(" ", "").lower()
    return key.replace("cmd+", "ctrl+").replace("meta+", "ctrl+")


class KeybindingsRegistry:
    """Central registry for keyboard shortcuts with load/save support."""

    def __init__(self, config_path=None):
        self._bindings = dict(DEFAULTS)
        self._config_path = Path(config_path) if config_path else _CONFIG_FILE
        self.load()

    def get(self, action_name):
        """Return the shortcut string for the given action."""
        return self._bindings.get(action_name, "")

    def set(self, action_name, shortcut):
        """Set the shortcut for the given action."""
        self._bindings[action_name] = shortcut

    def get_all(self):
        """Return a copy of all current bindings."""
        return dict(self._bindings)

    def action_for(self, shortcut: str) -> Optional[str]:
        """Return the action bound to a shortcut, or None if unbound."""
        key = normalize_shortcut(shortcut)
        for action, bound in self._bindings.items():
            if bound and normalize_shortcut(bound) == key:
                return action
        return None

    def get_conflicts(self):
        """Return list of (shortcut, [action1, action2, ...]) for duplicates."""
        shortcut_to_actions = {}
        for action, shortcut in self._bindings.items():
            if not shortcut:
                continue
            key = normalize_shortcut(shortcut)
            shortcut_to_actions.setdefault(key, []).append(action)
        return [(s, actions) for s, actions in shortcut_to_actions.items() if len(actions) > 1]

    def reset_defaults(self):
        """Reset all bindings to defaults."""
        self._bindings = dict(DEFAULTS)

    def save(self):
        """Save user overrides to JSON config file."""
        # Only save non-default bindings
        overrides = {k: v for k, v in self._bindings.items() if v != DEFAULTS.get(k)}
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_path, "w") as f:
                json.dump(overrides, f, indent=2)
        except OSError as e:
            logger.error("Failed to save keybindings: %s", e)

    def load(self):
        """Load user overrides from JSON config file."""
        if not self._config_path.exists():
            return
        try:
            with open(self._config_path) as f:
                overrides = json.load(f)
            for key, value in overrides.items():
                if key in self._bindings:
                    self._bindings[key] = value
        except (OSError, json.JSONDecodeError, AttributeError) as e:
            logger.warning("Failed to load keybindings config: %s", e)
