"""
Shared test fixtures for the diagram editor test suite.

All fixtures build pure-Python model and controller objects (no renderer).
"""

import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, controllers, services, settings)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

import pytest
from controllers.diagram_controller import DiagramController
from controllers.input_controller import InputController
from controllers.tool_controller import ToolController
from models.component import ComponentData
from models.connection import ConnectionData, Port
from models.viewport import ViewportState
from settings.keybindings import KeybindingsRegistry


def make_component(component_id, component_type="resistor", position=(0.0, 0.0), **kwargs):
    """Helper to create a ComponentData with minimal boilerplate."""
    return ComponentData(
        component_id=component_id,
        component_type=component_type,
        position=position,
        **kwargs,
    )


def make_connection(connection_id, source_id, source_pos, target_id, target_pos, waypoints=None):
    """Helper to create a ConnectionData."""
    return ConnectionData(
        connection_id=connection_id,
        source=Port(source_id, source_pos),
        target=Port(target_id, target_pos),
        waypoints=list(waypoints or []),
    )


@pytest.fixture
def controller():
    return DiagramController()


@pytest.fixture
def events():
    """Fixture that returns a list and a callback that appends events to it."""
    recorded = []

    def callback(event, data):
        recorded.append((event, data))

    return recorded, callback


@pytest.fixture
def keybindings(tmp_path):
    """Default keybindings that never touch the user's config directory."""
    return KeybindingsRegistry(config_path=tmp_path / "keybindings.json")


@pytest.fixture
def input_ctrl(controller, keybindings):
    return InputController(
        diagram=controller,
        tool=ToolController(),
        viewport=ViewportState(),
        keybindings=keybindings,
    )


@pytest.fixture
def rc_pair(controller):
    """
    Resistor at (100, 100) wired to a capacitor at (200, 100).

    R.right -> C.left
    """
    r_id = controller.add_component("resistor", (100, 100), label="R1", value="10k")
    c_id = controller.add_component("capacitor", (200, 100), label="C1", value="1u")
    conn_id = controller.add_connection(Port(r_id, "right"), Port(c_id, "left"))
    return r_id, c_id, conn_id
