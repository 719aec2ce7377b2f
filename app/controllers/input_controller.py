"""
InputController - Turns raw pointer and keyboard events into edits.

This module contains no rendering dependencies. The view forwards clicks,
drags, wheel steps and key presses; this controller decides the intent from
the active tool and calls the DiagramController, SelectionManager,
ToolController and ViewportState accordingly.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from models.component import COMPONENT_LIBRARY
from models.connection import Port
from models.geometry import snap_point
from models.viewport import ViewportState
from settings.constants import (
    QUICK_ADD_ORIGIN,
    QUICK_ADD_PER_ROW,
    QUICK_ADD_ROW_WIDTH,
    QUICK_ADD_STEP,
)
from settings.keybindings import KeybindingsRegistry

from .diagram_controller import DiagramController
from .tool_controller import AwaitingSecondPort, ToolController, ToolMode

logger = logging.getLogger(__name__)


@dataclass
class StatusInfo:
    """Values shown in the status bar."""

    cursor_x: int
    cursor_y: int
    zoom_percent: int
    component_count: int
    active_tool: str


class InputController:
    """
    Interaction layer between the view and the editing engine.

    Wire mode implements the two-click gesture: the first port click
    captures a start port, a click on a different port creates the
    connection, and a click on the same port cancels.
    """

    def __init__(
        self,
        diagram: Optional[DiagramController] = None,
        tool: Optional[ToolController] = None,
        viewport: Optional[ViewportState] = None,
        keybindings: Optional[KeybindingsRegistry] = None,
    ):
        self.diagram = diagram or DiagramController()
        self.tool = tool or ToolController()
        self.viewport = viewport or ViewportState()
        self.keybindings = keybindings or KeybindingsRegistry()
        self.pan_enabled = False
        self.cursor_position = (0.0, 0.0)

    @property
    def selection(self):
        return self.diagram.selection

    def _selection_changed(self) -> None:
        self.diagram._notify("selection_changed", self.selection)

    # --- Pointer events ---

    def click_component(self, component_id: str, additive: bool = False) -> None:
        """Select (select tool) or delete (delete tool) a component."""
        mode = self.tool.active_tool
        if mode is ToolMode.SELECT:
            if additive:
                self.selection.toggle_component(component_id)
            else:
                self.selection.select_component(component_id)
            self._selection_changed()
        elif mode is ToolMode.DELETE:
            self.diagram.delete_component(component_id)

    def click_connection(self, connection_id: str) -> None:
        """Select (select tool) or delete (delete tool) a connection."""
        mode = self.tool.active_tool
        if mode is ToolMode.SELECT:
            self.selection.select_connection(connection_id)
            self._selection_changed()
        elif mode is ToolMode.DELETE:
            self.diagram.delete_connection(connection_id)

    def click_port(self, port: Port) -> Optional[str]:
        """
        Advance the wiring gesture.

        Returns:
            The new connection's id when the click completes a wire, else None
        """
        if self.tool.active_tool is not ToolMode.WIRE:
            return None

        gesture = self.tool.gesture
        if not isinstance(gesture, AwaitingSecondPort):
            self.tool.set_wire_start_port(port)
            return None

        self.tool.clear_wire_start_port()
        if gesture.port == port:
            logger.debug("Wire cancelled at %s", port)
            return None
        return self.diagram.add_connection(gesture.port, port)

    def click_background(self) -> None:
        """Clear the selection and abandon any pending wire."""
        self.tool.clear_wire_start_port()
        if self.selection.has_selection():
            self.selection.clear_selection()
            self._selection_changed()

    def drag_component_end(self, component_id: str, x: float, y: float) -> None:
        """Drop a dragged component at the nearest grid point."""
        component = self.diagram.get_component(component_id)
        if component is None:
            return
        snapped = snap_point((x, y), self.diagram.grid_size)
        if snapped == component.position:
            return
        self.diagram.move_component(component_id, snapped)

    def pointer_move(self, screen_x: float, screen_y: float) -> tuple[float, float]:
        """Track the pointer in diagram coordinates for the status bar."""
        self.cursor_position = self.viewport.screen_to_diagram(screen_x, screen_y)
        return self.cursor_position

    def wheel(self, pointer_x: float, pointer_y: float, delta_y: float) -> float:
        """Zoom around the pointer: scrolling down zooms out, up zooms in."""
        return self.viewport.zoom_at(pointer_x, pointer_y, zoom_in=delta_y <= 0)

    def pan_end(self, x: float, y: float) -> None:
        """Store the stage offset after a pan drag. Ignored unless panning is enabled."""
        if self.pan_enabled:
            self.viewport.set_position(x, y)

    # --- Keyboard events ---

    def key_press(self, shortcut: str) -> bool:
        """
        Run the action bound to a shortcut.

        Returns:
            True if the shortcut was bound to an action
        """
        action = self.keybindings.action_for(shortcut)
        if action is None:
            return False

        if action in ("edit.delete", "edit.delete_alt"):
            self.diagram.delete_selected()
        elif action == "edit.undo":
            self.diagram.undo()
        elif action in ("edit.redo", "edit.redo_alt"):
            self.diagram.redo()
        elif action in ("edit.rotate_cw", "edit.rotate_ccw"):
            for component_id in self.selection.selected_component_ids:
                self.diagram.rotate_component(component_id, clockwise=action == "edit.rotate_cw")
        elif action == "edit.clear_selection":
            self.click_background()
        elif action == "tool.select":
            self.tool.set_active_tool(ToolMode.SELECT)
        elif action == "tool.wire":
            self.tool.set_active_tool(ToolMode.WIRE)
        elif action == "tool.delete":
            self.tool.set_active_tool(ToolMode.DELETE)
        elif action == "view.pan":
            self.pan_enabled = True
        elif action == "view.zoom_reset":
            self.viewport.reset()
        return True

    def key_release(self, shortcut: str) -> None:
        """Releasing the pan key ends panning."""
        if self.keybindings.action_for(shortcut) == "view.pan":
            self.pan_enabled = False

    # --- Toolbar ---

    def quick_add_component(self, component_type: str) -> str:
        """
        Add a component at the next staggered grid slot with a default label.

        Ground-like components get no label; others get their catalog label
        prefix followed by the new component count.

        Returns:
            The new component's id.
        """
        count = len(self.diagram.model.components)
        origin_x, origin_y = QUICK_ADD_ORIGIN
        position = snap_point(
            (
                origin_x + (count * QUICK_ADD_STEP) % QUICK_ADD_ROW_WIDTH,
                origin_y + (count // QUICK_ADD_PER_ROW) * QUICK_ADD_STEP,
            ),
            self.diagram.grid_size,
        )
        definition = COMPONENT_LIBRARY.get(component_type)
        prefix = definition.default_label if definition else ""
        label = f"{prefix}{count + 1}" if prefix else ""
        return self.diagram.add_component(component_type, position, label=label)

    def set_active_tool(self, mode) -> None:
        self.tool.set_active_tool(mode)

    def clear(self) -> None:
        """Clear the diagram and abandon any gesture."""
        self.tool.clear_wire_start_port()
        self.diagram.clear()

    def status(self) -> StatusInfo:
        x, y = self.cursor_position
        return StatusInfo(
            cursor_x=round(x),
            cursor_y=round(y),
            zoom_percent=self.viewport.zoom_percent,
            component_count=len(self.diagram.model.components),
            active_tool=self.tool.active_tool.value,
        )

    def to_diagram(self, metadata=None):
        """Serializable diagram using the current zoom."""
        return self.diagram.to_diagram(zoom=self.viewport.scale, metadata=metadata)
