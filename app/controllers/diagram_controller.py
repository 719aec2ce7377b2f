"""
DiagramController - Orchestrates component and connection CRUD operations.

This module contains no rendering dependencies. It manages the DiagramModel,
records every mutation in the HistoryManager, keeps the selection free of
deleted ids, and notifies views of changes through an observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from models.component import ComponentData
from models.connection import ConnectionData, Port
from models.diagram import DiagramData, DiagramMetadata, DiagramModel
from models.geometry import snap_to_grid
from settings.constants import DEFAULT_GRID_SIZE

from .history_manager import HistoryManager
from .selection_manager import SelectionManager

logger = logging.getLogger(__name__)


class IdAllocator:
    """Monotonic id source: ``<prefix>_1``, ``<prefix>_2``, ... never reused."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        self._next = 1

    def allocate(self) -> str:
        new_id = f"{self.prefix}_{self._next}"
        self._next += 1
        return new_id

    def reserve(self, existing_ids) -> None:
        """Advance past every ``<prefix>_<n>`` id already in use."""
        for existing in existing_ids:
            prefix, _, suffix = existing.rpartition("_")
            if prefix == self.prefix and suffix.isdigit():
                self._next = max(self._next, int(suffix) + 1)


class DiagramController:
    """
    Controller for diagram component and connection operations.

    Every mutating operation records a history snapshot before returning, so
    no caller can observe a changed diagram whose history is out of date.

    Observer events:
        component_added (ComponentData) - A new component was added
        component_updated (ComponentData) - A component's fields changed
        component_removed (str) - A component was removed (by ID)
        connection_added (ConnectionData) - A new connection was added
        connection_removed (str) - A connection was removed (by ID)
        selection_changed (SelectionManager) - Selected ids changed
        history_restored (None) - Undo or redo replaced the diagram
        diagram_cleared (None) - The entire diagram was cleared
    """

    def __init__(
        self,
        model: Optional[DiagramModel] = None,
        history: Optional[HistoryManager] = None,
        selection: Optional[SelectionManager] = None,
        grid_size: int = DEFAULT_GRID_SIZE,
    ):
        self.model = model or DiagramModel()
        self.history = history or HistoryManager(initial=self.model.snapshot())
        self.selection = selection or SelectionManager()
        self.grid_size = grid_size
        self._component_ids = IdAllocator("comp")
        self._component_ids.reserve(self.model.components)
        self._connection_ids = IdAllocator("conn")
        self._connection_ids.reserve(self.model.connections)
        self._observers: list[Callable[[str, Any], None]] = []

    @classmethod
    def from_settings(cls, settings, model: Optional[DiagramModel] = None) -> "DiagramController":
        """Build a controller using the grid size and history capacity from a SettingsStore."""
        model = model or DiagramModel()
        history = HistoryManager(capacity=settings.history_capacity, initial=model.snapshot())
        return cls(model=model, history=history, grid_size=settings.grid_size)

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    def save_to_history(self) -> None:
        """Record the current diagram as the newest history entry."""
        self.history.record(self.model.snapshot())

    # --- Read access ---

    @property
    def components(self) -> list[ComponentData]:
        return list(self.model.components.values())

    @property
    def connections(self) -> list[ConnectionData]:
        return list(self.model.connections.values())

    def get_component(self, component_id: str) -> Optional[ComponentData]:
        return self.model.components.get(component_id)

    def get_connection(self, connection_id: str) -> Optional[ConnectionData]:
        return self.model.connections.get(connection_id)

    def connections_for(self, component_id: str) -> list[ConnectionData]:
        return self.model.connections_for(component_id)

    def snap_to_grid(self, value: float) -> float:
        return snap_to_grid(value, self.grid_size)

    # --- Component operations ---

    def add_component(
        self,
        component_type: str,
        position: tuple[float, float],
        rotation: int = 0,
        label: str = "",
        value: str = "",
        style: Optional[str] = None,
        props: Optional[dict] = None,
    ) -> str:
        """
        Create and add a new component.

        Returns:
            The new component's id.

        Raises:
            ValueError: If the component type is unknown.
        """
        component = ComponentData(
            component_id=self._component_ids.allocate(),
            component_type=component_type,
            position=position,
            rotation=rotation,
            label=label,
            value=value,
            style=style,
            props=dict(props) if props is not None else None,
        )
        self.model.add_component(component)
        self.save_to_history()
        logger.debug("Added %r", component)
        self._notify("component_added", component)
        return component.component_id

    def update_component(self, component_id: str, **changes) -> None:
        """
        Merge field changes into a component.

        A missing id is not an error; the call still records a snapshot, so
        callers should only call this for real edits.

        Raises:
            ValueError: If a field name is not updatable.
        """
        component = self.model.components.get(component_id)
        if component is not None:
            component.apply_changes(changes)
        self.save_to_history()
        if component is not None:
            self._notify("component_updated", component)

    def move_component(self, component_id: str, position: tuple[float, float]) -> None:
        """Move a component to a new position."""
        self.update_component(component_id, position=position)

    def rotate_component(self, component_id: str, clockwise: bool = True) -> None:
        """Rotate a component 90 degrees."""
        component = self.model.components.get(component_id)
        if component is None:
            return
        delta = 90 if clockwise else -90
        self.update_component(component_id, rotation=component.rotation + delta)

    def delete_component(self, component_id: str) -> None:
        """
        Remove a component, every connection attached to it, and their
        selection entries. No-op if the component does not exist.
        """
        if component_id not in self.model.components:
            return

        removed_connections = self.model.remove_component(component_id)
        self.selection.deselect_component(component_id)
        for conn_id in removed_connections:
            self.selection.deselect_connection(conn_id)
        self.save_to_history()

        for conn_id in removed_connections:
            self._notify("connection_removed", conn_id)
        self._notify("component_removed", component_id)
        self._notify("selection_changed", self.selection)

    # --- Connection operations ---

    def add_connection(
        self,
        source: Port,
        target: Port,
        waypoints: Optional[list[tuple[float, float]]] = None,
    ) -> str:
        """
        Create and add a new connection.

        Ports are not checked against each other; any two ports may be joined.

        Returns:
            The new connection's id.
        """
        connection = ConnectionData(
            connection_id=self._connection_ids.allocate(),
            source=source,
            target=target,
            waypoints=list(waypoints or []),
        )
        self.model.add_connection(connection)
        self.save_to_history()
        logger.debug("Added %r", connection)
        self._notify("connection_added", connection)
        return connection.connection_id

    def delete_connection(self, connection_id: str) -> None:
        """Remove a connection and its selection entry. No-op if absent."""
        if not self.model.remove_connection(connection_id):
            return
        self.selection.deselect_connection(connection_id)
        self.save_to_history()
        self._notify("connection_removed", connection_id)
        self._notify("selection_changed", self.selection)

    def delete_selected(self) -> None:
        """Delete every selected component and connection."""
        for component_id in self.selection.selected_component_ids:
            self.delete_component(component_id)
        for connection_id in self.selection.selected_connection_ids:
            self.delete_connection(connection_id)

    # --- History operations ---

    def undo(self) -> bool:
        """
        Restore the previous snapshot.

        Returns:
            True if the diagram changed, False at the oldest entry
        """
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self.model.restore(snapshot)
        self._notify("history_restored", None)
        return True

    def redo(self) -> bool:
        """
        Restore the next snapshot.

        Returns:
            True if the diagram changed, False at the newest entry
        """
        snapshot = self.history.redo()
        if snapshot is None:
            return False
        self.model.restore(snapshot)
        self._notify("history_restored", None)
        return True

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    # --- Diagram operations ---

    def clear(self) -> None:
        """Empty the diagram, the selection and the history. Ids keep counting."""
        self.model.clear()
        self.selection.clear_selection()
        self.history.reset(self.model.snapshot())
        self._notify("diagram_cleared", None)

    def to_diagram(self, zoom: float = 1.0, metadata: Optional[DiagramMetadata] = None) -> DiagramData:
        """Build the serializable aggregate handed to the export service."""
        snapshot = self.model.snapshot()
        return DiagramData(
            components=list(snapshot.components),
            connections=list(snapshot.connections),
            grid_size=self.grid_size,
            zoom=zoom,
            metadata=metadata,
        )
