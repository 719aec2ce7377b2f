"""
SelectionManager - Tracks which components and connections are selected.

Holds ids only. A selected id may refer to an entity that no longer exists;
callers look ids up in the diagram and skip the ones that are gone.
"""

from typing import Iterable


def _unique(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(ids))


class SelectionManager:
    """Two independent, ordered, duplicate-free id sets."""

    def __init__(self):
        self._components: list[str] = []
        self._connections: list[str] = []

    @property
    def selected_component_ids(self) -> list[str]:
        return list(self._components)

    @property
    def selected_connection_ids(self) -> list[str]:
        return list(self._connections)

    # --- Single select (replaces only its own set) ---

    def select_component(self, component_id: str) -> None:
        self._components = [component_id]

    def select_connection(self, connection_id: str) -> None:
        self._connections = [connection_id]

    # --- Explicit multi-select ---

    def set_selected_components(self, ids: Iterable[str]) -> None:
        self._components = _unique(ids)

    def set_selected_connections(self, ids: Iterable[str]) -> None:
        self._connections = _unique(ids)

    def toggle_component(self, component_id: str) -> None:
        """Add the component to the selection, or remove it if already selected."""
        if component_id in self._components:
            self._components.remove(component_id)
        else:
            self._components.append(component_id)

    # --- Removal ---

    def deselect_component(self, component_id: str) -> None:
        if component_id in self._components:
            self._components.remove(component_id)

    def deselect_connection(self, connection_id: str) -> None:
        if connection_id in self._connections:
            self._connections.remove(connection_id)

    def clear_selection(self) -> None:
        """Empty both sets (background click, Escape, clear)."""
        self._components = []
        self._connections = []

    # --- Queries ---

    def is_component_selected(self, component_id: str) -> bool:
        return component_id in self._components

    def is_connection_selected(self, connection_id: str) -> bool:
        return connection_id in self._connections

    def has_selection(self) -> bool:
        return bool(self._components or self._connections)

    def __repr__(self) -> str:
        return f"SelectionManager(components={self._components}, connections={self._connections})"
