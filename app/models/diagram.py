"""
DiagramModel - Central data store for diagram entities.

This module contains no rendering dependencies. It holds all components and
connections and keeps connections consistent with the component set.
DiagramData is the serializable aggregate handed to the export service.
"""

from dataclasses import dataclass, field
from typing import Optional

from settings.constants import DEFAULT_GRID_SIZE

from .component import ComponentData
from .connection import ConnectionData
from .snapshot import HistorySnapshot


@dataclass
class DiagramModel:
    """
    Central data store holding all diagram entities.

    Components and connections are keyed by id; dict order is insertion
    order, which is also the drawing order.
    """

    components: dict[str, ComponentData] = field(default_factory=dict)
    connections: dict[str, ConnectionData] = field(default_factory=dict)

    # --- Component operations ---

    def add_component(self, component: ComponentData) -> None:
        """
        Add a component to the diagram.

        Raises:
            ValueError: If the id is already in use.
        """
        if component.component_id in self.components:
            raise ValueError(f"Duplicate component id: {component.component_id!r}")
        self.components[component.component_id] = component

    def remove_component(self, component_id: str) -> list[str]:
        """
        Remove a component and every connection attached to it.

        Returns:
            Ids of the connections removed along with the component.
            Empty if the component does not exist.
        """
        if component_id not in self.components:
            return []

        attached = [
            conn_id for conn_id, conn in self.connections.items() if conn.connects_component(component_id)
        ]
        for conn_id in attached:
            del self.connections[conn_id]
        del self.components[component_id]
        return attached

    def connections_for(self, component_id: str) -> list[ConnectionData]:
        """Return the connections with an endpoint on the given component."""
        return [conn for conn in self.connections.values() if conn.connects_component(component_id)]

    # --- Connection operations ---

    def add_connection(self, connection: ConnectionData) -> None:
        """
        Add a connection to the diagram.

        Raises:
            ValueError: If the id is already in use.
        """
        if connection.connection_id in self.connections:
            raise ValueError(f"Duplicate connection id: {connection.connection_id!r}")
        self.connections[connection.connection_id] = connection

    def remove_connection(self, connection_id: str) -> bool:
        """Remove a connection by id. Returns False if it did not exist."""
        return self.connections.pop(connection_id, None) is not None

    # --- Diagram operations ---

    def clear(self) -> None:
        """Clear all diagram data."""
        self.components.clear()
        self.connections.clear()

    def snapshot(self) -> HistorySnapshot:
        """Capture a deep copy of the current entities."""
        return HistorySnapshot.capture(self.components.values(), self.connections.values())

    def restore(self, snapshot: HistorySnapshot) -> None:
        """Replace all entities with fresh copies from a snapshot."""
        self.components = {c.component_id: c for c in snapshot.restore_components()}
        self.connections = {c.connection_id: c for c in snapshot.restore_connections()}


@dataclass
class DiagramMetadata:
    """Optional descriptive information attached to an exported diagram."""

    title: str = ""
    description: str = ""
    author: str = ""
    version: str = ""

    def to_dict(self) -> dict:
        return {k: v for k, v in vars(self).items() if v}

    @classmethod
    def from_dict(cls, data: dict) -> "DiagramMetadata":
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            author=data.get("author", ""),
            version=data.get("version", ""),
        )


@dataclass
class DiagramData:
    """Serializable diagram: entities plus grid, zoom and metadata."""

    components: list[ComponentData] = field(default_factory=list)
    connections: list[ConnectionData] = field(default_factory=list)
    grid_size: int = DEFAULT_GRID_SIZE
    zoom: float = 1.0
    metadata: Optional[DiagramMetadata] = None

    def to_dict(self) -> dict:
        """Serialize to the camelCase JSON shape consumed by the export service."""
        data = {
            "components": [c.to_dict() for c in self.components],
            "connections": [c.to_dict() for c in self.connections],
            "gridSize": self.grid_size,
            "zoom": self.zoom,
        }
        if self.metadata is not None:
            data["metadata"] = self.metadata.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DiagramData":
        metadata = data.get("metadata")
        return cls(
            components=[ComponentData.from_dict(c) for c in data.get("components", [])],
            connections=[ConnectionData.from_dict(c) for c in data.get("connections", [])],
            grid_size=data.get("gridSize", DEFAULT_GRID_SIZE),
            zoom=data.get("zoom", 1.0),
            metadata=DiagramMetadata.from_dict(metadata) if metadata else None,
        )


def validate_diagram_data(data) -> None:
    """
    Validate a serialized diagram before loading it.

    Raises ValueError with a descriptive message if anything is wrong.
    """
    if not isinstance(data, dict):
        raise ValueError("File does not contain a valid diagram object.")

    if "components" not in data or not isinstance(data["components"], list):
        raise ValueError("Missing or invalid 'components' list.")
    if "connections" not in data or not isinstance(data["connections"], list):
        raise ValueError("Missing or invalid 'connections' list.")

    comp_ids = set()
    for i, comp in enumerate(data["components"]):
        if not isinstance(comp, dict):
            raise ValueError(f"Component #{i + 1} is not an object.")
        for key in ("id", "type", "x", "y"):
            if key not in comp:
                raise ValueError(f"Component #{i + 1} is missing required field '{key}'.")
        if not isinstance(comp["x"], (int, float)) or not isinstance(comp["y"], (int, float)):
            raise ValueError(f"Component '{comp['id']}' position values must be numeric.")
        if comp["id"] in comp_ids:
            raise ValueError(f"Duplicate component id '{comp['id']}'.")
        comp_ids.add(comp["id"])

    for i, conn in enumerate(data["connections"]):
        if not isinstance(conn, dict):
            raise ValueError(f"Connection #{i + 1} is not an object.")
        for key in ("id", "source", "target"):
            if key not in conn:
                raise ValueError(f"Connection #{i + 1} is missing required field '{key}'.")
        for end in ("source", "target"):
            port = conn[end]
            if not isinstance(port, dict) or "componentId" not in port or "position" not in port:
                raise ValueError(f"Connection #{i + 1} has an invalid {end} port.")
            if port["componentId"] not in comp_ids:
                raise ValueError(
                    f"Connection #{i + 1} references unknown component '{port['componentId']}'."
                )
