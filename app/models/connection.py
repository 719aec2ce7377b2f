"""
Port and ConnectionData - Pure Python data models for diagram wires.

This module contains no rendering dependencies. Waypoints are stored as
tuples (x, y) in diagram units.
"""

from dataclasses import dataclass, field

from settings.constants import PORT_POSITIONS


@dataclass(frozen=True)
class Port:
    """
    A connection endpoint: one side of a component.

    Ports are not stored entities. A port is valid only while its
    component exists in the diagram.
    """

    component_id: str
    position: str  # "left", "right", "top" or "bottom"

    def __post_init__(self):
        if self.position not in PORT_POSITIONS:
            raise ValueError(f"Unknown port position: {self.position!r}")

    def to_dict(self) -> dict:
        return {"componentId": self.component_id, "position": self.position}

    @classmethod
    def from_dict(cls, data: dict) -> "Port":
        return cls(component_id=data["componentId"], position=data["position"])


@dataclass
class ConnectionData:
    """
    Pure Python data class representing a wire between two component ports.

    Waypoints are intermediate routing points drawn in order between the
    source and target ports.
    """

    connection_id: str
    source: Port
    target: Port
    waypoints: list[tuple[float, float]] = field(default_factory=list)

    def get_ports(self) -> list[Port]:
        """Return both endpoints, source first."""
        return [self.source, self.target]

    def connects_component(self, component_id: str) -> bool:
        """Check if this connection has an endpoint on the given component."""
        return self.source.component_id == component_id or self.target.component_id == component_id

    def connects_port(self, port: Port) -> bool:
        """Check if this connection ends at the given port."""
        return self.source == port or self.target == port

    def to_dict(self) -> dict:
        """Serialize connection to the export wire format."""
        data = {
            "id": self.connection_id,
            "source": self.source.to_dict(),
            "target": self.target.to_dict(),
        }
        if self.waypoints:
            data["waypoints"] = [{"x": x, "y": y} for x, y in self.waypoints]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ConnectionData":
        """Deserialize connection from the export wire format."""
        return cls(
            connection_id=data["id"],
            source=Port.from_dict(data["source"]),
            target=Port.from_dict(data["target"]),
            waypoints=[(wp["x"], wp["y"]) for wp in data.get("waypoints") or []],
        )

    def __repr__(self) -> str:
        return (
            f"ConnectionData({self.connection_id}: {self.source.component_id}[{self.source.position}] -> "
            f"{self.target.component_id}[{self.target.position}])"
        )
