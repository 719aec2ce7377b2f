"""
ComponentData - Pure Python data model for diagram components.

This module contains no rendering dependencies. All positions are
represented as tuples (x, y) in diagram units.

Component types use the short wire-format names as canonical identifiers:
'resistor', 'capacitor', 'nmos', 'dc_voltage', 'rground', ...
"""

from dataclasses import dataclass, field
from typing import Any, Optional

# Component type definitions (canonical wire-format names)
COMPONENT_TYPES = [
    # Transistors
    "npn",
    "pnp",
    "nmos",
    "pmos",
    # Passive components
    "resistor",
    "capacitor",
    "inductor",
    # Sources
    "dc_voltage",
    "dc_current",
    "ac_voltage",
    "battery",
    # Semiconductors
    "diode",
    "led",
    "zener",
    # Basic
    "ground",
    "rground",
    "junction",
    # Active components
    "opamp",
    "switch",
]

COMPONENT_CATEGORIES = ["transistor", "passive", "source", "semiconductor", "basic", "active"]

# Components drawn as a node at the end of a path rather than as a path element
NODE_COMPONENT_TYPES = frozenset({"ground", "rground", "junction"})


@dataclass(frozen=True)
class ComponentDefinition:
    """Catalog entry used to populate add-component affordances."""

    component_type: str
    name: str
    category: str
    default_label: str
    tikz: str

    def to_dict(self) -> dict:
        return {
            "type": self.component_type,
            "name": self.name,
            "category": self.category,
            "defaultLabel": self.default_label,
            "tikz": self.tikz,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentDefinition":
        """
        Build a definition from a component-library entry.

        Remote entries may carry only ``type`` and ``tikz``; missing fields
        fall back to the local catalog, then to neutral defaults.
        """
        component_type = data["type"]
        local = COMPONENT_LIBRARY.get(component_type)
        return cls(
            component_type=component_type,
            name=data.get("name") or (local.name if local else component_type),
            category=data.get("category") or (local.category if local else "basic"),
            default_label=data.get("defaultLabel", local.default_label if local else ""),
            tikz=data.get("tikz") or (local.tikz if local else "generic"),
        )


def _definition(component_type, name, category, default_label, tikz):
    return ComponentDefinition(component_type, name, category, default_label, tikz)


# Local component catalog, keyed by type
COMPONENT_LIBRARY = {
    d.component_type: d
    for d in [
        _definition("npn", "NPN Transistor", "transistor", "Q", "npn"),
        _definition("pnp", "PNP Transistor", "transistor", "Q", "pnp"),
        _definition("nmos", "NMOS Transistor", "transistor", "M", "nmos"),
        _definition("pmos", "PMOS Transistor", "transistor", "M", "pmos"),
        _definition("resistor", "Resistor", "passive", "R", "R"),
        _definition("capacitor", "Capacitor", "passive", "C", "C"),
        _definition("inductor", "Inductor", "passive", "L", "L"),
        _definition("dc_voltage", "DC Voltage Source", "source", "V", "battery1"),
        _definition("dc_current", "DC Current Source", "source", "I", "isource"),
        _definition("ac_voltage", "AC Voltage Source", "source", "V", "sV"),
        _definition("battery", "Battery", "source", "B", "battery"),
        _definition("diode", "Diode", "semiconductor", "D", "D"),
        _definition("led", "LED", "semiconductor", "D", "leDo"),
        _definition("zener", "Zener Diode", "semiconductor", "D", "zDo"),
        _definition("ground", "Ground", "basic", "", "ground"),
        _definition("rground", "Reference Ground", "basic", "", "rground"),
        _definition("junction", "Junction", "basic", "", "circ"),
        _definition("opamp", "Op-Amp", "active", "U", "op amp"),
        _definition("switch", "Switch", "active", "S", "switch"),
    ]
}

# Mapping of component types to CircuiTikZ element names
CIRCUITIKZ_NAMES = {t: d.tikz for t, d in COMPONENT_LIBRARY.items()}

# Fields a caller may change through an update
UPDATABLE_FIELDS = frozenset({"position", "x", "y", "rotation", "label", "value", "style", "props"})


def normalize_rotation(rotation: float) -> int:
    """Snap a rotation in degrees to the nearest quarter turn in [0, 360)."""
    return int(round(rotation / 90.0)) * 90 % 360


def is_node_component(component_type: str) -> bool:
    """Return True for components drawn as a node rather than a path element."""
    return component_type in NODE_COMPONENT_TYPES


@dataclass
class ComponentData:
    """
    Pure Python data class representing a placed component.

    Positions are stored as (x, y) tuples marking the component center.
    """

    component_id: str
    component_type: str
    position: tuple[float, float]  # (x, y) in diagram units
    rotation: int = 0  # degrees: 0, 90, 180, 270
    label: str = ""
    value: str = ""
    style: Optional[str] = None  # e.g. "european", "american"
    props: Optional[dict[str, Any]] = field(default_factory=lambda: None)

    def __post_init__(self):
        if self.component_type not in COMPONENT_LIBRARY:
            raise ValueError(f"Unknown component type: {self.component_type!r}")
        self.position = (self.position[0], self.position[1])
        self.rotation = normalize_rotation(self.rotation)

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def definition(self) -> ComponentDefinition:
        return COMPONENT_LIBRARY[self.component_type]

    def get_tikz_name(self) -> str:
        """Return the CircuiTikZ element name for this component type."""
        return CIRCUITIKZ_NAMES.get(self.component_type, "generic")

    def apply_changes(self, changes: dict) -> None:
        """
        Merge a partial update into this component.

        ``x``/``y`` replace one coordinate; ``position`` replaces both.

        Raises:
            ValueError: If a key is not an updatable field.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update component fields: {sorted(unknown)}")

        x, y = changes.get("position", self.position)
        self.position = (changes.get("x", x), changes.get("y", y))
        if "rotation" in changes:
            self.rotation = normalize_rotation(changes["rotation"])
        for name in ("label", "value", "style", "props"):
            if name in changes:
                setattr(self, name, changes[name])

    def to_dict(self) -> dict:
        """Serialize component to the export wire format."""
        data = {
            "id": self.component_id,
            "type": self.component_type,
            "x": self.position[0],
            "y": self.position[1],
            "rotation": self.rotation,
            "label": self.label,
            "value": self.value,
        }
        if self.style is not None:
            data["style"] = self.style
        if self.props is not None:
            data["props"] = dict(self.props)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentData":
        """Deserialize component from the export wire format."""
        return cls(
            component_id=data["id"],
            component_type=data["type"],
            position=(data["x"], data["y"]),
            rotation=data.get("rotation", 0),
            label=data.get("label", ""),
            value=data.get("value", ""),
            style=data.get("style"),
            props=dict(data["props"]) if data.get("props") is not None else None,
        )

    def __repr__(self) -> str:
        return (
            f"ComponentData(id={self.component_id!r}, type={self.component_type!r}, "
            f"label={self.label!r}, pos={self.position}, rot={self.rotation})"
        )
