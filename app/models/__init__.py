"""
Pure Python data models for the diagram editor.

This package contains rendering-free data classes that represent diagram
entities, the history snapshot, the viewport transform, and the geometry
helpers that operate on them.
"""

from .component import (
    CIRCUITIKZ_NAMES,
    COMPONENT_CATEGORIES,
    COMPONENT_LIBRARY,
    COMPONENT_TYPES,
    NODE_COMPONENT_TYPES,
    ComponentData,
    ComponentDefinition,
)
from .connection import ConnectionData, Port
from .diagram import DiagramData, DiagramMetadata, DiagramModel, validate_diagram_data
from .snapshot import HistorySnapshot
from .viewport import ViewportState

__all__ = [
    "ComponentData",
    "ComponentDefinition",
    "COMPONENT_TYPES",
    "COMPONENT_CATEGORIES",
    "COMPONENT_LIBRARY",
    "CIRCUITIKZ_NAMES",
    "NODE_COMPONENT_TYPES",
    "ConnectionData",
    "Port",
    "DiagramModel",
    "DiagramData",
    "DiagramMetadata",
    "validate_diagram_data",
    "HistorySnapshot",
    "ViewportState",
]
