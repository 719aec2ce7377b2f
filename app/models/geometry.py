"""
Geometry helpers for grid snapping, port resolution and wire polylines.

All functions are pure: they read the models passed in and return new
values without mutating anything.
"""

import math
from typing import Mapping, Optional

from settings.constants import PORT_OFFSET

from .component import ComponentData
from .connection import ConnectionData

Point = tuple[float, float]

# Unit direction of each port in world axes (y grows downward)
_PORT_DIRECTIONS = {
    "left": (-1.0, 0.0),
    "right": (1.0, 0.0),
    "top": (0.0, -1.0),
    "bottom": (0.0, 1.0),
}

_OPPOSITE_PORTS = {"left": "right", "right": "left", "top": "bottom", "bottom": "top"}


def snap_to_grid(value: float, grid_size: float) -> float:
    """
    Round a coordinate to the nearest grid line.

    Halves round up (toward +inf). A non-positive grid size disables
    snapping and returns the value unchanged.
    """
    if grid_size <= 0:
        return value
    return math.floor(value / grid_size + 0.5) * grid_size


def snap_point(point: Point, grid_size: float) -> Point:
    """Snap x and y independently."""
    return (snap_to_grid(point[0], grid_size), snap_to_grid(point[1], grid_size))


def opposite_port(position: str) -> str:
    """Return the port on the other side of the component (left <-> right, top <-> bottom)."""
    return _OPPOSITE_PORTS.get(position, "left")


def port_position(
    component: ComponentData,
    position: str,
    offset: float = PORT_OFFSET,
    follow_rotation: bool = False,
) -> Point:
    """
    Return the world coordinates of one of a component's ports.

    By default the offset is applied along the world axes and the
    component's rotation is ignored, which matches what the export service
    draws. With ``follow_rotation`` the offset turns with the component
    (clockwise, since y grows downward).
    """
    dx, dy = _PORT_DIRECTIONS[position]
    if follow_rotation and component.rotation:
        rad = math.radians(component.rotation)
        cos_a = round(math.cos(rad))
        sin_a = round(math.sin(rad))
        dx, dy = dx * cos_a - dy * sin_a, dx * sin_a + dy * cos_a
    return (component.position[0] + dx * offset, component.position[1] + dy * offset)


def wire_path(connection: ConnectionData, source_pos: Point, target_pos: Point) -> list[Point]:
    """Build the polyline source -> waypoints -> target."""
    return [source_pos, *connection.waypoints, target_pos]


def resolve_wire_path(
    connection: ConnectionData,
    components: Mapping[str, ComponentData],
    follow_rotation: bool = False,
) -> Optional[list[Point]]:
    """
    Resolve a connection's polyline from live components.

    Returns None when either endpoint component is missing.
    """
    source = components.get(connection.source.component_id)
    target = components.get(connection.target.component_id)
    if source is None or target is None:
        return None
    return wire_path(
        connection,
        port_position(source, connection.source.position, follow_rotation=follow_rotation),
        port_position(target, connection.target.position, follow_rotation=follow_rotation),
    )


def flatten_points(points: list[Point]) -> list[float]:
    """Flatten [(x, y), ...] into [x0, y0, x1, y1, ...] for polyline renderers."""
    return [coord for point in points for coord in point]
