"""
Offline CircuiTikZ generator.

Produces the same LaTeX as the export service so a diagram can be exported
without a running server. Each connection becomes one ``\\draw`` path that
runs through its source component and ends at the target port; components
with no connections are drawn as standalone nodes.

Diagram y grows downward while TikZ y grows upward, so y is inverted.
"""

import logging
import math

from models.component import ComponentData, is_node_component
from models.connection import ConnectionData
from models.diagram import DiagramData
from models.geometry import opposite_port, port_position
from settings.constants import DEFAULT_EXPORT_SCALE

from .api_client import ExportResult

logger = logging.getLogger(__name__)

DOCUMENT_HEADER = "\\documentclass{article}\n\\usepackage{circuitikz}\n\\begin{document}\n\n"
DOCUMENT_FOOTER = "\n\\end{document}\n"


class CircuitikzExportError(ValueError):
    """Raised when a diagram cannot be converted."""


def _fmt(value: float) -> str:
    # Half away from zero at two decimals; + 0.0 turns -0.0 into 0.0
    rounded = math.copysign(math.floor(abs(value) * 100 + 0.5), value) / 100
    return f"{rounded + 0.0:.2f}"


def _coord(point: tuple[float, float]) -> str:
    return f"({_fmt(point[0])},{_fmt(point[1])})"


def _to_tikz(point: tuple[float, float], scale: float) -> tuple[float, float]:
    """Convert diagram units to TikZ units, inverting y."""
    return (point[0] / scale, -point[1] / scale)


def _label_option(component: ComponentData) -> str:
    text = component.label or component.value
    return f", l=${text}$" if text else ""


def _write_connection(
    lines: list[str],
    connection: ConnectionData,
    components: dict[str, ComponentData],
    scale: float,
) -> None:
    source = components.get(connection.source.component_id)
    target = components.get(connection.target.component_id)
    if source is None or target is None:
        raise CircuitikzExportError(f"error writing connection {connection.connection_id}: component not found")

    # Draw the source element from its far side to the connected port
    start = _to_tikz(port_position(source, opposite_port(connection.source.position)), scale)
    end = _to_tikz(port_position(source, connection.source.position), scale)
    parts = [
        f"  \\draw {_coord(start)}\n",
        f"    to[{source.get_tikz_name()}{_label_option(source)}] {_coord(end)}",
    ]
    for waypoint in connection.waypoints:
        parts.append(f"\n    -- {_coord(_to_tikz(waypoint, scale))}")

    target_point = _to_tikz(port_position(target, connection.target.position), scale)
    parts.append(f"\n    -- {_coord(target_point)}")
    if is_node_component(target.component_type):
        parts.append(f" node[{target.get_tikz_name()}] {{}}")
    parts.append(";\n")
    lines.append("".join(parts))


def _write_standalone(lines: list[str], component: ComponentData, scale: float) -> None:
    text = f"{{${component.label}$}}" if component.label else "{}"
    lines.append(
        f"  \\draw {_coord(_to_tikz(component.position, scale))} node[{component.get_tikz_name()}] {text};\n"
    )


def generate(diagram: DiagramData, include_header: bool = False, scale: float = DEFAULT_EXPORT_SCALE) -> str:
    """
    Convert a diagram to CircuiTikZ source.

    Args:
        diagram: Diagram to convert
        include_header: Wrap the picture in a minimal standalone document
        scale: Diagram units per TikZ unit (0 means the default)

    Raises:
        CircuitikzExportError: If the diagram is empty or a connection
            names a component that is not in the diagram.
    """
    if not diagram.components:
        raise CircuitikzExportError("diagram must contain at least one component")
    if not scale:
        scale = DEFAULT_EXPORT_SCALE

    components = {c.component_id: c for c in diagram.components}
    lines = []
    if include_header:
        lines.append(DOCUMENT_HEADER)
    lines.append("\\begin{circuitikz}\n")

    connected = set()
    for connection in diagram.connections:
        _write_connection(lines, connection, components, scale)
        connected.add(connection.source.component_id)
        connected.add(connection.target.component_id)

    for component in diagram.components:
        if component.component_id not in connected:
            _write_standalone(lines, component, scale)

    lines.append("\\end{circuitikz}\n")
    if include_header:
        lines.append(DOCUMENT_FOOTER)
    return "".join(lines)


def export_diagram(
    diagram: DiagramData,
    include_header: bool = False,
    scale: float = DEFAULT_EXPORT_SCALE,
) -> ExportResult:
    """Run ``generate`` and report the outcome the way the export service does."""
    try:
        latex = generate(diagram, include_header=include_header, scale=scale)
    except CircuitikzExportError as e:
        logger.warning("Local export failed: %s", e)
        return ExportResult(success=False, errors=[str(e)])
    return ExportResult(success=True, latex=latex)
