"""Export services: the remote export API client and the offline CircuiTikZ generator."""

from .api_client import ExportClient, ExportResult, HealthStatus
from .circuitikz_exporter import CircuitikzExportError, export_diagram, generate

__all__ = [
    "ExportClient",
    "ExportResult",
    "HealthStatus",
    "CircuitikzExportError",
    "export_diagram",
    "generate",
]
