"""
ExportClient - HTTP client for the diagram export service.

The service converts a serialized diagram into CircuiTikZ LaTeX, reports its
health, and publishes the component library. Calls are blocking, made once,
and never cached; they never modify the diagram they are given.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests

from models.component import ComponentDefinition
from models.diagram import DiagramData
from settings.constants import DEFAULT_API_BASE_URL, DEFAULT_EXPORT_SCALE, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Result of an export request."""

    success: bool
    latex: str = ""
    errors: list[str] = field(default_factory=list)
    status_code: Optional[int] = None

    @property
    def error(self) -> str:
        return "; ".join(self.errors)


@dataclass
class HealthStatus:
    """Health-check payload reported by the export service."""

    status: str
    service: str = ""
    version: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class ExportClient:
    """
    Client for the export service API.

    Example::

        client = ExportClient("http://localhost:8080")
        result = client.export_to_latex(controller.to_diagram())
        if result.success:
            print(result.latex)
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Service root, without the ``/api`` suffix
            timeout: Request timeout in seconds
            session: Session to reuse (default: created on first request)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session

    @classmethod
    def from_settings(cls, settings) -> "ExportClient":
        """Build a client from a SettingsStore."""
        return cls(base_url=settings.api_base_url, timeout=settings.request_timeout)

    def _get_session(self) -> requests.Session:
        """Get or create requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(self.DEFAULT_HEADERS)
        return self._session

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path}"

    def export_to_latex(
        self,
        diagram: DiagramData,
        include_header: bool = False,
        scale: float = DEFAULT_EXPORT_SCALE,
    ) -> ExportResult:
        """
        Ask the service to convert a diagram to LaTeX.

        Transport errors, non-success HTTP statuses and ``success: false``
        payloads all come back as a failed ExportResult carrying messages.
        """
        request = {
            "diagram": diagram.to_dict(),
            "includeHeader": include_header,
            "scale": scale,
        }
        try:
            response = self._get_session().post(self._url("export"), json=request, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Export request failed: %s", e)
            return ExportResult(success=False, errors=[f"Export request failed: {e}"])

        payload = _json_or_none(response)

        if not response.ok:
            errors = _payload_errors(payload) or [f"HTTP error! status: {response.status_code}"]
            logger.warning("Export service returned %s: %s", response.status_code, errors)
            return ExportResult(success=False, errors=errors, status_code=response.status_code)

        if not isinstance(payload, dict):
            return ExportResult(
                success=False,
                errors=["Export service returned an invalid response"],
                status_code=response.status_code,
            )

        if not payload.get("success"):
            errors = _payload_errors(payload) or ["Export failed"]
            logger.warning("Export rejected: %s", errors)
            return ExportResult(success=False, errors=errors, status_code=response.status_code)

        return ExportResult(success=True, latex=payload.get("latex", ""), status_code=response.status_code)

    def get_health(self) -> Optional[HealthStatus]:
        """Return the service health, or None if it could not be reached."""
        payload = self._get_json("health")
        if not isinstance(payload, dict) or "status" not in payload:
            return None
        return HealthStatus(
            status=payload["status"],
            service=payload.get("service", ""),
            version=payload.get("version", ""),
        )

    def get_component_library(self) -> Optional[list[ComponentDefinition]]:
        """
        Return the service's component catalog, or None if unavailable.

        Entries the service describes only partially are completed from the
        local catalog; entries without a type are skipped.
        """
        payload = self._get_json("components")
        if isinstance(payload, dict):
            entries = payload.get("components")
        else:
            entries = payload
        if not isinstance(entries, list):
            return None

        definitions = [
            ComponentDefinition.from_dict(entry)
            for entry in entries
            if isinstance(entry, dict) and entry.get("type")
        ]
        definitions.sort(key=lambda d: d.component_type)
        return definitions

    def _get_json(self, path: str):
        try:
            response = self._get_session().get(self._url(path), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", path, e)
            return None
        if not response.ok:
            logger.warning("Request to %s returned HTTP %s", path, response.status_code)
            return None
        payload = _json_or_none(response)
        if payload is None:
            logger.warning("Request to %s returned a non-JSON body", path)
        return payload


def _json_or_none(response):
    try:
        return response.json()
    except ValueError:
        return None


def _payload_errors(payload) -> list[str]:
    if isinstance(payload, dict) and isinstance(payload.get("errors"), list):
        return [str(e) for e in payload["errors"]]
    return []
