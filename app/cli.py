"""
Command-line interface for diagram export operations.

Check the export service, list its component library, validate diagram
files, and convert diagrams to CircuiTikZ without the editor.

Usage::

    python -m cli health
    python -m cli components
    python -m cli validate diagram.json
    python -m cli export diagram.json --output diagram.tex
    python -m cli export diagram.json --local --include-header
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from models.diagram import DiagramData, validate_diagram_data
from services.api_client import ExportClient
from services.circuitikz_exporter import export_diagram
from settings.editor_settings import SettingsStore

__version__ = "1.0.0"


def try_load_diagram(filepath: str) -> tuple[DiagramData | None, str]:
    """Load and validate a diagram JSON file without exiting.

    Args:
        filepath: Path to the diagram JSON file.

    Returns:
        (diagram, "") on success, or (None, error_message) on failure.
    """
    path = Path(filepath)
    if not path.exists():
        return None, f"file not found: {filepath}"

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return None, f"invalid JSON in {filepath}: {e}"

    try:
        validate_diagram_data(data)
        diagram = DiagramData.from_dict(data)
    except (ValueError, KeyError, TypeError) as e:
        return None, f"invalid diagram file: {e}"

    return diagram, ""


def load_diagram(filepath: str) -> DiagramData:
    """Load and validate a diagram JSON file.

    Raises:
        SystemExit: On file read or validation errors.
    """
    diagram, error = try_load_diagram(filepath)
    if diagram is None:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    return diagram


def _settings(args: argparse.Namespace) -> SettingsStore:
    return SettingsStore(config_path=args.config) if args.config else SettingsStore()


def _client(args: argparse.Namespace, settings: SettingsStore | None = None) -> ExportClient:
    client = ExportClient.from_settings(settings or _settings(args))
    if args.api_url:
        client.base_url = args.api_url.rstrip("/")
    return client


def cmd_health(args: argparse.Namespace) -> int:
    """Report the export service status."""
    client = _client(args)
    health = client.get_health()
    if health is None:
        print(f"Export service unreachable at {client.base_url}", file=sys.stderr)
        return 1
    print(f"{health.service or 'export service'} {health.version}: {health.status}")
    return 0 if health.ok else 1


def cmd_components(args: argparse.Namespace) -> int:
    """List the component library published by the export service."""
    definitions = _client(args).get_component_library()
    if definitions is None:
        print("Could not fetch the component library", file=sys.stderr)
        return 1

    print(f"{'Type':<12} {'Category':<14} {'TikZ':<10} {'Name'}")
    print("-" * 60)
    for d in definitions:
        print(f"{d.component_type:<12} {d.category:<14} {d.tikz:<10} {d.name}")
    print(f"\n{len(definitions)} components")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Check a diagram file's structure and references."""
    diagram, error = try_load_diagram(args.diagram)
    if diagram is None:
        print(f"Diagram has errors: {error}", file=sys.stderr)
        return 1
    print(
        f"Diagram is valid: {args.diagram} "
        f"({len(diagram.components)} components, {len(diagram.connections)} connections)"
    )
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Convert a diagram file to CircuiTikZ LaTeX."""
    diagram = load_diagram(args.diagram)
    settings = _settings(args)
    # Flags given on the command line win over the settings file
    include_header = settings.include_header if args.include_header is None else args.include_header
    scale = settings.export_scale if args.scale is None else args.scale

    if args.local:
        result = export_diagram(diagram, include_header=include_header, scale=scale)
    else:
        result = _client(args, settings).export_to_latex(diagram, include_header=include_header, scale=scale)

    if not result.success:
        print("Export failed:", file=sys.stderr)
        for err in result.errors:
            print(f"  - {err}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(result.latex)
        print(f"LaTeX written to {args.output}", file=sys.stderr)
    else:
        print(result.latex, end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="circuit-diagram-cli",
        description="Circuit diagram export operations from the command line.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--api-url", help="Export service URL (overrides the settings file)")
    parser.add_argument("--config", help="Settings JSON file (default: ~/.circuit-diagram-editor/settings.json)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("health", help="Check the export service")
    subparsers.add_parser("components", help="List the service's component library")

    val_parser = subparsers.add_parser("validate", help="Check a diagram file for errors")
    val_parser.add_argument("diagram", help="Path to diagram JSON file")

    exp_parser = subparsers.add_parser("export", help="Convert a diagram to CircuiTikZ LaTeX")
    exp_parser.add_argument("diagram", help="Path to diagram JSON file")
    exp_parser.add_argument("--output", "-o", help="Write LaTeX to file instead of stdout")
    exp_parser.add_argument(
        "--include-header",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit a complete LaTeX document (default: from settings)",
    )
    exp_parser.add_argument(
        "--scale", type=float, default=None, help="Diagram units per TikZ unit (default: from settings, 50)"
    )
    exp_parser.add_argument("--local", action="store_true", help="Generate LaTeX locally instead of calling the service")

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    handlers = {
        "health": cmd_health,
        "components": cmd_components,
        "validate": cmd_validate,
        "export": cmd_export,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
