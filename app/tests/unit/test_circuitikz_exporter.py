"""Tests for services/circuitikz_exporter.py - local LaTeX generation."""

import pytest
from models.diagram import DiagramData
from services.circuitikz_exporter import (
    DOCUMENT_FOOTER,
    DOCUMENT_HEADER,
    CircuitikzExportError,
    export_diagram,
    generate,
)
from tests.conftest import make_component, make_connection


def _rc_diagram():
    return DiagramData(
        components=[
            make_component("comp_1", "resistor", (100, 100), label="R1"),
            make_component("comp_2", "capacitor", (200, 100), label="C1"),
        ],
        connections=[make_connection("conn_1", "comp_1", "right", "comp_2", "left")],
    )


RC_LATEX = (
    "\\begin{circuitikz}\n"
    "  \\draw (1.60,-2.00)\n"
    "    to[R, l=$R1$] (2.40,-2.00)\n"
    "    -- (3.60,-2.00);\n"
    "\\end{circuitikz}\n"
)


class TestGenerate:
    def test_rc_connection(self):
        assert generate(_rc_diagram()) == RC_LATEX

    def test_header_wraps_document(self):
        latex = generate(_rc_diagram(), include_header=True)
        assert latex == DOCUMENT_HEADER + RC_LATEX + DOCUMENT_FOOTER

    def test_zero_scale_uses_default(self):
        assert generate(_rc_diagram(), scale=0) == RC_LATEX

    def test_custom_scale(self):
        latex = generate(_rc_diagram(), scale=100)
        assert "to[R, l=$R1$] (1.20,-1.00)" in latex

    def test_node_target(self):
        diagram = DiagramData(
            components=[
                make_component("comp_1", "resistor", (100, 100), value="10k"),
                make_component("comp_2", "ground", (100, 200)),
            ],
            connections=[make_connection("conn_1", "comp_1", "bottom", "comp_2", "top")],
        )
        assert generate(diagram) == (
            "\\begin{circuitikz}\n"
            "  \\draw (2.00,-1.60)\n"
            "    to[R, l=$10k$] (2.00,-2.40)\n"
            "    -- (2.00,-3.60) node[ground] {};\n"
            "\\end{circuitikz}\n"
        )

    def test_waypoints(self):
        diagram = _rc_diagram()
        diagram.connections[0].waypoints.append((150, 50))
        assert "(2.40,-2.00)\n    -- (3.00,-1.00)\n    -- (3.60,-2.00);" in generate(diagram)

    def test_standalone_components(self):
        diagram = DiagramData(
            components=[
                make_component("comp_1", "resistor", (100, 100), label="R1"),
                make_component("comp_2", "ground", (0, 0)),
            ]
        )
        assert generate(diagram) == (
            "\\begin{circuitikz}\n"
            "  \\draw (2.00,-2.00) node[R] {$R1$};\n"
            "  \\draw (0.00,0.00) node[ground] {};\n"
            "\\end{circuitikz}\n"
        )

    def test_unconnected_components_follow_connections(self):
        diagram = _rc_diagram()
        diagram.components.append(make_component("comp_3", "led", (300, 300), label="D1"))
        latex = generate(diagram)
        assert latex.index("to[R") < latex.index("node[leDo] {$D1$}")

    def test_tikz_names(self):
        diagram = DiagramData(components=[make_component("comp_1", "opamp", (50, 50))])
        assert "node[op amp] {}" in generate(diagram)

    def test_empty_diagram(self):
        with pytest.raises(CircuitikzExportError, match="at least one component"):
            generate(DiagramData())

    def test_missing_component(self):
        diagram = _rc_diagram()
        diagram.components.pop()
        with pytest.raises(CircuitikzExportError, match="conn_1"):
            generate(diagram)


class TestExportDiagram:
    def test_success(self):
        result = export_diagram(_rc_diagram())
        assert result.success
        assert result.latex == RC_LATEX

    def test_failure_is_reported(self):
        result = export_diagram(DiagramData())
        assert not result.success
        assert result.errors == ["diagram must contain at least one component"]
