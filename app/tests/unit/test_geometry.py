"""Tests for models/geometry.py - snapping, port positions and wire paths."""

import pytest
from models.geometry import (
    flatten_points,
    opposite_port,
    port_position,
    resolve_wire_path,
    snap_point,
    snap_to_grid,
    wire_path,
)
from tests.conftest import make_component, make_connection


class TestSnapToGrid:
    @pytest.mark.parametrize(
        "value, expected",
        [(0, 0), (24, 0), (25, 50), (26, 50), (74, 50), (75, 100), (-24, 0), (-26, -50), (-25, 0)],
    )
    def test_rounds_to_nearest_line(self, value, expected):
        assert snap_to_grid(value, 50) == expected

    @pytest.mark.parametrize("value", [-1234.5, -25, -0.1, 0, 3.3, 49.999, 125, 9876.54])
    @pytest.mark.parametrize("grid", [10, 20, 50])
    def test_idempotent_and_on_grid(self, value, grid):
        once = snap_to_grid(value, grid)
        assert snap_to_grid(once, grid) == once
        assert once % grid == 0

    def test_non_positive_grid_disables_snapping(self):
        assert snap_to_grid(33.3, 0) == 33.3
        assert snap_to_grid(33.3, -10) == 33.3

    def test_snap_point_axes_independent(self):
        assert snap_point((26, 74), 50) == (50, 50)
        assert snap_point((124, 126), 50) == (100, 150)


class TestPortPosition:
    @pytest.mark.parametrize(
        "position, expected",
        [("left", (80, 100)), ("right", (120, 100)), ("top", (100, 80)), ("bottom", (100, 120))],
    )
    def test_offsets_along_world_axes(self, position, expected):
        comp = make_component("comp_1", position=(100, 100))
        assert port_position(comp, position) == expected

    def test_rotation_ignored_by_default(self):
        comp = make_component("comp_1", position=(100, 100), rotation=90)
        assert port_position(comp, "right") == (120, 100)

    @pytest.mark.parametrize(
        "rotation, expected",
        [(0, (120, 100)), (90, (100, 120)), (180, (80, 100)), (270, (100, 80))],
    )
    def test_follow_rotation_turns_clockwise(self, rotation, expected):
        comp = make_component("comp_1", position=(100, 100), rotation=rotation)
        assert port_position(comp, "right", follow_rotation=True) == expected

    def test_custom_offset(self):
        comp = make_component("comp_1", position=(0, 0))
        assert port_position(comp, "bottom", offset=30) == (0, 30)

    def test_opposite_port(self):
        assert opposite_port("left") == "right"
        assert opposite_port("right") == "left"
        assert opposite_port("top") == "bottom"
        assert opposite_port("bottom") == "top"


class TestWirePath:
    def test_straight_segment_without_waypoints(self):
        conn = make_connection("conn_1", "comp_1", "right", "comp_2", "left")
        assert wire_path(conn, (0, 0), (100, 0)) == [(0, 0), (100, 0)]

    def test_waypoints_in_order(self):
        conn = make_connection("conn_1", "comp_1", "right", "comp_2", "left", [(50, 0), (50, 100)])
        assert wire_path(conn, (0, 0), (100, 100)) == [(0, 0), (50, 0), (50, 100), (100, 100)]

    def test_resolve_from_components(self):
        components = {
            "comp_1": make_component("comp_1", position=(100, 100)),
            "comp_2": make_component("comp_2", "capacitor", (200, 100)),
        }
        conn = make_connection("conn_1", "comp_1", "right", "comp_2", "left")
        assert resolve_wire_path(conn, components) == [(120, 100), (180, 100)]

    def test_resolve_missing_endpoint(self):
        components = {"comp_1": make_component("comp_1")}
        conn = make_connection("conn_1", "comp_1", "right", "comp_2", "left")
        assert resolve_wire_path(conn, components) is None

    def test_flatten_points(self):
        assert flatten_points([(1, 2), (3, 4)]) == [1, 2, 3, 4]
