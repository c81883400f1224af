"""
tests/test_arcs.py
──────────────────
Tests for SVG arc path construction.
"""
import re

from circular_gauge.geometry.arcs import arc_endpoint, build_arc

NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


class TestArcEndpoint:
    def test_zero_degrees_on_positive_x_axis(self):
        x, y = arc_endpoint(42, 0)
        assert (x, y) == (42.0, 0.0)

    def test_ninety_degrees_points_down(self):
        x, y = arc_endpoint(42, 90)
        assert abs(x) < 1e-9
        assert y == 42.0


class TestBuildArc:
    def test_quarter_arc(self):
        assert build_arc(42, 0, 90) == "M 42 0 A 42 42 0 0 1 0 42"

    def test_half_arc_uses_small_arc_flag(self):
        assert build_arc(42, 0, 180) == "M 42 0 A 42 42 0 0 1 -42 0"

    def test_large_arc_flag_above_180(self):
        assert build_arc(42, 0, 270) == "M 42 0 A 42 42 0 1 1 0 -42"

    def test_full_circle_split_into_two_halves(self):
        path = build_arc(42, 0, 360)
        assert path == "M 42 0 A 42 42 0 0 1 -42 0 A 42 42 0 0 1 42 0"
        assert path.count("A") == 2

    def test_sweep_beyond_full_turn_is_capped(self):
        assert build_arc(42, 0, 500) == build_arc(42, 0, 360)

    def test_zero_sweep_is_well_formed(self):
        path = build_arc(42, 30, 30)
        assert path.startswith("M ")
        assert path.count("A") == 1
        numbers = NUMBER.findall(path)
        # start point == end point
        assert numbers[0:2] == numbers[-2:]

    def test_reversed_angles_are_swapped(self):
        assert build_arc(42, 90, 0) == build_arc(42, 0, 90)

    def test_coordinates_rounded(self):
        path = build_arc(47, 0, 45)
        assert "33.234" in path
        for number in NUMBER.findall(path):
            decimals = number.split(".")[1] if "." in number else ""
            assert len(decimals) <= 3

    def test_custom_precision(self):
        assert "33.2 33.2" in build_arc(47, 0, 45, precision=1)

    def test_no_negative_zero(self):
        assert "-0 " not in build_arc(42, 0, 270) + " "

    def test_repeatable(self):
        assert build_arc(47, 12.3456, 201.789) == build_arc(47, 12.3456, 201.789)
