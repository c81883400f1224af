"""
tests/test_colors.py
────────────────────
Tests for the CSS color codec.
"""
from circular_gauge.colors.parsing import format_color, interpolate_color, parse_color


class TestParseColor:
    def test_named(self):
        assert parse_color("red") == (255, 0, 0)
        assert parse_color("green") == (0, 128, 0)

    def test_named_case_insensitive(self):
        assert parse_color("Yellow") == (255, 255, 0)

    def test_hex(self):
        assert parse_color("#4caf50") == (76, 175, 80)

    def test_rgb_function(self):
        assert parse_color("rgb(10, 20, 30)") == (10, 20, 30)

    def test_rgba_ignores_alpha(self):
        assert parse_color("rgba(10,20,30,0.5)") == (10, 20, 30)

    def test_theme_references_are_not_colors(self):
        assert parse_color("var(--primary-color)") is None
        assert parse_color("adaptive") is None

    def test_unknown(self):
        assert parse_color("not-a-color") is None
        assert parse_color("") is None
        assert parse_color(None) is None


class TestInterpolateColor:
    def test_midpoint_rounds_half_up(self):
        assert interpolate_color((0, 0, 0), (255, 255, 255), 0.5) == (128, 128, 128)

    def test_endpoints(self):
        assert interpolate_color((10, 20, 30), (200, 100, 0), 0.0) == (10, 20, 30)
        assert interpolate_color((10, 20, 30), (200, 100, 0), 1.0) == (200, 100, 0)

    def test_t_is_clamped(self):
        assert interpolate_color((0, 0, 0), (100, 100, 100), 2.0) == (100, 100, 100)
        assert interpolate_color((0, 0, 0), (100, 100, 100), -1.0) == (0, 0, 0)


class TestFormatColor:
    def test_rgb_label(self):
        assert format_color((1, 2, 3)) == "rgb(1, 2, 3)"
