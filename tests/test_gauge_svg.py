"""
tests/test_gauge_svg.py
───────────────────────
Tests for the SVG composition of gauge cards and badges.
"""
import base64

from circular_gauge.data.models import DashArc, GaugeBadgeConfig, GaugeCardConfig, GaugeStyle
from circular_gauge.geometry.arcs import build_arc
from circular_gauge.geometry.dash_arc import dash_pattern
from circular_gauge.layout.components.gauge_svg import (
    format_state,
    gauge_badge_svg,
    gauge_card_svg,
    ring_svg,
    state_font_size,
    state_margin,
    svg_data_uri,
)


def _fill(radius, start, end, max_angle=270.0):
    dasharray, dashoffset = dash_pattern(DashArc(start_angle=start, end_angle=end), radius, max_angle)
    return f'stroke-dasharray="{dasharray}" stroke-dashoffset="{dashoffset}"'


class TestTextSizing:
    def test_short_state_keeps_initial_size(self):
        assert state_font_size("12") == "25px"
        assert state_font_size("123") == "25px"

    def test_long_state_shrinks(self):
        assert state_font_size("1234") == "24px"
        assert state_font_size("12345", initial=20) == "18px"

    def test_margin_uses_innermost_ring(self):
        assert state_margin([(47, 6), (42, 4)]) == 76
        assert state_margin([(47, 6)]) == 82

    def test_format_state(self):
        assert format_state(42.0) == "42"
        assert format_state(42.26) == "42.3"
        assert format_state(42.257, decimals=2) == "42.26"

    def test_format_infinite_state(self):
        assert format_state(float("inf")) == "inf"


class TestRing:
    def test_fill_follows_value(self):
        svg = ring_svg(50, 0, 100)
        assert f'class="arc current" d="{build_arc(47, 0, 270)}"' in svg
        assert _fill(47, 0, 135) in svg
        assert 'class="arc background"' in svg

    def test_value_at_min_hides_fill(self):
        assert "arc current" not in ring_svg(0, 0, 100)

    def test_zero_start_fill(self):
        svg = ring_svg(-25, -50, 50, start_from_zero=True)
        assert _fill(47, 67.5, 135) in svg

    def test_needle(self, traffic_segments):
        svg = ring_svg(50, 0, 100, segments=traffic_segments, needle=True)
        assert 'class="needle"' in svg
        assert "rotate(135.000)" in svg
        assert "arc current" not in svg
        assert svg.count('class="segment"') == 3

    def test_segments_without_needle_not_drawn(self, traffic_segments):
        assert 'class="segment"' not in ring_svg(50, 0, 100, segments=traffic_segments)

    def test_accent_from_segments(self, traffic_segments):
        assert 'stroke="yellow"' in ring_svg(60, 0, 100, segments=traffic_segments)

    def test_explicit_foreground_color(self, traffic_segments):
        svg = ring_svg(60, 0, 100, segments=traffic_segments, foreground=GaugeStyle(color="#ff00ff"))
        assert 'stroke="#ff00ff"' in svg

    def test_adaptive_foreground_draws_segments(self, traffic_segments):
        svg = ring_svg(90, 0, 100, segments=traffic_segments, foreground=GaugeStyle(color="adaptive"))
        assert "arc current" not in svg
        assert svg.count('class="segment"') == 3

    def test_adaptive_foreground_clipped_to_fill(self, traffic_segments):
        svg = ring_svg(60, 0, 100, segments=traffic_segments, foreground=GaugeStyle(color="adaptive"))
        assert svg.count('class="segment"') == 2
        assert 'stroke="red"' not in svg

    def test_smooth_adaptive_background_rasterised(self, traffic_segments):
        svg = ring_svg(
            50, 0, 100, segments=traffic_segments, smooth=True, background=GaugeStyle(color="adaptive")
        )
        assert svg.count('class="segment"') == 90
        assert "rgb(" in svg


class TestCard:
    def test_rotated_group(self, card_config):
        assert 'transform="rotate(135)"' in gauge_card_svg(card_config, 40)

    def test_state_text(self, card_config):
        svg = gauge_card_svg(card_config, 40)
        assert ">40<tspan" in svg
        assert ">W</tspan>" in svg

    def test_half_gauge_viewbox(self):
        config = GaugeCardConfig(entity="sensor.temp", gauge_type="half")
        svg = gauge_card_svg(config, 20)
        assert 'viewBox="-50 -50 100 55"' in svg
        assert 'transform="rotate(180)"' in svg

    def test_inner_secondary_ring(self, card_config):
        secondary = {"entity": "sensor.temp", "show_gauge": "inner", "min": 10, "max": 30}
        config = GaugeCardConfig.model_validate({**card_config.model_dump(by_alias=True), "secondary": secondary})
        svg = gauge_card_svg(config, 40, secondary_value=20)
        assert svg.count('class="arc background"') == 2
        assert _fill(42, 0, 135) in svg

    def test_secondary_without_value_skipped(self, card_config):
        config = GaugeCardConfig.model_validate(
            {**card_config.model_dump(by_alias=True), "secondary": {"entity": "sensor.temp", "show_gauge": "inner"}}
        )
        assert gauge_card_svg(config, 40).count('class="arc background"') == 1

    def test_infinite_value_renders(self, card_config):
        svg = gauge_card_svg(card_config, float("inf"))
        assert _fill(47, 0, 270) in svg

    def test_timer_fallback_max(self):
        config = GaugeCardConfig(entity="timer.kitchen")
        svg = gauge_card_svg(config, 150, fallback_max=300)
        assert _fill(47, 0, 135) in svg

    def test_lookup_resolves_theme_colors(self, card_config, theme_lookup):
        svg = gauge_card_svg(card_config, 40, color_lookup=theme_lookup)
        assert "var(" not in svg
        assert 'stroke="#30363d"' in svg

    def test_without_lookup_keeps_css_variables(self, card_config):
        assert "var(--primary-background-color)" in gauge_card_svg(card_config, 40)


class TestBadge:
    def test_badge_text(self):
        badge = GaugeBadgeConfig(entity="sensor.humidity", unit="%")
        svg = gauge_badge_svg(badge, 55)
        assert ">55<tspan" in svg
        assert 'font-size="25px"' in svg

    def test_hidden_unit(self):
        badge = GaugeBadgeConfig(entity="sensor.humidity", unit="%", show_unit=False)
        assert "tspan" not in gauge_badge_svg(badge, 55)

    def test_decimals(self):
        badge = GaugeBadgeConfig(entity="sensor.humidity", decimals=1)
        assert ">55.0<" in gauge_badge_svg(badge, 55)

    def test_badge_ring_radius(self):
        svg = gauge_badge_svg(GaugeBadgeConfig(entity="sensor.humidity"), 50)
        assert _fill(42, 0, 135) in svg


class TestDataUri:
    def test_round_trip(self):
        svg = "<svg></svg>"
        uri = svg_data_uri(svg)
        assert uri.startswith("data:image/svg+xml;base64,")
        assert base64.b64decode(uri.split(",", 1)[1]).decode() == svg
