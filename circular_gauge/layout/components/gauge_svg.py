"""
circular_gauge/layout/components/gauge_svg.py
──────────────────────────────────────────────
SVG markup for gauge cards and badges.

A ring is drawn in layers, inside a group rotated so the sweep is centred
on the bottom of the dial:
  1. background arc
  2. segment bands (needle gauges, or an "adaptive" background)
  3. value fill: an accent-colored dash along the sweep path, or
     segment-colored arcs when the foreground color is "adaptive"
  4. needle marker
Smooth segment gradients are drawn as thin slices colored from the
gradient stops, since SVG has no conic gradient.
"""
from __future__ import annotations

import base64
import math
from collections.abc import Callable
from html import escape

from circular_gauge.colors.render import gradient_color, render_segments
from circular_gauge.colors.segments import (
    ColorLookup,
    SegmentsInput,
    resolve_color,
    resolve_segment_color,
)
from circular_gauge.data.entity_state import resolve_range
from circular_gauge.data.models import (
    GaugeBadgeConfig,
    GaugeCardConfig,
    GaugeStyle,
    GradientArc,
    RingConfig,
)
from circular_gauge.geometry.angles import gauge_angle, map_value_to_angle, rotation_offset
from circular_gauge.geometry.arcs import build_arc
from circular_gauge.geometry.dash_arc import compute_current_arc, dash_pattern
from config.gauge import (
    ADAPTIVE,
    BADGE_RADIUS,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_GAUGE_COLOR,
    INNER_RADIUS,
    INNER_STROKE_WIDTH,
    MAX_ANGLE,
    RADIUS,
    STROKE_WIDTH,
    TERTIARY_RADIUS,
)

# Angular width of one slice when rasterising a smooth gradient
GRADIENT_STEP = 3.0
BADGE_NEEDLE_RADIUS = 7.0


def state_font_size(text: str, initial: int = 25) -> str:
    """Badge state font size: shrinks 1px per character beyond three."""
    if len(text) >= 4:
        return f"{initial - (len(text) - 3)}px"
    return f"{initial}px"


def state_margin(rings: list[tuple[float, float]]) -> float:
    """
    Diameter left for the centred state text.

    Args:
        rings: (radius, stroke_width) of every rendered ring

    Returns:
        (radius - width) * 2 of the innermost ring
    """
    radius, width = min(rings, key=lambda ring: ring[0])
    return (radius - width) * 2


def format_state(value: float, decimals: int | None = None) -> str:
    if decimals is not None:
        return f"{value:.{decimals}f}"
    if not math.isfinite(value):
        return str(value)
    if value == int(value):
        return str(int(value))
    return f"{value:.1f}"


def _theme(color: str | None, lookup: ColorLookup | None, default: str) -> str:
    return resolve_segment_color(color or default, lookup)


def _arc(
    d: str,
    stroke: str,
    width: float,
    opacity: float | None = None,
    css_class: str = "arc",
    dash: tuple[str, str] | None = None,
) -> str:
    extra = f' stroke-opacity="{opacity}"' if opacity is not None else ""
    if dash:
        extra += f' stroke-dasharray="{dash[0]}" stroke-dashoffset="{dash[1]}"'
    return (
        f'<path class="{css_class}" d="{d}" fill="none" stroke="{escape(stroke)}" '
        f'stroke-width="{width:g}" stroke-linecap="round"{extra}/>'
    )


def _segment_arcs(
    segments: SegmentsInput,
    min_value: float,
    max_value: float,
    radius: float,
    width: float,
    smooth: bool,
    max_angle: float,
    lookup: ColorLookup | None,
    window: tuple[float, float] | None = None,
    opacity: float | None = None,
) -> list[str]:
    """Segment bands, optionally restricted to an angular window."""
    start, end = window or (0.0, max_angle)
    if end <= start:
        return []
    rendered = render_segments(segments, min_value, max_value, radius, smooth, max_angle, lookup)

    if isinstance(rendered, GradientArc):
        count = max(1, math.ceil((end - start) / GRADIENT_STEP))
        step = (end - start) / count
        parts = []
        for i in range(count):
            a0 = start + i * step
            color = _theme(gradient_color(rendered, (a0 + step / 2) / max_angle), lookup, DEFAULT_GAUGE_COLOR)
            parts.append(_arc(build_arc(radius, a0, a0 + step), color, width, opacity, "segment"))
        return parts

    parts = []
    for piece in rendered:
        a0, a1 = max(piece.start_angle, start), min(piece.end_angle, end)
        if a1 <= a0:
            continue
        path = piece.path if (a0, a1) == (piece.start_angle, piece.end_angle) else build_arc(radius, a0, a1)
        color = _theme(piece.color, lookup, DEFAULT_GAUGE_COLOR)
        parts.append(_arc(path, color, width, opacity, "segment"))
    return parts


def ring_svg(
    value: float,
    min_value: float,
    max_value: float,
    radius: float = RADIUS,
    segments: SegmentsInput = None,
    smooth: bool = False,
    needle: bool = False,
    start_from_zero: bool = False,
    max_angle: float = MAX_ANGLE,
    foreground: GaugeStyle | None = None,
    background: GaugeStyle | None = None,
    default_width: float = STROKE_WIDTH,
    needle_radius: float | None = None,
    color_lookup: ColorLookup | None = None,
) -> str:
    """One gauge ring (background, segments, fill, needle) as an SVG group."""
    foreground = foreground or GaugeStyle()
    background = background or GaugeStyle()
    fg_width = foreground.width or default_width
    bg_width = background.width or fg_width

    if foreground.color and foreground.color != ADAPTIVE:
        accent = _theme(foreground.color, color_lookup, DEFAULT_GAUGE_COLOR)
    else:
        accent = _theme(
            resolve_color(value, segments, smooth, color_lookup), color_lookup, DEFAULT_GAUGE_COLOR
        )

    bg_color = background.color if background.color != ADAPTIVE else None
    parts = [
        _arc(
            build_arc(radius, 0.0, max_angle),
            _theme(bg_color, color_lookup, DEFAULT_BACKGROUND_COLOR),
            bg_width,
            background.opacity,
            "arc background",
        )
    ]

    if segments and (needle or background.color == ADAPTIVE):
        parts += _segment_arcs(
            segments, min_value, max_value, radius, bg_width, smooth, max_angle, color_lookup,
            opacity=background.opacity,
        )

    current = compute_current_arc(value, min_value, max_value, start_from_zero, needle, max_angle)
    if current is not None and current.sweep > 0:
        if foreground.color == ADAPTIVE and segments:
            parts += _segment_arcs(
                segments, min_value, max_value, radius, fg_width, smooth, max_angle, color_lookup,
                window=(current.start_angle, current.end_angle), opacity=foreground.opacity,
            )
        else:
            # the fill is a dash along the full sweep path
            parts.append(
                _arc(
                    build_arc(radius, 0.0, max_angle),
                    accent, fg_width, foreground.opacity, "arc current",
                    dash=dash_pattern(current, radius, max_angle),
                )
            )

    if needle:
        angle = map_value_to_angle(value, min_value, max_value, max_angle)
        r = needle_radius if needle_radius is not None else fg_width / 2 + 1
        parts.append(
            f'<circle class="needle" cx="{radius:g}" cy="0" r="{r:g}" fill="{escape(accent)}" '
            f'transform="rotate({angle:.3f})"/>'
        )

    return "<g>" + "".join(parts) + "</g>"


def _state_text(text: str, unit: str, font_size: str, color: str, y: float = 0.0) -> str:
    unit_span = f'<tspan class="unit" font-size="60%" dx="1">{escape(unit)}</tspan>' if unit else ""
    return (
        f'<text x="0" y="{y:g}" text-anchor="middle" dominant-baseline="middle" '
        f'font-size="{font_size}" fill="{escape(color)}">{escape(text)}{unit_span}</text>'
    )


def _svg(body: str, view_box: str) -> str:
    return f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}">{body}</svg>'


def _ring_from_config(
    ring: RingConfig,
    value: float | None,
    radius: float,
    gauge_max_angle: float,
    smooth: bool,
    color_lookup: ColorLookup | None,
) -> tuple[str, float] | None:
    if value is None or ring.show_gauge != "inner":
        return None
    min_value, max_value = resolve_range(ring.min, ring.max)
    width = ring.gauge_foreground_style.width or INNER_STROKE_WIDTH
    svg = ring_svg(
        value, min_value, max_value,
        radius=ring.gauge_radius or radius,
        segments=ring.segments,
        smooth=smooth,
        needle=ring.needle,
        start_from_zero=ring.start_from_zero,
        max_angle=gauge_max_angle,
        foreground=ring.gauge_foreground_style,
        background=ring.gauge_background_style,
        default_width=INNER_STROKE_WIDTH,
        color_lookup=color_lookup,
    )
    return svg, width


def gauge_card_svg(
    config: GaugeCardConfig,
    value: float,
    secondary_value: float | None = None,
    tertiary_value: float | None = None,
    fallback_max: float | None = None,
    color_lookup: ColorLookup | None = None,
) -> str:
    """
    Full card gauge: main ring plus optional inner secondary / tertiary rings.

    Args:
        config: Validated card configuration
        value: Numeric value of the main entity
        secondary_value: Value of the secondary entity (inner ring)
        tertiary_value: Value of the tertiary entity (innermost ring)
        fallback_max: Default max when none is configured (timer duration)
        color_lookup: Resolves "adaptive" and CSS variable colors
    """
    max_angle = gauge_angle(config.gauge_type)
    min_value, max_value = resolve_range(config.min, config.max, fallback_max)
    radius = config.gauge_radius or RADIUS

    inner_rings: list[tuple[str, float, float]] = []
    secondary_inner = False
    if isinstance(config.secondary, RingConfig):
        ring_radius = config.secondary.gauge_radius or INNER_RADIUS
        drawn = _ring_from_config(
            config.secondary, secondary_value, ring_radius, max_angle, config.smooth_segments, color_lookup
        )
        if drawn:
            secondary_inner = True
            inner_rings.append((drawn[0], ring_radius, drawn[1]))
    if isinstance(config.tertiary, RingConfig):
        ring_radius = config.tertiary.gauge_radius or (TERTIARY_RADIUS if secondary_inner else INNER_RADIUS)
        drawn = _ring_from_config(
            config.tertiary, tertiary_value, ring_radius, max_angle, config.smooth_segments, color_lookup
        )
        if drawn:
            inner_rings.append((drawn[0], ring_radius, drawn[1]))

    main_width = config.gauge_foreground_style.width or (
        INNER_STROKE_WIDTH if len(inner_rings) > 1 else STROKE_WIDTH
    )
    main = ring_svg(
        value, min_value, max_value,
        radius=radius,
        segments=config.segments,
        smooth=config.smooth_segments,
        needle=config.needle,
        start_from_zero=config.start_from_zero,
        max_angle=max_angle,
        foreground=config.gauge_foreground_style,
        background=config.gauge_background_style,
        default_width=main_width,
        color_lookup=color_lookup,
    )

    body = f'<g transform="rotate({rotation_offset(max_angle):g})">{main}'
    body += "".join(svg for svg, _, _ in inner_rings) + "</g>"

    if config.show_state:
        margin = state_margin([(radius, main_width)] + [(r, w) for _, r, w in inner_rings])
        text_color = _theme("var(--primary-text-color)", color_lookup, DEFAULT_GAUGE_COLOR)
        y = -margin / 8 if config.gauge_type == "half" else 0.0
        body += _state_text(
            format_state(value), config.unit or "", f"{margin / 3.5:.1f}px", text_color, y
        )

    view_box = "-50 -50 100 55" if config.gauge_type == "half" else "-50 -50 100 100"
    return _svg(body, view_box)


def gauge_badge_svg(
    config: GaugeBadgeConfig,
    value: float,
    color_lookup: ColorLookup | None = None,
) -> str:
    """Compact badge gauge: one 270° ring with the state in the middle."""
    min_value, max_value = resolve_range(config.min, config.max)
    fg = config.gauge_foreground_style
    needle_radius = fg.width / 2 if fg.width else BADGE_NEEDLE_RADIUS
    ring = ring_svg(
        value, min_value, max_value,
        radius=BADGE_RADIUS,
        segments=config.segments,
        smooth=config.smooth_segments,
        needle=config.needle,
        start_from_zero=config.start_from_zero,
        max_angle=MAX_ANGLE,
        foreground=fg,
        background=config.gauge_background_style,
        default_width=STROKE_WIDTH * 2,
        needle_radius=needle_radius,
        color_lookup=color_lookup,
    )
    body = f'<g transform="rotate({rotation_offset(MAX_ANGLE):g})">{ring}</g>'
    if config.show_state:
        text = format_state(value, config.decimals)
        unit = (config.unit or "") if config.show_unit else ""
        text_color = _theme("var(--primary-text-color)", color_lookup, DEFAULT_GAUGE_COLOR)
        body += _state_text(text, unit, state_font_size(text), text_color)
    return _svg(body, "-50 -50 100 100")


def svg_data_uri(svg: str) -> str:
    """data: URI for embedding SVG markup in an <img>."""
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def mapping_lookup(colors: dict[str, str]) -> Callable[[str], str | None]:
    """Color lookup backed by a plain dict of theme references."""
    return colors.get
