"""
circular_gauge/colors/render.py
───────────────────────────────
Colored segment bands drawn behind (or instead of) the gauge fill.

Each usable segment owns the band from its threshold to the next one,
clipped to [min, max]:
  - bands entirely outside the range are dropped
  - the first band is stretched down to `min` (values below the lowest
    threshold take its color) and the last band runs up to `max`
Discrete mode returns one arc slice per band; smooth mode returns a single
full-sweep arc with gradient stops at the band boundaries.
"""

from __future__ import annotations

import math

import numpy as np

from circular_gauge.colors.parsing import format_color, interpolate_color, parse_color
from circular_gauge.colors.segments import (
    ColorLookup,
    SegmentsInput,
    canonical_segments,
    resolve_color,
    resolve_segment_color,
)
from circular_gauge.data.models import ColoredArcSlice, GradientArc, GradientStop, Segment
from circular_gauge.geometry.angles import map_value_to_angle
from circular_gauge.geometry.arcs import build_arc
from config.gauge import MAX_ANGLE


def _bands(
    ordered: tuple[Segment, ...],
    min_value: float,
    max_value: float,
) -> list[tuple[Segment, float, float]]:
    """(segment, start, end) for every segment band overlapping the range."""
    bands = []
    for i, segment in enumerate(ordered):
        low = segment.from_
        high = ordered[i + 1].from_ if i + 1 < len(ordered) else math.inf
        if high <= min_value or low >= max_value:
            continue
        bands.append((segment, max(low, min_value), min(high, max_value)))
    if bands:
        first, _, end = bands[0]
        bands[0] = (first, min_value, end)
    return bands


def render_segments(
    segments: SegmentsInput,
    min_value: float,
    max_value: float,
    radius: float,
    smooth: bool = False,
    max_angle: float = MAX_ANGLE,
    adaptive_color_lookup: ColorLookup | None = None,
) -> list[ColoredArcSlice] | GradientArc:
    """
    Segment visualisation for one ring.

    Args:
        segments: Unordered segments or segment mappings
        min_value: Lower end of the gauge range
        max_value: Upper end of the gauge range
        radius: Ring radius
        smooth: Gradient instead of discrete bands
        max_angle: Sweep of the gauge shape in degrees
        adaptive_color_lookup: Resolves "adaptive" and CSS variable colors

    Returns:
        List of arc slices (a single full-sweep slice when at most one band
        is in range, colored None without usable segments), or a
        GradientArc in smooth mode.
    """
    ordered = canonical_segments(segments)
    full_path = build_arc(radius, 0.0, max_angle)
    bands = _bands(ordered, min_value, max_value) if max_value > min_value else []

    if len(bands) <= 1:
        segment = bands[0][0] if bands else None
        color = resolve_color(min_value, ordered, adaptive_color_lookup=adaptive_color_lookup)
        return [
            ColoredArcSlice(
                path=full_path,
                start_angle=0.0,
                end_angle=max_angle,
                color=color,
                label=segment.label if segment else None,
            )
        ]

    if smooth:
        span = max_value - min_value
        stops = [
            GradientStop(
                offset=(max(segment.from_, min_value) - min_value) / span,
                color=resolve_segment_color(segment.color, adaptive_color_lookup),
            )
            for segment, _, _ in bands
        ]
        return GradientArc(path=full_path, stops=tuple(stops))

    slices = []
    for segment, start, end in bands:
        start_angle = map_value_to_angle(start, min_value, max_value, max_angle)
        end_angle = map_value_to_angle(end, min_value, max_value, max_angle)
        slices.append(
            ColoredArcSlice(
                path=build_arc(radius, start_angle, end_angle),
                start_angle=start_angle,
                end_angle=end_angle,
                color=resolve_color(start, ordered, adaptive_color_lookup=adaptive_color_lookup),
                label=segment.label,
            )
        )
    return slices


def gradient_color(arc: GradientArc, offset: float) -> str:
    """Color of a gradient arc at `offset` (0 to 1 along the sweep)."""
    stops = arc.stops
    offsets = np.fromiter((s.offset for s in stops), dtype=float, count=len(stops))
    index = max(int(np.searchsorted(offsets, offset, side="right")) - 1, 0)
    stop = stops[index]
    if index == len(stops) - 1 or offset <= stop.offset:
        return stop.color

    upper = stops[index + 1]
    low, high = parse_color(stop.color), parse_color(upper.color)
    if low is None or high is None:
        return stop.color
    t = (offset - stop.offset) / (upper.offset - stop.offset)
    return format_color(interpolate_color(low, high, t))
