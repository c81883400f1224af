"""
circular_gauge/colors/segments.py
─────────────────────────────────
Segment color resolution.

Segments are thresholds: a segment applies from its `from` value up to the
next segment's `from`. Values below the lowest threshold take the lowest
segment's color.

Modes:
  discrete  color of the segment the value falls in
  smooth    sRGB blend between the bracketing thresholds' colors
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import lru_cache

import numpy as np

from circular_gauge.colors.parsing import format_color, interpolate_color, parse_color
from circular_gauge.data.models import Segment
from config.gauge import ADAPTIVE, DEFAULT_GAUGE_COLOR

_LOGGER = logging.getLogger(__name__)

ColorLookup = Callable[[str], str | None]
SegmentsInput = Iterable[Segment | Mapping] | None


@lru_cache(maxsize=128)
def _sorted_segments(segments: tuple[Segment, ...]) -> tuple[Segment, ...]:
    usable = [s for s in segments if s.from_ is not None]
    if len(usable) != len(segments):
        _LOGGER.debug("Dropped %d segment(s) without a numeric 'from'", len(segments) - len(usable))
    # a later-listed segment replaces an earlier one with the same threshold
    by_threshold = {s.from_: s for s in usable}
    return tuple(sorted(by_threshold.values(), key=lambda s: s.from_))


def canonical_segments(segments: SegmentsInput) -> tuple[Segment, ...]:
    """Segments with a numeric threshold, one per `from`, ascending."""
    if not segments:
        return ()
    parsed = tuple(
        s if isinstance(s, Segment) else Segment.model_validate(s)
        for s in segments
    )
    return _sorted_segments(parsed)


def segment_index(value: float, ordered: tuple[Segment, ...]) -> int:
    """
    Index of the segment `value` falls in.

    The last segment whose threshold is <= value wins; below every
    threshold the lowest segment is used.
    """
    thresholds = np.fromiter((s.from_ for s in ordered), dtype=float, count=len(ordered))
    return max(int(np.searchsorted(thresholds, value, side="right")) - 1, 0)


def resolve_segment_color(color: str, lookup: ColorLookup | None = None) -> str:
    """Resolve theme references ("adaptive", CSS variables) through `lookup`."""
    if color == ADAPTIVE or color.startswith("var("):
        resolved = lookup(color) if lookup else None
        if resolved:
            return resolved
        return DEFAULT_GAUGE_COLOR if color == ADAPTIVE else color
    return color


def resolve_color(
    value: float,
    segments: SegmentsInput,
    smooth: bool = False,
    adaptive_color_lookup: ColorLookup | None = None,
) -> str | None:
    """
    Color of `value` for a segment list.

    Args:
        value: Current (numeric, non-NaN) value
        segments: Unordered segments or segment mappings
        smooth: Blend between bracketing thresholds instead of banding
        adaptive_color_lookup: Resolves "adaptive" and CSS variable colors

    Returns:
        CSS color string, or None when there are no usable segments
        (callers then use their own default color).
    """
    ordered = canonical_segments(segments)
    if not ordered:
        return None

    index = segment_index(value, ordered)
    segment = ordered[index]
    color = resolve_segment_color(segment.color, adaptive_color_lookup)

    if not smooth or index == len(ordered) - 1 or value <= segment.from_:
        return color

    upper = ordered[index + 1]
    low = parse_color(color)
    high = parse_color(resolve_segment_color(upper.color, adaptive_color_lookup))
    if low is None or high is None:
        return color

    t = (value - segment.from_) / (upper.from_ - segment.from_)
    return format_color(interpolate_color(low, high, t))


def segment_label(value: float, segments: SegmentsInput) -> str:
    """Label of the segment `value` falls in ("" when unlabelled)."""
    ordered = canonical_segments(segments)
    if not ordered:
        return ""
    return ordered[segment_index(value, ordered)].label or ""
