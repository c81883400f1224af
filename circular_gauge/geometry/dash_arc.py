"""
circular_gauge/geometry/dash_arc.py
───────────────────────────────────
Filled ("current value") arc of a gauge.

The fill runs from the origin of the range to the current value:
  - normally the origin is `min`
  - with start_from_zero and 0 inside [min, max] the origin is 0, so a
    bipolar gauge (-50…+50) fills outward from the centre
Needle gauges draw a pointer instead and get no fill.
"""

from __future__ import annotations

import math

from circular_gauge.data.models import DashArc
from circular_gauge.geometry.angles import map_value_to_angle
from config.gauge import MAX_ANGLE


def is_fill_hidden(value: float, min_value: float) -> bool:
    """A value at or below a non-negative minimum leaves the gauge empty."""
    return value <= min_value and min_value >= 0


def compute_current_arc(
    value: float,
    min_value: float,
    max_value: float,
    start_from_zero: bool = False,
    needle: bool = False,
    max_angle: float = MAX_ANGLE,
) -> DashArc | None:
    """
    Angular extent of the fill for `value`.

    Returns None when nothing should be drawn: needle mode, or a value at or
    below a non-negative minimum. The returned arc always has
    start_angle <= end_angle.
    """
    if needle or is_fill_hidden(value, min_value):
        return None

    if start_from_zero and min_value <= 0 <= max_value:
        start = map_value_to_angle(0, min_value, max_value, max_angle)
    else:
        start = map_value_to_angle(min_value, min_value, max_value, max_angle)
    end = map_value_to_angle(value, min_value, max_value, max_angle)

    if end < start:
        start, end = end, start
    return DashArc(start_angle=start, end_angle=end)


def dash_pattern(
    arc: DashArc,
    radius: float,
    max_angle: float = MAX_ANGLE,
) -> tuple[str, str]:
    """
    (stroke-dasharray, stroke-dashoffset) drawing `arc` on the full sweep path.

    The dash is as long as the fill; the gap covers the rest of the sweep and
    the negative offset slides the dash forward to `arc.start_angle`.
    """
    degree = math.pi * radius / 180.0
    total = max_angle * degree
    dash = arc.sweep * degree
    offset = -arc.start_angle * degree
    return f"{dash:.3f} {total:.3f}", f"{offset + 0.0:.3f}"
