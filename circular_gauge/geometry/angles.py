"""
circular_gauge/geometry/angles.py
─────────────────────────────────
Value → angle mapping along a gauge sweep.

Angles are measured in degrees from the start of the sweep. The renderer
rotates the whole dial by `rotation_offset()` so the sweep is centred on the
bottom of the circle.
"""

from __future__ import annotations

import numpy as np

from config.gauge import GAUGE_TYPE_ANGLES, MAX_ANGLE


def map_value_to_angle(
    value: float,
    min_value: float,
    max_value: float,
    max_angle: float = MAX_ANGLE,
) -> float:
    """
    Angle of `value` along a sweep of `max_angle` degrees.

    The value is clamped into [min_value, max_value] first, so the result
    always lies in [0, max_angle]. A degenerate range (max <= min) maps
    every value to 0.
    """
    span = max_value - min_value
    if not span > 0:
        return 0.0
    clamped = float(np.clip(value, min_value, max_value))
    return (clamped - min_value) / span * max_angle


def gauge_angle(gauge_type: str | None) -> float:
    """Sweep of a gauge shape; unknown shapes use the standard 270°."""
    return GAUGE_TYPE_ANGLES.get(gauge_type or "standard", MAX_ANGLE)


def rotation_offset(max_angle: float = MAX_ANGLE) -> float:
    """Rotation that centres a sweep of `max_angle` on the bottom of the dial."""
    return 360.0 - max_angle / 2.0 - 90.0
