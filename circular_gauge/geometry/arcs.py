"""
circular_gauge/geometry/arcs.py
───────────────────────────────
SVG arc path construction around the local origin (0, 0).

Angles grow clockwise in SVG screen coordinates (y points down), and every
arc is emitted with sweep-flag 1. A 360° sweep cannot be expressed by one
elliptical-arc command (start and end coincide), so it is split into two
half-circle commands.
"""

from __future__ import annotations

import math

import numpy as np

from config.settings import settings

FULL_CIRCLE = 360.0


def _fmt(number: float, precision: int) -> str:
    # + 0.0 folds -0.0 into 0.0
    rounded = round(number, precision) + 0.0
    return np.format_float_positional(rounded, precision=precision, trim="-")


def arc_endpoint(radius: float, angle: float) -> tuple[float, float]:
    """Point on the circle of `radius` at `angle` degrees."""
    rad = math.radians(angle)
    return radius * math.cos(rad), radius * math.sin(rad)


def build_arc(
    radius: float,
    start_angle: float,
    end_angle: float,
    precision: int | None = None,
) -> str:
    """
    SVG path data for a clockwise arc from `start_angle` to `end_angle`.

    Reversed angles are swapped and sweeps beyond a full turn are capped at
    360°. A zero sweep yields a zero-length arc (renders nothing but is a
    valid path).

    Args:
        radius: Arc radius in user units
        start_angle: Start of the arc in degrees
        end_angle: End of the arc in degrees
        precision: Decimal places of emitted coordinates
                   (defaults to settings.ARC_PRECISION)
    """
    if precision is None:
        precision = settings.ARC_PRECISION
    if end_angle < start_angle:
        start_angle, end_angle = end_angle, start_angle
    sweep = min(end_angle - start_angle, FULL_CIRCLE)

    r = _fmt(abs(radius), precision)
    x0, y0 = arc_endpoint(radius, start_angle)
    move = f"M {_fmt(x0, precision)} {_fmt(y0, precision)}"

    if sweep >= FULL_CIRCLE:
        xm, ym = arc_endpoint(radius, start_angle + FULL_CIRCLE / 2)
        return (
            f"{move} "
            f"A {r} {r} 0 0 1 {_fmt(xm, precision)} {_fmt(ym, precision)} "
            f"A {r} {r} 0 0 1 {_fmt(x0, precision)} {_fmt(y0, precision)}"
        )

    large_arc = 1 if sweep > 180.0 else 0
    x1, y1 = arc_endpoint(radius, start_angle + sweep)
    return f"{move} A {r} {r} 0 {large_arc} 1 {_fmt(x1, precision)} {_fmt(y1, precision)}"
