"""
circular_gauge/colors/parsing.py
────────────────────────────────
CSS color codec used by smooth segment blending.

Accepts the literal forms a gauge config can carry:
  - named colors ("green", "orange")      via matplotlib
  - hex ("#4caf50", "#f00")               via matplotlib
  - functional rgb()/rgba()               via plotly.colors
CSS variables and other theme references are not colors here; they must be
resolved by the caller's lookup first.
"""

from __future__ import annotations

import contextlib
from functools import lru_cache

import numpy as np
from matplotlib.colors import to_rgb
from plotly.colors import find_intermediate_color, label_rgb, unlabel_rgb

RGB = tuple[int, int, int]


@lru_cache(maxsize=256)
def parse_color(color: str | None) -> RGB | None:
    """Return the 0–255 RGB triple of a CSS color, or None if unknown."""
    if not color:
        return None
    text = color.strip()
    if text.lower().startswith(("rgb(", "rgba(")):
        with contextlib.suppress(ValueError, IndexError):
            r, g, b = unlabel_rgb(text)
            return _to_bytes((r, g, b))
        return None
    if text.startswith("var(") or text.lower() == "adaptive":
        return None
    with contextlib.suppress(ValueError):
        return _to_bytes(np.asarray(to_rgb(text)) * 255.0)
    return None


def _to_bytes(channels) -> RGB:
    # half-up
    values = np.clip(np.floor(np.asarray(channels, dtype=float) + 0.5), 0, 255)
    return int(values[0]), int(values[1]), int(values[2])


def format_color(rgb: RGB) -> str:
    return label_rgb(rgb)


def interpolate_color(low: RGB, high: RGB, t: float) -> RGB:
    """Component-wise sRGB blend; t is clamped to [0, 1]."""
    t = float(np.clip(t, 0.0, 1.0))
    return _to_bytes(find_intermediate_color(low, high, t, colortype="tuple"))
