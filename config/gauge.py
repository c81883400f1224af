"""
config/gauge.py
───────────────
Gauge geometry constants and defaults.

All radii are in SVG user units of a `-50 -50 100 100` viewBox, so a radius
of 47 leaves room for the stroke inside the box.

Gauge shapes (sweep in degrees):
  standard  270°  open at the bottom
  half      180°  upper semicircle
  full      360°  closed ring
"""

DEFAULT_MIN: float = 0.0
DEFAULT_MAX: float = 100.0

MAX_ANGLE: float = 270.0

GAUGE_TYPE_ANGLES: dict[str, float] = {
    "standard": 270.0,
    "half": 180.0,
    "full": 360.0,
}

# ── Ring radii ────────────────────────────────────────────────────────────────
RADIUS: float = 47.0
INNER_RADIUS: float = 42.0
TERTIARY_RADIUS: float = 37.0
BADGE_RADIUS: float = 42.0

# ── Stroke widths ─────────────────────────────────────────────────────────────
STROKE_WIDTH: float = 6.0
INNER_STROKE_WIDTH: float = 4.0

# ── Colors ────────────────────────────────────────────────────────────────────
# Segment / style color resolved from the surrounding theme
ADAPTIVE: str = "adaptive"
DEFAULT_GAUGE_COLOR: str = "var(--primary-color)"
DEFAULT_BACKGROUND_COLOR: str = "var(--primary-background-color)"
