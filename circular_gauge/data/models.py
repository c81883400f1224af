"""
circular_gauge/data/models.py
─────────────────────────────
Pydantic v2 models for segment configuration, arc descriptors and gauge
card / badge configuration.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.gauge import DEFAULT_MAX, DEFAULT_MIN

GaugeType = Literal["standard", "half", "full"]


class Segment(BaseModel):
    """Color threshold: values from `from` upward take `color`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: float | None = Field(default=None, alias="from")
    color: str
    label: str | None = None

    @field_validator("from_", mode="before")
    @classmethod
    def _coerce_from(cls, value):
        # Non-numeric thresholds are kept but excluded from every computation
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        return None if math.isnan(number) else number


# ── Engine output ─────────────────────────────────────────────────────────────


class DashArc(BaseModel):
    """Filled portion of a gauge, in degrees along the sweep."""

    model_config = ConfigDict(frozen=True)

    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


class ColoredArcSlice(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    start_angle: float
    end_angle: float
    color: str | None
    label: str | None = None


class GradientStop(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: float = Field(ge=0.0, le=1.0)
    color: str


class GradientArc(BaseModel):
    """Full-sweep arc stroked with a gradient along its length."""

    model_config = ConfigDict(frozen=True)

    path: str
    stops: tuple[GradientStop, ...]


# ── Gauge configuration ───────────────────────────────────────────────────────


class GaugeStyle(BaseModel):
    color: str | None = None
    width: float | None = Field(default=None, gt=0.0)
    opacity: float | None = Field(default=None, ge=0.0, le=1.0)


class RingConfig(BaseModel):
    """Secondary or tertiary entity, optionally drawn as an inner ring."""

    entity: str | None = None
    attribute: str | None = None
    label: str | None = None
    min: float | str | None = None
    max: float | str | None = None
    segments: list[Segment] | None = None
    needle: bool = False
    start_from_zero: bool = False
    show_gauge: Literal["none", "inner"] = "none"
    gauge_radius: float | None = Field(default=None, gt=0.0)
    gauge_foreground_style: GaugeStyle = Field(default_factory=GaugeStyle)
    gauge_background_style: GaugeStyle = Field(default_factory=GaugeStyle)
    adaptive_state_color: bool = False


class GaugeCardConfig(BaseModel):
    entity: str
    attribute: str | None = None
    name: str | None = None
    unit: str | None = None
    min: float | str | None = DEFAULT_MIN
    max: float | str | None = None
    segments: list[Segment] | None = None
    smooth_segments: bool = False
    needle: bool = False
    start_from_zero: bool = False
    gauge_type: GaugeType = "standard"
    gauge_radius: float | None = Field(default=None, gt=0.0)
    gauge_foreground_style: GaugeStyle = Field(default_factory=GaugeStyle)
    gauge_background_style: GaugeStyle = Field(default_factory=GaugeStyle)
    secondary: RingConfig | str | None = None
    tertiary: RingConfig | str | None = None
    show_state: bool = True


class GaugeBadgeConfig(BaseModel):
    entity: str
    attribute: str | None = None
    name: str | None = None
    unit: str | None = None
    min: float | str | None = DEFAULT_MIN
    max: float | str | None = DEFAULT_MAX
    segments: list[Segment] | None = None
    smooth_segments: bool = False
    needle: bool = False
    start_from_zero: bool = False
    show_state: bool = True
    show_unit: bool = True
    decimals: int | None = Field(default=None, ge=0)
    gauge_foreground_style: GaugeStyle = Field(default_factory=GaugeStyle)
    gauge_background_style: GaugeStyle = Field(default_factory=GaugeStyle)


# ── Demo telemetry ────────────────────────────────────────────────────────────


class SensorReading(BaseModel):
    timestamp: datetime
    entity_id: str
    value: float
