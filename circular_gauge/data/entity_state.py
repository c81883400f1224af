"""
circular_gauge/data/entity_state.py
───────────────────────────────────
Numeric coercion of entity states before they reach the gauge engine.

The engine assumes a real number; everything that can produce NaN or a
non-numeric value is handled here:
  - plain numeric states / attributes
  - timer entities (remaining seconds; duration becomes the default max)
  - timestamp sensors (seconds until the timestamp)
  - template-able min / max values with the card defaults
"""

from __future__ import annotations

import contextlib
import logging
import math
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

import pandas as pd

from config.gauge import DEFAULT_MAX, DEFAULT_MIN

_LOGGER = logging.getLogger(__name__)

TIMESTAMP_STATE_DOMAINS = ("input_datetime", "scene", "button", "input_button", "event")


def to_number(raw: Any) -> float | None:
    """Float value of `raw`, or None for missing, non-numeric or non-finite input."""
    if raw is None or isinstance(raw, bool):
        return None
    with contextlib.suppress(ValueError, TypeError):
        number = float(raw)
        return number if math.isfinite(number) else None
    return None


def resolve_range(
    min_raw: Any,
    max_raw: Any,
    fallback_max: float | None = None,
) -> tuple[float, float]:
    """
    Gauge range from configured (possibly templated) bounds.

    Zero, missing or non-numeric bounds take the defaults; a timer's
    duration replaces the default max. A range that is not strictly
    increasing falls back to (DEFAULT_MIN, DEFAULT_MAX).
    """
    min_value = to_number(min_raw) or DEFAULT_MIN
    max_value = to_number(max_raw) or fallback_max or DEFAULT_MAX
    if min_value >= max_value:
        _LOGGER.debug("Invalid gauge range [%s, %s], using defaults", min_value, max_value)
        return DEFAULT_MIN, DEFAULT_MAX
    return min_value, max_value


def duration_to_seconds(duration: str | None) -> float:
    """Seconds in an "H:MM:SS" duration; 0 when it cannot be parsed."""
    if not duration:
        return 0.0
    with contextlib.suppress(ValueError, TypeError):
        return float(pd.to_timedelta(duration).total_seconds())
    _LOGGER.debug("Unparseable duration %r", duration)
    return 0.0


def _seconds_until(timestamp: Any, now: datetime) -> float | None:
    with contextlib.suppress(ValueError, TypeError):
        target = pd.Timestamp(timestamp)
        if pd.isna(target):
            return None
        if target.tzinfo is None:
            target = target.tz_localize(UTC)
        return (target - pd.Timestamp(now)).total_seconds()
    return None


def timestamp_remaining_seconds(state: str, now: datetime | None = None) -> float | None:
    """Seconds from `now` until the ISO timestamp in `state` (negative if past)."""
    return _seconds_until(state, now or datetime.now(tz=UTC))


def timer_remaining_seconds(
    state: str,
    attributes: Mapping[str, Any],
    now: datetime | None = None,
) -> float | None:
    """
    Remaining seconds of a timer entity.

    active → until `finishes_at`; paused → `remaining`; idle → `duration`.
    """
    if state == "active":
        seconds = _seconds_until(attributes.get("finishes_at"), now or datetime.now(tz=UTC))
        return max(seconds, 0.0) if seconds is not None else None
    if state == "paused":
        return duration_to_seconds(attributes.get("remaining"))
    return duration_to_seconds(attributes.get("duration"))


def entity_value(
    entity_id: str,
    state: str,
    attributes: Mapping[str, Any] | None = None,
    attribute: str | None = None,
    now: datetime | None = None,
) -> float | None:
    """
    Numeric gauge value of an entity.

    Priority:
    1. timer entities → remaining seconds
    2. timestamp device class / timestamp domains → seconds until
    3. `attribute` (when configured and present)
    4. the state itself
    """
    attributes = attributes or {}
    domain = entity_id.split(".")[0] if "." in entity_id else ""

    if domain == "timer":
        return timer_remaining_seconds(state, attributes, now)
    if attributes.get("device_class") == "timestamp" or domain in TIMESTAMP_STATE_DOMAINS:
        return timestamp_remaining_seconds(state, now)

    raw = attributes.get(attribute) if attribute else None
    value = to_number(raw if raw is not None else state)
    if value is None:
        _LOGGER.debug("Non-numeric state for %s: %r", entity_id, state)
    return value


def timer_max(entity_id: str, attributes: Mapping[str, Any] | None) -> float | None:
    """Default gauge max for timers (their full duration)."""
    if not entity_id.startswith("timer."):
        return None
    return duration_to_seconds((attributes or {}).get("duration")) or None
