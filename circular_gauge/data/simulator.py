"""
circular_gauge/data/simulator.py
────────────────────────────────
Synthetic entity states for the demo dashboard.

Each sensor in config.sensors.SENSORS is a mean-reverting random walk:
  value' = value + θ·(baseline − value) + N(0, noise)
clipped to the sensor's bounds. Reproducible with SIMULATION_SEED.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import numpy as np
import pandas as pd

from circular_gauge.data.models import SensorReading
from config.sensors import SENSORS
from config.settings import settings

REVERSION = 0.15
STEP = timedelta(seconds=settings.UPDATE_INTERVAL_MS / 1000)


def next_value(entity_id: str, value: float, rng: np.random.Generator) -> float:
    """One random-walk step for `entity_id`, clipped to its bounds."""
    sensor = SENSORS[entity_id]
    low, high = sensor["bounds"]
    drift = REVERSION * (sensor["baseline"] - value)
    stepped = value + drift + rng.normal(0.0, sensor["noise"])
    return round(float(np.clip(stepped, low, high)), 2)


def generate_history(
    seed: int = settings.SIMULATION_SEED,
    points: int = settings.HISTORY_POINTS,
    end: datetime | None = None,
) -> dict[str, list[SensorReading]]:
    """
    `points` consecutive readings per sensor, ending at `end` (default: now).
    Returns dict keyed by entity_id.
    """
    rng = np.random.default_rng(seed)
    end_ts = (end or datetime.now(tz=UTC)).replace(microsecond=0)
    timestamps = [end_ts - STEP * (points - 1 - i) for i in range(points)]

    history: dict[str, list[SensorReading]] = {}
    for entity_id, sensor in SENSORS.items():
        value = float(sensor["baseline"])
        readings = []
        for ts in timestamps:
            value = next_value(entity_id, value, rng)
            readings.append(SensorReading(timestamp=ts, entity_id=entity_id, value=value))
        history[entity_id] = readings
    return history


def advance(
    history: dict[str, list[SensorReading]],
    rng: np.random.Generator,
    now: datetime | None = None,
    keep: int = settings.HISTORY_POINTS,
) -> dict[str, list[SensorReading]]:
    """Append one live reading per sensor, keeping the last `keep` readings."""
    ts = (now or datetime.now(tz=UTC)).replace(microsecond=0)
    updated = {}
    for entity_id, readings in history.items():
        last = readings[-1].value if readings else float(SENSORS[entity_id]["baseline"])
        reading = SensorReading(timestamp=ts, entity_id=entity_id, value=next_value(entity_id, last, rng))
        updated[entity_id] = [*readings, reading][-keep:]
    return updated


def to_dataframe(readings: list[SensorReading]) -> pd.DataFrame:
    """Convert a list of SensorReadings to a pandas DataFrame."""
    return pd.DataFrame([r.model_dump() for r in readings])
