"""
circular_gauge/data/store.py
────────────────────────────
In-memory entity state store for the demo dashboard.

Provides:
  - initialize()   : Seed every sensor with simulated history
  - tick()         : Append one live reading per sensor
  - get_readings() : Recent readings for an entity as a DataFrame
  - get_state()    : Latest value and attributes of an entity

Thread safety: Dash may serve callbacks from several threads; all access
goes through a module-level lock.
"""
from __future__ import annotations

import threading

import numpy as np
import pandas as pd

from circular_gauge.data.models import SensorReading
from circular_gauge.data.simulator import advance, generate_history, to_dataframe
from config.sensors import SENSORS
from config.settings import settings

_lock = threading.RLock()
_history: dict[str, list[SensorReading]] = {}
_rng = np.random.default_rng(settings.SIMULATION_SEED + 1)


def initialize(seed: int = settings.SIMULATION_SEED, points: int = settings.HISTORY_POINTS) -> None:
    global _history
    with _lock:
        _history = generate_history(seed=seed, points=points)


def tick() -> None:
    global _history
    with _lock:
        if not _history:
            _history = generate_history()
        _history = advance(_history, _rng)


def get_readings(entity_id: str) -> pd.DataFrame:
    with _lock:
        readings = list(_history.get(entity_id, []))
    return to_dataframe(readings)


def get_state(entity_id: str) -> tuple[str, dict]:
    """(state, attributes) of an entity, "unavailable" when unknown."""
    with _lock:
        readings = _history.get(entity_id)
        latest = readings[-1] if readings else None
    if latest is None:
        return "unavailable", {}
    sensor = SENSORS.get(entity_id, {})
    attributes = {
        "friendly_name": sensor.get("name", entity_id),
        "unit_of_measurement": sensor.get("unit", ""),
    }
    return str(latest.value), attributes
