"""
tests/test_simulator.py
────────────────────────
Tests for the synthetic entity simulator and the in-memory store.
"""
from datetime import timedelta

import numpy as np

from circular_gauge.data import store
from circular_gauge.data.simulator import STEP, advance, generate_history, next_value, to_dataframe
from config.sensors import SENSORS


class TestGenerateHistory:
    def test_returns_every_sensor(self, now):
        history = generate_history(seed=42, points=10, end=now)
        assert list(history) == list(SENSORS)

    def test_correct_reading_count(self, now):
        history = generate_history(seed=42, points=25, end=now)
        assert all(len(readings) == 25 for readings in history.values())

    def test_readings_are_chronological(self, now):
        readings = generate_history(seed=42, points=10, end=now)["sensor.house_power"]
        timestamps = [r.timestamp for r in readings]
        assert timestamps == sorted(timestamps)
        assert timestamps[-1] == now
        assert timestamps[1] - timestamps[0] == STEP

    def test_values_within_bounds(self, now):
        history = generate_history(seed=42, points=50, end=now)
        for entity_id, readings in history.items():
            low, high = SENSORS[entity_id]["bounds"]
            assert all(low <= r.value <= high for r in readings)
            assert all(r.entity_id == entity_id for r in readings)

    def test_reproducibility(self, now):
        h1 = generate_history(seed=99, points=10, end=now)
        h2 = generate_history(seed=99, points=10, end=now)
        for entity_id in SENSORS:
            assert [r.value for r in h1[entity_id]] == [r.value for r in h2[entity_id]]


class TestAdvance:
    def test_next_value_clipped(self):
        rng = np.random.default_rng(0)
        low, high = SENSORS["sensor.living_room_humidity"]["bounds"]
        assert low <= next_value("sensor.living_room_humidity", high + 1000, rng) <= high

    def test_appends_one_reading(self, now):
        history = generate_history(seed=42, points=5, end=now)
        later = now + timedelta(seconds=2)
        updated = advance(history, np.random.default_rng(1), now=later, keep=10)
        for entity_id in SENSORS:
            assert len(updated[entity_id]) == 6
            assert updated[entity_id][-1].timestamp == later

    def test_keeps_last_readings(self, now):
        history = generate_history(seed=42, points=5, end=now)
        updated = advance(history, np.random.default_rng(1), now=now + timedelta(seconds=2), keep=5)
        assert len(updated["sensor.house_power"]) == 5
        assert updated["sensor.house_power"][0] == history["sensor.house_power"][1]


class TestDataFrame:
    def test_columns(self, now):
        readings = generate_history(seed=42, points=5, end=now)["sensor.battery_flow"]
        df = to_dataframe(readings)
        assert list(df.columns) == ["timestamp", "entity_id", "value"]
        assert len(df) == 5


class TestStore:
    def test_state_after_initialize(self):
        store.initialize(seed=42, points=5)
        state, attributes = store.get_state("sensor.house_power")
        assert float(state) == store.get_readings("sensor.house_power")["value"].iloc[-1]
        assert attributes["unit_of_measurement"] == SENSORS["sensor.house_power"]["unit"]

    def test_unknown_entity(self):
        store.initialize(seed=42, points=5)
        assert store.get_state("sensor.missing") == ("unavailable", {})
        assert store.get_readings("sensor.missing").empty

    def test_tick_appends(self):
        store.initialize(seed=42, points=5)
        store.tick()
        assert len(store.get_readings("sensor.house_power")) == 6
