"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the circular gauge test suite.
"""
import os
import pytest
from datetime import datetime, timezone

os.environ.setdefault("ARC_PRECISION", "3")
os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("HISTORY_POINTS", "30")


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def traffic_segments() -> list[dict]:
    """Unordered green / yellow / red thresholds."""
    return [
        {"from": 80, "color": "red", "label": "Critical"},
        {"from": 0, "color": "green", "label": "Normal"},
        {"from": 50, "color": "yellow", "label": "Elevated"},
    ]


@pytest.fixture
def card_config(traffic_segments):
    from circular_gauge.data.models import GaugeCardConfig
    return GaugeCardConfig(
        entity="sensor.house_power",
        min=0,
        max=100,
        unit="W",
        segments=traffic_segments,
    )


@pytest.fixture
def theme_lookup():
    from circular_gauge.layout.components.gauge_svg import mapping_lookup
    return mapping_lookup({
        "adaptive": "#03a9f4",
        "var(--primary-color)": "#03a9f4",
        "var(--primary-background-color)": "#30363d",
        "var(--primary-text-color)": "#c9d1d9",
    })
