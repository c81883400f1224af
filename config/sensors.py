"""
config/sensors.py
─────────────────
Simulated entities and the gauges shown on the demo dashboard.

Each sensor is a bounded random walk around a baseline; the card and badge
configs below are plain dicts, validated into GaugeCardConfig /
GaugeBadgeConfig at startup exactly like user YAML would be.
"""

# ── Simulated entities ────────────────────────────────────────────────────────
SENSORS: dict[str, dict] = {
    "sensor.house_power": {
        "name": "House power",
        "unit": "W",
        "baseline": 850.0,
        "noise": 140.0,
        "bounds": (0.0, 3_500.0),
    },
    "sensor.battery_flow": {
        "name": "Battery",
        "unit": "W",
        "baseline": 0.0,
        "noise": 180.0,
        "bounds": (-2_000.0, 2_000.0),
    },
    "sensor.living_room_temperature": {
        "name": "Living room",
        "unit": "°C",
        "baseline": 21.0,
        "noise": 0.35,
        "bounds": (5.0, 35.0),
    },
    "sensor.living_room_humidity": {
        "name": "Humidity",
        "unit": "%",
        "baseline": 48.0,
        "noise": 1.2,
        "bounds": (0.0, 100.0),
    },
}

# ── Theme colors for standalone SVG rendering ─────────────────────────────────
# Theme references cannot be resolved inside an <img>, so the demo maps them
THEME_COLORS: dict[str, str] = {
    "adaptive": "#03a9f4",
    "var(--primary-color)": "#03a9f4",
    "var(--primary-background-color)": "#30363d",
    "var(--primary-text-color)": "#c9d1d9",
    "var(--secondary-text-color)": "#8b949e",
    "var(--success-color)": "#43a047",
    "var(--warning-color)": "#ffa600",
    "var(--error-color)": "#db4437",
}

# ── Gauges ────────────────────────────────────────────────────────────────────
POWER_SEGMENTS = [
    {"from": 0, "color": "var(--success-color)", "label": "Low"},
    {"from": 1_500, "color": "var(--warning-color)", "label": "High"},
    {"from": 2_500, "color": "var(--error-color)", "label": "Peak"},
]

CARDS: list[dict] = [
    {
        "entity": "sensor.house_power",
        "name": "House power",
        "unit": "W",
        "min": 0,
        "max": 3_500,
        "segments": POWER_SEGMENTS,
        "secondary": {
            "entity": "sensor.living_room_temperature",
            "label": "Temp",
            "min": 5,
            "max": 35,
            "show_gauge": "inner",
            "segments": [
                {"from": 5, "color": "#2196f3"},
                {"from": 18, "color": "#4caf50"},
                {"from": 26, "color": "#f44336"},
            ],
        },
    },
    {
        "entity": "sensor.battery_flow",
        "name": "Battery",
        "unit": "W",
        "min": -2_000,
        "max": 2_000,
        "start_from_zero": True,
        "smooth_segments": True,
        "gauge_type": "full",
        "gauge_foreground_style": {"color": "adaptive"},
        "segments": [
            {"from": -2_000, "color": "#f44336"},
            {"from": 0, "color": "#ffeb3b"},
            {"from": 2_000, "color": "#4caf50"},
        ],
    },
    {
        "entity": "sensor.living_room_temperature",
        "name": "Living room",
        "unit": "°C",
        "min": 5,
        "max": 35,
        "needle": True,
        "gauge_type": "half",
        "segments": [
            {"from": 5, "color": "#2196f3", "label": "Cold"},
            {"from": 18, "color": "#4caf50", "label": "Comfort"},
            {"from": 26, "color": "#f44336", "label": "Hot"},
        ],
    },
]

BADGES: list[dict] = [
    {
        "entity": "sensor.living_room_humidity",
        "name": "Humidity",
        "unit": "%",
        "decimals": 0,
        "smooth_segments": True,
        "segments": [
            {"from": 20, "color": "#ff9800"},
            {"from": 40, "color": "#4caf50"},
            {"from": 70, "color": "#2196f3"},
        ],
    },
]
