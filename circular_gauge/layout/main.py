"""
circular_gauge/layout/main.py
─────────────────────────────
Demo dashboard layout.

Contains:
  - dcc.Interval for live updates
  - one slot per configured gauge card and badge
  - a trend chart of the selected entity, points colored by its segments
"""
from dash import dcc, html
import dash_bootstrap_components as dbc

from config.sensors import BADGES, CARDS, SENSORS
from config.settings import settings


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    trend_options = [
        {"label": SENSORS[card["entity"]]["name"], "value": card["entity"]} for card in CARDS
    ]
    return html.Div(
        [
            # ── Live update interval ──────────────────────────────────────────
            dcc.Interval(
                id="interval-live",
                interval=settings.UPDATE_INTERVAL_MS,
                n_intervals=0,
            ),

            dbc.Container(
                [
                    html.H4("Modern Circular Gauge", style={"margin": "1rem 0"}),

                    # ── Badges ────────────────────────────────────────────────
                    html.Div(
                        [html.Div(id=f"gauge-badge-{i}") for i in range(len(BADGES))],
                        style={"display": "flex", "gap": "8px", "marginBottom": "1rem"},
                    ),

                    # ── Cards ─────────────────────────────────────────────────
                    dbc.Row(
                        [dbc.Col(html.Div(id=f"gauge-card-{i}"), width="auto") for i in range(len(CARDS))],
                        className="g-3",
                    ),

                    # ── Trend ─────────────────────────────────────────────────
                    dcc.Dropdown(
                        id="trend-entity",
                        options=trend_options,
                        value=trend_options[0]["value"] if trend_options else None,
                        clearable=False,
                        style={"marginTop": "1.5rem", "color": "#0d1117", "maxWidth": "320px"},
                    ),
                    dcc.Graph(id="trend-chart", config={"displayModeBar": False}),
                ],
                fluid=True,
            ),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )
