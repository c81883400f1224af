"""
circular_gauge/callbacks/gauges.py
──────────────────────────────────
Live gauge callbacks.

Every interval tick advances the simulated sensors, then re-renders each
card and badge from the latest entity states and redraws the trend chart.
"""
from __future__ import annotations

import logging

import plotly.graph_objects as go
from dash import Input, Output
from dash.development.base_component import Component

from circular_gauge.colors.segments import resolve_color, segment_label
from circular_gauge.data import store
from circular_gauge.data.entity_state import entity_value, timer_max
from circular_gauge.data.models import GaugeBadgeConfig, GaugeCardConfig, RingConfig
from circular_gauge.layout.components.gauge_card import gauge_badge, gauge_card, gauge_warning
from circular_gauge.layout.components.gauge_svg import (
    gauge_badge_svg,
    gauge_card_svg,
    mapping_lookup,
    svg_data_uri,
)
from config.sensors import BADGES, CARDS, THEME_COLORS

_LOGGER = logging.getLogger(__name__)

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"
PLOTLY_TMPL = "plotly_dark"

CARD_CONFIGS = [GaugeCardConfig.model_validate(card) for card in CARDS]
BADGE_CONFIGS = [GaugeBadgeConfig.model_validate(badge) for badge in BADGES]

color_lookup = mapping_lookup(THEME_COLORS)


def _entity_value(entity_id: str | None, attribute: str | None = None) -> float | None:
    if not entity_id:
        return None
    state, attributes = store.get_state(entity_id)
    if state == "unavailable":
        return None
    return entity_value(entity_id, state, attributes, attribute)


def _ring_value(ring: RingConfig | str | None) -> float | None:
    if isinstance(ring, RingConfig):
        return _entity_value(ring.entity, ring.attribute)
    return None


def render_card(config: GaugeCardConfig) -> Component:
    state, attributes = store.get_state(config.entity)
    name = config.name or attributes.get("friendly_name", config.entity)
    if state == "unavailable":
        return gauge_warning(name, "Unavailable")
    value = entity_value(config.entity, state, attributes, config.attribute)
    if value is None:
        return gauge_warning(name, "NaN")

    svg = gauge_card_svg(
        config,
        value,
        secondary_value=_ring_value(config.secondary),
        tertiary_value=_ring_value(config.tertiary),
        fallback_max=timer_max(config.entity, attributes),
        color_lookup=color_lookup,
    )
    return gauge_card(svg_data_uri(svg), name, segment_label(value, config.segments))


def render_badge(config: GaugeBadgeConfig) -> Component:
    state, attributes = store.get_state(config.entity)
    name = config.name or attributes.get("friendly_name", config.entity)
    value = _entity_value(config.entity, config.attribute)
    if value is None:
        return gauge_warning(name, "Unavailable" if state == "unavailable" else "NaN")
    svg = gauge_badge_svg(config, value, color_lookup=color_lookup)
    return gauge_badge(svg_data_uri(svg), name)


def trend_figure(config: GaugeCardConfig) -> go.Figure:
    """Recent values of a card's entity, each point in its segment color."""
    df = store.get_readings(config.entity)
    fig = go.Figure()
    if not df.empty:
        colors = [
            resolve_color(v, config.segments, config.smooth_segments, color_lookup)
            or THEME_COLORS["adaptive"]
            for v in df["value"]
        ]
        fig.add_scatter(
            x=df["timestamp"], y=df["value"],
            mode="lines+markers",
            line={"color": MUTED, "width": 1},
            marker={"color": colors, "size": 6},
            hovertemplate="%{x|%H:%M:%S}<br>%{y:.2f}<extra></extra>",
        )
    fig.update_layout(
        template=PLOTLY_TMPL,
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        font={"color": "#c9d1d9", "size": 11},
        xaxis={"gridcolor": GRID_CLR},
        yaxis={"gridcolor": GRID_CLR},
        height=260,
        showlegend=False,
    )
    return fig


def register(app) -> None:

    @app.callback(
        [Output(f"gauge-card-{i}", "children") for i in range(len(CARD_CONFIGS))]
        + [Output(f"gauge-badge-{i}", "children") for i in range(len(BADGE_CONFIGS))],
        Input("interval-live", "n_intervals"),
    )
    def update_gauges(n_intervals: int):
        if n_intervals:
            store.tick()
        _LOGGER.debug("Rendering gauges (tick %s)", n_intervals)
        return [render_card(c) for c in CARD_CONFIGS] + [render_badge(b) for b in BADGE_CONFIGS]

    @app.callback(
        Output("trend-chart", "figure"),
        [Input("interval-live", "n_intervals"), Input("trend-entity", "value")],
    )
    def update_trend(n_intervals: int, entity_id: str | None):
        config = next((c for c in CARD_CONFIGS if c.entity == entity_id), None)
        if config is None:
            return go.Figure()
        return trend_figure(config)
