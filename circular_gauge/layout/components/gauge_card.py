"""
circular_gauge/layout/components/gauge_card.py
───────────────────────────────────────────────
Dash wrappers around the gauge SVG: card, badge and the warning variant
shown for unavailable / non-numeric entities.
"""
from dash import html

CARD_BG = "#161b22"
MUTED = "#8b949e"
BORDER = "#30363d"
WARNING = "#e8a020"


def gauge_card(
    image_src: str,
    name: str,
    segment_label: str = "",
    width: str = "220px",
) -> html.Div:
    """
    Gauge card with its name below the dial.

    Args:
        image_src: data: URI of the rendered gauge SVG
        name: Entity name shown under the gauge
        segment_label: Label of the segment the value falls in
        width: CSS width of the card
    """
    children = [
        html.Img(src=image_src, style={"width": "100%", "display": "block"}),
        html.Div(name, style={"fontSize": ".8rem", "fontWeight": "600", "textAlign": "center"}),
    ]
    if segment_label:
        children.append(
            html.Div(segment_label, style={"fontSize": ".68rem", "color": MUTED, "textAlign": "center"})
        )
    return html.Div(
        children,
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {BORDER}",
            "borderRadius": "12px",
            "padding": "12px",
            "width": width,
        },
    )


def gauge_badge(image_src: str, label: str) -> html.Div:
    """Pill-shaped badge with a small gauge icon."""
    return html.Div(
        [
            html.Img(src=image_src, style={"width": "36px", "height": "36px"}),
            html.Span(label, style={"fontSize": ".75rem", "fontWeight": "600", "marginLeft": "6px"}),
        ],
        style={
            "display": "inline-flex",
            "alignItems": "center",
            "backgroundColor": CARD_BG,
            "border": f"1px solid {BORDER}",
            "borderRadius": "18px",
            "padding": "2px 12px 2px 2px",
        },
    )


def gauge_warning(name: str, message: str) -> html.Div:
    """Placeholder for an entity that cannot be drawn."""
    return html.Div(
        [
            html.Div(name, style={"fontSize": ".8rem", "fontWeight": "600"}),
            html.Div(message, style={"fontSize": ".72rem", "color": WARNING}),
        ],
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {WARNING}",
            "borderRadius": "12px",
            "padding": "12px",
        },
    )
