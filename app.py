"""
app.py
──────
Modern Circular Gauge: demo dashboard entry point.

Startup sequence:
  1. Configure logging
  2. Seed the in-memory entity store with simulated history
  3. Create Dash app with DARKLY bootstrap theme
  4. Register callbacks
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from circular_gauge.data import store
from circular_gauge.layout.main import create_layout
from config.settings import settings

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_LOGGER = logging.getLogger(__name__)

# ── 2. Seed entity store ──────────────────────────────────────────────────────
store.initialize()
_LOGGER.info("Entity store seeded with %d readings per sensor", settings.HISTORY_POINTS)

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Circular Gauge",
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from circular_gauge.callbacks import gauges

gauges.register(app)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
