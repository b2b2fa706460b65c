"""
app.py
──────
ClearDrops Monitor — Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Open the live subscription to the latest classified record
  3. Create Dash app with DARKLY bootstrap theme
  4. Register all callbacks (subscriber + settings client injected)
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import atexit
import logging

import dash
import dash_bootstrap_components as dbc

from cleardrops.data.feed import DemoFeed, build_feed
from cleardrops.data.settings_api import SettingsApiClient
from cleardrops.data.subscriber import LiveReadingSubscriber
from cleardrops.layout.main import create_layout
from config.logging_config import configure_logging
from config.settings import settings

# ── 1. Logging ────────────────────────────────────────────────────────────────
configure_logging()
logger = logging.getLogger("cleardrops")

# ── 2. Live subscription ──────────────────────────────────────────────────────
feed = build_feed(settings)
subscriber = LiveReadingSubscriber(feed, path=settings.FEED_PATH, order_by=settings.FEED_ORDER_BY)
if isinstance(feed, DemoFeed):
    feed.start()
    atexit.register(feed.stop)
subscriber.start()
atexit.register(subscriber.close)
logger.info("Feed ready (%s mode)", settings.FEED_MODE, extra={"feed_path": settings.FEED_PATH})

settings_client = SettingsApiClient(settings.SETTINGS_API_URL, settings.SETTINGS_API_TIMEOUT_S)
atexit.register(settings_client.close)

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="ClearDrops",
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from cleardrops.callbacks import monitor, navigation, notifications

navigation.register(app)
monitor.register(app, subscriber)
notifications.register(app, settings_client)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
