"""
cleardrops/layout/components/feed_view.py
──────────────────────────────────────────
Renders the live feed state on the monitor page.

  Loading  → waiting message
  Empty    → "No Data Available" card + neutral toast
  Errored  → error card + error toast with the transport message
  HasData  → sensor grid, classification badge and reasons
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from cleardrops.data.models import Reading
from cleardrops.data.subscriber import Empty, Errored, FeedEvent, HasData
from cleardrops.layout.components.classification_badge import classification_panel
from cleardrops.layout.components.formatting import format_timestamp
from cleardrops.layout.components.sensor_card import sensor_card
from config.water_quality import SENSOR_DISPLAY

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"

LOADING_TEXT = "Loading latest sensor data..."
NO_DATA_TITLE = "No Data Available"
NO_DATA_TEXT = (
    "Could not retrieve sensor data from the database. "
    "Please ensure the system is running and check back later."
)
TOAST_DURATION_MS = 5000


def _notice_card(title: str, body: str, color: str = "#c9d1d9") -> html.Div:
    return html.Div(
        [
            html.H5(title, style={"color": color, "fontWeight": "700"}),
            html.P(body, style={"color": MUTED, "marginBottom": 0}),
        ],
        className="notice-card",
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {BORDER}",
            "borderRadius": "8px",
            "padding": "20px",
            "marginTop": "2rem",
        },
    )


def reading_grid(reading: Reading) -> html.Div:
    cards = [
        dbc.Col(
            sensor_card(meta["label"], getattr(reading, field), meta["unit"], meta["color"]),
            xs=12, sm=6, md=3,
        )
        for field, meta in SENSOR_DISPLAY.items()
    ]
    return html.Div(
        [
            dbc.Row(cards, className="g-3 mb-3"),
            classification_panel(reading),
            html.Div(
                f"Last updated: {format_timestamp(reading.timestamp)}",
                id="reading-timestamp",
                style={"fontSize": ".72rem", "color": MUTED, "marginTop": "10px", "textAlign": "right"},
            ),
        ]
    )


def render_feed_state(event: FeedEvent) -> html.Div | html.P:
    if isinstance(event, HasData):
        return reading_grid(event.reading)
    if isinstance(event, Empty):
        return _notice_card(NO_DATA_TITLE, NO_DATA_TEXT)
    if isinstance(event, Errored):
        return _notice_card("Unable to load sensor data", event.message, color="#da3633")
    return html.P(LOADING_TEXT, className="loading-text", style={"textAlign": "center", "color": MUTED})


def feed_toast(event: FeedEvent) -> dbc.Toast | None:
    """Transient notice for Empty / Errored events, None otherwise."""
    if isinstance(event, Empty):
        header, body = "No Data", "No sensor data found in the database."
    elif isinstance(event, Errored):
        header, body = "Firebase Error", f"Failed to fetch data: {event.message}"
    else:
        return None
    return dbc.Toast(
        body,
        header=header,
        icon="danger",
        is_open=True,
        dismissable=True,
        duration=TOAST_DURATION_MS,
        style={"position": "fixed", "top": 72, "right": 16, "minWidth": 320, "zIndex": 1050},
    )

