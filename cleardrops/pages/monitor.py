"""
cleardrops/pages/monitor.py
───────────────────────────
Live dashboard of the latest classified reading.

Static structure; the feed state is rendered into `monitor-content` by
callbacks/monitor.py whenever the subscriber publishes a new event.
"""
from dash import dcc, html

from cleardrops.layout.components.feed_view import LOADING_TEXT


def layout() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Dashboard", className="page-title"),
                    html.P(
                        "Latest sensor reading and irrigation suitability",
                        className="page-subtitle",
                    ),
                ],
                className="page-header",
            ),
            # Version of the last rendered feed event; -1 forces the first render
            dcc.Store(id="store-feed-version", data=-1),
            html.Div(id="monitor-toast"),
            html.Div(
                html.P(LOADING_TEXT, className="loading-text", style={"textAlign": "center", "color": "#8b949e"}),
                id="monitor-content",
            ),
        ],
        style={"padding": "1.5rem"},
    )
