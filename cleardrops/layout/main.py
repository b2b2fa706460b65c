"""
cleardrops/layout/main.py
─────────────────────────
Main application layout composition.

Contains:
  - dcc.Location for routing
  - dcc.Interval that refreshes the monitor view from the live subscriber
  - Navbar + page content container
"""
from dash import dcc, html

from cleardrops.layout.navbar import create_navbar
from config.settings import settings


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=False),

            # ── Live refresh of the monitor view ──────────────────────────────
            dcc.Interval(
                id="interval-live",
                interval=settings.UI_REFRESH_MS,
                n_intervals=0,
            ),

            # ── Navigation bar ────────────────────────────────────────────────
            create_navbar(),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                [
                    html.Span("ClearDrops"),
                    html.Span(" · "),
                    html.Span("Real-time water quality for irrigation"),
                ],
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "2rem",
                },
            ),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )
