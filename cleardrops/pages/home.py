"""
cleardrops/pages/home.py
────────────────────────
Landing page.
"""
import dash_bootstrap_components as dbc
from dash import html


def layout() -> html.Div:
    return html.Div(
        html.Div(
            [
                html.H1(
                    "ClearDrops: Real-time Water Quality Monitoring",
                    style={"fontWeight": "700", "marginBottom": "1rem"},
                ),
                html.P(
                    "Ensuring clean and safe water for a sustainable future.",
                    style={"fontSize": "1.1rem", "color": "#8b949e", "marginBottom": "2rem"},
                ),
                dbc.Button("Monitor Water Quality", href="/monitor", color="info"),
            ],
            style={"textAlign": "center", "padding": "5rem 1rem"},
        ),
        className="hero",
    )
