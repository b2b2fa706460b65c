"""
cleardrops/pages/notifications.py
─────────────────────────────────
Notification settings form. Values are loaded from and saved to the external
settings service by callbacks/notifications.py.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from config.water_quality import DEFAULT_COOLDOWN_MINUTES

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"

_LABEL_STYLE = {"fontSize": ".72rem", "color": MUTED, "textTransform": "uppercase"}


def layout() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Notifications", className="page-title"),
                    html.P("Manage your notification preferences.", className="page-subtitle"),
                ],
                className="page-header",
            ),
            # Fires the settings load once the page is mounted
            dcc.Store(id="notifications-mount", data=True),
            html.Div(id="notifications-toast"),
            html.Div(
                [
                    dbc.Row(
                        [
                            dbc.Col(html.Label("Email Address", htmlFor="notify-email", style=_LABEL_STYLE), md=3),
                            dbc.Col(dbc.Input(id="notify-email", type="email", value=""), md=9),
                        ],
                        className="g-3 mb-3 align-items-center",
                    ),
                    dbc.Checkbox(id="notify-enabled", label="Enable Notifications", value=False, className="mb-3"),
                    dbc.Row(
                        [
                            dbc.Col(
                                html.Label("Email Cooldown (minutes)", htmlFor="notify-cooldown", style=_LABEL_STYLE),
                                md=3,
                            ),
                            dbc.Col(
                                dbc.Input(id="notify-cooldown", type="number", min=1, step=1,
                                          value=DEFAULT_COOLDOWN_MINUTES),
                                md=9,
                            ),
                        ],
                        className="g-3 mb-3 align-items-center",
                    ),
                    dbc.Checkbox(id="notify-quiet-enabled", label="Don't Disturb Mode", value=False),
                    dbc.Collapse(
                        html.Div(
                            [
                                dbc.Row(
                                    [
                                        dbc.Col(html.Label("Do not notify after", style=_LABEL_STYLE), md=3),
                                        dbc.Col(dbc.Input(id="notify-quiet-start", type="time", value=""), md=9),
                                    ],
                                    className="g-3 mb-2 align-items-center",
                                ),
                                dbc.Row(
                                    [
                                        dbc.Col(html.Label("Resume notifications at", style=_LABEL_STYLE), md=3),
                                        dbc.Col(dbc.Input(id="notify-quiet-end", type="time", value=""), md=9),
                                    ],
                                    className="g-3 mb-2 align-items-center",
                                ),
                                html.Label("Do not notify on these days:", style=_LABEL_STYLE),
                                dbc.Checklist(id="notify-quiet-days", options=[], value=[], inline=True),
                            ],
                            style={"marginTop": "10px"},
                        ),
                        id="notify-quiet-collapse",
                        is_open=False,
                    ),
                    dbc.Button("Save Settings", id="notify-save-btn", n_clicks=0, color="info", className="mt-3"),
                ],
                style={
                    "backgroundColor": CARD_BG,
                    "border": f"1px solid {BORDER}",
                    "borderRadius": "8px",
                    "padding": "20px",
                    "maxWidth": "760px",
                },
            ),
        ],
        style={"padding": "1.5rem"},
    )
