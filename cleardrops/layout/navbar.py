"""
cleardrops/layout/navbar.py
───────────────────────────
Navigation bar with page links.
"""

import dash_bootstrap_components as dbc
from dash import html

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#80cbc4"

NAV_LINKS = [
    ("Home", "/", "nav-home"),
    ("Monitor Water Quality", "/monitor", "nav-monitor"),
    ("Educational Content", "/educational", "nav-educational"),
    ("Notifications", "/notifications", "nav-notifications"),
]


def create_navbar() -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            [
                # Brand
                dbc.NavbarBrand(
                    [
                        html.Span("💧", style={"marginRight": "8px", "fontSize": "1.1rem"}),
                        html.Span(
                            "ClearDrops", style={"fontWeight": "700", "letterSpacing": ".04em"}
                        ),
                    ],
                    href="/",
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(
                        [
                            dbc.NavItem(dbc.NavLink(label, href=href, id=nav_id, active="exact"))
                            for label, href, nav_id in NAV_LINKS
                        ],
                        className="ms-auto",
                        navbar=True,
                    ),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )
