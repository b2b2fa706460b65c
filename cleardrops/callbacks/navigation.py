"""
cleardrops/callbacks/navigation.py — Page routing and navbar callbacks.
"""
from __future__ import annotations

from dash import Input, Output, State


def register(app) -> None:
    """Register routing + navbar callbacks."""

    # ── Page routing ──────────────────────────────────────────────────────────
    from cleardrops.pages import educational, home, monitor, notifications

    routes = {
        "/": home.layout,
        "/monitor": monitor.layout,
        "/educational": educational.layout,
        "/notifications": notifications.layout,
    }

    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
    )
    def display_page(pathname: str):
        return routes.get(pathname, home.layout)()

    # ── Navbar collapse ───────────────────────────────────────────────────────
    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open
