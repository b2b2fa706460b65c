"""
cleardrops/callbacks/monitor.py
───────────────────────────────
Monitor page callbacks.

The subscriber is injected by app.py. On each interval tick the view is
re-rendered only if the subscriber published a new event since the last
render; otherwise the update is skipped.
"""
from __future__ import annotations

from dash import Input, Output, State
from dash.exceptions import PreventUpdate

from cleardrops.data.subscriber import LiveReadingSubscriber
from cleardrops.layout.components.feed_view import feed_toast, render_feed_state


def register(app, subscriber: LiveReadingSubscriber) -> None:

    @app.callback(
        [
            Output("monitor-content", "children"),
            Output("monitor-toast", "children"),
            Output("store-feed-version", "data"),
        ],
        Input("interval-live", "n_intervals"),
        State("store-feed-version", "data"),
    )
    def refresh_monitor(n_intervals: int, rendered_version: int | None):
        version, event = subscriber.snapshot()
        if version == rendered_version:
            raise PreventUpdate
        return render_feed_state(event), feed_toast(event), version
