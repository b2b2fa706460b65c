"""
cleardrops/callbacks/notifications.py
─────────────────────────────────────
Notification settings form callbacks: load on mount, save on click.
"""
from __future__ import annotations

import logging
from typing import Any

import dash_bootstrap_components as dbc
from dash import Input, Output, State
from pydantic import ValidationError

from cleardrops.data.models import NotificationSettings, QuietHours
from cleardrops.data.settings_api import SettingsApiClient, SettingsApiError
from config.water_quality import WEEKDAYS

logger = logging.getLogger(__name__)


def _toast(header: str, body: str, ok: bool) -> dbc.Toast:
    return dbc.Toast(
        body,
        header=header,
        icon="success" if ok else "danger",
        is_open=True,
        dismissable=True,
        duration=5000,
        style={"position": "fixed", "top": 72, "right": 16, "minWidth": 320, "zIndex": 1050},
    )


def day_options(days: list[str]) -> list[dict[str, str]]:
    return [{"label": day.capitalize(), "value": day} for day in days]


def settings_to_form(notification_settings: NotificationSettings) -> dict[str, Any]:
    """Form field values for a loaded settings object."""
    quiet = notification_settings.no_notify
    days = quiet.days if quiet is not None else {}
    all_days = list(days) or list(WEEKDAYS)
    return {
        "email": notification_settings.email,
        "enabled": notification_settings.enabled,
        "cooldown": notification_settings.cooldown_minutes,
        "quiet_enabled": quiet is not None,
        "quiet_start": quiet.start if quiet is not None else "",
        "quiet_end": quiet.end if quiet is not None else "",
        "day_options": day_options(all_days),
        "days_checked": [day for day, flag in days.items() if flag],
    }


def form_to_settings(
    email: str | None,
    enabled: bool | None,
    cooldown: Any,
    quiet_enabled: bool | None,
    quiet_start: str | None,
    quiet_end: str | None,
    options: list[dict[str, str]] | None,
    days_checked: list[str] | None,
) -> NotificationSettings:
    """Build the settings to save; raises ValidationError on bad input."""
    no_notify = None
    if quiet_enabled:
        checked = set(days_checked or [])
        all_days = [opt["value"] for opt in options or []] or list(WEEKDAYS)
        no_notify = QuietHours(
            start=quiet_start or "",
            end=quiet_end or "",
            days={day: day in checked for day in all_days},
        )
    return NotificationSettings(
        email=email or "",
        enabled=bool(enabled),
        cooldown_minutes=cooldown,
        no_notify=no_notify,
    )


def register(app, client: SettingsApiClient) -> None:

    @app.callback(
        [
            Output("notify-email", "value"),
            Output("notify-enabled", "value"),
            Output("notify-cooldown", "value"),
            Output("notify-quiet-enabled", "value"),
            Output("notify-quiet-start", "value"),
            Output("notify-quiet-end", "value"),
            Output("notify-quiet-days", "options"),
            Output("notify-quiet-days", "value"),
            Output("notifications-toast", "children", allow_duplicate=True),
        ],
        Input("notifications-mount", "data"),
        prevent_initial_call="initial_duplicate",
    )
    def load_settings(_mounted):
        try:
            form = settings_to_form(client.fetch())
        except SettingsApiError:
            form = settings_to_form(NotificationSettings())
            toast = _toast("Failed to load settings", "Unable to fetch notification settings.", ok=False)
        else:
            toast = None
        return (
            form["email"],
            form["enabled"],
            form["cooldown"],
            form["quiet_enabled"],
            form["quiet_start"],
            form["quiet_end"],
            form["day_options"],
            form["days_checked"],
            toast,
        )

    @app.callback(
        Output("notify-quiet-collapse", "is_open"),
        Input("notify-quiet-enabled", "value"),
    )
    def toggle_quiet_hours(quiet_enabled: bool) -> bool:
        return bool(quiet_enabled)

    @app.callback(
        Output("notifications-toast", "children", allow_duplicate=True),
        Input("notify-save-btn", "n_clicks"),
        [
            State("notify-email", "value"),
            State("notify-enabled", "value"),
            State("notify-cooldown", "value"),
            State("notify-quiet-enabled", "value"),
            State("notify-quiet-start", "value"),
            State("notify-quiet-end", "value"),
            State("notify-quiet-days", "options"),
            State("notify-quiet-days", "value"),
        ],
        prevent_initial_call=True,
    )
    def save_settings(n_clicks, email, enabled, cooldown, quiet_enabled, start, end, options, days):
        try:
            notification_settings = form_to_settings(email, enabled, cooldown, quiet_enabled, start, end, options, days)
        except ValidationError as exc:
            logger.info("Rejected notification settings form: %s", exc.errors()[0]["msg"])
            return _toast("Failed to save settings", "Email cooldown must be a whole number of at least 1 minute.", ok=False)
        try:
            client.save(notification_settings)
        except SettingsApiError:
            return _toast("Failed to save settings", "Please check your connection or try again later.", ok=False)
        return _toast("Settings Saved", "Notification settings have been saved successfully.", ok=True)
