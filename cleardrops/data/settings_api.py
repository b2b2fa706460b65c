"""
cleardrops/data/settings_api.py
───────────────────────────────
HTTP client for the external notification-settings service.

Endpoints:
  GET  /get-settings     → {email, enabled, cooldown_minutes, no_notify?}
  POST /update-settings  ← same shape (no_notify null when quiet hours are off)
"""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from cleardrops.data.models import NotificationSettings, QuietHours
from config.settings import settings as default_settings
from config.water_quality import DEFAULT_COOLDOWN_MINUTES

logger = logging.getLogger(__name__)


class SettingsApiError(Exception):
    """Base error for the notification-settings service."""


class SettingsLoadError(SettingsApiError):
    pass


class SettingsSaveError(SettingsApiError):
    pass


def parse_settings(payload: Any) -> NotificationSettings:
    """Apply the service's defaults to a raw GET payload."""
    if not isinstance(payload, dict):
        raise SettingsLoadError("Unexpected settings payload.")

    no_notify = payload.get("no_notify")
    quiet: QuietHours | None = None
    if isinstance(no_notify, dict):
        days = no_notify.get("days") or {}
        quiet = QuietHours(
            start=no_notify.get("start") or "",
            end=no_notify.get("end") or "",
            days={str(day): bool(flag) for day, flag in days.items()} if isinstance(days, dict) else {},
        )

    cooldown = payload.get("cooldown_minutes")
    try:
        return NotificationSettings(
            email=payload.get("email") or "",
            enabled=bool(payload.get("enabled") or False),
            cooldown_minutes=DEFAULT_COOLDOWN_MINUTES if cooldown is None else cooldown,
            no_notify=quiet,
        )
    except ValidationError as exc:
        raise SettingsLoadError(f"Invalid settings payload: {exc.error_count()} error(s)") from exc


class SettingsApiClient:
    """Minimal client; pass `transport` to substitute the network in tests."""

    def __init__(
        self,
        base_url: str = default_settings.SETTINGS_API_URL,
        timeout: float = default_settings.SETTINGS_API_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def fetch(self) -> NotificationSettings:
        try:
            response = self._client.get("/get-settings")
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Failed to load notification settings",
                extra={"status_code": exc.response.status_code},
            )
            raise SettingsLoadError("Unable to fetch notification settings.") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Failed to load notification settings", extra={"reason": str(exc)})
            raise SettingsLoadError("Unable to fetch notification settings.") from exc
        return parse_settings(payload)

    def save(self, notification_settings: NotificationSettings) -> None:
        body = notification_settings.model_dump()
        try:
            response = self._client.post("/update-settings", json=body)
        except httpx.HTTPError as exc:
            logger.warning("Failed to save notification settings", extra={"reason": str(exc)})
            raise SettingsSaveError("Please check your connection or try again later.") from exc
        if not response.is_success:
            logger.warning(
                "Settings service rejected update",
                extra={"status_code": response.status_code},
            )
            raise SettingsSaveError("Server returned an error")
