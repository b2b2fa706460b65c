"""
cleardrops/layout/components/formatting.py
───────────────────────────────────────────
Display formatting for timestamps and sensor values.
"""
from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from config.settings import settings

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
INVALID_DATE = "Invalid Date"


def format_timestamp(timestamp: Any, tz: str = settings.DISPLAY_TIMEZONE) -> str:
    """
    Epoch milliseconds → locale date/time string.

    Missing (or zero) timestamps render "N/A"; anything that cannot be
    formatted renders "Invalid Date".
    """
    if not pd.api.types.is_scalar(timestamp):
        return INVALID_DATE
    if not timestamp:
        return NOT_AVAILABLE
    try:
        ts = pd.to_datetime(timestamp, unit="ms", utc=True).tz_convert(tz)
        return ts.strftime("%x, %X")
    except (TypeError, ValueError, OverflowError, KeyError) as exc:
        logger.debug("Cannot format timestamp %r: %s", timestamp, exc)
        return INVALID_DATE


def format_sensor_value(value: float | None, unit: str = "") -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{value:g} {unit}".strip()
