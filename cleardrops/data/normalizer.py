"""
cleardrops/data/normalizer.py
─────────────────────────────
Maps an upstream classified record onto a fixed-shape Reading.

Upstream shape (not controlled here):

    {
        "time": 1717243200000,
        "classification": "1" | 1,
        "reading": {"temp_sensor": .., "tds_sensor": .., "ph_sensor": .., "turbidity_sensor": ..},
    }

Anything missing or of the wrong type becomes None (sensors) or "" (label).
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

import numpy as np

from cleardrops.data.models import Reading

# upstream sensor key → Reading field
SENSOR_FIELDS: dict[str, str] = {
    "temp_sensor": "temperature",
    "tds_sensor": "total_dissolved_solids",
    "ph_sensor": "acidity",
    "turbidity_sensor": "turbidity",
}


def is_number(value: Any) -> bool:
    """True for int/float values (numpy scalars included), False for bools."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _label_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    # JSON numbers carry no int/float distinction: 1.0 is the label "1"
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def _as_float(value: Any) -> float | None:
    if not is_number(value):
        return None
    try:
        return float(value)
    except OverflowError:
        # JSON integers beyond float range decode as ±infinity upstream
        return math.inf if value > 0 else -math.inf


def normalize_record(record: Any) -> Reading:
    if not isinstance(record, Mapping):
        record = {}
    sensors = record.get("reading")
    if not isinstance(sensors, Mapping):
        sensors = {}

    values = {
        field: _as_float(sensors.get(key)) for key, field in SENSOR_FIELDS.items()
    }
    return Reading(
        **values,
        timestamp=record.get("time"),
        classification_label=_label_text(record.get("classification")),
    )
