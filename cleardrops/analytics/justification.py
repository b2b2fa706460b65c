"""
cleardrops/analytics/justification.py
──────────────────────────────────────
Human-readable reasons for an upstream suitability label.

The label itself is computed by the external classifier; this module only
re-derives plausible reasons from the irrigation thresholds. A "1" label is
never questioned, and a "0" label whose values all pass the local thresholds
yields no reasons at all.
"""
from __future__ import annotations

from config.water_quality import (
    IRRIGATION_THRESHOLDS,
    REASON_ALL_OK,
    REASON_PH,
    REASON_TDS_HIGH,
    REASON_TDS_LOW,
    REASON_TEMPERATURE,
    REASON_TURBIDITY,
    REASON_UNKNOWN,
    Range,
)
from cleardrops.data.models import Reading
from cleardrops.data.normalizer import is_number


def _outside(value: float | None, band: Range) -> bool:
    """Non-numeric values count as outside the band."""
    if not is_number(value):
        return True
    if band.low is not None and value < band.low:
        return True
    return band.high is not None and value > band.high


def explain(reading: Reading) -> list[str]:
    """
    Build the ordered justification for a reading's classification.

    Rule order: pH, turbidity, TDS (high, else low), temperature. TDS reports
    at most one reason: a missing TDS value is reported as exceeding the
    maximum and the low check is skipped.
    """
    if reading.is_suitable:
        return [REASON_ALL_OK]
    if not reading.is_unsuitable:
        return [REASON_UNKNOWN]

    thr = IRRIGATION_THRESHOLDS
    reasons: list[str] = []

    if _outside(reading.acidity, thr.ph):
        reasons.append(REASON_PH)
    if _outside(reading.turbidity, Range(low=None, high=thr.turbidity_ntu.high)):
        reasons.append(REASON_TURBIDITY)

    tds = reading.total_dissolved_solids
    if _outside(tds, Range(low=None, high=thr.tds_ppm.high)):
        reasons.append(REASON_TDS_HIGH)
    elif _outside(tds, Range(low=thr.tds_ppm.low, high=None)):
        reasons.append(REASON_TDS_LOW)

    if _outside(reading.temperature, thr.temperature_c):
        reasons.append(REASON_TEMPERATURE)

    return reasons


def reason_heading(reasons: list[str]) -> str:
    return "Reasons" if len(reasons) > 1 else "Reason"
