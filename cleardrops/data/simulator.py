"""
cleardrops/data/simulator.py
────────────────────────────
Synthetic classified records for the demo feed.

Records have the same shape the ingestion pipeline writes to the database.
Most readings sit around healthy irrigation values; some drift one sensor out
of range and a few lose a sensor entirely. The label mimics the upstream
classifier: 1 when every value is inside the irrigation thresholds, else 0.
"""
from __future__ import annotations

import time

import numpy as np

from config.water_quality import IRRIGATION_THRESHOLDS, Range

# Baseline operating points and noise scales (σ)
BASELINES: dict[str, float] = {
    "temp_sensor": 19.0,
    "tds_sensor": 450.0,
    "ph_sensor": 7.2,
    "turbidity_sensor": 2.0,
}

NOISE: dict[str, float] = {
    "temp_sensor": 2.5,
    "tds_sensor": 110.0,
    "ph_sensor": 0.35,
    "turbidity_sensor": 1.0,
}

# Values used when a sensor drifts out of range
DRIFT: dict[str, tuple[float, float]] = {
    "temp_sensor": (27.0, 34.0),
    "tds_sensor": (1050.0, 1800.0),
    "ph_sensor": (8.6, 9.8),
    "turbidity_sensor": (5.5, 14.0),
}

DRIFT_PROBABILITY = 0.25
DROPOUT_PROBABILITY = 0.05

_BANDS: dict[str, Range] = {
    "temp_sensor": IRRIGATION_THRESHOLDS.temperature_c,
    "tds_sensor": IRRIGATION_THRESHOLDS.tds_ppm,
    "ph_sensor": IRRIGATION_THRESHOLDS.ph,
    "turbidity_sensor": IRRIGATION_THRESHOLDS.turbidity_ntu,
}


def _within(value: float | None, band: Range) -> bool:
    if value is None:
        return False
    if band.low is not None and value < band.low:
        return False
    return band.high is None or value <= band.high


def classify(sensors: dict[str, float]) -> int:
    """Stand-in for the upstream classifier."""
    return int(all(_within(sensors.get(key), band) for key, band in _BANDS.items()))


def generate_record(rng: np.random.Generator, time_ms: int | None = None) -> dict:
    """One upstream-shaped record: {time, classification, reading}."""
    sensors = {
        key: BASELINES[key] + float(rng.normal(0, NOISE[key]))
        for key in BASELINES
    }
    sensors["turbidity_sensor"] = max(0.0, sensors["turbidity_sensor"])
    sensors["tds_sensor"] = max(0.0, sensors["tds_sensor"])

    if rng.random() < DRIFT_PROBABILITY:
        key = str(rng.choice(list(DRIFT)))
        low, high = DRIFT[key]
        sensors[key] = float(rng.uniform(low, high))

    rounded = {
        "temp_sensor": round(sensors["temp_sensor"], 2),
        "tds_sensor": round(sensors["tds_sensor"], 1),
        "ph_sensor": round(sensors["ph_sensor"], 2),
        "turbidity_sensor": round(sensors["turbidity_sensor"], 2),
    }

    if rng.random() < DROPOUT_PROBABILITY:
        rounded.pop(str(rng.choice(list(rounded))))

    return {
        "time": time_ms if time_ms is not None else int(time.time() * 1000),
        "classification": classify(rounded),
        "reading": rounded,
    }

