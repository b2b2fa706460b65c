"""
config/water_quality.py
───────────────────────
Irrigation water-quality thresholds, reason texts and display metadata.

Acceptable ranges used to explain an upstream classification:
  pH:          6.5 – 8.5
  Turbidity:   ≤ 5 NTU
  TDS:         10 – 1000 ppm
  Temperature: 10 – 25 °C
"""
from dataclasses import dataclass
from enum import Enum


class ClassificationLabel(str, Enum):
    UNSUITABLE = "0"
    SUITABLE = "1"


@dataclass(frozen=True)
class Range:
    low: float | None
    high: float | None


@dataclass(frozen=True)
class WaterThresholds:
    ph: Range
    turbidity_ntu: Range
    tds_ppm: Range
    temperature_c: Range


IRRIGATION_THRESHOLDS = WaterThresholds(
    ph=Range(low=6.5, high=8.5),
    turbidity_ntu=Range(low=None, high=5.0),
    tds_ppm=Range(low=10.0, high=1000.0),
    temperature_c=Range(low=10.0, high=25.0),
)

# ── Justification texts ───────────────────────────────────────────────────────
REASON_ALL_OK = "All values are within acceptable ranges."
REASON_UNKNOWN = "Classification is unknown or missing."
REASON_PH = "pH is outside the safe range (6.5–8.5)."
REASON_TURBIDITY = "Turbidity is too high (> 5 NTU)."
REASON_TDS_HIGH = "TDS exceeds the recommended maximum (1000 ppm)."
REASON_TDS_LOW = "TDS is too low."
REASON_TEMPERATURE = "Temperature is outside the optimal range (10°C–25°C)."

# ── Sensor cards (Reading field → display metadata) ───────────────────────────
SENSOR_DISPLAY: dict[str, dict[str, str]] = {
    "temperature": {"label": "Temperature", "unit": "°C", "color": "#d190a8"},
    "total_dissolved_solids": {"label": "TDS", "unit": "ppm", "color": "#9787a1"},
    "acidity": {"label": "pH", "unit": "", "color": "#9bbd82"},
    "turbidity": {"label": "Turbidity", "unit": "NTU", "color": "#72bab2"},
}

SUITABLE_COLOR = "#2ea44f"
UNSUITABLE_COLOR = "#da3633"

# ── Educational content: ideal ranges per plant type ──────────────────────────
PLANT_RANGES: list[dict[str, str]] = [
    {"Plant Type": "Leafy Greens", "TDS (ppm)": "400–800", "pH": "6.0–6.5",
     "Temperature (°C)": "15–25", "Notes": "Sensitive to high salts"},
    {"Plant Type": "Tomatoes", "TDS (ppm)": "800–1200", "pH": "5.8–6.8",
     "Temperature (°C)": "18–26", "Notes": "Moderate TDS tolerance"},
    {"Plant Type": "Flowers", "TDS (ppm)": "300–700", "pH": "6.0–7.0",
     "Temperature (°C)": "15–30", "Notes": "Watch for pH drift"},
    {"Plant Type": "Herbs", "TDS (ppm)": "500–1000", "pH": "5.5–6.5",
     "Temperature (°C)": "15–25", "Notes": "Need consistent quality"},
    {"Plant Type": "Root Vegetables", "TDS (ppm)": "500–1000", "pH": "6.0–6.8",
     "Temperature (°C)": "15–22", "Notes": "Sensitive to high turbidity"},
]

# ── Notification quiet-hours ──────────────────────────────────────────────────
WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

DEFAULT_COOLDOWN_MINUTES = 10
