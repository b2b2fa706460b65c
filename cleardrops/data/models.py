"""
cleardrops/data/models.py
─────────────────────────
Pydantic v2 data models for sensor readings and notification settings.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from config.water_quality import DEFAULT_COOLDOWN_MINUTES, ClassificationLabel


class Reading(BaseModel):
    """Fixed-shape snapshot of the latest classified sensor record."""

    model_config = ConfigDict(frozen=True)

    temperature: float | None = None
    total_dissolved_solids: float | None = None
    acidity: float | None = Field(default=None, description="pH scale, 0–14")
    turbidity: float | None = None
    timestamp: Any = None  # epoch ms as delivered upstream
    classification_label: str = ""

    @property
    def is_suitable(self) -> bool:
        return self.classification_label == ClassificationLabel.SUITABLE.value

    @property
    def is_unsuitable(self) -> bool:
        return self.classification_label == ClassificationLabel.UNSUITABLE.value


class QuietHours(BaseModel):
    start: str = ""
    end: str = ""
    days: dict[str, bool] = Field(default_factory=dict)


class NotificationSettings(BaseModel):
    email: str = ""
    enabled: bool = False
    cooldown_minutes: int = Field(default=DEFAULT_COOLDOWN_MINUTES, ge=1)
    no_notify: QuietHours | None = None
