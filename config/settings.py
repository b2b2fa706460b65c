"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Feed: "firebase" for the Realtime Database, "demo" for simulated records
    FEED_MODE: str = os.getenv("FEED_MODE", "demo").lower()
    FEED_PATH: str = os.getenv("FEED_PATH", "sensor_data_classified")
    FEED_ORDER_BY: str = os.getenv("FEED_ORDER_BY", "time")

    # Firebase (only read when FEED_MODE=firebase)
    FIREBASE_DATABASE_URL: str = os.getenv("FIREBASE_DATABASE_URL", "")
    FIREBASE_CREDENTIALS: str = os.getenv("FIREBASE_CREDENTIALS", "")

    # Notification settings service
    SETTINGS_API_URL: str = os.getenv("SETTINGS_API_URL", "https://flask-classifier.onrender.com")
    SETTINGS_API_TIMEOUT_S: float = float(os.getenv("SETTINGS_API_TIMEOUT_S", "10"))

    # Browser refresh of the monitor view in milliseconds
    UI_REFRESH_MS: int = int(os.getenv("UI_REFRESH_MS", "2000"))
    DISPLAY_TIMEZONE: str = os.getenv("DISPLAY_TIMEZONE", "UTC")

    # Demo feed
    DEMO_PUSH_INTERVAL_S: float = float(os.getenv("DEMO_PUSH_INTERVAL_S", "15"))
    SIMULATION_SEED: int = int(os.getenv("SIMULATION_SEED", "42"))


settings = Settings()
