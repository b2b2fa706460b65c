"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the ClearDrops test suite.
"""
import os

import numpy as np
import pytest

# Never reach Firebase or the settings service from tests
os.environ.setdefault("FEED_MODE", "demo")
os.environ.setdefault("FEED_PATH", "sensor_data_classified")
os.environ.setdefault("DISPLAY_TIMEZONE", "UTC")
os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("SETTINGS_API_URL", "http://settings.test")

FEED_PATH = "sensor_data_classified"


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def suitable_record() -> dict:
    return {
        "time": 1_717_243_200_000,
        "classification": "1",
        "reading": {
            "temp_sensor": 20.0,
            "tds_sensor": 500.0,
            "ph_sensor": 7.0,
            "turbidity_sensor": 2.0,
        },
    }


@pytest.fixture
def unsuitable_record() -> dict:
    """Every sensor out of range."""
    return {
        "time": 1_717_243_260_000,
        "classification": 0,
        "reading": {
            "temp_sensor": 30.0,
            "tds_sensor": 1500.0,
            "ph_sensor": 9.0,
            "turbidity_sensor": 10.0,
        },
    }


@pytest.fixture
def feed():
    from cleardrops.data.feed import InMemoryFeed
    return InMemoryFeed(default_path=FEED_PATH)


@pytest.fixture
def subscriber(feed):
    from cleardrops.data.subscriber import LiveReadingSubscriber
    sub = LiveReadingSubscriber(feed, path=FEED_PATH, order_by="time")
    yield sub
    sub.close()
