"""Shared test fixtures."""

import json
import sqlite3
from datetime import datetime
from pathlib import Path

import pytest
import yaml

from fishcast.config.schema import FishcastConfig
from fishcast.models.conditions import HourlyRecord
from fishcast.storage.database import open_database


@pytest.fixture
def tmp_db(tmp_path: Path) -> sqlite3.Connection:
    """A migrated cache database in a temp directory."""
    conn = open_database(tmp_path / "cache.db")
    yield conn
    conn.close()


@pytest.fixture
def default_config() -> FishcastConfig:
    return FishcastConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "cache": {"weather_ttl_minutes": 45},
        "search": {"radius_miles": 20},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    def _load(name: str) -> dict:
        with open(fixtures_dir / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def make_hour():
    """Build an HourlyRecord on 2026-06-15 at the given hour and minute."""

    def _make(hour: int, wind=None, cloud=None, minute: int = 0, air=None, pressure=None):
        return HourlyRecord(
            time=datetime(2026, 6, 15, hour, minute),
            air_temp_f=air,
            wind_mph=wind,
            cloud_pct=cloud,
            pressure_msl=pressure,
        )

    return _make
