"""Common types and helpers shared across models."""

from enum import StrEnum


class ThermalBand(StrEnum):
    COLD = "cold"
    COOL = "cool"
    WARM = "warm"


class WaterType(StrEnum):
    LAKE = "Lake"
    RIVER = "River"
    STREAM = "Stream"
    RESERVOIR = "Reservoir"
    WATER = "Water"


class SiteSource(StrEnum):
    USGS = "USGS"
    OSM = "OSM"
    CENTER = "CENTER"


def is_river_like(water_type: str | None) -> bool:
    """River and stream water behave like moving water; everything else like a lake."""
    t = (water_type or "").lower()
    return "river" in t or "stream" in t


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 upwards so scores do not depend on banker's rounding."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
