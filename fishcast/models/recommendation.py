"""Scoring and recommendation outputs."""

from dataclasses import dataclass, field
from datetime import datetime

from fishcast.models.common import clamp, round_half_up
from fishcast.models.conditions import ConditionSet, HydroReading
from fishcast.models.site import GeoPoint, PointOfInterest, WaterSite


@dataclass(frozen=True)
class ScoreBreakdown:
    temperature: float
    wind: float
    cloud: float
    pressure: float
    turbidity: float

    @property
    def total(self) -> float:
        return self.temperature + self.wind + self.cloud + self.pressure + self.turbidity

    @property
    def score(self) -> int:
        return round_half_up(clamp(self.total, 0, 100))


@dataclass(frozen=True)
class GearRecommendation:
    rod_and_line: str
    lures: tuple[str, ...]
    flies: tuple[str, ...]
    fly_setup: str
    fly_presentation: str
    locations: tuple[str, ...]


@dataclass(frozen=True)
class TimeWindow:
    time: datetime
    score: int


@dataclass
class Advisory:
    species: str
    date: str  # YYYY-MM-DD
    center: GeoPoint | None = None
    site: WaterSite | None = None
    conditions: ConditionSet | None = None
    hydro: HydroReading | None = None
    score: int | None = None
    breakdown: ScoreBreakdown | None = None
    label: str = "unknown"
    thermal_band: str = ""
    gear: GearRecommendation | None = None
    windows: list[TimeWindow] = field(default_factory=list)
    suggested_species: list[str] = field(default_factory=list)
    known_species: bool = True
    nearby_sites: list[WaterSite] = field(default_factory=list)
    pois: list[PointOfInterest] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
