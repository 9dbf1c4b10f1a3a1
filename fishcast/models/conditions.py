"""Environmental readings consumed by the scoring core."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ConditionSet:
    """Point-in-time conditions for one site. ``None`` means unknown, not zero."""

    water_temp_f: float | None = None
    wind_mph: float | None = None
    cloud_pct: float | None = None
    barometer_inhg: float | None = None
    turbidity_fnu: float | None = None
    estimated: bool = False  # water temp derived from air temp


@dataclass(frozen=True)
class HourlyRecord:
    time: datetime
    air_temp_f: float | None = None
    wind_mph: float | None = None
    cloud_pct: float | None = None
    pressure_msl: float | None = None  # hPa


@dataclass(frozen=True)
class DaySunEvents:
    sunrise: datetime | None = None
    sunset: datetime | None = None


@dataclass(frozen=True)
class WeatherDay:
    hourly: list[HourlyRecord] = field(default_factory=list)
    sun: DaySunEvents = field(default_factory=DaySunEvents)


@dataclass(frozen=True)
class HydroReading:
    flow_cfs: float | None = None
    stage_ft: float | None = None
    water_temp_f: float | None = None
    turbidity_fnu: float | None = None
