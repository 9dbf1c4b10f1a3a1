"""Open-Meteo forecast client for one day of hourly weather and sun events."""

import logging
from datetime import datetime

from fishcast.config.defaults import DEFAULT_USER_AGENT, OPEN_METEO_URL
from fishcast.ingest.http_client import RetryingClient
from fishcast.models.common import round_half_up
from fishcast.models.conditions import DaySunEvents, HourlyRecord, WeatherDay

logger = logging.getLogger(__name__)

HOURLY_FIELDS = "temperature_2m,cloudcover,windspeed_10m,pressure_msl"
DAILY_FIELDS = "sunrise,sunset"
KMH_TO_MPH = 0.621371


class OpenMeteoClient(RetryingClient):
    service_name = "Open-Meteo"

    def __init__(
        self,
        base_url: str = OPEN_METEO_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 2.0,
    ):
        super().__init__(user_agent, timeout, max_retries, retry_base_delay)
        self.base_url = base_url

    def get_forecast(self, lat: float, lon: float, date: str) -> dict:
        """Fetch hourly weather plus sunrise/sunset for a single YYYY-MM-DD date.

        Times come back in the location's local timezone.
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "hourly": HOURLY_FIELDS,
            "daily": DAILY_FIELDS,
            "start_date": date,
            "end_date": date,
            "timezone": "auto",
        }
        return self._get_json(self.base_url, params=params)


def _at(values: list | None, i: int):
    if values is None or i >= len(values):
        return None
    return values[i]


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Unparseable Open-Meteo timestamp: %r", value)
        return None


def parse_open_meteo(raw: dict) -> WeatherDay:
    """Convert an Open-Meteo response to Fahrenheit/mph hourly records."""
    hourly = raw.get("hourly") or {}
    temps = hourly.get("temperature_2m")
    winds = hourly.get("windspeed_10m")
    clouds = hourly.get("cloudcover")
    pressures = hourly.get("pressure_msl")

    records: list[HourlyRecord] = []
    for i, t in enumerate(hourly.get("time") or []):
        ts = _parse_time(t)
        if ts is None:
            continue
        temp_c = _at(temps, i)
        wind_kmh = _at(winds, i)
        cloud = _at(clouds, i)
        records.append(
            HourlyRecord(
                time=ts,
                air_temp_f=float(round_half_up(temp_c * 9 / 5 + 32)) if temp_c is not None else None,
                wind_mph=float(round_half_up(wind_kmh * KMH_TO_MPH)) if wind_kmh is not None else None,
                cloud_pct=float(round_half_up(cloud)) if cloud is not None else None,
                pressure_msl=_at(pressures, i),
            )
        )

    daily = raw.get("daily") or {}
    sun = DaySunEvents(
        sunrise=_parse_time(_at(daily.get("sunrise"), 0)),
        sunset=_parse_time(_at(daily.get("sunset"), 0)),
    )
    return WeatherDay(hourly=records, sun=sun)
