"""Weather and hydrology fetchers for a chosen site and date."""

import logging

from fishcast.ingest.open_meteo_client import OpenMeteoClient, parse_open_meteo
from fishcast.ingest.response_cache import ResponseCache
from fishcast.ingest.usgs_client import UsgsClient, parse_usgs_conditions
from fishcast.models.conditions import HydroReading, WeatherDay
from fishcast.models.site import GeoPoint

logger = logging.getLogger(__name__)


class WeatherFetcher:
    def __init__(self, client: OpenMeteoClient, cache: ResponseCache, ttl_minutes: int = 60):
        self.client = client
        self.cache = cache
        self.ttl_minutes = ttl_minutes

    def fetch(self, point: GeoPoint, date: str) -> WeatherDay | None:
        """One day of hourly weather, or None if the forecast is unavailable."""
        cache_key = f"wx:{point.lat:.3f},{point.lon:.3f}:{date}"
        raw = self.cache.get(cache_key)
        if raw is None:
            try:
                raw = self.client.get_forecast(point.lat, point.lon, date)
            except Exception:
                logger.exception(
                    "Failed to fetch weather for %.3f,%.3f on %s",
                    point.lat, point.lon, date,
                )
                return None
            self.cache.set(cache_key, raw, self.ttl_minutes)

        weather = parse_open_meteo(raw)
        if not weather.hourly:
            logger.warning("No hourly weather for %.3f,%.3f on %s", point.lat, point.lon, date)
        return weather


class HydroFetcher:
    def __init__(self, client: UsgsClient, cache: ResponseCache, ttl_minutes: int = 60):
        self.client = client
        self.cache = cache
        self.ttl_minutes = ttl_minutes

    def fetch(self, site_id: str) -> HydroReading | None:
        """Latest gauge readings for a USGS site, or None on failure."""
        cache_key = f"iv:{site_id}"
        raw = self.cache.get(cache_key)
        if raw is None:
            try:
                raw = self.client.get_instant_values(site_id)
            except Exception:
                logger.exception("Failed to fetch USGS conditions for site %s", site_id)
                return None
            self.cache.set(cache_key, raw, self.ttl_minutes)
        return parse_usgs_conditions(raw)
