"""Nominatim geocoding client for place-name searches."""

import logging

from fishcast.config.defaults import DEFAULT_USER_AGENT, NOMINATIM_URL
from fishcast.ingest.http_client import RetryingClient
from fishcast.models.site import GeoPoint

logger = logging.getLogger(__name__)


class NominatimClient(RetryingClient):
    service_name = "Nominatim"

    def __init__(
        self,
        base_url: str = NOMINATIM_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 1,
        retry_base_delay: float = 2.0,
    ):
        super().__init__(user_agent, timeout, max_retries, retry_base_delay)
        self.base_url = base_url

    def geocode(self, query: str) -> GeoPoint | None:
        """Resolve "city, state" or a landmark to coordinates. None if nothing matched."""
        q = query.strip()
        if not q:
            return None
        params = {"q": q, "format": "json", "limit": "1", "addressdetails": "0"}
        results = self._get_json(
            self.base_url, params=params, headers={"Accept-Language": "en"}
        )
        if not results:
            logger.info("No geocoding match for %r", q)
            return None
        first = results[0]
        return GeoPoint(lat=float(first["lat"]), lon=float(first["lon"]))
