"""Boat ramps and tackle shops near the search center."""

import logging
from dataclasses import asdict

from fishcast.ingest.overpass_client import OverpassClient, parse_osm_pois, pois_query
from fishcast.ingest.response_cache import ResponseCache
from fishcast.models.site import GeoPoint, PointOfInterest

logger = logging.getLogger(__name__)


class PoiFetcher:
    def __init__(self, overpass: OverpassClient, cache: ResponseCache, ttl_minutes: int = 720):
        self.overpass = overpass
        self.cache = cache
        self.ttl_minutes = ttl_minutes

    def fetch(
        self, center: GeoPoint, radius_miles: float, types: list[str]
    ) -> list[PointOfInterest]:
        ql = pois_query(center, radius_miles, types)
        if ql is None:
            return []

        cache_key = (
            f"pois:{center.lat:.3f},{center.lon:.3f}:{radius_miles:g}:{','.join(types)}"
        )
        cached = self.cache.get(cache_key)
        if cached is not None:
            return [PointOfInterest(**p) for p in cached]

        try:
            pois = parse_osm_pois(self.overpass.query(ql))
        except Exception:
            logger.warning("POI lookup failed near %.3f,%.3f", center.lat, center.lon, exc_info=True)
            return []

        logger.info("POIs found: %d", len(pois))
        self.cache.set(cache_key, [asdict(p) for p in pois], self.ttl_minutes)
        return pois
