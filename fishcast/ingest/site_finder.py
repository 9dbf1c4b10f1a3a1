"""Nearby water-site search: USGS first, OpenStreetMap water bodies as fallback."""

import logging
from dataclasses import asdict
from urllib.parse import urlencode

from fishcast.ingest.geo import bbox_from_center_radius, haversine_miles
from fishcast.ingest.overpass_client import (
    OverpassClient,
    parse_osm_water_bodies,
    water_bodies_query,
)
from fishcast.ingest.response_cache import ResponseCache
from fishcast.ingest.usgs_client import UsgsClient, parse_usgs_sites
from fishcast.models.common import SiteSource, WaterType
from fishcast.models.site import GeoPoint, WaterSite

logger = logging.getLogger(__name__)

CENTER_SITE_ID = "center"


def center_site(center: GeoPoint) -> WaterSite:
    """Synthetic site at the search center, used when no real site is chosen."""
    return WaterSite(
        id=CENTER_SITE_ID,
        name="Current Location",
        lat=center.lat,
        lon=center.lon,
        type=WaterType.WATER.value,
        source=SiteSource.CENTER.value,
    )


def sort_by_distance(sites: list[WaterSite], center: GeoPoint) -> list[WaterSite]:
    return sorted(sites, key=lambda s: haversine_miles(center, s.point))


class SiteFinder:
    def __init__(
        self,
        usgs: UsgsClient,
        overpass: OverpassClient,
        cache: ResponseCache,
        ttl_minutes: int = 360,
    ):
        self.usgs = usgs
        self.overpass = overpass
        self.cache = cache
        self.ttl_minutes = ttl_minutes

    def find(self, center: GeoPoint, radius_miles: float) -> list[WaterSite]:
        """Sites within the radius, nearest first. Returns [] if every source fails."""
        bbox = bbox_from_center_radius(center, radius_miles)
        cache_key = f"sites:{urlencode(self.usgs.site_params(bbox))}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return [WaterSite(**s) for s in cached]

        sites: list[WaterSite] = []
        try:
            sites = parse_usgs_sites(self.usgs.get_sites(bbox))
            logger.info("USGS sites returned: %d", len(sites))
        except Exception:
            logger.exception("USGS site search failed, falling back to OSM")

        if not sites:
            try:
                raw = self.overpass.query(water_bodies_query(center, radius_miles))
                sites = parse_osm_water_bodies(raw)
                logger.info("OSM water bodies: %d", len(sites))
            except Exception:
                logger.exception("OSM water body fallback failed")
                return []

        sites = sort_by_distance(sites, center)
        self.cache.set(cache_key, [asdict(s) for s in sites], self.ttl_minutes)
        return sites
