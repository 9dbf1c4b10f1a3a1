"""Overpass (OpenStreetMap) client with mirror failover."""

import logging

import httpx

from fishcast.config.defaults import DEFAULT_OVERPASS_MIRRORS, DEFAULT_USER_AGENT
from fishcast.ingest.geo import miles_to_meters
from fishcast.ingest.http_client import RetryingClient
from fishcast.models.common import SiteSource, WaterType
from fishcast.models.site import GeoPoint, PointOfInterest, WaterSite

logger = logging.getLogger(__name__)

POI_SELECTORS = {
    "boat_ramp": 'node["amenity"="boat_ramp"]',
    "shop_fishing": 'node["shop"="fishing"]',
}


class OverpassClient(RetryingClient):
    service_name = "Overpass"

    def __init__(
        self,
        mirrors: list[str] | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_base_delay: float = 2.0,
    ):
        super().__init__(user_agent, timeout, max_retries, retry_base_delay)
        self.mirrors = list(mirrors or DEFAULT_OVERPASS_MIRRORS)

    def query(self, ql: str) -> dict:
        """POST an Overpass QL query, trying each mirror in order.

        Raises the last mirror's error if all of them fail.
        """
        last_error: Exception | None = None
        for base in self.mirrors:
            try:
                resp = self._request(
                    "POST", base, content=ql, headers={"Content-Type": "text/plain"}
                )
                data = resp.json()
                logger.info(
                    "Overpass ok: %s elements=%d", base, len(data.get("elements") or [])
                )
                return data
            except (httpx.HTTPStatusError, httpx.RequestError, ValueError) as e:
                logger.warning("Overpass mirror %s failed: %s", base, e)
                last_error = e

        if last_error is None:
            raise ValueError("No Overpass mirrors configured")
        raise last_error


def water_bodies_query(center: GeoPoint, radius_miles: float) -> str:
    radius_m = int(miles_to_meters(radius_miles))
    around = f"(around:{radius_m},{center.lat},{center.lon})"
    return (
        "[out:json][timeout:25];("
        f'way["natural"="water"]{around};'
        f'way["water"="lake"]{around};'
        f'way["water"="reservoir"]{around};'
        f'way["waterway"="river"]{around};'
        ");out center;"
    )


def pois_query(center: GeoPoint, radius_miles: float, types: list[str]) -> str | None:
    """Query for nodes of the requested POI types, or None if no known type is asked for."""
    radius_m = int(miles_to_meters(radius_miles))
    parts = [
        f"{POI_SELECTORS[t]}(around:{radius_m},{center.lat},{center.lon});"
        for t in types
        if t in POI_SELECTORS
    ]
    if not parts:
        return None
    return f"[out:json][timeout:25];({' '.join(parts)})out body;"


def _coords(element: dict) -> tuple[float, float] | None:
    center = element.get("center") or {}
    lat = center.get("lat", element.get("lat"))
    lon = center.get("lon", element.get("lon"))
    if lat is None or lon is None:
        return None
    return float(lat), float(lon)


def parse_osm_water_bodies(raw: dict) -> list[WaterSite]:
    sites: list[WaterSite] = []
    for e in raw.get("elements") or []:
        coords = _coords(e)
        if coords is None:
            continue
        tags = e.get("tags") or {}
        if tags.get("waterway"):
            water_type = WaterType.RIVER.value
        elif tags.get("water"):
            water_type = str(tags["water"]).title()
        else:
            water_type = WaterType.WATER.value
        sites.append(
            WaterSite(
                id=str(e.get("id")),
                name=tags.get("name") or "Unnamed Water",
                lat=coords[0],
                lon=coords[1],
                type=water_type,
                source=SiteSource.OSM.value,
            )
        )
    return sites


def parse_osm_pois(raw: dict) -> list[PointOfInterest]:
    pois: list[PointOfInterest] = []
    for e in raw.get("elements") or []:
        coords = _coords(e)
        if coords is None:
            continue
        tags = e.get("tags") or {}
        pois.append(
            PointOfInterest(
                id=str(e.get("id")),
                name=tags.get("name") or tags.get("brand") or "(Unnamed)",
                lat=coords[0],
                lon=coords[1],
                type=tags.get("amenity") or tags.get("shop") or "",
            )
        )
    return pois
