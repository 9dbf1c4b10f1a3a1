"""Advisory pipeline: location + date + species in, scored advisory out."""

import logging
import time
from dataclasses import dataclass
from datetime import datetime

from fishcast.config.schema import FishcastConfig
from fishcast.ingest.conditions_fetcher import HydroFetcher, WeatherFetcher
from fishcast.ingest.nominatim_client import NominatimClient
from fishcast.ingest.open_meteo_client import OpenMeteoClient
from fishcast.ingest.overpass_client import OverpassClient
from fishcast.ingest.poi_fetcher import PoiFetcher
from fishcast.ingest.response_cache import ResponseCache
from fishcast.ingest.site_finder import CENTER_SITE_ID, SiteFinder, center_site
from fishcast.ingest.usgs_client import UsgsClient
from fishcast.models.common import SiteSource
from fishcast.models.recommendation import Advisory
from fishcast.models.site import GeoPoint, WaterSite
from fishcast.scoring.conditions import derive_conditions
from fishcast.scoring.gear import recommend_gear
from fishcast.scoring.species import classify, is_known_species, suggest_species
from fishcast.scoring.success import score_breakdown, success_label
from fishcast.scoring.time_windows import rank_time_windows
from fishcast.storage.database import open_database

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvisoryRequest:
    species: str
    date: str  # YYYY-MM-DD
    center: GeoPoint | None = None
    place: str | None = None
    site_id: str | None = None
    radius_miles: float | None = None
    hour: int | None = None  # local hour used for wind/cloud/pressure


@dataclass
class Clients:
    usgs: UsgsClient
    open_meteo: OpenMeteoClient
    overpass: OverpassClient
    nominatim: NominatimClient


def build_clients(config: FishcastConfig) -> Clients:
    api = config.api
    common = {
        "user_agent": api.user_agent,
        "timeout": api.timeout_seconds,
        "retry_base_delay": api.retry_base_delay,
    }
    return Clients(
        usgs=UsgsClient(
            site_url=api.usgs_site_url,
            iv_url=api.usgs_iv_url,
            max_retries=api.max_retries,
            **common,
        ),
        open_meteo=OpenMeteoClient(
            base_url=api.open_meteo_url, max_retries=api.max_retries, **common
        ),
        # Mirrors stand in for retries
        overpass=OverpassClient(mirrors=api.overpass_mirrors, max_retries=0, **common),
        nominatim=NominatimClient(base_url=api.nominatim_url, max_retries=1, **common),
    )


class AdvisoryPipeline:
    def __init__(
        self,
        config: FishcastConfig,
        db_path: str = "data/cache.db",
        clients: Clients | None = None,
    ):
        self.config = config
        self.db_path = db_path
        self.clients = clients or build_clients(config)

    def find_sites(
        self, center: GeoPoint, radius_miles: float | None = None
    ) -> list[WaterSite]:
        conn = open_database(self.db_path)
        try:
            finder = self._site_finder(ResponseCache(conn, self.config.cache.enabled))
            return finder.find(center, radius_miles or self.config.search.radius_miles)
        finally:
            conn.close()

    def resolve_center(self, request: AdvisoryRequest) -> GeoPoint | None:
        """Explicit coordinates win; otherwise geocode the place name."""
        if request.center is not None:
            return request.center
        if request.place:
            return self.clients.nominatim.geocode(request.place)
        return None

    def run(self, request: AdvisoryRequest) -> Advisory:
        """Assemble a full advisory. Collaborator failures are recorded, not raised."""
        start_time = time.monotonic()
        advisory = Advisory(
            species=request.species,
            date=request.date,
            thermal_band=classify(request.species).value,
            known_species=is_known_species(request.species),
        )

        # 1. LOCATE
        try:
            center = self.resolve_center(request)
        except Exception as e:
            logger.exception("Geocoding failed for %r", request.place)
            advisory.errors.append(f"Geocoding failed: {e}")
            center = None
        if center is None:
            advisory.errors.append("No location: pass coordinates or a place name")
            return advisory
        advisory.center = center

        conn = open_database(self.db_path)
        try:
            cache = ResponseCache(conn, self.config.cache.enabled)
            cache_cfg = self.config.cache
            radius = request.radius_miles or self.config.search.radius_miles

            # 2. SITES
            sites = self._site_finder(cache).find(center, radius)
            advisory.nearby_sites = sites
            site = self._choose_site(request.site_id, sites, center)
            if request.site_id and request.site_id != CENTER_SITE_ID and site.id != request.site_id:
                advisory.errors.append(f"Site {request.site_id} not found nearby")
            advisory.site = site

            # 3. WEATHER + HYDROLOGY
            weather = WeatherFetcher(
                self.clients.open_meteo, cache, cache_cfg.weather_ttl_minutes
            ).fetch(site.point, request.date)
            if weather is None:
                advisory.errors.append("Weather unavailable")

            hydro = None
            if site.source == SiteSource.USGS.value:
                hydro = HydroFetcher(
                    self.clients.usgs, cache, cache_cfg.hydro_ttl_minutes
                ).fetch(site.id)
            advisory.hydro = hydro

            # 4. SCORE
            hour = request.hour if request.hour is not None else datetime.now().hour
            conditions = derive_conditions(weather, hydro, hour)
            advisory.conditions = conditions
            advisory.breakdown = score_breakdown(request.species, site.type, conditions)
            advisory.score = advisory.breakdown.score if advisory.breakdown else None
            advisory.label = success_label(advisory.score)
            advisory.gear = recommend_gear(request.species, site.type, conditions)
            if weather is not None:
                advisory.windows = rank_time_windows(weather.sun, weather.hourly)
            advisory.suggested_species = suggest_species(
                site.type, conditions.water_temp_f if conditions else None
            )

            # 5. POIS
            search = self.config.search
            advisory.pois = PoiFetcher(
                self.clients.overpass, cache, cache_cfg.poi_ttl_minutes
            ).fetch(
                center,
                min(radius, search.poi_radius_cap_miles),
                [t.value for t in search.poi_types],
            )
        finally:
            conn.close()

        logger.info(
            "Advisory for %s at %s (%s) on %s: score=%s in %.1fs",
            request.species, advisory.site.name, advisory.site.type,
            request.date, advisory.score, time.monotonic() - start_time,
        )
        return advisory

    def _site_finder(self, cache: ResponseCache) -> SiteFinder:
        return SiteFinder(
            self.clients.usgs,
            self.clients.overpass,
            cache,
            self.config.cache.sites_ttl_minutes,
        )

    @staticmethod
    def _choose_site(
        site_id: str | None, sites: list[WaterSite], center: GeoPoint
    ) -> WaterSite:
        """Requested site if present, otherwise the synthetic center site."""
        if site_id and site_id != CENTER_SITE_ID:
            for s in sites:
                if s.id == site_id:
                    return s
            logger.warning("Site %s not among %d nearby sites", site_id, len(sites))
        return center_site(center)
