"""USGS Water Services client: site search and instantaneous values."""

import logging
import re

from fishcast.config.defaults import DEFAULT_USER_AGENT, USGS_IV_URL, USGS_SITE_URL
from fishcast.ingest.http_client import RetryingClient
from fishcast.models.common import SiteSource, WaterType
from fishcast.models.conditions import HydroReading
from fishcast.models.site import BoundingBox, WaterSite

logger = logging.getLogger(__name__)

SITE_TYPES = "ST,ST-TS,LA,RES"

PARAM_FLOW_CFS = "00060"
PARAM_STAGE_FT = "00065"
PARAM_WATER_TEMP_C = "00010"
PARAM_TURBIDITY_FNU = "63680"
IV_PARAMETERS = ",".join(
    [PARAM_FLOW_CFS, PARAM_STAGE_FT, PARAM_WATER_TEMP_C, PARAM_TURBIDITY_FNU]
)

_LAKE_RE = re.compile(r"lake|reservoir", re.IGNORECASE)
_RIVER_RE = re.compile(r"stream|river", re.IGNORECASE)
_SITE_CODE_TYPES = {
    "LA": WaterType.LAKE,
    "RES": WaterType.LAKE,
    "ST": WaterType.RIVER,
    "ST-TS": WaterType.RIVER,
}


class UsgsClient(RetryingClient):
    service_name = "USGS"

    def __init__(
        self,
        site_url: str = USGS_SITE_URL,
        iv_url: str = USGS_IV_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 2.0,
    ):
        super().__init__(user_agent, timeout, max_retries, retry_base_delay)
        self.site_url = site_url
        self.iv_url = iv_url

    def site_params(self, bbox: BoundingBox) -> dict[str, str]:
        return {
            "format": "json",
            "bBox": bbox.as_usgs_param(),
            "siteType": SITE_TYPES,
            "siteStatus": "active",
        }

    def get_sites(self, bbox: BoundingBox) -> dict:
        """Fetch active stream, lake and reservoir sites inside a bounding box."""
        return self._get_json(self.site_url, params=self.site_params(bbox))

    def get_instant_values(self, site_id: str) -> dict:
        """Fetch the latest flow, stage, water temperature and turbidity for a site."""
        params = {"format": "json", "parameterCd": IV_PARAMETERS, "sites": site_id}
        return self._get_json(self.iv_url, params=params)


def classify_site_type(raw_type: str) -> str:
    """Collapse a USGS site type into Lake, River or Water."""
    if _LAKE_RE.search(raw_type):
        return WaterType.LAKE.value
    if _RIVER_RE.search(raw_type):
        return WaterType.RIVER.value
    code_type = _SITE_CODE_TYPES.get(raw_type.strip().upper())
    if code_type is not None:
        return code_type.value
    return WaterType.WATER.value


def _first_value(items: list | None) -> str:
    if not items:
        return ""
    return str(items[0].get("value", ""))


def _to_float(value) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_usgs_sites(raw: dict) -> list[WaterSite]:
    """Extract sites with usable coordinates from a site-service response."""
    sites: list[WaterSite] = []
    for s in (raw.get("value") or {}).get("site") or []:
        geog = (s.get("geoLocation") or {}).get("geogLocation") or {}
        lat = _to_float(geog.get("latitude"))
        lon = _to_float(geog.get("longitude"))
        if lat is None or lon is None:
            continue
        sites.append(
            WaterSite(
                id=_first_value(s.get("siteCode")),
                name=s.get("siteName") or "Unnamed Site",
                lat=lat,
                lon=lon,
                type=classify_site_type(_first_value(s.get("siteType"))),
                source=SiteSource.USGS.value,
            )
        )
    return sites


def parse_usgs_conditions(raw: dict) -> HydroReading:
    """Pick the latest reading of each parameter; water temperature is converted to F."""
    flow = stage = temp_f = turbidity = None
    for series in (raw.get("value") or {}).get("timeSeries") or []:
        code = _first_value((series.get("variable") or {}).get("variableCode"))
        values = series.get("values") or [{}]
        points = values[0].get("value") or []
        if not points:
            continue
        val = _to_float(points[0].get("value"))
        if val is None:
            continue
        if code == PARAM_FLOW_CFS:
            flow = val
        elif code == PARAM_STAGE_FT:
            stage = val
        elif code == PARAM_WATER_TEMP_C:
            temp_f = val * 9 / 5 + 32
        elif code == PARAM_TURBIDITY_FNU:
            turbidity = val
    return HydroReading(
        flow_cfs=flow, stage_ft=stage, water_temp_f=temp_f, turbidity_fnu=turbidity
    )
