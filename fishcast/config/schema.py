"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from fishcast.config.defaults import (
    DEFAULT_OVERPASS_MIRRORS,
    DEFAULT_SPECIES,
    DEFAULT_USER_AGENT,
    NOMINATIM_URL,
    OPEN_METEO_URL,
    USGS_IV_URL,
    USGS_SITE_URL,
)


class PoiType(StrEnum):
    BOAT_RAMP = "boat_ramp"
    SHOP_FISHING = "shop_fishing"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    usgs_site_url: str = USGS_SITE_URL
    usgs_iv_url: str = USGS_IV_URL
    open_meteo_url: str = OPEN_METEO_URL
    overpass_mirrors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_OVERPASS_MIRRORS), min_length=1
    )
    nominatim_url: str = NOMINATIM_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    sites_ttl_minutes: int = Field(default=360, ge=0)
    hydro_ttl_minutes: int = Field(default=60, ge=0)
    weather_ttl_minutes: int = Field(default=60, ge=0)
    poi_ttl_minutes: int = Field(default=720, ge=0)


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    radius_miles: float = Field(default=25.0, gt=0.0, le=100.0)
    poi_radius_cap_miles: float = Field(default=10.0, gt=0.0)
    poi_types: list[PoiType] = Field(
        default_factory=lambda: [PoiType.BOAT_RAMP, PoiType.SHOP_FISHING]
    )


class DefaultsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    species: str = DEFAULT_SPECIES


class FishcastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    cache: CacheConfig = CacheConfig()
    search: SearchConfig = SearchConfig()
    defaults: DefaultsConfig = DefaultsConfig()
