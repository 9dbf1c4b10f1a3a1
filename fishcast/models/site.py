"""Water sites, coordinates and nearby points of interest."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float


@dataclass(frozen=True)
class BoundingBox:
    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def as_usgs_param(self) -> str:
        return f"{self.min_lon:.6f},{self.min_lat:.6f},{self.max_lon:.6f},{self.max_lat:.6f}"


@dataclass(frozen=True)
class WaterSite:
    id: str
    name: str
    lat: float
    lon: float
    type: str  # Lake, River, Stream, Reservoir or Water
    source: str = "USGS"

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lon)


@dataclass(frozen=True)
class PointOfInterest:
    id: str
    name: str
    lat: float
    lon: float
    type: str  # boat_ramp or fishing
