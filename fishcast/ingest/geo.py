"""Distance and bounding-box helpers for site search."""

import math

from fishcast.models.site import BoundingBox, GeoPoint

METERS_PER_MILE = 1609.344
EARTH_RADIUS_M = 6371e3
MILES_PER_DEGREE_LAT = 69.0


def miles_to_meters(miles: float) -> float:
    return miles * METERS_PER_MILE


def meters_to_miles(meters: float) -> float:
    return meters / METERS_PER_MILE


def haversine_miles(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in statute miles."""
    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)
    s = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lon / 2) ** 2
    )
    return meters_to_miles(2 * EARTH_RADIUS_M * math.atan2(math.sqrt(s), math.sqrt(1 - s)))


def bbox_from_center_radius(center: GeoPoint, radius_miles: float) -> BoundingBox:
    """Approximate box around a center; longitude span widens with latitude."""
    d_lat = radius_miles / MILES_PER_DEGREE_LAT
    d_lon = radius_miles / (MILES_PER_DEGREE_LAT * math.cos(math.radians(center.lat)))
    return BoundingBox(
        min_lon=center.lon - d_lon,
        min_lat=center.lat - d_lat,
        max_lon=center.lon + d_lon,
        max_lat=center.lat + d_lat,
    )
