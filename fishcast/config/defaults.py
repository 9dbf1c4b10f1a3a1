"""Default public API endpoints used by the ingest clients."""

USGS_SITE_URL = "https://waterservices.usgs.gov/nwis/site/"
USGS_IV_URL = "https://waterservices.usgs.gov/nwis/iv/"
OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"

DEFAULT_OVERPASS_MIRRORS: list[str] = [
    "https://overpass-api.de/api/interpreter",
    "https://overpass.openstreetmap.fr/api/interpreter",
]

DEFAULT_USER_AGENT = "fishcast/0.1.0"
DEFAULT_SPECIES = "Largemouth Bass"
