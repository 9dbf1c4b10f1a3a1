"""Fixtures for end-to-end pipeline and CLI tests with mocked HTTP."""

import httpx
import pytest
import respx

from fishcast.config.schema import ApiConfig, FishcastConfig

SITE_URL = "https://test-usgs.example.com/site/"
IV_URL = "https://test-usgs.example.com/iv/"
METEO_URL = "https://test-meteo.example.com/v1/forecast"
MIRROR = "https://overpass-a.example.com/api/interpreter"
NOMINATIM_URL = "https://test-nominatim.example.com/search"


@pytest.fixture
def test_config() -> FishcastConfig:
    return FishcastConfig(
        api=ApiConfig(
            usgs_site_url=SITE_URL,
            usgs_iv_url=IV_URL,
            open_meteo_url=METEO_URL,
            overpass_mirrors=[MIRROR],
            nominatim_url=NOMINATIM_URL,
            max_retries=0,
            retry_base_delay=0.0,
        )
    )


@pytest.fixture
def mock_services(load_fixture):
    """Route every external service to its recorded fixture.

    Routes are named sites, iv, weather, pois and geocode.
    """
    with respx.mock(assert_all_called=False) as router:
        router.get(SITE_URL, name="sites").mock(
            return_value=httpx.Response(200, json=load_fixture("usgs_sites.json"))
        )
        router.get(IV_URL, name="iv").mock(
            return_value=httpx.Response(200, json=load_fixture("usgs_iv.json"))
        )
        router.get(METEO_URL, name="weather").mock(
            return_value=httpx.Response(200, json=load_fixture("open_meteo_day.json"))
        )
        router.post(MIRROR, name="pois").mock(
            return_value=httpx.Response(200, json=load_fixture("overpass_pois.json"))
        )
        router.get(NOMINATIM_URL, name="geocode").mock(
            return_value=httpx.Response(200, json=[{"lat": "43.62", "lon": "-116.2"}])
        )
        yield router
