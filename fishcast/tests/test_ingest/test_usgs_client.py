"""Tests for the USGS client with mocked httpx."""

from unittest.mock import patch

import httpx
import pytest
import respx

from fishcast.ingest.usgs_client import (
    UsgsClient,
    classify_site_type,
    parse_usgs_conditions,
    parse_usgs_sites,
)
from fishcast.models.site import BoundingBox

SITE_URL = "https://test-usgs.example.com/site/"
IV_URL = "https://test-usgs.example.com/iv/"


@pytest.fixture
def usgs() -> UsgsClient:
    return UsgsClient(
        site_url=SITE_URL,
        iv_url=IV_URL,
        user_agent="fishcast-test/1.0",
        max_retries=1,
        retry_base_delay=0.01,
    )


BOX = BoundingBox(min_lon=-116.5, min_lat=43.4, max_lon=-115.9, max_lat=43.9)


class TestGetSites:
    @respx.mock
    def test_success(self, usgs: UsgsClient, load_fixture):
        route = respx.get(SITE_URL, params={"siteType": "ST,ST-TS,LA,RES"}).mock(
            return_value=httpx.Response(200, json=load_fixture("usgs_sites.json"))
        )
        raw = usgs.get_sites(BOX)
        assert len(raw["value"]["site"]) == 3
        request = route.calls[0].request
        assert request.url.params["bBox"] == BOX.as_usgs_param()
        assert request.url.params["siteStatus"] == "active"
        assert request.headers["user-agent"] == "fishcast-test/1.0"

    @respx.mock
    def test_retry_on_429(self, usgs: UsgsClient, load_fixture):
        route = respx.get(SITE_URL).mock(
            side_effect=[
                httpx.Response(429),
                httpx.Response(200, json=load_fixture("usgs_sites.json")),
            ]
        )
        with patch("fishcast.ingest.http_client.time.sleep") as sleep:
            usgs.get_sites(BOX)
        assert route.call_count == 2
        sleep.assert_called_once_with(0.01)

    @respx.mock
    def test_exhausted_retries(self, usgs: UsgsClient):
        respx.get(SITE_URL).mock(return_value=httpx.Response(503))
        with patch("fishcast.ingest.http_client.time.sleep"), pytest.raises(httpx.HTTPStatusError):
            usgs.get_sites(BOX)

    @respx.mock
    def test_client_error_not_retried(self, usgs: UsgsClient):
        route = respx.get(SITE_URL).mock(return_value=httpx.Response(400))
        with pytest.raises(httpx.HTTPStatusError):
            usgs.get_sites(BOX)
        assert route.call_count == 1

    @respx.mock
    def test_connection_error_retried_then_raised(self, usgs: UsgsClient):
        route = respx.get(SITE_URL).mock(side_effect=httpx.ConnectError("down"))
        with patch("fishcast.ingest.http_client.time.sleep"), pytest.raises(httpx.ConnectError):
            usgs.get_sites(BOX)
        assert route.call_count == 2


class TestGetInstantValues:
    @respx.mock
    def test_parameters(self, usgs: UsgsClient, load_fixture):
        route = respx.get(IV_URL, params={"sites": "13206000"}).mock(
            return_value=httpx.Response(200, json=load_fixture("usgs_iv.json"))
        )
        usgs.get_instant_values("13206000")
        assert route.calls[0].request.url.params["parameterCd"] == "00060,00065,00010,63680"


class TestParseSites:
    def test_parse(self, load_fixture):
        sites = parse_usgs_sites(load_fixture("usgs_sites.json"))
        assert [s.id for s in sites] == ["13202990", "13206000"]
        assert sites[0].type == "Lake"
        assert sites[1].type == "River"
        assert sites[1].source == "USGS"
        assert sites[1].lat == pytest.approx(43.6599)

    def test_empty(self):
        assert parse_usgs_sites({}) == []
        assert parse_usgs_sites({"value": {"site": []}}) == []


class TestClassifySiteType:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Lake, Reservoir, Impoundment", "Lake"),
            ("Stream", "River"),
            ("LA", "Lake"),
            ("RES", "Lake"),
            ("ST-TS", "River"),
            ("GW", "Water"),
            ("", "Water"),
        ],
    )
    def test_types(self, raw, expected):
        assert classify_site_type(raw) == expected


class TestParseConditions:
    def test_parse(self, load_fixture):
        hydro = parse_usgs_conditions(load_fixture("usgs_iv.json"))
        assert hydro.flow_cfs == 152
        assert hydro.stage_ft == 2.31
        assert hydro.water_temp_f == pytest.approx(53.6)
        assert hydro.turbidity_fnu == 4.2

    def test_missing_parameters_stay_unknown(self):
        raw = {
            "value": {
                "timeSeries": [
                    {
                        "variable": {"variableCode": [{"value": "00060"}]},
                        "values": [{"value": [{"value": "88"}]}],
                    },
                    {
                        "variable": {"variableCode": [{"value": "00010"}]},
                        "values": [{"value": []}],
                    },
                ]
            }
        }
        hydro = parse_usgs_conditions(raw)
        assert hydro.flow_cfs == 88
        assert hydro.water_temp_f is None
        assert hydro.turbidity_fnu is None

    def test_unparseable_value(self):
        raw = {
            "value": {
                "timeSeries": [
                    {
                        "variable": {"variableCode": [{"value": "63680"}]},
                        "values": [{"value": [{"value": "Ice"}]}],
                    }
                ]
            }
        }
        assert parse_usgs_conditions(raw).turbidity_fnu is None
