"""Tests for the Overpass client, mirror failover and OSM parsing."""

import httpx
import pytest
import respx

from fishcast.ingest.overpass_client import (
    OverpassClient,
    parse_osm_pois,
    parse_osm_water_bodies,
    pois_query,
    water_bodies_query,
)
from fishcast.models.site import GeoPoint

MIRROR_A = "https://overpass-a.example.com/api/interpreter"
MIRROR_B = "https://overpass-b.example.com/api/interpreter"
CENTER = GeoPoint(43.62, -116.2)


@pytest.fixture
def overpass() -> OverpassClient:
    return OverpassClient(mirrors=[MIRROR_A, MIRROR_B])


class TestQuery:
    @respx.mock
    def test_first_mirror(self, overpass: OverpassClient, load_fixture):
        route_a = respx.post(MIRROR_A).mock(
            return_value=httpx.Response(200, json=load_fixture("overpass_water.json"))
        )
        route_b = respx.post(MIRROR_B)
        data = overpass.query("[out:json];")
        assert len(data["elements"]) == 4
        assert route_a.called
        assert not route_b.called
        assert route_a.calls[0].request.content == b"[out:json];"

    @respx.mock
    def test_failover(self, overpass: OverpassClient, load_fixture):
        respx.post(MIRROR_A).mock(return_value=httpx.Response(504))
        route_b = respx.post(MIRROR_B).mock(
            return_value=httpx.Response(200, json=load_fixture("overpass_pois.json"))
        )
        data = overpass.query("[out:json];")
        assert route_b.called
        assert len(data["elements"]) == 3

    @respx.mock
    def test_all_mirrors_fail(self, overpass: OverpassClient):
        respx.post(MIRROR_A).mock(side_effect=httpx.ConnectError("down"))
        respx.post(MIRROR_B).mock(return_value=httpx.Response(502))
        with pytest.raises(httpx.HTTPStatusError):
            overpass.query("[out:json];")


class TestQueries:
    def test_water_bodies_query(self):
        ql = water_bodies_query(CENTER, 1)
        assert "(around:1609,43.62,-116.2)" in ql
        assert 'way["waterway"="river"]' in ql
        assert ql.endswith("out center;")

    def test_pois_query(self):
        ql = pois_query(CENTER, 10, ["boat_ramp", "shop_fishing"])
        assert 'node["amenity"="boat_ramp"](around:16093,43.62,-116.2);' in ql
        assert 'node["shop"="fishing"]' in ql

    def test_pois_query_no_types(self):
        assert pois_query(CENTER, 10, []) is None
        assert pois_query(CENTER, 10, ["marina"]) is None


class TestParsing:
    def test_water_bodies(self, load_fixture):
        sites = parse_osm_water_bodies(load_fixture("overpass_water.json"))
        assert [s.id for s in sites] == ["1001", "1002", "1003"]
        assert sites[0].type == "Reservoir"
        assert sites[0].name == "Quinn's Pond"
        assert sites[1].type == "River"
        assert sites[2].type == "Water"
        assert sites[2].name == "Unnamed Water"
        assert all(s.source == "OSM" for s in sites)

    def test_pois(self, load_fixture):
        pois = parse_osm_pois(load_fixture("overpass_pois.json"))
        assert [(p.name, p.type) for p in pois] == [
            ("Barber Park Ramp", "boat_ramp"),
            ("Idaho Angler", "fishing"),
            ("(Unnamed)", "boat_ramp"),
        ]
