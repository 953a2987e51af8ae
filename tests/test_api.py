from unittest import mock

import pytest
import requests
from fastapi.testclient import TestClient

from hikelog.api.dependencies import set_store
from hikelog.data.store import HikeStore
from hikelog.main import create_app


@pytest.fixture
def client(hike_store):
    set_store(hike_store)
    yield TestClient(create_app())
    set_store(None)


def test_health(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["hikes"] == 7
    assert body["source_url"] == "https://sheet.example/pub?output=csv"
    assert body["last_error"] is None


def test_not_initialized():
    set_store(None)
    resp = TestClient(create_app()).get("/api/stats")
    assert resp.status_code == 503


def test_not_loaded_yet():
    set_store(HikeStore(source_url=""))
    try:
        resp = TestClient(create_app()).get("/api/hikes")
        assert resp.status_code == 503
    finally:
        set_store(None)


def test_list_and_search_hikes(client):
    body = client.get("/api/hikes").json()
    assert body["count"] == 7
    assert body["hikes"][0]["id"] == 51

    body = client.get("/api/hikes", params={"q": "peak", "year": "2020"}).json()
    assert [h["id"] for h in body["hikes"]] == [2, 1]

    body = client.get("/api/hikes", params={"year": "all"}).json()
    assert body["count"] == 7


def test_invalid_year(client):
    assert client.get("/api/hikes", params={"year": "20x1"}).status_code == 400


def test_get_hike(client):
    body = client.get("/api/hikes/25").json()
    assert body["hikes"][0]["location"] == "Mount Dana, Yosemite"
    assert client.get("/api/hikes/999").status_code == 404


def test_years(client):
    assert client.get("/api/years").json() == {"years": ["2022", "2021", "2020"]}
    assert client.get("/api/years/histogram").json() == [
        {"year": "2020", "count": 2},
        {"year": "2021", "count": 3},
        {"year": "2022", "count": 1},
    ]


def test_stats(client):
    body = client.get("/api/stats").json()
    assert body["hike_count"] == 7
    assert body["since"] == 2020
    assert body["active_year"] == "2021"
    assert body["average_hikes_per_year"] == 2.3


def test_milestones_and_locations(client):
    assert [h["id"] for h in client.get("/api/milestones").json()] == [50, 25, 1]
    top = client.get("/api/locations/top").json()
    assert top[0] == {"name": "MISSION PEAK", "count": 2}


def test_categories(client):
    demanding = client.get("/api/categories/demanding", params={"limit": 2}).json()
    assert [(d["hike"]["id"], d["score"]) for d in demanding] == [(25, 16100.0), (50, 14000.0)]
    assert [h["id"] for h in client.get("/api/categories/scenic").json()] == [50, 1]
    assert [h["id"] for h in client.get("/api/categories/Weather").json()] == [2]
    assert [h["id"] for h in client.get("/api/categories/food").json()] == [27, 25]
    assert client.get("/api/categories/spooky").status_code == 404


def test_dashboard(client):
    body = client.get("/api/dashboard").json()
    assert body["stats"]["hike_count"] == 7
    assert len(body["demanding"]) == 7


def test_reload_failure_keeps_stale_data(client):
    with mock.patch("hikelog.data.loader.requests.get", side_effect=requests.ConnectionError("down")):
        resp = client.post("/api/reload")
    assert resp.status_code == 502
    assert "Could not reach" in resp.json()["detail"]

    health = client.get("/api/health").json()
    assert health["status"] == "stale"
    assert health["hikes"] == 7
    assert client.get("/api/stats").json()["hike_count"] == 7


def test_reload_success(client):
    resp_obj = mock.Mock(ok=True, status_code=200, text="Num,Date,Comments,Link,Loc,Miles,Elev\n9,1/1/24,,,,1,1\n")
    with mock.patch("hikelog.data.loader.requests.get", return_value=resp_obj):
        resp = client.post("/api/reload")
    assert resp.status_code == 200
    assert resp.json()["hikes"] == 1


def test_change_source(client):
    assert client.get("/api/source").json() == {"url": "https://sheet.example/pub?output=csv"}
    resp = client.put("/api/source", json={"url": ""})
    assert resp.status_code == 200
    assert resp.json()["hikes"] == 0
    assert client.get("/api/source").json() == {"url": ""}


def test_unknown_year_filter(client):
    body = client.get("/api/hikes", params={"year": "unknown"}).json()
    assert [h["id"] for h in body["hikes"]] == [51]


def test_startup_fetches_sheet(sample_csv):
    resp_obj = mock.Mock(ok=True, status_code=200, text=sample_csv)
    with mock.patch("hikelog.main.HikeStore", lambda: HikeStore(source_url="https://sheet.example/x")), \
            mock.patch("hikelog.data.loader.requests.get", return_value=resp_obj):
        with TestClient(create_app()) as started:
            assert started.get("/api/health").json()["hikes"] == 7
    set_store(None)


def test_startup_survives_unreachable_sheet():
    with mock.patch("hikelog.main.HikeStore", lambda: HikeStore(source_url="https://sheet.example/x")), \
            mock.patch("hikelog.data.loader.requests.get", side_effect=requests.ConnectionError("down")):
        with TestClient(create_app()) as started:
            health = started.get("/api/health").json()
    assert health["hikes"] == 0
    assert "Could not reach" in health["last_error"]
    set_store(None)
