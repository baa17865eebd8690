"""Tests for the FastAPI wrapper."""

from __future__ import annotations

from collections.abc import Generator

import pytest
import responses
from fastapi.testclient import TestClient
from requests.exceptions import ConnectionError as RequestsConnectionError

from impact_effects.api import CustomHitRequest, app
from impact_effects.fetchers.neows import NEOWS_FEED_URL


@pytest.fixture(scope="module")
def client() -> Generator[TestClient, None, None]:
    """TestClient with lifespan entered so app.state is initialised."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def no_disk_cache(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr("impact_effects.cache._CACHE_DIR", tmp_path)


EUROPE_HIT = {
    "diameter": 100,
    "velocity": 25,
    "lat": 50,
    "long": 10,
    "days_until_impact": 180,
    "name": "Europe hit",
    "seed": 42,
}


class TestHealthEndpoint:
    def test_returns_ok(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert "version" in data
        assert "uptime_seconds" in data
        assert "report_count" in data


class TestCustomHitRequest:
    def test_long_alias(self) -> None:
        body = CustomHitRequest.model_validate({"diameter": 10, "velocity": 5, "long": -20})
        assert body.lon == -20

    def test_field_name_accepted(self) -> None:
        body = CustomHitRequest.model_validate({"diameter": 10, "velocity": 5, "lon": -20})
        assert body.lon == -20

    def test_default_density(self) -> None:
        spec = CustomHitRequest(diameter=10, velocity=5).to_spec(2500.0)
        assert spec.density_kg_m3 == 2500.0

    def test_naive_date_is_utc(self) -> None:
        body = CustomHitRequest.model_validate(
            {"diameter": 10, "velocity": 5, "date": "2030-01-01T00:00:00"}
        )
        spec = body.to_spec(3000.0)
        assert spec.impact_date.tzinfo is not None


class TestCustomHitEndpoint:
    def test_json_report(self, client: TestClient) -> None:
        resp = client.post("/custom-hit", json=EUROPE_HIT)
        assert resp.status_code == 200
        data = resp.json()
        assert isinstance(data, list)
        assert len(data) == 1
        report = data[0]
        assert report["spec"]["name"] == "Europe hit"
        assert report["geographic"]["risk"]["primary_region"] == "Europe"
        assert report["seismic"]["tsunami_warning"] is None
        assert report["mitigation"]["recommended_approach"] == "LAST_RESORT_DISRUPTION"
        assert report["errors"] == []

    def test_report_count_increments(self, client: TestClient) -> None:
        before = client.get("/health").json()["report_count"]
        client.post("/custom-hit", json=EUROPE_HIT)
        after = client.get("/health").json()["report_count"]
        assert after == before + 1

    def test_invalid_parameter_returns_400(self, client: TestClient) -> None:
        resp = client.post("/custom-hit", json={"diameter": -1, "velocity": 20})
        assert resp.status_code == 400
        assert "diameter_m" in resp.json()["detail"]

    def test_lat_without_lon_returns_400(self, client: TestClient) -> None:
        resp = client.post("/custom-hit", json={"diameter": 10, "velocity": 20, "lat": 5})
        assert resp.status_code == 400

    def test_energy_overflow_returns_400(self, client: TestClient) -> None:
        resp = client.post(
            "/custom-hit",
            json={"diameter": 100, "velocity": 1e5, "mass": 1e300, "days_until_impact": 10},
        )
        assert resp.status_code == 400
        assert "out of range" in resp.json()["detail"]

    def test_velocity_overflow_returns_400(self, client: TestClient) -> None:
        resp = client.post("/custom-hit", json={"diameter": 100, "velocity": 1e200})
        assert resp.status_code == 400

    def test_missing_required_field_is_422(self, client: TestClient) -> None:
        resp = client.post("/custom-hit", json={"velocity": 20})
        assert resp.status_code == 422

    def test_missing_timing_reports_failed_stage(self, client: TestClient) -> None:
        resp = client.post("/custom-hit", json={"diameter": 50, "velocity": 20})
        assert resp.status_code == 200
        report = resp.json()[0]
        assert report["mitigation"]["stage"] == "mitigation"
        assert report["errors"][0]["error"] == "Mitigation strategy calculation failed"

    def test_csv_format(self, client: TestClient) -> None:
        resp = client.post("/custom-hit?format=csv", json=EUROPE_HIT)
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert resp.text.splitlines()[0].startswith("name,neo_id")

    def test_markdown_format(self, client: TestClient) -> None:
        resp = client.post("/custom-hit?format=markdown", json=EUROPE_HIT)
        assert resp.status_code == 200
        assert resp.text.startswith("# Impact Effects Report")

    def test_geojson_format(self, client: TestClient) -> None:
        resp = client.post("/custom-hit?format=geojson", json=EUROPE_HIT)
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/geo+json")
        assert resp.json()["type"] == "FeatureCollection"

    def test_invalid_format_is_422(self, client: TestClient) -> None:
        resp = client.post("/custom-hit?format=xml", json=EUROPE_HIT)
        assert resp.status_code == 422


class TestScanEndpoint:
    @responses.activate
    def test_json_with_summary(
        self, client: TestClient, sample_neows_feed: dict, no_disk_cache: None
    ) -> None:
        responses.add(responses.GET, NEOWS_FEED_URL, json=sample_neows_feed, status=200)

        resp = client.get("/scan?start=2025-09-01&end=2025-09-02&seed=1")
        assert resp.status_code == 200
        data = resp.json()
        assert data["summary"]["total_objects"] == 2
        assert data["summary"]["hazardous_count"] == 1
        assert [r["spec"]["name"] for r in data["reports"]] == [
            "465633 (2009 JR5)",
            "(2010 PK9)",
        ]

    @responses.activate
    def test_upstream_error_returns_502(self, client: TestClient, no_disk_cache: None) -> None:
        responses.add(responses.GET, NEOWS_FEED_URL, status=500)

        resp = client.get("/scan?start=2025-09-01&end=2025-09-02&no_cache=true")
        assert resp.status_code == 502
        assert "Upstream feed error" in resp.json()["detail"]

    @responses.activate
    def test_connection_error_returns_502(self, client: TestClient, no_disk_cache: None) -> None:
        responses.add(
            responses.GET, NEOWS_FEED_URL, body=RequestsConnectionError("DNS failure")
        )

        resp = client.get("/scan?start=2025-09-01&end=2025-09-02&no_cache=true")
        assert resp.status_code == 502

    def test_range_too_long_returns_400(self, client: TestClient) -> None:
        resp = client.get("/scan?start=2025-09-01&end=2025-09-20")
        assert resp.status_code == 400
        assert "7 days" in resp.json()["detail"]

    @responses.activate
    def test_markdown_includes_feed_summary(
        self, client: TestClient, sample_neows_feed: dict, no_disk_cache: None
    ) -> None:
        responses.add(responses.GET, NEOWS_FEED_URL, json=sample_neows_feed, status=200)

        resp = client.get("/scan?start=2025-09-01&end=2025-09-02&format=markdown")
        assert resp.status_code == 200
        assert "## Feed Summary" in resp.text
