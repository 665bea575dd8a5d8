"""Tests for main.py — HTTP routes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from osm_geojson.main import app
    return TestClient(app)


class TestHealthCheck:
    """Test GET /api/health."""

    def test_healthy(self, client):
        from osm_geojson import __version__
        resp = client.get("/api/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__


class TestConvertRoute:
    """Test POST /api/convert."""

    def test_converts_overpass_response(self, client, sample_overpass_response):
        resp = client.post("/api/convert", json=sample_overpass_response)
        assert resp.status_code == 200
        body = resp.json()
        assert body["type"] == "FeatureCollection"
        assert sorted(f["properties"]["osm_id"] for f in body["features"]) == [5, 102, 500]

    def test_empty_body(self, client):
        resp = client.post("/api/convert", json={})
        assert resp.status_code == 200
        assert resp.json() == {"type": "FeatureCollection", "features": []}

    def test_invalid_element_is_400(self, client):
        resp = client.post("/api/convert", json={"elements": [{"type": "node", "id": 1}]})
        assert resp.status_code == 400
        assert "coordinates" in resp.json()["detail"]

    @pytest.mark.parametrize("element", [
        {"type": "way", "id": 1, "nodes": [[1]], "tags": {"a": "b"}},
        {"type": "way", "id": 1, "nodes": [1], "geometry": {"x": 1}},
        {"type": "relation", "id": 1, "members": [{"type": "way", "ref": [2], "role": "outer"}]},
    ])
    def test_malformed_references_are_400(self, client, element):
        resp = client.post("/api/convert", json={"elements": [element]})
        assert resp.status_code == 400

    def test_too_many_elements_is_413(self, client, monkeypatch):
        from osm_geojson.services import validators
        monkeypatch.setattr(validators, "MAX_ELEMENTS_PER_REQUEST", 1)
        elements = [{"type": "node", "id": i, "lat": 31.0, "lon": 35.0} for i in range(2)]
        resp = client.post("/api/convert", json={"elements": elements})
        assert resp.status_code == 413

    def test_unexpected_failure_is_500(self, client, monkeypatch):
        import osm_geojson.main as main

        def _explode(data):
            raise RuntimeError("boom")

        monkeypatch.setattr(main, "convert_overpass", _explode)
        resp = client.post("/api/convert", json={"elements": []})
        assert resp.status_code == 500
        assert "boom" in resp.json()["error"]
