# tests/test_endpoints.py
from __future__ import annotations

import base64

import pytest

sample = {
    "name": "Asha",
    "dob": "2000-01-01",
    "tob": "12:00",
    "pob": "",
    "as_of": "2026-10-16",
}


@pytest.mark.parametrize("path", ["/", "/health", "/healthz", "/api/health"])
def test_health(client, path):
    rv = client.get(path)
    assert rv.status_code == 200
    assert rv.get_json()["ok"] is True


def test_config(client):
    data = client.get("/api/config").get_json()
    assert data["engine"]["dasha_model"] == "flat"
    assert data["engine"]["house_system"] == "whole-sign"
    assert data["default_location"]["latitude"] == 28.6139


def test_chart(client):
    rv = client.post("/api/chart", json=sample)
    assert rv.status_code == 200
    chart = rv.get_json()["chart"]
    assert chart["meta"]["default_location"] is True
    assert chart["lagna"]["sign"] == 3
    assert [p["name"] for p in chart["planets"]][:2] == ["Sun", "Moon"]
    assert chart["dasha"]["current"] == {
        "planet": "Rahu", "start": "2026", "end": "2033", "years": 7.0, "duration": "7 Years",
    }
    assert len(chart["houses"]) == 12
    assert chart["recommendations"]["primary"]["name"] == "Emerald"


def test_chart_with_coordinates(client):
    payload = dict(sample, lat=19.076, lng=72.8777, pob="Mumbai")
    chart = client.post("/api/chart", json=payload).get_json()["chart"]
    assert chart["meta"]["default_location"] is False
    assert chart["meta"]["place"] == "Mumbai"


def test_chart_validation_error(client):
    rv = client.post("/api/chart", json={"name": "x", "dob": "2000-13-01"})
    assert rv.status_code == 400
    data = rv.get_json()
    assert data["error"] == "validation_error"
    assert data["details"][0]["loc"] == ["dob"]


def test_chart_partial_coordinates_rejected(client):
    rv = client.post("/api/chart", json=dict(sample, lat=10.0))
    assert rv.status_code == 400


def test_chart_requires_json_object(client):
    rv = client.post("/api/chart", data="not json", content_type="text/plain")
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "http_error"


def test_moon_phase_post_and_get(client):
    rv = client.post("/api/moon-phase", json={"date": "2000-01-20"})
    assert rv.status_code == 200
    mp = rv.get_json()["moon_phase"]
    assert mp["phase_name"] == "Full Moon"
    assert mp["archetype"]["personality_type"] == "The Illuminated Visionary"

    rv = client.get("/api/moon-phase?date=2000-01-06")
    assert rv.get_json()["moon_phase"]["phase_name"] == "New Moon"


def test_moon_phase_get_requires_date(client):
    rv = client.get("/api/moon-phase")
    assert rv.status_code == 400
    assert rv.get_json()["details"][0]["loc"] == ["date"]


def test_unknown_route_is_json(client):
    rv = client.get("/api/nope")
    assert rv.status_code == 404
    assert rv.get_json()["code"] == 404


def test_metrics_requires_auth(client, monkeypatch):
    monkeypatch.setenv("METRICS_USER", "ops")
    monkeypatch.setenv("METRICS_PASS", "s3cret")
    assert client.get("/metrics").status_code == 401

    client.post("/api/chart", json=sample)
    token = base64.b64encode(b"ops:s3cret").decode()
    rv = client.get("/metrics", headers={"Authorization": f"Basic {token}"})
    assert rv.status_code == 200
    body = rv.get_data(as_text=True)
    assert "astroveda_charts_total" in body
    assert "astroveda_default_location_total" in body
    assert "astroveda_app_up 1.0" in body


def test_metrics_closed_without_credentials_configured(client, monkeypatch):
    monkeypatch.delenv("METRICS_USER", raising=False)
    monkeypatch.delenv("METRICS_PASS", raising=False)
    token = base64.b64encode(b":").decode()
    assert client.get("/metrics", headers={"Authorization": f"Basic {token}"}).status_code == 401
