# tests/test_ratelimit.py
from __future__ import annotations

import pytest
from flask import Flask, jsonify

from astroveda.utils.ratelimit import rate_limit, reset_buckets


@pytest.fixture
def limited_client(monkeypatch):
    monkeypatch.delenv("ASTROVEDA_RL_DISABLE", raising=False)
    monkeypatch.delenv("ASTROVEDA_RL_ALLOWLIST", raising=False)
    reset_buckets()

    app = Flask(__name__)

    @app.get("/ping")
    @rate_limit(2)
    def ping():
        return jsonify(ok=True)

    yield app.test_client()
    reset_buckets()


def test_burst_then_429(limited_client):
    first = limited_client.get("/ping")
    assert first.status_code == 200
    assert first.headers["X-RateLimit-Limit"] == "2"
    assert first.headers["X-RateLimit-Remaining"] == "1"
    assert limited_client.get("/ping").status_code == 200

    rv = limited_client.get("/ping")
    assert rv.status_code == 429
    data = rv.get_json()
    assert data["error"] == "rate_limited"
    assert int(rv.headers["Retry-After"]) >= 1


def test_clients_are_separate(limited_client):
    for _ in range(2):
        limited_client.get("/ping")
    assert limited_client.get("/ping").status_code == 429
    rv = limited_client.get("/ping", headers={"X-Forwarded-For": "203.0.113.9"})
    assert rv.status_code == 200


def test_disable_switch(limited_client, monkeypatch):
    monkeypatch.setenv("ASTROVEDA_RL_DISABLE", "1")
    for _ in range(5):
        assert limited_client.get("/ping").status_code == 200


def test_allowlist(limited_client, monkeypatch):
    monkeypatch.setenv("ASTROVEDA_RL_ALLOWLIST", "127.0.0.1")
    for _ in range(5):
        assert limited_client.get("/ping").status_code == 200


def test_rejects_nonpositive_limit():
    with pytest.raises(ValueError):
        rate_limit(0)
