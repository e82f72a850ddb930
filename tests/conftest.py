# tests/conftest.py
from __future__ import annotations

"""
Pytest configuration for the astroveda suite.

- Registers Hypothesis profiles for local dev and CI.
- Freezes the process TZ to UTC (the engine treats birth time as UTC anyway).
- Provides a Flask test client with rate limiting switched off.
- Pins the "today" used for the dasha window so chart output never depends on the wall clock.
"""

import os
from datetime import date, time

import pytest
from hypothesis import settings, HealthCheck

from astroveda.core.models import BirthInput


# ──────────────────────────────────────────────────────────────────────────────
# Hypothesis profiles
# ──────────────────────────────────────────────────────────────────────────────
settings.register_profile(
    "dev",
    settings(
        deadline=None,
        max_examples=60,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)
settings.register_profile(
    "ci",
    settings(
        deadline=None,
        max_examples=200,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)

_profile = (
    "ci"
    if (os.getenv("CI") or os.getenv("GITHUB_ACTIONS"))
    else os.getenv("HYPOTHESIS_PROFILE", "dev")
)
settings.load_profile(_profile)


def pytest_report_header(config: pytest.Config) -> str:
    return f"Hypothesis profile: '{_profile}'"


# ──────────────────────────────────────────────────────────────────────────────
# Global fixtures
# ──────────────────────────────────────────────────────────────────────────────
AS_OF = date(2026, 10, 16)


@pytest.fixture(scope="session", autouse=True)
def freeze_tz_env():
    prev = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    try:
        yield
    finally:
        if prev is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = prev


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def j2000_birth() -> BirthInput:
    """Noon on 2000-01-01 (JD 2451545.0) at the default location."""
    return BirthInput(name="Asha", date=date(2000, 1, 1), time=time(12, 0), place="")


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("ASTROVEDA_RL_DISABLE", "1")
    monkeypatch.delenv("ASTROVEDA_DASHA_MODEL", raising=False)
    monkeypatch.delenv("ASTROVEDA_CONFIG", raising=False)
    from astroveda.main import create_app
    application = create_app()
    application.testing = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()
