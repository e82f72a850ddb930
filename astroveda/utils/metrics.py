# astroveda/utils/metrics.py
from __future__ import annotations
from typing import Final, Iterable

from prometheus_client import Counter, Gauge, Histogram

# Metric names are part of the ops contract; keep them stable.
MET_REQUESTS: Final = Counter("astroveda_api_requests_total", "API requests", ["route"])
REQ_LATENCY: Final = Histogram("astroveda_request_seconds", "API request latency", ["route"])
MET_CHARTS: Final = Counter("astroveda_charts_total", "Chart computations", ["outcome"])
MET_DEFAULT_LOCATION: Final = Counter(
    "astroveda_default_location_total", "Charts computed at the default location"
)
GAUGE_APP_UP: Final = Gauge("astroveda_app_up", "1 if app is running")

CHART_OUTCOMES = ("ok", "invalid", "error")


def seed(routes: Iterable[str]) -> None:
    """Export zero-valued series so dashboards see every label from the start."""
    for route in routes:
        MET_REQUESTS.labels(route=route).inc(0)
        REQ_LATENCY.labels(route=route)
    for outcome in CHART_OUTCOMES:
        MET_CHARTS.labels(outcome=outcome).inc(0)
    GAUGE_APP_UP.set(1.0)
