# astroveda/api/routes.py
"""
astroveda API routes
- Chart:      POST /api/chart
- Moon phase: POST /api/moon-phase, GET /api/moon-phase?date=YYYY-MM-DD
- Ops:        GET /api/health, GET /api/config

The blueprint reads EngineSettings from app.config["ASTROVEDA_SETTINGS"]
(set by the app factory) and falls back to the built-in defaults.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from astroveda.core.chart import compute_chart
from astroveda.core.models import EngineSettings
from astroveda.core.moon_phase import calculate_moon_phase
from astroveda.core.validators import (
    InvalidInput,
    parse_as_of,
    parse_birth_payload,
    parse_date,
    parse_moon_phase_payload,
)
from astroveda.utils.metrics import MET_CHARTS, MET_DEFAULT_LOCATION
from astroveda.utils.ratelimit import rate_limit
from astroveda.version import VERSION

log = logging.getLogger(__name__)
api = Blueprint("api", __name__)

# ── per-endpoint rate-limit caps (calls per minute, env-overridable) ───────────
_RL = lambda k, d: int(os.getenv(k, str(d)))
RL_CHART      = _RL("ASTROVEDA_RL_CHART_PER_MIN",      30)
RL_MOON_PHASE = _RL("ASTROVEDA_RL_MOON_PHASE_PER_MIN", 60)
RL_CONFIG     = _RL("ASTROVEDA_RL_CONFIG_PER_MIN",     30)


# ───────────────────────── helpers ─────────────────────────
def _settings() -> EngineSettings:
    return current_app.config.get("ASTROVEDA_SETTINGS") or EngineSettings()


def _body_json() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("JSON body must be an object")
    return data


# ───────────────────────── health / ops ─────────────────────────
@api.get("/api/health")
def health():
    return jsonify({"ok": True, "status": "up", "version": VERSION}), 200


@api.get("/api/config")
@rate_limit(RL_CONFIG)
def config_info():
    s = _settings()
    return jsonify({
        "ok": True,
        "version": VERSION,
        "engine": {
            "ayanamsa": "Lahiri (linear)",
            "house_system": "whole-sign",
            "time_basis": "local-as-UTC",
            "dasha_model": s.dasha_model,
            "flat_dasha_years": s.flat_dasha_years,
        },
        "default_location": {
            "latitude": s.default_latitude,
            "longitude": s.default_longitude,
            "place": s.default_place,
        },
    }), 200


# ───────────────────────── chart ─────────────────────────
@api.post("/api/chart")
@rate_limit(RL_CHART)
def chart():
    payload = _body_json()
    try:
        birth = parse_birth_payload(payload)
        as_of = parse_as_of(payload.get("as_of"))
    except InvalidInput:
        MET_CHARTS.labels(outcome="invalid").inc()
        raise

    try:
        result = compute_chart(birth, settings=_settings(), today=as_of)
    except Exception:
        MET_CHARTS.labels(outcome="error").inc()
        raise

    MET_CHARTS.labels(outcome="ok").inc()
    if result.meta.default_location:
        MET_DEFAULT_LOCATION.inc()
    return jsonify({"ok": True, "chart": result.to_dict()}), 200


# ───────────────────────── moon phase ─────────────────────────
@api.route("/api/moon-phase", methods=["GET", "POST"])
@rate_limit(RL_MOON_PHASE)
def moon_phase():
    if request.method == "GET":
        raw = request.args.get("date")
        if not raw:
            raise InvalidInput({"loc": ["date"], "msg": "field required", "type": "value_error.missing"})
        when = parse_date(raw)
    else:
        when = parse_moon_phase_payload(_body_json())
    data = calculate_moon_phase(when)
    log.debug("moon phase %s -> %s (%.2f%%)", data.date, data.phase_name, data.percentage)
    return jsonify({"ok": True, "moon_phase": data.to_dict()}), 200
