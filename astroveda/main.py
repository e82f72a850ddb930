# astroveda/main.py
from __future__ import annotations

import logging
import os
import traceback
from time import perf_counter
from typing import Optional

from flask import Flask, Response, g, jsonify, request
from flask_cors import CORS
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix

from astroveda.api.routes import api as api_bp
from astroveda.core.validators import InvalidInput
from astroveda.utils import metrics
from astroveda.utils.config import engine_settings, load_config
from astroveda.version import VERSION

_TRACKED_EXACT = ("/", "/health", "/healthz", "/metrics")
SEEDED_ROUTES = (
    "/", "/health", "/healthz", "/metrics",
    "/api/health", "/api/config", "/api/chart", "/api/moon-phase",
)


def _tracked(path: str) -> bool:
    return path.startswith("/api/") or path in _TRACKED_EXACT


# ───────────────────────── helpers: logging & errors ─────────────────────────
def _configure_logging(app: Flask) -> None:
    gerr = logging.getLogger("gunicorn.error")
    if gerr.handlers:
        app.logger.handlers = gerr.handlers
        app.logger.setLevel(gerr.level)
    else:
        logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))


def _register_errors(app: Flask) -> None:
    @app.errorhandler(InvalidInput)
    def _invalid(e: InvalidInput):
        app.logger.warning("invalid input at %s %s: %s", request.method, request.path, e)
        return jsonify(ok=False, error="validation_error", details=e.errors()), 400

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        app.logger.warning("HTTP %s at %s %s: %s", e.code, request.method, request.path, e.description)
        return jsonify(
            ok=False,
            error="http_error",
            code=e.code,
            name=e.name,
            message=e.description,
            path=request.path,
        ), e.code

    @app.errorhandler(Exception)
    def _any(e: Exception):
        app.logger.error(
            "UNHANDLED %s at %s %s\n%s", type(e).__name__, request.method, request.path, traceback.format_exc()
        )
        return jsonify(
            ok=False,
            error="internal_error",
            type=type(e).__name__,
            message=str(e),
            path=request.path,
        ), 500


# ───────────────────────── health & metrics ─────────────────────────
def _register_health(app: Flask) -> None:
    @app.route("/", methods=["GET"])
    def root():
        return jsonify(ok=True, service="astroveda", version=VERSION, health="/health"), 200

    @app.route("/health", methods=["GET"])
    @app.route("/healthz", methods=["GET"])
    def health():
        return jsonify(ok=True, status="ok"), 200


def _metrics_auth_ok() -> bool:
    auth = request.authorization
    user = os.getenv("METRICS_USER", "")
    pw = os.getenv("METRICS_PASS", "")
    return bool(
        auth and auth.type == "basic" and auth.username == user and auth.password == pw and user and pw
    )


def _register_metrics(app: Flask) -> None:
    # labelled by URL rule; unmatched URLs are not counted
    @app.before_request
    def _before():
        rule = request.url_rule
        if rule is not None and _tracked(rule.rule):
            metrics.MET_REQUESTS.labels(route=rule.rule).inc()
            g.t0 = perf_counter()

    @app.after_request
    def _after(resp):
        t0 = g.pop("t0", None)
        if t0 is not None and request.url_rule is not None:
            metrics.REQ_LATENCY.labels(route=request.url_rule.rule).observe(perf_counter() - t0)
        return resp

    @app.route("/metrics", methods=["GET"])
    def metrics_endpoint():
        if not _metrics_auth_ok():
            return Response("Unauthorized", 401, {"WWW-Authenticate": 'Basic realm="metrics"'})
        metrics.GAUGE_APP_UP.set(1.0)
        return Response(generate_latest(REGISTRY), mimetype=CONTENT_TYPE_LATEST)


# ───────────────────────── app factory ─────────────────────────
def create_app(config_path: Optional[str] = None) -> Flask:
    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)  # type: ignore

    _configure_logging(app)

    # invalid config raises here
    cfg = load_config(config_path)
    app.cfg = cfg  # type: ignore[attr-defined]
    app.config["ASTROVEDA_SETTINGS"] = engine_settings(cfg)

    metrics.seed(SEEDED_ROUTES)

    _register_health(app)
    _register_errors(app)
    _register_metrics(app)
    app.register_blueprint(api_bp)

    origin = os.environ.get("CORS_ALLOW_ORIGIN") or "*"
    CORS(
        app,
        resources={r"/.*": {"origins": origin}},
        supports_credentials=False,
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=600,
    )

    s = app.config["ASTROVEDA_SETTINGS"]
    app.logger.info(
        "astroveda %s initialized; dasha_model=%s default_location=%.4f,%.4f",
        VERSION, s.dasha_model, s.default_latitude, s.default_longitude,
    )
    return app


# ───────────────────────── app instance ─────────────────────────
app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
