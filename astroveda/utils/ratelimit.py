# astroveda/utils/ratelimit.py
from __future__ import annotations

"""
Token-bucket rate limiter for the chart API.

- One bucket per client IP + route (first X-Forwarded-For hop when present)
- Per-process, guarded by an RLock
- X-RateLimit-* headers on every limited route, Retry-After on 429
- Env toggles (read per request):
    ASTROVEDA_RL_DISABLE    -> disable limiter entirely
    ASTROVEDA_RL_ALLOWLIST  -> comma-separated client ids/IPs to skip
"""

import math
import os
import time
from dataclasses import dataclass
from functools import wraps
from threading import RLock
from typing import Any, Callable, Dict, Optional, Set

from flask import jsonify, make_response, request

__all__ = ["rate_limit", "client_key", "reset_buckets"]

_buckets: Dict[str, "Bucket"] = {}
_lock = RLock()

_TRUTHY = ("1", "true", "yes", "on")
IDLE_EVICT_SECONDS = 180.0


def _disabled() -> bool:
    return os.getenv("ASTROVEDA_RL_DISABLE", "0").strip().lower() in _TRUTHY


def _allowlist() -> Set[str]:
    return {s.strip() for s in os.getenv("ASTROVEDA_RL_ALLOWLIST", "").split(",") if s.strip()}


def client_key(req) -> str:
    xff = req.headers.get("X-Forwarded-For", "")
    ident = (xff.split(",")[0].strip() if xff else "") or (req.remote_addr or "anon")
    return f"{ident}:{(req.endpoint or req.path) or '*'}"


@dataclass
class Bucket:
    tokens: float
    capacity: float
    rate: float         # tokens per second
    ts: float           # last refill (monotonic)

    def refill(self, now: float) -> None:
        if now > self.ts:
            self.tokens = min(self.capacity, self.tokens + (now - self.ts) * self.rate)
            self.ts = now


def reset_buckets() -> None:
    with _lock:
        _buckets.clear()


def _evict_idle(now: float) -> None:
    stale = [k for k, b in _buckets.items() if b.tokens >= b.capacity and now - b.ts > IDLE_EVICT_SECONDS]
    for k in stale:
        _buckets.pop(k, None)


def rate_limit(
    max_per_minute: int,
    key_fn: Optional[Callable[[Any], str]] = None,
    *,
    burst: Optional[int] = None,
):
    """
    Allow `max_per_minute` steady calls per bucket with a burst of `burst`
    (defaults to the per-minute limit). Exhausted buckets get a 429:
        {"ok": False, "error": "rate_limited", "details": {"retry_after_seconds": N}}
    """
    if max_per_minute <= 0:
        raise ValueError("max_per_minute must be > 0")

    limit = int(max_per_minute)
    capacity = float(burst if burst is not None else limit)
    rate = limit / 60.0
    policy = f"{limit};w=60;burst={int(capacity)}"

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if _disabled() or request.method in ("HEAD", "OPTIONS"):
                return f(*args, **kwargs)

            key = str((key_fn or client_key)(request))
            allow = _allowlist()
            if key in allow or key.split(":", 1)[0] in allow:
                return f(*args, **kwargs)

            now = time.monotonic()
            with _lock:
                _evict_idle(now)
                b = _buckets.get(key)
                if b is None:
                    b = _buckets[key] = Bucket(tokens=capacity, capacity=capacity, rate=rate, ts=now)
                else:
                    b.refill(now)

                if b.tokens < 1.0:
                    retry_after = max(1, math.ceil((1.0 - b.tokens) / b.rate))
                    resp = make_response(jsonify({
                        "ok": False,
                        "error": "rate_limited",
                        "details": {"retry_after_seconds": retry_after},
                    }), 429)
                    resp.headers["Retry-After"] = str(retry_after)
                    resp.headers["X-RateLimit-Limit"] = str(limit)
                    resp.headers["X-RateLimit-Remaining"] = "0"
                    resp.headers["X-RateLimit-Policy"] = policy
                    return resp

                b.tokens -= 1.0
                remaining = max(0, int(b.tokens))

            resp = make_response(f(*args, **kwargs))
            resp.headers["X-RateLimit-Limit"] = str(limit)
            resp.headers["X-RateLimit-Remaining"] = str(remaining)
            resp.headers["X-RateLimit-Policy"] = policy
            return resp

        return wrapper

    return decorator
