# astroveda/core/validators.py
from __future__ import annotations

import math
import re
from datetime import date, datetime, time
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from astroveda.core.models import BirthInput

# Supported birth years; vimshottari periods stay inside the datetime range.
MIN_YEAR = 1000
MAX_YEAR = 3000
MAX_NAME_LEN = 200

# ───────────────────────── errors ─────────────────────────

class InvalidInput(ValueError):
    """Malformed caller input; `.errors()` lists structured entries (loc, msg, type)."""
    def __init__(self, details: Union[str, Dict[str, Any], List[Dict[str, Any]]]):
        if isinstance(details, str):
            self._details = [{"loc": [], "msg": details, "type": "value_error"}]
        elif isinstance(details, dict):
            self._details = [details]
        else:
            self._details = list(details)
        super().__init__(self._details[0]["msg"] if self._details else "invalid_input")

    def errors(self) -> List[Dict[str, Any]]:
        return list(self._details)


# ───────────────────────── helpers ─────────────────────────

def _err(loc: Union[List[str], str], msg: str, typ: str = "value_error") -> Dict[str, Any]:
    return {"loc": [loc] if isinstance(loc, str) else loc, "msg": msg, "type": typ}


def _as_float(v: Any) -> Optional[float]:
    if v is None or isinstance(v, bool):
        return None
    try:
        x = float(v)
    except (TypeError, ValueError):
        return None
    return x if math.isfinite(x) else None


def _blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def _first(payload: Mapping[str, Any], *keys: str) -> Tuple[Optional[str], Any]:
    for k in keys:
        if k in payload and not _blank(payload[k]):
            return k, payload[k]
    return None, None


# ───────────────────────── atomic parsers ─────────────────────────

_TIME_RE = re.compile(r"^\s*(?P<h>\d{1,2}):(?P<m>\d{2})(?::(?P<s>\d{2}))?\s*$")
_NOON = time(12, 0)


def parse_date(s: Any, loc: str = "date") -> date:
    if isinstance(s, datetime):
        return s.date()
    if isinstance(s, date):
        return s
    try:
        return datetime.strptime(str(s).strip(), "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise InvalidInput(_err(loc, "date must be 'YYYY-MM-DD'", "value_error.date"))


def parse_time(s: Any, loc: str = "time") -> time:
    """'HH:MM' or 'HH:MM:SS'; blank means 12:00."""
    if isinstance(s, time):
        return s
    if _blank(s):
        return _NOON
    m = _TIME_RE.match(str(s))
    if not m:
        raise InvalidInput(_err(loc, "time must be 'HH:MM' or 'HH:MM:SS'", "value_error.time"))
    hh, mm, ss = int(m.group("h")), int(m.group("m")), int(m.group("s") or 0)
    if not (0 <= hh <= 23 and 0 <= mm <= 59 and 0 <= ss <= 59):
        raise InvalidInput(_err(loc, "time fields out of range", "value_error.time"))
    return time(hh, mm, ss)


def parse_coordinates(
    lat: Any, lng: Any, lat_key: str = "lat", lng_key: str = "lng",
) -> Tuple[Optional[float], Optional[float]]:
    """Both or neither. (None, None) means the engine's default location."""
    if _blank(lat) and _blank(lng):
        return None, None
    if _blank(lat) or _blank(lng):
        raise InvalidInput(_err([lat_key, lng_key], "lat and lng must be given together", "value_error.missing"))
    lat_f, lng_f = _as_float(lat), _as_float(lng)
    if lat_f is None or lng_f is None:
        raise InvalidInput(_err([lat_key, lng_key], "lat/lng must be finite numbers", "type_error.float"))
    if not -90.0 <= lat_f <= 90.0:
        raise InvalidInput(_err(lat_key, "latitude must be between -90 and 90"))
    if not -180.0 <= lng_f <= 180.0:
        raise InvalidInput(_err(lng_key, "longitude must be between -180 and 180"))
    return lat_f, lng_f


def check_year(d: date, loc: str = "date") -> date:
    if not MIN_YEAR <= d.year <= MAX_YEAR:
        raise InvalidInput(_err(loc, f"year must be between {MIN_YEAR} and {MAX_YEAR}"))
    return d


def parse_as_of(value: Any) -> Optional[date]:
    if _blank(value):
        return None
    return parse_date(value, loc="as_of")


# ───────────────────────── payloads ─────────────────────────

def parse_birth_payload(payload: Any) -> BirthInput:
    """
    Accepts either the short keys (dob, tob, pob, lat, lng) or the long ones
    (date, time, place, latitude, longitude/lon).
    """
    if not isinstance(payload, Mapping):
        raise InvalidInput(_err("body", "JSON object expected", "type_error.dict"))

    errors: List[Dict[str, Any]] = []

    name = payload.get("name") or ""
    if not isinstance(name, str):
        errors.append(_err("name", "name must be a string", "type_error.str"))
        name = ""
    elif len(name) > MAX_NAME_LEN:
        errors.append(_err("name", f"name must be at most {MAX_NAME_LEN} characters"))

    dob: Optional[date] = None
    dob_key, dob_raw = _first(payload, "dob", "date")
    if dob_key is None:
        errors.append(_err("dob", "field required", "value_error.missing"))
    else:
        try:
            dob = check_year(parse_date(dob_raw, loc=dob_key), loc=dob_key)
        except InvalidInput as e:
            errors.extend(e.errors())

    tob = _NOON
    tob_key, tob_raw = _first(payload, "tob", "time")
    if tob_key is not None:
        try:
            tob = parse_time(tob_raw, loc=tob_key)
        except InvalidInput as e:
            errors.extend(e.errors())

    place = payload.get("pob", payload.get("place")) or ""
    if not isinstance(place, str):
        errors.append(_err("pob", "place must be a string", "type_error.str"))
        place = ""

    lat_key, lat_raw = _first(payload, "lat", "latitude")
    lng_key, lng_raw = _first(payload, "lng", "lon", "longitude")
    lat = lng = None
    try:
        lat, lng = parse_coordinates(lat_raw, lng_raw, lat_key or "lat", lng_key or "lng")
    except InvalidInput as e:
        errors.extend(e.errors())

    if errors or dob is None:
        raise InvalidInput(errors)
    return BirthInput(
        name=name.strip(),
        date=dob,
        time=tob,
        place=place.strip(),
        latitude=lat,
        longitude=lng,
    )


def parse_moon_phase_payload(payload: Any) -> date:
    if not isinstance(payload, Mapping):
        raise InvalidInput(_err("body", "JSON object expected", "type_error.dict"))
    key, raw = _first(payload, "date", "dob")
    if key is None:
        raise InvalidInput(_err("date", "field required", "value_error.missing"))
    return parse_date(raw, loc=key)
