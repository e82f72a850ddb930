# astroveda/utils/config.py
import logging
import os

import yaml

from astroveda.core.constants import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_PLACE
from astroveda.core.models import EngineSettings

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join("config", "defaults.yaml")
DASHA_MODELS = ("flat", "vimshottari")

_BUILTIN = {
    "default_location": {
        "latitude": DEFAULT_LATITUDE,
        "longitude": DEFAULT_LONGITUDE,
        "place": DEFAULT_PLACE,
    },
    "dasha": {"model": "flat", "flat_years": 7},
}


class AttrDict(dict):
    """Dict that also supports attribute access: cfg.dasha and cfg['dasha'] both work."""
    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError as e:
            raise AttributeError(item) from e
    def __setattr__(self, key, value):
        self[key] = value


def _to_attr(obj):
    if isinstance(obj, dict):
        return AttrDict({k: _to_attr(v) for k, v in obj.items()})
    if isinstance(obj, list):
        return [_to_attr(x) for x in obj]
    return obj


def _merge(base, extra):
    out = dict(base)
    for k, v in (extra or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_float(name):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_config(path=None):
    """
    Load YAML config from `path` (default $ASTROVEDA_CONFIG or config/defaults.yaml)
    on top of the built-in defaults. A missing file is not an error.
    Env overrides:
      - ASTROVEDA_DASHA_MODEL
      - ASTROVEDA_DEFAULT_LAT / ASTROVEDA_DEFAULT_LNG
    Returns an AttrDict for convenient access.
    """
    path = path or os.getenv("ASTROVEDA_CONFIG") or DEFAULT_CONFIG_PATH
    data = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{path}: invalid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{path}: top level must be a mapping")
    else:
        log.info("config file %s not found, using built-in defaults", path)

    data = _merge(_BUILTIN, data)

    model = os.getenv("ASTROVEDA_DASHA_MODEL")
    if model:
        data["dasha"]["model"] = model.strip().lower()
    lat = _env_float("ASTROVEDA_DEFAULT_LAT")
    if lat is not None:
        data["default_location"]["latitude"] = lat
    lng = _env_float("ASTROVEDA_DEFAULT_LNG")
    if lng is not None:
        data["default_location"]["longitude"] = lng

    return _to_attr(data)


def engine_settings(cfg) -> EngineSettings:
    """Validate the engine part of a loaded config."""
    loc = cfg.default_location
    lat, lng = float(loc.latitude), float(loc.longitude)
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"default latitude out of range: {lat}")
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"default longitude out of range: {lng}")

    model = str(cfg.dasha.model).lower()
    if model not in DASHA_MODELS:
        raise ValueError(f"dasha model must be one of {DASHA_MODELS}, got {model!r}")
    years = int(cfg.dasha.flat_years)
    if years <= 0:
        raise ValueError("dasha flat_years must be > 0")

    return EngineSettings(
        default_latitude=lat,
        default_longitude=lng,
        default_place=str(loc.get("place") or DEFAULT_PLACE),
        dasha_model=model,
        flat_dasha_years=years,
    )
