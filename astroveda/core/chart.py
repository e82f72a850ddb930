# astroveda/core/chart.py
from __future__ import annotations
"""
Birth-chart assembly.

BirthInput → JD/T → sidereal grahas → lagna → whole-sign houses
           → dasha (Moon's nakshatra) → panchang → recommendations

Everything here is a pure function of (birth, settings, today). Birth years
outside validators.MIN_YEAR..MAX_YEAR raise InvalidInput. `today` only
moves the dasha window; pass it explicitly for reproducible output.
"""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from astroveda.content.recommendations import build_recommendations
from astroveda.core.astronomy import AYANAMSA_NAME, ayanamsa, sidereal_positions
from astroveda.core.constants import sign_name
from astroveda.core.dasha import build_dasha
from astroveda.core.dignity import dignity, is_combust, rank_by_strength, strength
from astroveda.core.houses import (
    build_lagna,
    degree_in_sign,
    house_of,
    sidereal_ascendant,
    sign_of,
    whole_sign_houses,
)
from astroveda.core.models import BirthInput, Chart, ChartMeta, EngineSettings, Planet
from astroveda.core.nakshatra import resolve_nakshatra
from astroveda.core.panchang import build_panchang
from astroveda.core.time_kernel import birth_instant, centuries_since_j2000, julian_day
from astroveda.core.validators import check_year

log = logging.getLogger(__name__)

__all__ = ["compute_chart"]


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def compute_chart(
    birth: BirthInput,
    *,
    settings: Optional[EngineSettings] = None,
    today: Optional[date] = None,
) -> Chart:
    settings = settings or EngineSettings()
    today = today or _utc_today()
    check_year(birth.date)

    lat, lng, used_default = birth.resolve_location(settings)
    if used_default:
        log.info("no coordinates for %r, using default location %.4f,%.4f", birth.name, lat, lng)
    place = birth.place or (settings.default_place if used_default else "")

    jd = julian_day(birth_instant(birth.date, birth.time))
    T = centuries_since_j2000(jd)

    lagna = build_lagna(sidereal_ascendant(jd, lat, lng))
    positions = sidereal_positions(jd)
    sun_lon = positions[0].longitude
    moon_lon = positions[1].longitude

    ranks = rank_by_strength((p.planet, strength(p.planet, sign_of(p.longitude))) for p in positions)

    planets: List[Planet] = []
    for pos in positions:
        sign = sign_of(pos.longitude)
        nak = resolve_nakshatra(pos.longitude)
        planets.append(Planet(
            name=pos.planet,
            longitude=pos.longitude,
            sign=sign,
            sign_name=sign_name(sign),
            degree=degree_in_sign(pos.longitude),
            house=house_of(lagna.sign, sign),
            retrograde=pos.retrograde,
            nakshatra=nak.name,
            nakshatra_lord=nak.lord,
            pada=nak.pada,
            speed=pos.speed,
            dignity=dignity(pos.planet, sign),
            strength=strength(pos.planet, sign),
            rank=ranks[pos.planet],
            combust=is_combust(pos.planet, pos.longitude, sun_lon),
        ))

    houses = whole_sign_houses(lagna.sign, ((p.name, p.house) for p in planets))
    dasha = build_dasha(
        moon_lon,
        birth=birth.date,
        today=today,
        model=settings.dasha_model,
        flat_years=settings.flat_dasha_years,
    )

    meta = ChartMeta(
        name=birth.name,
        place=place,
        latitude=lat,
        longitude=lng,
        default_location=used_default,
        julian_day=jd,
        ayanamsa=AYANAMSA_NAME,
        ayanamsa_deg=ayanamsa(T),
        dasha_model=settings.dasha_model,
    )
    log.debug("chart jd=%.5f lagna=%s moon=%.3f dasha=%s", jd, lagna.sign_name, moon_lon, dasha.current.planet)

    return Chart(
        meta=meta,
        lagna=lagna,
        planets=tuple(planets),
        houses=houses,
        dasha=dasha,
        panchang=build_panchang(sun_lon, moon_lon, birth.date),
        recommendations=build_recommendations(houses),
    )
