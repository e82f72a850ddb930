# -*- coding: utf-8 -*-
"""
First-order sidereal positions for the nine grahas.

Model
-----
- Tropical longitude = mean longitude (linear in Julian centuries T).
- Sun and Moon get a single-term equation of centre; the five star-planets use
  the uncorrected mean longitude (orbital eccentricity ignored).
- Sidereal longitude = tropical − ayanamsa(T), with a linear Lahiri-style
  precession model anchored at 23.85° for J2000.

This is deliberately coarse: it is stable at day-level input precision but is
not an ephemeris. Changing any constant here moves sign placements downstream.

Public API:
    ayanamsa(T) -> float
    mean_longitude(planet, T) -> float
    equation_of_center(planet, T) -> float
    tropical_longitude(planet, T) -> float
    daily_motion(planet) -> float
    sidereal_position(planet, jd) -> SiderealPosition
    sidereal_positions(jd) -> tuple[SiderealPosition, ...]
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple
import math

from astroveda.core.constants import DAYS_PER_CENTURY, GRAHAS, NODES, normalize_degree
from astroveda.core.time_kernel import centuries_since_j2000

__all__ = [
    "SiderealPosition",
    "ayanamsa",
    "mean_longitude",
    "equation_of_center",
    "tropical_longitude",
    "daily_motion",
    "is_retrograde",
    "sidereal_position",
    "sidereal_positions",
]

AYANAMSA_NAME = "Lahiri"
AYANAMSA_AT_J2000 = 23.85
PRECESSION_ARCSEC_PER_YEAR = 50.29

# (base longitude at J2000, degrees per Julian century)
_MEAN_ELEMENTS: Mapping[str, Tuple[float, float]] = MappingProxyType({
    "Sun": (280.46646, 36000.76983),
    "Moon": (218.3165, 481267.8813),
    "Mercury": (252.2509, 149472.6746),
    "Venus": (181.9798, 58517.8157),
    "Mars": (355.433, 19140.2965),
    "Jupiter": (34.3515, 3034.9057),
    "Saturn": (50.0774, 1222.1138),
    "Rahu": (125.0445, -1934.1363),
})

# (amplitude deg, mean-anomaly base, mean-anomaly rate per century)
_CENTER_TERMS: Mapping[str, Tuple[float, float, float]] = MappingProxyType({
    "Sun": (1.915, 357.529, 35999.05),
    "Moon": (6.289, 134.963, 477198.867),
})


@dataclass(frozen=True)
class SiderealPosition:
    planet: str
    longitude: float   # sidereal, [0, 360)
    retrograde: bool
    speed: float       # mean motion, deg/day


def _require_graha(planet: str) -> None:
    if planet not in GRAHAS:
        raise ValueError(f"unknown graha '{planet}'; expected one of {', '.join(GRAHAS)}")


def ayanamsa(T: float) -> float:
    """Linear precession offset in degrees for T Julian centuries from J2000."""
    return AYANAMSA_AT_J2000 + 100.0 * float(T) * (PRECESSION_ARCSEC_PER_YEAR / 3600.0)


def mean_longitude(planet: str, T: float) -> float:
    _require_graha(planet)
    if planet == "Ketu":
        return normalize_degree(mean_longitude("Rahu", T) + 180.0)
    base, rate = _MEAN_ELEMENTS[planet]
    return normalize_degree(base + rate * float(T))


def equation_of_center(planet: str, T: float) -> float:
    _require_graha(planet)
    term = _CENTER_TERMS.get(planet)
    if term is None:
        return 0.0
    amplitude, m0, m1 = term
    anomaly = normalize_degree(m0 + m1 * float(T))
    return amplitude * math.sin(math.radians(anomaly))


def tropical_longitude(planet: str, T: float) -> float:
    return normalize_degree(mean_longitude(planet, T) + equation_of_center(planet, T))


def daily_motion(planet: str) -> float:
    """Mean motion in degrees per day (negative for the nodes)."""
    _require_graha(planet)
    _, rate = _MEAN_ELEMENTS["Rahu" if planet == "Ketu" else planet]
    return rate / DAYS_PER_CENTURY


def is_retrograde(planet: str) -> bool:
    # Only the nodes; real retrogradation needs multi-day velocity sampling.
    _require_graha(planet)
    return planet in NODES


def sidereal_position(planet: str, jd: float) -> SiderealPosition:
    T = centuries_since_j2000(jd)
    lon = normalize_degree(tropical_longitude(planet, T) - ayanamsa(T))
    return SiderealPosition(
        planet=planet,
        longitude=lon,
        retrograde=is_retrograde(planet),
        speed=daily_motion(planet),
    )


def sidereal_positions(jd: float) -> Tuple[SiderealPosition, ...]:
    """All nine grahas in canonical order."""
    return tuple(sidereal_position(p, jd) for p in GRAHAS)
