from __future__ import annotations
"""
Sidereal ascendant (lagna) and Whole-Sign house mapping.

Ascendant chain:
  JD → GMST (linear, anchored at J2000) → LST = GMST + east longitude
     → tropical ascendant via the spherical-trig formula with a fixed obliquity
     → sidereal lagna = tropical − ayanamsa(T)

Houses:
  Whole-Sign: the lagna's sign is house 1, the next sign house 2, and so on.
  A planet's house depends only on its sign and the lagna sign.
"""

from typing import Dict, Iterable, List, Tuple
import math

from astroveda.core.astronomy import ayanamsa
from astroveda.core.constants import (
    J2000_JD,
    KENDRA_HOUSES,
    RASHI_LORDS,
    TRIKONA_HOUSES,
    normalize_degree,
    sign_name,
)
from astroveda.core.models import House, HouseKind, Lagna
from astroveda.core.nakshatra import resolve_nakshatra
from astroveda.core.time_kernel import centuries_since_j2000

__all__ = [
    "OBLIQUITY_DEG",
    "gmst_degrees",
    "local_sidereal_time",
    "tropical_ascendant",
    "sidereal_ascendant",
    "sign_of",
    "degree_in_sign",
    "build_lagna",
    "house_of",
    "house_kind",
    "whole_sign_houses",
]

OBLIQUITY_DEG = 23.439


def gmst_degrees(jd: float) -> float:
    return normalize_degree(280.46061837 + 360.98564736629 * (float(jd) - J2000_JD))


def local_sidereal_time(jd: float, lon_east_deg: float) -> float:
    return normalize_degree(gmst_degrees(jd) + float(lon_east_deg))


def tropical_ascendant(lst_deg: float, lat_deg: float) -> float:
    lst = math.radians(lst_deg)
    eps = math.radians(OBLIQUITY_DEG)
    phi = math.radians(lat_deg)
    num = math.cos(lst)
    den = -math.sin(lst) * math.cos(eps) - math.tan(phi) * math.sin(eps)
    return normalize_degree(math.degrees(math.atan2(num, den)))


def sidereal_ascendant(jd: float, lat_deg: float, lon_east_deg: float) -> float:
    T = centuries_since_j2000(jd)
    trop = tropical_ascendant(local_sidereal_time(jd, lon_east_deg), lat_deg)
    return normalize_degree(trop - ayanamsa(T))


def sign_of(lon: float) -> int:
    """1-based rashi number for a sidereal longitude."""
    return min(int(normalize_degree(lon) // 30.0) + 1, 12)


def degree_in_sign(lon: float) -> float:
    pos = normalize_degree(lon)
    return pos - (sign_of(pos) - 1) * 30.0


def build_lagna(lagna_lon: float) -> Lagna:
    sign = sign_of(lagna_lon)
    nak = resolve_nakshatra(lagna_lon)
    return Lagna(
        longitude=normalize_degree(lagna_lon),
        sign=sign,
        sign_name=sign_name(sign),
        degree=degree_in_sign(lagna_lon),
        nakshatra=nak.name,
        nakshatra_lord=nak.lord,
        pada=nak.pada,
        lord=RASHI_LORDS[sign],
    )


def _check_sign(label: str, sign: int) -> None:
    if not 1 <= int(sign) <= 12:
        raise ValueError(f"{label} must be within 1..12, got {sign}")


def house_of(lagna_sign: int, planet_sign: int) -> int:
    """Whole-Sign house (1..12) of a planet sitting in `planet_sign`."""
    _check_sign("lagna_sign", lagna_sign)
    _check_sign("planet_sign", planet_sign)
    raw = (int(planet_sign) - int(lagna_sign) + 1) % 12
    return 12 if raw <= 0 else raw


def house_kind(number: int) -> HouseKind:
    if number in KENDRA_HOUSES:
        return "Kendra"
    if number in TRIKONA_HOUSES:
        return "Trikona"
    return "Neutral"


def whole_sign_houses(lagna_sign: int, occupants: Iterable[Tuple[str, int]]) -> Tuple[House, ...]:
    """
    Enumerate the 12 houses from the lagna sign.

    `occupants` is (planet name, house number) in the order planets should be
    listed inside each house.
    """
    _check_sign("lagna_sign", lagna_sign)
    by_house: Dict[int, List[str]] = {n: [] for n in range(1, 13)}
    for name, house in occupants:
        by_house[house].append(name)

    houses: List[House] = []
    for offset in range(12):
        number = offset + 1
        sign = (lagna_sign - 1 + offset) % 12 + 1
        houses.append(House(
            number=number,
            sign=sign,
            sign_name=sign_name(sign),
            lord=RASHI_LORDS[sign],
            planets=tuple(by_house[number]),
            kind=house_kind(number),
        ))
    return tuple(houses)
