from __future__ import annotations
from dataclasses import dataclass

from astroveda.core.constants import DASHA_ORDER, NAKSHATRA_NAMES, normalize_degree

NAKSHATRA_SPAN = 360.0 / 27.0   # 13°20'
PADA_SPAN = NAKSHATRA_SPAN / 4.0  # 3°20'


@dataclass(frozen=True)
class NakshatraPlacement:
    index: int   # 0..26
    name: str
    lord: str
    pada: int    # 1..4


def nakshatra_index(lon: float) -> int:
    pos = normalize_degree(lon)
    return min(int(pos // NAKSHATRA_SPAN), 26)


def nakshatra_lord(index: int) -> str:
    return DASHA_ORDER[index % 9]


def pada(lon: float) -> int:
    pos = normalize_degree(lon)
    rem = pos - nakshatra_index(pos) * NAKSHATRA_SPAN
    # floating error at a segment edge can push the quotient to -1 or 4
    return max(1, min(int(rem // PADA_SPAN) + 1, 4))


def resolve_nakshatra(lon: float) -> NakshatraPlacement:
    """Sidereal longitude → (nakshatra, ruling lord, pada)."""
    idx = nakshatra_index(lon)
    return NakshatraPlacement(
        index=idx,
        name=NAKSHATRA_NAMES[idx],
        lord=nakshatra_lord(idx),
        pada=pada(lon),
    )
