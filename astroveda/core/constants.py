# astroveda/core/constants.py
# -*- coding: utf-8 -*-
"""
Core constants & small helpers

Purpose
-------
Single source of truth for:
- the nine grahas and the lunar nodes
- rashi (sign) names and their classical lords
- the 27 nakshatras and the Vimshottari lord cycle
- time anchors (J2000, Unix epoch JD, synodic month)
- the angle-normalisation helper every engine module relies on

Design
------
- Pure-Python, no external dependencies.
- Tables are tuples / read-only mappings so nothing can mutate them at runtime.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Tuple
import math

__all__ = [
    # grahas
    "GRAHAS", "NODES",
    # signs
    "RASHIS", "RASHI_LORDS", "ZODIAC_SIGNS",
    # nakshatras / dasha
    "NAKSHATRA_NAMES", "DASHA_ORDER", "VIMSHOTTARI_YEARS",
    # time anchors
    "J2000_JD", "UNIX_EPOCH_JD", "MS_PER_DAY", "DAYS_PER_CENTURY", "SYNODIC_MONTH_DAYS",
    # houses
    "KENDRA_HOUSES", "TRIKONA_HOUSES",
    # defaults
    "DEFAULT_LATITUDE", "DEFAULT_LONGITUDE", "DEFAULT_PLACE",
    # helpers
    "normalize_degree", "sign_name",
]

# ── grahas ───────────────────────────────────────────────────────────────────
GRAHAS: Tuple[str, ...] = (
    "Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn", "Rahu", "Ketu",
)
NODES: frozenset[str] = frozenset({"Rahu", "Ketu"})

# ── rashis (1-based; index 0 is a placeholder so sign numbers index directly) ─
RASHIS: Tuple[str, ...] = (
    "",
    "Mesha (Aries)", "Vrishabha (Taurus)", "Mithuna (Gemini)", "Karka (Cancer)",
    "Simha (Leo)", "Kanya (Virgo)", "Tula (Libra)", "Vrishchika (Scorpio)",
    "Dhanu (Sagittarius)", "Makara (Capricorn)", "Kumbha (Aquarius)", "Meena (Pisces)",
)
RASHI_LORDS: Tuple[str, ...] = (
    "",
    "Mars", "Venus", "Mercury", "Moon", "Sun", "Mercury",
    "Venus", "Mars", "Jupiter", "Saturn", "Saturn", "Jupiter",
)
# Western labels used by the moon-phase proxy (0-based)
ZODIAC_SIGNS: Tuple[str, ...] = (
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)

# ── nakshatras & Vimshottari ──────────────────────────────────────────────────
NAKSHATRA_NAMES: Tuple[str, ...] = (
    "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
    "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni", "Uttara Phalguni",
    "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
    "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana", "Dhanishta", "Shatabhisha",
    "Purva Bhadrapada", "Uttara Bhadrapada", "Revati",
)

# Canonical ruler cycle; nakshatra lords and dasha sequencing both index into it.
DASHA_ORDER: Tuple[str, ...] = (
    "Ketu", "Venus", "Sun", "Moon", "Mars", "Rahu", "Jupiter", "Saturn", "Mercury",
)
VIMSHOTTARI_YEARS: Mapping[str, int] = MappingProxyType({
    "Ketu": 7, "Venus": 20, "Sun": 6, "Moon": 10, "Mars": 7,
    "Rahu": 18, "Jupiter": 16, "Saturn": 19, "Mercury": 17,
})

# ── time anchors ──────────────────────────────────────────────────────────────
J2000_JD: float = 2451545.0
UNIX_EPOCH_JD: float = 2440587.5
MS_PER_DAY: float = 86_400_000.0
DAYS_PER_CENTURY: float = 36525.0
SYNODIC_MONTH_DAYS: float = 29.53058867

# ── houses ────────────────────────────────────────────────────────────────────
KENDRA_HOUSES: frozenset[int] = frozenset({1, 4, 7, 10})
TRIKONA_HOUSES: frozenset[int] = frozenset({5, 9})

# ── reference location used when the caller supplies no coordinates ──────────
DEFAULT_LATITUDE: float = 28.6139
DEFAULT_LONGITUDE: float = 77.2090
DEFAULT_PLACE: str = "New Delhi, India"


# ── helpers ───────────────────────────────────────────────────────────────────
def normalize_degree(x: float) -> float:
    """
    Wrap any angle to [0, 360).

    fmod keeps the sign of x, so negatives are shifted up by 360. Adding 360 to
    a tiny negative can round to exactly 360.0, which is folded back to 0.0.
    """
    d = math.fmod(float(x), 360.0)
    if d < 0.0:
        d += 360.0
    return 0.0 if d >= 360.0 else d


def sign_name(sign: int) -> str:
    if not 1 <= sign <= 12:
        raise ValueError(f"sign must be within 1..12, got {sign}")
    return RASHIS[sign]
