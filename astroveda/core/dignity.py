from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from astroveda.core.constants import GRAHAS, NODES, RASHI_LORDS

# sign numbers (1-based); debilitation is always the opposite sign
EXALTATION_SIGN: Mapping[str, int] = MappingProxyType({
    "Sun": 1, "Moon": 2, "Mars": 10, "Mercury": 6, "Jupiter": 4,
    "Venus": 12, "Saturn": 7, "Rahu": 2, "Ketu": 8,
})

DIGNITY_STRENGTH: Mapping[str, float] = MappingProxyType({
    "exalted": 100.0,
    "own": 90.0,
    "neutral": 75.0,
    "debilitated": 60.0,
})

# classical combustion orbs (degrees from the Sun)
COMBUSTION_ORB: Mapping[str, float] = MappingProxyType({
    "Moon": 12.0, "Mars": 17.0, "Mercury": 14.0,
    "Jupiter": 11.0, "Venus": 10.0, "Saturn": 15.0,
})


def debilitation_sign(planet: str) -> int:
    return (EXALTATION_SIGN[planet] + 5) % 12 + 1


def dignity(planet: str, sign: int) -> str:
    if EXALTATION_SIGN[planet] == sign:
        return "exalted"
    if debilitation_sign(planet) == sign:
        return "debilitated"
    if RASHI_LORDS[sign] == planet:
        return "own"
    return "neutral"


def strength(planet: str, sign: int) -> float:
    return DIGNITY_STRENGTH[dignity(planet, sign)]


def _separation(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return 360.0 - d if d > 180.0 else d


def is_combust(planet: str, lon: float, sun_lon: float) -> bool:
    if planet == "Sun" or planet in NODES:
        return False
    return _separation(lon, sun_lon) <= COMBUSTION_ORB[planet]


def rank_by_strength(scores: Iterable[Tuple[str, float]]) -> Dict[str, int]:
    """1 = strongest; ties keep graha order."""
    order = {name: i for i, name in enumerate(GRAHAS)}
    ranked = sorted(scores, key=lambda item: (-item[1], order[item[0]]))
    return {name: i + 1 for i, (name, _) in enumerate(ranked)}
