# astroveda/content/recommendations.py
"""
Gemstone and remedy selection.

Pure lookup: every graha owns one remedy row; the chart only decides which
rows apply. Favourable planets are the lagna lord (primary) and the lords of
the 5th and 9th houses (secondary). Gems of the 6th, 8th and 12th lords go on
the avoid list unless that planet is already favourable.
"""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence

from astroveda.core.models import (
    Charity,
    Fasting,
    Gemstone,
    House,
    Lifestyle,
    Mantra,
    Recommendations,
    Remedies,
    Rudraksha,
    Yantra,
)

FAVOURABLE_HOUSES = (5, 9)
DUSTHANA_HOUSES = (6, 8, 12)


@dataclass(frozen=True)
class RemedyRow:
    gem: str
    metal: str
    finger: str
    day: str
    mantra: str
    rudraksha: str
    rudraksha_benefits: str
    charity: str
    deity: str
    color: str
    direction: str


REMEDY_TABLE: Mapping[str, RemedyRow] = MappingProxyType({
    "Sun": RemedyRow(
        "Ruby", "Gold", "Ring", "Sunday",
        "Om Hram Hreem Hraum Sah Suryaya Namah",
        "1 Mukhi", "Confidence and Leadership",
        "Wheat and Jaggery", "Lord Surya", "Orange", "East",
    ),
    "Moon": RemedyRow(
        "Pearl", "Silver", "Little", "Monday",
        "Om Shram Shreem Shraum Sah Chandraya Namah",
        "2 Mukhi", "Emotional Balance",
        "Rice and Milk", "Lord Shiva", "White", "North-West",
    ),
    "Mars": RemedyRow(
        "Red Coral", "Copper", "Ring", "Tuesday",
        "Om Kram Kreem Kraum Sah Bhaumaya Namah",
        "3 Mukhi", "Courage and Vitality",
        "Red Lentils", "Lord Hanuman", "Red", "South",
    ),
    "Mercury": RemedyRow(
        "Emerald", "Gold", "Little", "Wednesday",
        "Om Bram Breem Braum Sah Budhaya Namah",
        "4 Mukhi", "Intellect and Speech",
        "Green Moong Dal", "Lord Vishnu", "Green", "North",
    ),
    "Jupiter": RemedyRow(
        "Yellow Sapphire", "Gold", "Index", "Thursday",
        "Om Gram Greem Graum Sah Gurave Namah",
        "5 Mukhi", "Peace and Health",
        "Yellow Lentils", "Lord Vishnu", "Yellow", "North-East",
    ),
    "Venus": RemedyRow(
        "Diamond", "Platinum", "Middle", "Friday",
        "Om Dram Dreem Draum Sah Shukraya Namah",
        "6 Mukhi", "Harmony and Prosperity",
        "White Sweets", "Goddess Lakshmi", "White", "South-East",
    ),
    "Saturn": RemedyRow(
        "Blue Sapphire", "Silver", "Middle", "Saturday",
        "Om Pram Preem Praum Sah Shanaischaraya Namah",
        "7 Mukhi", "Discipline and Endurance",
        "Black Sesame", "Lord Shani", "Dark Blue", "West",
    ),
    "Rahu": RemedyRow(
        "Hessonite", "Silver", "Middle", "Saturday",
        "Om Bhram Bhreem Bhraum Sah Rahave Namah",
        "8 Mukhi", "Clarity and Protection",
        "Blue Cloth", "Goddess Durga", "Smoky Grey", "South-West",
    ),
    "Ketu": RemedyRow(
        "Cat's Eye", "Silver", "Little", "Tuesday",
        "Om Stram Streem Straum Sah Ketave Namah",
        "9 Mukhi", "Detachment and Insight",
        "Multicoloured Blanket", "Lord Ganesha", "Grey", "North-West",
    ),
})


def gemstone_for(planet: str) -> Gemstone:
    row = REMEDY_TABLE[planet]
    return Gemstone(
        name=row.gem, planet=planet, metal=row.metal,
        finger=row.finger, day=row.day, mantra=row.mantra,
    )


def _unique(names: Sequence[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for n in names:
        seen.setdefault(n, None)
    return list(seen)


def _lord_of(houses: Sequence[House], number: int) -> str:
    return houses[number - 1].lord


def build_recommendations(houses: Sequence[House]) -> Recommendations:
    """`houses` is the 12-entry whole-sign table starting at the lagna."""
    primary = _lord_of(houses, 1)
    secondary = [p for p in _unique([_lord_of(houses, n) for n in FAVOURABLE_HOUSES]) if p != primary]
    favourable = {primary, *secondary}
    avoid = [
        REMEDY_TABLE[p].gem
        for p in _unique([_lord_of(houses, n) for n in DUSTHANA_HOUSES])
        if p not in favourable
    ]

    row = REMEDY_TABLE[primary]
    chosen = [primary, *secondary]
    remedies = Remedies(
        mantras=tuple(Mantra(planet=p, text=REMEDY_TABLE[p].mantra) for p in chosen),
        yantras=(Yantra(name=f"{primary} Yantra", placement=f"Place in {row.direction} direction"),),
        rudraksha=(Rudraksha(mukhi=row.rudraksha, benefits=row.rudraksha_benefits),),
        charity=tuple(Charity(item=REMEDY_TABLE[p].charity, day=REMEDY_TABLE[p].day) for p in chosen),
        fasting=Fasting(day=row.day, deity=row.deity),
        lifestyle=Lifestyle(color=row.color, direction=row.direction),
    )
    return Recommendations(
        primary=gemstone_for(primary),
        secondary=tuple(gemstone_for(p) for p in secondary),
        avoid=tuple(_unique(avoid)),
        remedies=remedies,
    )
