from __future__ import annotations
from dataclasses import dataclass, asdict, field
from datetime import date, time
from typing import Any, Dict, Literal, Optional, Tuple

from astroveda.core.constants import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_PLACE

_NOON = time(12, 0)

DashaModel = Literal["flat", "vimshottari"]
HouseKind = Literal["Kendra", "Trikona", "Neutral"]


@dataclass(frozen=True)
class EngineSettings:
    default_latitude: float = DEFAULT_LATITUDE
    default_longitude: float = DEFAULT_LONGITUDE
    default_place: str = DEFAULT_PLACE
    dasha_model: DashaModel = "flat"
    flat_dasha_years: int = 7


@dataclass(frozen=True)
class BirthInput:
    name: str
    date: date
    time: time = _NOON
    place: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def resolve_location(self, settings: EngineSettings) -> Tuple[float, float, bool]:
        """(lat, lng, used_default). Each missing coordinate falls back on its own."""
        lat = settings.default_latitude if self.latitude is None else float(self.latitude)
        lng = settings.default_longitude if self.longitude is None else float(self.longitude)
        return lat, lng, self.latitude is None or self.longitude is None


# ───────────────────────── chart entities ─────────────────────────

@dataclass(frozen=True)
class Planet:
    name: str
    longitude: float          # sidereal, [0, 360)
    sign: int                 # 1..12
    sign_name: str
    degree: float             # within sign, [0, 30)
    house: int                # 1..12
    retrograde: bool
    nakshatra: str
    nakshatra_lord: str
    pada: int                 # 1..4
    speed: float              # mean motion, deg/day
    dignity: str
    strength: float
    rank: int
    combust: bool = False


@dataclass(frozen=True)
class Lagna:
    longitude: float
    sign: int
    sign_name: str
    degree: float
    nakshatra: str
    nakshatra_lord: str
    pada: int
    lord: str                 # lord of the rising sign


@dataclass(frozen=True)
class House:
    number: int
    sign: int
    sign_name: str
    lord: str
    planets: Tuple[str, ...]
    kind: HouseKind


@dataclass(frozen=True)
class DashaPeriod:
    planet: str
    start: str
    end: str
    years: float

    @property
    def duration(self) -> str:
        y = round(self.years, 2)
        return f"{int(y)} Years" if float(y).is_integer() else f"{y:.2f} Years"


@dataclass(frozen=True)
class DashaInfo:
    model: DashaModel
    start_lord: str
    current: DashaPeriod
    timeline: Tuple[DashaPeriod, ...]


@dataclass(frozen=True)
class Panchang:
    tithi: str
    tithi_number: int         # 1..30
    paksha: str
    yoga: str
    karana: str
    nakshatra: str
    vara: str


# ───────────────────────── static content ─────────────────────────

@dataclass(frozen=True)
class Gemstone:
    name: str
    planet: str
    metal: str
    finger: str
    day: str
    mantra: str


@dataclass(frozen=True)
class Mantra:
    planet: str
    text: str
    count: int = 108


@dataclass(frozen=True)
class Yantra:
    name: str
    placement: str


@dataclass(frozen=True)
class Rudraksha:
    mukhi: str
    benefits: str


@dataclass(frozen=True)
class Charity:
    item: str
    day: str


@dataclass(frozen=True)
class Fasting:
    day: str
    deity: str


@dataclass(frozen=True)
class Lifestyle:
    color: str
    direction: str


@dataclass(frozen=True)
class Remedies:
    mantras: Tuple[Mantra, ...]
    yantras: Tuple[Yantra, ...]
    rudraksha: Tuple[Rudraksha, ...]
    charity: Tuple[Charity, ...]
    fasting: Fasting
    lifestyle: Lifestyle


@dataclass(frozen=True)
class Recommendations:
    primary: Gemstone
    secondary: Tuple[Gemstone, ...]
    avoid: Tuple[str, ...]
    remedies: Remedies


# ───────────────────────── aggregate ─────────────────────────

@dataclass(frozen=True)
class ChartMeta:
    name: str
    place: str
    latitude: float
    longitude: float
    default_location: bool
    julian_day: float
    ayanamsa: str
    ayanamsa_deg: float
    house_system: str = "whole-sign"
    dasha_model: DashaModel = "flat"
    time_basis: str = "local-as-UTC"


@dataclass(frozen=True)
class Chart:
    meta: ChartMeta
    lagna: Lagna
    planets: Tuple[Planet, ...]
    houses: Tuple[House, ...]
    dasha: DashaInfo
    panchang: Panchang
    recommendations: Recommendations

    def planet(self, name: str) -> Planet:
        for p in self.planets:
            if p.name == name:
                return p
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["dasha"]["current"]["duration"] = self.dasha.current.duration
        for row, period in zip(out["dasha"]["timeline"], self.dasha.timeline):
            row["duration"] = period.duration
        return out


# ───────────────────────── moon phase ─────────────────────────

@dataclass(frozen=True)
class LuckyElements:
    colors: Tuple[str, ...]
    numbers: Tuple[int, ...]
    gemstones: Tuple[str, ...]
    days: Tuple[str, ...]


@dataclass(frozen=True)
class ManifestationPower:
    wealth: int
    love: int
    career: int
    health: int
    spiritual: int


@dataclass(frozen=True)
class Archetype:
    personality_type: str
    traits: Tuple[str, ...]
    strengths: Tuple[str, ...]
    challenges: Tuple[str, ...]
    life_purpose: str
    spiritual_path: str
    karmic_lesson: str
    soul_mission: str
    emotional_nature: str
    intuitive_gifts: Tuple[str, ...]
    relationship_style: str
    career_guidance: str
    lucky_elements: LuckyElements
    manifestation_power: ManifestationPower


@dataclass(frozen=True)
class MoonPhaseData:
    date: str
    phase_name: str
    phase_emoji: str
    percentage: float         # position in the synodic cycle, 0..100
    angle: float              # degrees of the cycle, 0..360
    illumination: float       # lit fraction of the disc, 0..100
    zodiac_sign: str
    nakshatra: str
    archetype: Archetype = field(repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
