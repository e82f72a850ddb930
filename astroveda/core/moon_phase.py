# astroveda/core/moon_phase.py
"""
Synodic-cycle moon phase for a bare calendar date.

This pipeline is independent of the chart engine. Its zodiac sign and
nakshatra are day-of-year proxies, not the sidereal Moon from
`astronomy.sidereal_position("Moon", ...)`; the two answers can differ for
the same birth date.

  days      = when - 2000-01-06 (reference new moon, 00:00 UTC)
  position  = days mod 29.53058867      (floored, so earlier dates wrap forward)
  percent   = position / synodic * 100
  angle     = percent / 100 * 360
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Tuple, Union
import math

from astroveda.content.archetypes import archetype_for
from astroveda.core.constants import NAKSHATRA_NAMES, SYNODIC_MONTH_DAYS, ZODIAC_SIGNS
from astroveda.core.models import MoonPhaseData

__all__ = [
    "REFERENCE_NEW_MOON",
    "PHASES",
    "days_since_reference",
    "cycle_percentage",
    "phase_for_percentage",
    "day_of_year",
    "zodiac_proxy",
    "nakshatra_proxy",
    "illumination",
    "calculate_moon_phase",
]

REFERENCE_NEW_MOON = date(2000, 1, 6)
_REFERENCE_INSTANT = datetime(2000, 1, 6, tzinfo=timezone.utc)

DateLike = Union[date, datetime]


@dataclass(frozen=True)
class PhaseBucket:
    name: str
    emoji: str
    start: float   # inclusive, percent
    end: float     # exclusive, percent


# Non-uniform: the four principal phases get narrow windows.
PHASES: Tuple[PhaseBucket, ...] = (
    PhaseBucket("New Moon",        "\U0001F311",  0.0,    3.125),
    PhaseBucket("Waxing Crescent", "\U0001F312",  3.125, 21.875),
    PhaseBucket("First Quarter",   "\U0001F313", 21.875, 28.125),
    PhaseBucket("Waxing Gibbous",  "\U0001F314", 28.125, 46.875),
    PhaseBucket("Full Moon",       "\U0001F315", 46.875, 53.125),
    PhaseBucket("Waning Gibbous",  "\U0001F316", 53.125, 71.875),
    PhaseBucket("Last Quarter",    "\U0001F317", 71.875, 78.125),
    PhaseBucket("Waning Crescent", "\U0001F318", 78.125, 96.875),
)


def days_since_reference(when: DateLike) -> float:
    """Whole days for a date; fractional days for a datetime (naive = UTC)."""
    if isinstance(when, datetime):
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        return (when - _REFERENCE_INSTANT).total_seconds() / 86400.0
    return float((when - REFERENCE_NEW_MOON).days)


def cycle_percentage(days: float) -> float:
    position = days % SYNODIC_MONTH_DAYS
    if position >= SYNODIC_MONTH_DAYS:  # -tiny % m rounds up to m
        position = 0.0
    return position / SYNODIC_MONTH_DAYS * 100.0


def phase_for_percentage(percent: float) -> PhaseBucket:
    for bucket in PHASES:
        if bucket.start <= percent < bucket.end:
            return bucket
    # last 3.125% of the cycle is new moon again
    return PHASES[0]


def day_of_year(when: DateLike) -> int:
    return when.timetuple().tm_yday


def zodiac_proxy(doy: int) -> str:
    return ZODIAC_SIGNS[math.floor(doy / 365 * 12) % 12]


def nakshatra_proxy(doy: int) -> str:
    return NAKSHATRA_NAMES[math.floor(doy / 365 * 27) % 27]


def illumination(angle_deg: float) -> float:
    """Lit fraction of the disc, percent, for a circular orbit."""
    return 50.0 * (1.0 - math.cos(math.radians(angle_deg)))


def calculate_moon_phase(when: DateLike) -> MoonPhaseData:
    percent = cycle_percentage(days_since_reference(when))
    angle = percent / 100.0 * 360.0
    bucket = phase_for_percentage(percent)
    doy = day_of_year(when)
    return MoonPhaseData(
        date=when.isoformat(),
        phase_name=bucket.name,
        phase_emoji=bucket.emoji,
        percentage=round(percent, 2),
        angle=round(angle, 2),
        illumination=round(illumination(angle), 2),
        zodiac_sign=zodiac_proxy(doy),
        nakshatra=nakshatra_proxy(doy),
        archetype=archetype_for(bucket.name),
    )
