from __future__ import annotations
from datetime import date, timedelta
from typing import List, Tuple

from astroveda.core.constants import DASHA_ORDER, VIMSHOTTARI_YEARS, normalize_degree
from astroveda.core.models import DashaInfo, DashaModel, DashaPeriod
from astroveda.core.nakshatra import NAKSHATRA_SPAN, nakshatra_index

DAYS_PER_YEAR = 365.25


def moon_nakshatra(moon_lon_sidereal: float) -> Tuple[int, float]:
    """(nakshatra index, fraction of it already traversed)."""
    pos = normalize_degree(moon_lon_sidereal)
    idx = nakshatra_index(pos)
    within = (pos - idx * NAKSHATRA_SPAN) / NAKSHATRA_SPAN
    return idx, min(max(within, 0.0), 1.0)


def start_lord(moon_nakshatra_index: int) -> str:
    return DASHA_ORDER[moon_nakshatra_index % 9]


def initial_dasha_balance(moon_lon_sidereal: float) -> Tuple[str, float]:
    idx, within = moon_nakshatra(moon_lon_sidereal)
    lord = start_lord(idx)
    return lord, VIMSHOTTARI_YEARS[lord] * (1.0 - within)


def mahadasha_sequence(first_lord: str, count: int = 9) -> List[str]:
    i = DASHA_ORDER.index(first_lord)
    return [DASHA_ORDER[(i + k) % 9] for k in range(count)]


def flat_timeline(first_lord: str, anchor_year: int, years: int = 7) -> Tuple[DashaPeriod, ...]:
    """Nine equal periods, back to back from `anchor_year`."""
    out = []
    for k, lord in enumerate(mahadasha_sequence(first_lord)):
        begin = anchor_year + k * years
        out.append(DashaPeriod(planet=lord, start=str(begin), end=str(begin + years), years=float(years)))
    return tuple(out)


def vimshottari_timeline(moon_lon_sidereal: float, birth: date) -> Tuple[DashaPeriod, ...]:
    """
    Traditional lengths; the first period is the unelapsed balance at birth.
    Boundaries are birth + elapsed years in whole days, truncated once each.
    """
    first, balance = initial_dasha_balance(moon_lon_sidereal)
    out = []
    cursor = birth
    elapsed = 0.0
    for k, lord in enumerate(mahadasha_sequence(first)):
        span = balance if k == 0 else float(VIMSHOTTARI_YEARS[lord])
        elapsed += span
        end = birth + timedelta(days=int(elapsed * DAYS_PER_YEAR))
        out.append(DashaPeriod(planet=lord, start=cursor.isoformat(), end=end.isoformat(), years=span))
        cursor = end
    return tuple(out)


def _containing(timeline: Tuple[DashaPeriod, ...], today: date) -> DashaPeriod:
    stamp = today.isoformat()
    if stamp < timeline[0].start:
        return timeline[0]
    for period in timeline:
        if period.start <= stamp < period.end:
            return period
    return timeline[-1]


def build_dasha(
    moon_lon_sidereal: float,
    *,
    birth: date,
    today: date,
    model: DashaModel = "flat",
    flat_years: int = 7,
) -> DashaInfo:
    idx, _ = moon_nakshatra(moon_lon_sidereal)
    first = start_lord(idx)
    if model == "flat":
        timeline = flat_timeline(first, today.year, flat_years)
        current = timeline[0]
    elif model == "vimshottari":
        timeline = vimshottari_timeline(moon_lon_sidereal, birth)
        current = _containing(timeline, today)
    else:
        raise ValueError(f"unknown dasha model '{model}'")
    return DashaInfo(model=model, start_lord=first, current=current, timeline=timeline)
