# astroveda/core/time_kernel.py
from __future__ import annotations
"""
time_kernel.py: civil time → Julian Day helpers for the chart engine.

Time basis (documented simplification):
  The supplied birth time is local civil time, but the engine treats it as if
  it were UTC. No zone is resolved from the birth place; callers that need a
  true UTC instant must convert before building the BirthInput.

Public API:
  birth_instant(date, time)          -> datetime (tz=UTC label)
  julian_day(instant)                -> float
  centuries_since_j2000(jd)          -> float
"""
from datetime import date, datetime, time, timezone

from astroveda.core.constants import DAYS_PER_CENTURY, J2000_JD, MS_PER_DAY, UNIX_EPOCH_JD

__all__ = ["birth_instant", "julian_day", "centuries_since_j2000"]

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def birth_instant(d: date, t: time) -> datetime:
    """Combine a civil date and time, labelling the result UTC (no conversion)."""
    return datetime.combine(d, t.replace(tzinfo=None)).replace(tzinfo=timezone.utc)


def julian_day(instant: datetime) -> float:
    """
    JD = unix_millis / 86 400 000 + 2 440 587.5

    Naive datetimes are read as UTC. Aware datetimes are converted by their own
    offset, which is the only timezone arithmetic done here.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    millis = (instant - _UNIX_EPOCH).total_seconds() * 1000.0
    return millis / MS_PER_DAY + UNIX_EPOCH_JD


def centuries_since_j2000(jd: float) -> float:
    return (float(jd) - J2000_JD) / DAYS_PER_CENTURY
