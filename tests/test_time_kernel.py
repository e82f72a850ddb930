# tests/test_time_kernel.py
from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

import pytest
from hypothesis import given, strategies as st

from astroveda.core.constants import normalize_degree, sign_name
from astroveda.core.time_kernel import birth_instant, centuries_since_j2000, julian_day


def test_j2000_noon_is_epoch():
    assert julian_day(datetime(2000, 1, 1, 12)) == 2451545.0
    assert centuries_since_j2000(2451545.0) == 0.0


def test_unix_epoch():
    assert julian_day(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5


def test_aware_datetime_uses_its_offset():
    ist = timezone(timedelta(hours=5, minutes=30))
    assert julian_day(datetime(2000, 1, 1, 17, 30, tzinfo=ist)) == pytest.approx(2451545.0, abs=1e-9)


def test_birth_instant_labels_local_time_as_utc():
    inst = birth_instant(date(1990, 5, 17), time(6, 45))
    assert inst.tzinfo is timezone.utc
    assert (inst.hour, inst.minute) == (6, 45)


def test_one_century():
    assert centuries_since_j2000(2451545.0 + 36525.0) == pytest.approx(1.0)


@given(st.floats(min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False))
def test_normalize_degree_range(x):
    d = normalize_degree(x)
    assert 0.0 <= d < 360.0


@pytest.mark.parametrize("x,expected", [
    (360.0, 0.0),
    (720.0, 0.0),
    (-30.0, 330.0),
    (725.5, 5.5),
    (-1e-18, 0.0),
])
def test_normalize_degree_edges(x, expected):
    assert normalize_degree(x) == pytest.approx(expected, abs=1e-9)


def test_sign_name_bounds():
    assert sign_name(1) == "Mesha (Aries)"
    assert sign_name(12) == "Meena (Pisces)"
    with pytest.raises(ValueError):
        sign_name(0)
    with pytest.raises(ValueError):
        sign_name(13)
