# tests/test_nakshatra.py
from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from astroveda.core.constants import DASHA_ORDER, NAKSHATRA_NAMES
from astroveda.core.nakshatra import (
    NAKSHATRA_SPAN,
    nakshatra_index,
    nakshatra_lord,
    pada,
    resolve_nakshatra,
)

longitudes = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


@given(longitudes)
def test_index_and_pada_ranges(lon):
    assert 0 <= nakshatra_index(lon) <= 26
    assert 1 <= pada(lon) <= 4


def test_table_shapes():
    assert len(NAKSHATRA_NAMES) == 27
    assert len(set(NAKSHATRA_NAMES)) == 27
    assert [nakshatra_lord(i) for i in range(27)] == list(DASHA_ORDER) * 3


@pytest.mark.parametrize("lon,name,lord,p", [
    (0.0, "Ashwini", "Ketu", 1),
    (3.3334, "Ashwini", "Ketu", 2),
    (13.3334, "Bharani", "Venus", 1),
    (198.916, "Swati", "Rahu", 4),
    (359.999, "Revati", "Mercury", 4),
    (360.0, "Ashwini", "Ketu", 1),
])
def test_known_placements(lon, name, lord, p):
    n = resolve_nakshatra(lon)
    assert (n.name, n.lord, n.pada) == (name, lord, p)


def test_segment_edges():
    for i in range(27):
        start = i * NAKSHATRA_SPAN + 1e-9
        assert nakshatra_index(start) == i
        assert pada(start) == 1
