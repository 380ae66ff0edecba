# tests/test_specs.py

import pytest
from datetime import date

from lichta.core.errors import AstronomicalRangeError
from lichta.engines.specs import (
    CalendarParams,
    VIETNAM,
    MIN_YEAR,
    MAX_YEAR,
    UTC_OFFSET_BEFORE_CUTOVER,
    UTC_OFFSET_FROM_CUTOVER,
)

def test_vietnam_defaults():
    assert (VIETNAM.min_year, VIETNAM.max_year) == (MIN_YEAR, MAX_YEAR) == (1200, 2199)
    assert VIETNAM.offset_before == UTC_OFFSET_BEFORE_CUTOVER == 8.0
    assert VIETNAM.offset_from == UTC_OFFSET_FROM_CUTOVER == 7.0
    assert VIETNAM.midnight_tolerance == 0.0
    assert VIETNAM.apparent_longitude is False

def test_check_year():
    VIETNAM.check_year(1200)
    VIETNAM.check_year(2199)
    with pytest.raises(AstronomicalRangeError):
        VIETNAM.check_year(2200)

def test_with_fixed_offset():
    p = VIETNAM.with_fixed_offset(8)
    assert p.utc_offset(date(1900, 1, 1)) == 8.0
    assert p.utc_offset(date(2000, 1, 1)) == 8.0
    assert p.name == "vietnam@+8"
    assert VIETNAM.utc_offset(date(2000, 1, 1)) == 7.0

@pytest.mark.parametrize("kwargs", [
    {"min_year": 2000, "max_year": 1999},
    {"min_year": 1000},
    {"max_year": 3000},
    {"midnight_tolerance": -0.1},
    {"offset_from": 15.0},
])
def test_invalid_params(kwargs):
    with pytest.raises(ValueError):
        CalendarParams(name="bad", **kwargs)

def test_info_is_plain_data():
    info = VIETNAM.info()
    assert info["cutover"] == "1968-01-01"
    assert info["years"] == (1200, 2199)
