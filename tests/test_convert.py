# tests/test_convert.py

import pytest
from datetime import date

import lichta
from lichta import LichTaDate
from lichta.core.errors import AstronomicalRangeError, InvalidDate
from lichta.engines.specs import VIETNAM, TIMEZONE_CUTOVER

UTC8 = VIETNAM.with_fixed_offset(8.0)

@pytest.mark.parametrize("ymd, expected", [
    # Tet
    ((2023, 1, 22), LichTaDate(2023, 1, False, 1)),
    ((2024, 2, 10), LichTaDate(2024, 1, False, 1)),
    ((2025, 1, 29), LichTaDate(2025, 1, False, 1)),
    ((2026, 2, 17), LichTaDate(2026, 1, False, 1)),
    ((2020, 1, 25), LichTaDate(2020, 1, False, 1)),
    # ordinary days
    ((2024, 5, 24), LichTaDate(2024, 4, False, 17)),
    ((2022, 5, 24), LichTaDate(2022, 4, False, 24)),
    # leap months
    ((2023, 3, 21), LichTaDate(2023, 2, False, 30)),
    ((2023, 3, 22), LichTaDate(2023, 2, True, 1)),
    ((2023, 4, 19), LichTaDate(2023, 2, True, 29)),
    ((2023, 4, 20), LichTaDate(2023, 3, False, 1)),
    ((2020, 5, 23), LichTaDate(2020, 4, True, 1)),
    ((2025, 7, 25), LichTaDate(2025, 6, True, 1)),
])
def test_known_dates(ymd, expected):
    assert lichta.convert_gregorian_to_lichta(*ymd) == expected

def test_january_belongs_to_previous_lunar_year():
    t = lichta.convert_gregorian_to_lichta(2023, 1, 10)
    assert t == LichTaDate(2022, 12, False, 19)
    t = lichta.convert_gregorian_to_lichta(2024, 2, 9)
    assert (t.year, t.month) == (2023, 12)

def test_december_month_11():
    t = lichta.convert_gregorian_to_lichta(2023, 12, 20)
    assert t == LichTaDate(2023, 11, False, 8)
    t = lichta.convert_gregorian_to_lichta(2023, 12, 12)
    assert (t.year, t.month, t.day) == (2023, 10, 30)

def test_timezone_cutover_selects_offset():
    assert TIMEZONE_CUTOVER == date(1968, 1, 1)
    assert VIETNAM.utc_offset(date(1967, 12, 31)) == 8.0
    assert VIETNAM.utc_offset(date(1968, 1, 1)) == 7.0
    assert lichta.explain(date(1967, 12, 31))["utc_offset"] == 8.0
    assert lichta.explain(date(1968, 1, 1))["utc_offset"] == 7.0

def test_tet_1968_north_and_south():
    """
    The new moon of 1968-01-29 16:29 UT falls before midnight at UTC+7 and
    after it at UTC+8, so Tet Mau Than came a day apart.
    """
    assert lichta.convert_gregorian_to_lichta(1968, 1, 29) == LichTaDate(1968, 1, False, 1)
    south = lichta.convert_gregorian_to_lichta(1968, 1, 29, params=UTC8)
    assert (south.year, south.month) == (1967, 12)
    assert lichta.convert_gregorian_to_lichta(1968, 1, 30, params=UTC8) == LichTaDate(1968, 1, False, 1)

def test_tet_1985_month_earlier_than_utc8():
    """
    The 1984 solstice falls on Dec 21 at UTC+7 but Dec 22 at UTC+8, moving month 11.
    """
    assert lichta.new_year_day(1985) == date(1985, 1, 21)
    assert lichta.new_year_day(1985, params=UTC8) == date(1985, 2, 20)

@pytest.mark.parametrize("ymd", [(3000, 1, 1), (2200, 1, 1), (1199, 12, 31)])
def test_out_of_range(ymd):
    with pytest.raises(AstronomicalRangeError):
        lichta.convert_gregorian_to_lichta(*ymd)

def test_range_edges_convert():
    assert lichta.convert_gregorian_to_lichta(1200, 1, 1).year in (1199, 1200)
    assert lichta.convert_gregorian_to_lichta(2199, 12, 31).year == 2199

@pytest.mark.parametrize("ymd", [(2023, 4, 31), (2023, 2, 29), (2024, 13, 1), (3000, 2, 30)])
def test_invalid_date(ymd):
    with pytest.raises(InvalidDate):
        lichta.convert_gregorian_to_lichta(*ymd)

def test_from_date_and_str():
    t = lichta.from_date(date(2023, 3, 22))
    assert str(t) == "01/02n/2023"
    assert str(lichta.from_date(date(2024, 5, 24))) == "17/04/2024"
