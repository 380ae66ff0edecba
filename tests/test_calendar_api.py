# tests/test_calendar_api.py

import pytest
from datetime import date

import lichta
from lichta import LichTaDate
from lichta.core.errors import AstronomicalRangeError, InvalidDate

def test_months_in_year_leap():
    months = lichta.months_in_year(2023)
    assert len(months) == 13
    assert [(m.ordinal, m.is_leap) for m in months[:4]] == [(1, False), (2, False), (2, True), (3, False)]
    assert all(m.lunar_year == 2023 for m in months)
    for a, b in zip(months, months[1:]):
        assert a.end_jdn == b.start_jdn

def test_leap_month_lookup():
    assert lichta.leap_month(2020) == 4
    assert lichta.leap_month(2023) == 2
    assert lichta.leap_month(2025) == 6
    assert lichta.leap_month(2024) is None

def test_new_year_day():
    assert lichta.new_year_day(2024) == date(2024, 2, 10)
    assert lichta.new_year_day(2023) == date(2023, 1, 22)

def test_month_bounds():
    m = lichta.month_bounds(2023, 2, is_leap=True)
    assert lichta.jdn_to_gregorian(m.start_jdn) == (2023, 3, 22)
    assert m.length == 29
    with pytest.raises(InvalidDate):
        lichta.month_bounds(2024, 3, is_leap=True)
    with pytest.raises(InvalidDate):
        lichta.month_bounds(2024, 13)

def test_to_gregorian():
    assert lichta.to_gregorian(LichTaDate(2023, 2, True, 1)) == date(2023, 3, 22)
    assert lichta.to_gregorian(LichTaDate(2023, 2, False, 1)) == date(2023, 2, 20)
    assert lichta.to_gregorian(LichTaDate(2024, 4, False, 17)) == date(2024, 5, 24)

def test_to_gregorian_rejects_missing_labels():
    with pytest.raises(InvalidDate):
        lichta.to_gregorian(LichTaDate(2023, 2, True, 30))  # leap month 2 has 29 days
    with pytest.raises(InvalidDate):
        lichta.to_gregorian(LichTaDate(2023, 2, False, 0))
    with pytest.raises(AstronomicalRangeError):
        lichta.to_gregorian(LichTaDate(2500, 1, False, 1))

def test_explain_fields():
    info = lichta.explain(date(2023, 3, 22))
    assert info["utc_offset"] == 7.0
    assert info["table_year"] == 2023
    assert info["table_leap_month"] == 2
    assert info["month"]["is_leap"] is True
    assert info["lichta"] == LichTaDate(2023, 2, True, 1)
    assert 0.0 <= info["sun_longitude_midnight"] < 360.0

def test_calendar_info():
    cal = lichta.LichTaCalendar()
    info = cal.info()
    assert info["params"]["name"] == "vietnam"
    assert info["cached"] is False
