# tests/test_time.py

import pytest
import random
from datetime import date

from lichta.core import time as ct
from lichta.core.errors import InvalidDate

def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to stay inside datetime.date
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        y, m, d = ct.jdn_to_gregorian(jdn_in)
        assert ct.gregorian_to_jdn(y, m, d) == jdn_in
        assert ct.from_jdn(jdn_in) == date(y, m, d)

def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert ct.gregorian_to_jdn(2000, 1, 1) == 2451545
    assert ct.gregorian_to_jdn(1900, 1, 1) == 2415021
    assert ct.to_jdn(date(2024, 12, 1)) == 2460646
    assert ct.jdn_to_gregorian(2460311) == (2024, 1, 1)

@pytest.mark.parametrize("ymd", [
    (2023, 4, 31),
    (2023, 2, 29),
    (1900, 2, 29),
    (2024, 13, 1),
    (2024, 0, 10),
    (2024, 1, 0),
    (0, 1, 1),
    (10000, 1, 1),
])
def test_invalid_dates_rejected(ymd):
    with pytest.raises(InvalidDate):
        ct.gregorian_to_jdn(*ymd)

def test_leap_days_accepted():
    assert ct.gregorian_to_jdn(2024, 2, 29) + 1 == ct.gregorian_to_jdn(2024, 3, 1)
    assert ct.gregorian_to_jdn(2000, 2, 29) + 1 == ct.gregorian_to_jdn(2000, 3, 1)

def test_invalid_date_is_value_error():
    with pytest.raises(ValueError):
        ct.validate_gregorian(2023, 4, 31)

def test_civil_day_bucketing():
    """
    Midnight UT of 2000-01-01 is JD 2451544.5; at UTC+7 that instant is 07:00 local.
    """
    assert ct.civil_day(2451544.5, 0.0) == 2451545
    assert ct.civil_day(2451544.5, 7.0) == 2451545
    # 17:30 UT on Jan 1 is 00:30 Jan 2 at UTC+7
    assert ct.civil_day(2451545.0 + 5.5 / 24.0, 7.0) == 2451546
    assert ct.local_midnight_jd(2451545, 7.0) == pytest.approx(2451544.5 - 7.0 / 24.0)

def test_civil_day_tie_break_resolves_earlier():
    midnight = ct.local_midnight_jd(2451546, 7.0)
    just_after = midnight + 30.0 / 86400.0  # 30 seconds past local midnight
    assert ct.civil_day(just_after, 7.0) == 2451546
    assert ct.civil_day(just_after, 7.0, tolerance=60.0 / 86400.0) == 2451545
    # outside the tolerance nothing moves
    assert ct.civil_day(midnight + 0.25, 7.0, tolerance=60.0 / 86400.0) == 2451546
