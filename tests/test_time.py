# tests/test_time.py

import random
from datetime import date

import pytest

from amlich.core import time as t
from amlich.core.types import SolarDate


def test_known_epochs():
    # J2000.0 civil date
    assert t.to_jdn(1, 1, 2000) == 2451545
    assert t.from_jdn(2451545) == SolarDate(day=1, month=1, year=2000, jd=2451545)
    assert t.date_to_jdn(date(2000, 1, 1)) == 2451545

    # ends of the supported range
    assert t.to_jdn(1, 1, 1200) == 2159358
    assert t.to_jdn(31, 12, 2199) == 2524593


def test_gregorian_cutover():
    # Thursday 4 October 1582 (Julian) was followed by Friday 15 October 1582 (Gregorian)
    assert t.to_jdn(4, 10, 1582) == 2299160
    assert t.to_jdn(15, 10, 1582) == t.GREGORIAN_START_JDN == 2299161

    before = t.from_jdn(2299160)
    after = t.from_jdn(2299161)
    assert (before.day, before.month, before.year) == (4, 10, 1582)
    assert (after.day, after.month, after.year) == (15, 10, 1582)


def test_no_range_validation():
    # impossible dates still map onto the day count
    assert t.to_jdn(31, 2, 2023) == t.to_jdn(3, 3, 2023)
    assert t.to_jdn(0, 1, 2000) == t.to_jdn(31, 12, 1999)


def test_jdn_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jd_in = random.randint(2000000, 2600000)
        s = t.from_jdn(jd_in)
        assert s.jd == jd_in
        assert t.to_jdn(s.day, s.month, s.year) == jd_in


def test_roundtrip_around_cutover():
    for jd in range(2299161 - 400, 2299161 + 400):
        s = t.from_jdn(jd)
        assert t.to_jdn(s.day, s.month, s.year) == jd


def test_date_roundtrip():
    random.seed(7)
    # datetime.date is proleptic Gregorian, so only from the reform on
    for _ in range(2000):
        jd_in = random.randint(t.GREGORIAN_START_JDN, 5373484)
        assert t.date_to_jdn(t.jdn_to_date(jd_in)) == jd_in


def test_jdn_to_date_rejects_julian_days():
    with pytest.raises(ValueError):
        t.jdn_to_date(t.GREGORIAN_START_JDN - 1)
