# tests/test_locator.py

import pytest

from amlich.core.types import LunarDate
from amlich.engines.locator import find_lunar_date, find_month
from amlich.engines.year_code import decode_lunar_year

MONTHS_2023 = decode_lunar_year(2023, 0x2a5b52)


def test_first_day_of_year():
    assert find_lunar_date(2459967, MONTHS_2023) == LunarDate(1, 1, 2023, False, 2459967)


def test_day_inside_leap_month():
    # 14 days after the leap month 2 starts (22/3/2023)
    assert find_lunar_date(2460026 + 14, MONTHS_2023) == LunarDate(15, 2, 2023, True, 2460040)


def test_last_month_runs_past_table():
    # the locator does not know where month 12 ends
    got = find_lunar_date(2460321 + 29, MONTHS_2023)
    assert (got.day, got.month, got.leap) == (30, 12, False)


def test_before_first_record():
    assert find_lunar_date(2459966, MONTHS_2023) is None
    assert find_lunar_date(2459966, []) is None


def test_find_month():
    assert find_month(MONTHS_2023, 2).jd == 2459996
    assert find_month(MONTHS_2023, 2, leap=True).jd == 2460026
    assert find_month(MONTHS_2023, 12).jd == 2460321


@pytest.mark.parametrize("month, leap", [(3, True), (0, False), (13, False)])
def test_find_month_rejects(month, leap):
    with pytest.raises(ValueError):
        find_month(MONTHS_2023, month, leap=leap)
