# tests/test_year_code.py

import pytest

import amlich
from amlich.core.time import to_jdn
from amlich.engines.year_code import YearCode, decode_lunar_year, year_end_jdn


CODE_2023 = 0x2a5b52  # Quý Mão, Tết 22/1/2023, leap month 2


def test_unpack_2023():
    yc = YearCode.unpack(CODE_2023)
    assert yc.leap_month == 2
    assert yc.leap_month_days == 29
    assert yc.tet_offset == 21
    assert yc.month_days == (29, 30, 29, 30, 30, 29, 30, 30, 29, 30, 29, 30)
    assert yc.month_count == 13
    assert yc.total_days == 384


def test_pack_inverts_unpack_for_all_years():
    lo, hi = amlich.supported_range()
    for year in range(lo, hi + 1):
        code = amlich.lookup_year_code(year)
        assert YearCode.unpack(code).pack() == code


def test_year_code_validation():
    days = (29,) * 12
    with pytest.raises(ValueError):
        YearCode(leap_month=13, leap_month_days=29, month_days=days, tet_offset=20)
    with pytest.raises(ValueError):
        YearCode(leap_month=0, leap_month_days=29, month_days=days[:11], tet_offset=20)
    with pytest.raises(ValueError):
        YearCode(leap_month=0, leap_month_days=29, month_days=(31,) + days[1:], tet_offset=20)
    with pytest.raises(ValueError):
        YearCode(leap_month=0, leap_month_days=29, month_days=days, tet_offset=-1)
    with pytest.raises(ValueError):
        YearCode.unpack(-1)


def test_decode_2023():
    months = decode_lunar_year(2023, CODE_2023)
    got = [(m.month, m.leap, m.jd) for m in months]
    assert got == [
        (1, False, 2459967),
        (2, False, 2459996),
        (2, True, 2460026),
        (3, False, 2460055),
        (4, False, 2460084),
        (5, False, 2460114),
        (6, False, 2460144),
        (7, False, 2460173),
        (8, False, 2460203),
        (9, False, 2460233),
        (10, False, 2460262),
        (11, False, 2460292),
        (12, False, 2460321),
    ]
    assert all(m.day == 1 and m.year == 2023 for m in months)
    # the year ends on Tết 2024 (10/2/2024)
    assert year_end_jdn(2023, CODE_2023) == to_jdn(10, 2, 2024)


def test_decode_without_leap_month():
    months = decode_lunar_year(2024, amlich.lookup_year_code(2024))
    assert len(months) == 12
    assert [m.month for m in months] == list(range(1, 13))
    assert not any(m.leap for m in months)
    assert months[0].jd == to_jdn(10, 2, 2024)


def test_decode_2025_leap_6():
    months = decode_lunar_year(2025, amlich.lookup_year_code(2025))
    assert len(months) == 13
    assert (months[6].month, months[6].leap) == (6, True)
    assert months[5].jd == to_jdn(25, 6, 2025)
    assert months[6].jd == to_jdn(25, 7, 2025)
    assert months[7].jd == to_jdn(23, 8, 2025)


def test_decoded_years_are_well_formed():
    lo, hi = amlich.supported_range()
    for year in range(lo, hi + 1):
        code = amlich.lookup_year_code(year)
        months = decode_lunar_year(year, code)
        leaps = [m for m in months if m.leap]
        lm = YearCode.unpack(code).leap_month

        assert len(months) == (13 if lm else 12)
        assert [m.month for m in leaps] == ([lm] if lm else [])
        for a, b in zip(months, months[1:]):
            assert b.jd - a.jd in (29, 30)
        # Gregorian years: Tết falls between 21 January and 20 February
        if year > 1582:
            assert 20 <= YearCode.unpack(code).tet_offset <= 50


def test_table_is_continuous():
    # each lunar year ends exactly where the next one begins
    lo, hi = amlich.supported_range()
    for year in range(lo, hi):
        end = year_end_jdn(year, amlich.lookup_year_code(year))
        nxt = decode_lunar_year(year + 1, amlich.lookup_year_code(year + 1))[0]
        assert end == nxt.jd, year


@pytest.mark.parametrize(
    "year, leap",
    [(1984, 0), (1985, 2), (2000, 0), (2020, 4), (2023, 2), (2025, 6), (2033, 11), (2199, 6)],
)
def test_known_leap_months(year, leap):
    assert amlich.leap_month(year) == leap
