# tests/test_table.py

from dataclasses import replace

import pytest

import amlich
from amlich.bootstrap import build_table
from amlich.core.errors import AmlichError, YearNotSupportedError
from amlich.core.table import MAX_YEAR, MIN_YEAR, YearCodeTable
from amlich.engines.year_code import YearCode
from amlich.tables.year_codes import CENTURIES


@pytest.fixture
def restore_table():
    yield
    amlich.set_table(build_table())

def test_builtin_table_covers_range():
    table = build_table()
    assert table.centuries() == list(range(12, 22))
    assert (table.min_year, table.max_year) == (MIN_YEAR, MAX_YEAR) == amlich.supported_range()
    assert all(len(codes) == 100 for codes in CENTURIES.values())

@pytest.mark.parametrize(
    "year, code",
    [(1200, 0x225b54), (1399, 0x48c960), (1400, 0x32e4a0), (2023, 0x2a5b52), (2199, 0x355556)],
)
def test_lookup(year, code):
    assert amlich.lookup_year_code(year) == code

@pytest.mark.parametrize("year", [1199, 2200, -5])
def test_lookup_outside_table(year):
    with pytest.raises(YearNotSupportedError) as exc:
        amlich.lookup_year_code(year)
    assert exc.value.year == year
    assert isinstance(exc.value, LookupError)
    assert isinstance(exc.value, AmlichError)

def test_register_errors():
    table = YearCodeTable()
    with pytest.raises(ValueError):
        table.register(20, CENTURIES[20][:99])
    table.register(20, CENTURIES[20])
    with pytest.raises(KeyError):
        table.register(20, CENTURIES[20])
    table.register(20, CENTURIES[20], overwrite=True)
    assert 2023 in table
    assert 1999 not in table
    assert "2023" not in table

def test_empty_table_has_no_range():
    with pytest.raises(YearNotSupportedError):
        YearCodeTable().min_year

def test_custom_table(restore_table):
    # only 1900..1999
    table = YearCodeTable()
    table.register(19, CENTURIES[19])
    amlich.set_table(table)

    assert amlich.get_table() is table
    assert amlich.solar_to_lunar(22, 1, 2023) is None
    assert amlich.lunar_to_solar(1, 1, 2023) is None
    # 1/1/1999 is still lunar 1998
    assert amlich.solar_to_lunar(1, 1, 1999).year == 1998
    # 1/1/1900 would be lunar 1899
    assert amlich.solar_to_lunar(1, 1, 1900) is None


def _shift_tet(codes, index, days=1):
    out = list(codes)
    yc = YearCode.unpack(out[index])
    out[index] = replace(yc, tet_offset=yc.tet_offset + days).pack()
    return out


def test_gap_between_years(restore_table):
    # Tết 2024 moved one day later: 10/2/2024 belongs to no lunar year
    table = YearCodeTable()
    table.register(20, _shift_tet(CENTURIES[20], 24))
    amlich.set_table(table)

    assert amlich.solar_to_lunar(10, 2, 2024) is None
    assert amlich.day_info(10, 2, 2024) is None
    got = amlich.solar_to_lunar(11, 2, 2024)
    assert (got.day, got.month, got.year) == (1, 1, 2024)
    got = amlich.solar_to_lunar(9, 2, 2024)
    assert (got.day, got.month, got.year) == (30, 12, 2023)


def test_overwrite_installed_shard(restore_table):
    assert amlich.months_in_year(2023)[0].jd == 2459967
    assert amlich.new_year_day(2023).day == 22

    amlich.get_table().register(20, _shift_tet(CENTURIES[20], 23), overwrite=True)

    assert amlich.months_in_year(2023)[0].jd == 2459968
    assert amlich.new_year_day(2023).day == 23
    assert amlich.solar_to_lunar(23, 1, 2023).day == 1
