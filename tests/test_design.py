# tests/test_design.py

import pytest

import amlich
from amlich.design import year_codes as yc
from amlich.engines.year_code import YearCode


@pytest.mark.parametrize("year", [1200, 1984, 1985, 2000, 2020, 2023, 2024, 2025, 2033, 2199])
def test_generator_reproduces_table(year):
    assert yc.compute_year_code(year) == amlich.lookup_year_code(year)


def test_month_11_holds_winter_solstice():
    # lunar month 11 of 2023 starts 13/12/2023
    assert yc.lunar_month_11(2023) == amlich.to_jdn(13, 12, 2023)


def test_china_meridian_moves_tet_1985():
    # at UTC+8 the 1985 New Year falls a month later, on 20/2/1985
    code = yc.compute_year_code(1985, yc.GeneratorParams(time_zone=8.0))
    assert YearCode.unpack(code).tet_offset == 50


def test_params_validation():
    with pytest.raises(ValueError):
        yc.GeneratorParams(time_zone=20.0)


def test_format_century():
    codes = tuple(range(100))
    text = yc.format_century(20, codes)
    lines = text.splitlines()
    assert lines[0] == "TK21 = ("
    assert lines[-1] == ")"
    assert len(lines) == 12
    assert lines[1].startswith("    0x000000, 0x000001")


def test_main_check(capsys):
    assert yc.main(["--from-century", "20", "--to-century", "20", "--check"]) == 0
    assert "0 mismatch(es)" in capsys.readouterr().out


def test_main_rejects_reversed_range():
    with pytest.raises(SystemExit):
        yc.main(["--from-century", "21", "--to-century", "20"])
