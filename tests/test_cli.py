# tests/test_cli.py

import pytest

from amlich import cli


def test_day(capsys):
    assert cli.main(["day", "2023-01-22"]) == 0
    out = capsys.readouterr().out
    assert "Lunar: 1/1/2023" in out
    assert "Quý Mão" in out


def test_date_shortcut(capsys):
    assert cli.main(["2024-02-10", "--attr", "weekday"]) == 0
    out = capsys.readouterr().out
    assert "Lunar: 1/1/2024" in out
    assert "weekday_name = Thứ bảy" in out


def test_day_unsupported(capsys):
    assert cli.main(["day", "1100-01-01"]) == cli.EXIT_UNSUPPORTED
    assert "not supported" in capsys.readouterr().err


def test_day_bad_format():
    with pytest.raises(SystemExit):
        cli.main(["day", "2023-1-22"])


def test_solar(capsys):
    assert cli.main(["solar", "2023", "2", "1", "--leap"]) == 0
    assert "Solar: 22/3/2023" in capsys.readouterr().out


def test_solar_bad_leap_month():
    with pytest.raises(SystemExit):
        cli.main(["solar", "2023", "3", "1", "--leap"])


def test_solar_unsupported():
    assert cli.main(["solar", "2200", "1", "1"]) == cli.EXIT_UNSUPPORTED


def test_year(capsys):
    assert cli.main(["year", "2023"]) == 0
    out = capsys.readouterr().out
    assert "code=0x2a5b52" in out
    assert "2+" in out
    assert cli.main(["year", "2200"]) == cli.EXIT_UNSUPPORTED


def test_new_years(capsys):
    assert cli.main(["new-years", "--from-year", "2023", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "Giáp Thìn" in out
    assert "10/02" in out


def test_pretty_month(capsys):
    assert cli.main(["pretty-month", "--lunar", "2023", "2", "--leap"]) == 0
    assert "Tháng 2 nhuận" in capsys.readouterr().out


def test_round_trip_diagnostic(capsys):
    assert cli.main(["diag", "round-trip", "-N", "300", "--start", "1990", "--end", "2030"]) == 0
    assert "0 failure(s)" in capsys.readouterr().out
