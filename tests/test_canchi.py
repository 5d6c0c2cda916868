# tests/test_canchi.py

import pytest

from amlich.attributes.canchi import day_can_chi, month_can_chi, solar_term, weekday_name, year_can_chi
from amlich.tables.labels import CAN, CHI


@pytest.mark.parametrize(
    "year, label",
    [(1984, "Giáp Tý"), (2000, "Canh Thìn"), (2023, "Quý Mão"), (2024, "Giáp Thìn"), (2025, "Ất Tỵ")],
)
def test_year_labels(year, label):
    assert year_can_chi(year) == label


def test_year_cycle_is_sixty():
    assert year_can_chi(2044) == year_can_chi(1984) == "Giáp Tý"
    for year in range(1200, 1320):
        assert year_can_chi(year) == year_can_chi(year + 60)
    labels = {year_can_chi(y) for y in range(1984, 2044)}
    assert len(labels) == 60


def test_day_labels():
    assert day_can_chi(2451545) == "Mậu Ngọ"   # 1/1/2000
    assert day_can_chi(2459967) == "Canh Thìn"  # Tết 2023
    for jd in range(2459967, 2459967 + 120):
        assert day_can_chi(jd) == day_can_chi(jd + 60)


def test_month_labels():
    # branch is fixed per month: month 1 = Dần, 11 = Tý, 12 = Sửu
    for year in (1984, 2023):
        assert month_can_chi(1, year).split()[1] == "Dần"
        assert month_can_chi(11, year).split()[1] == "Tý"
        assert month_can_chi(12, year).split()[1] == "Sửu"
    assert month_can_chi(1, 1984) == "Ất Dần"
    assert month_can_chi(11, 2023) == "Quý Tý"


def test_month_stems_advance_by_one():
    for year in (1999, 2023, 2024):
        stems = [CAN.index(month_can_chi(m, year).split()[0]) for m in range(1, 13)]
        for a, b in zip(stems, stems[1:]):
            assert b == (a + 1) % 10


def test_labels_cover_tables():
    assert len(CAN) == 10 and len(CHI) == 12


def test_weekday_name():
    assert weekday_name(2451545) == "Thứ bảy"   # Saturday 1/1/2000
    assert weekday_name(2459967) == "Chủ nhật"  # Sunday 22/1/2023


def test_solar_term():
    from amlich.core.time import to_jdn

    assert solar_term(to_jdn(20, 3, 2024)) == "Xuân phân"
    assert solar_term(to_jdn(22, 12, 2023)) == "Đông chí"
    assert solar_term(to_jdn(21, 12, 2023)) == "Đại tuyết"
