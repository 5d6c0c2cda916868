# tests/test_reference.py

import math
import sys
from unittest.mock import patch

import pytest

from amlich.core.time import to_jdn
from amlich.reference import lunar, solar


def test_sun_longitude_at_equinox():
    # March equinox 2000: 20 March 07:35 UT
    L = solar.sun_longitude_rad(2451623.816)
    dist = min(L, 2 * math.pi - L)
    assert math.degrees(dist) == pytest.approx(0.0, abs=0.05)


def test_sun_longitude_is_wrapped():
    for jd in range(2451545, 2451545 + 800, 7):
        assert 0.0 <= solar.sun_longitude_rad(jd) < 2 * math.pi


def test_principal_term_at_solstice():
    # sector 9 (270..300 deg) begins with the December solstice
    assert solar.principal_term_index(to_jdn(20, 12, 2023)) == 8
    assert solar.principal_term_index(to_jdn(24, 12, 2023)) == 9


def test_new_moon_day_tet_2023():
    # new moon of 21 January 2023, 20:53 UT, is already 22 January at UTC+7
    k = lunar.lunation_near(2459967)
    assert lunar.new_moon_day(k) == 2459967
    assert lunar.new_moon_day(k, time_zone=0.0) == 2459966
    assert lunar.new_moon_jd(k) == pytest.approx(2459966.370, abs=0.01)


def test_lunation_index_steps_by_month():
    k = lunar.lunation_near(2459967)
    assert lunar.lunation_near(2459967 + 30) == k + 1
    assert lunar.new_moon_day(k + 1) - lunar.new_moon_day(k) in (29, 30)


def test_ephemeris_requires_extra():
    from amlich.ephemeris import require_ephemeris

    with patch.dict(sys.modules, {"skyfield": None}):
        with pytest.raises(RuntimeError, match="amlich\\[ephemeris\\]"):
            require_ephemeris()
