"""Diagnostics package.

- new_years_table, pretty_month, round_trip: standard library only
- leap_months, tet_scatter: plots, require the "diagnostics" extra (numpy, matplotlib)
- ephem.validate_new_moons: JPL ephemeris check, requires the "ephemeris" extra (skyfield)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_months", "tet_scatter"]
