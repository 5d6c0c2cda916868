from __future__ import annotations
from amlich.core.table import YearCodeTable
from amlich.tables.year_codes import CENTURIES

def build_table() -> YearCodeTable:
    table = YearCodeTable()
    for century, codes in CENTURIES.items():
        table.register(century, codes)
    return table
