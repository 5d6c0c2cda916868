from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .errors import YearNotSupportedError

log = logging.getLogger(__name__)

# Advertised range of the public conversion API.
MIN_YEAR = 1200
MAX_YEAR = 2199

CENTURY = 100

@dataclass
class YearCodeTable:
    """
    Lunar year -> packed year code, assembled from century shards.

    A shard for century c covers years 100*c .. 100*c + 99.
    """
    _shards: Dict[int, Tuple[int, ...]] = field(default_factory=dict)

    def register(self, century: int, codes: Sequence[int], *, overwrite: bool = False) -> None:
        if len(codes) != CENTURY:
            raise ValueError(f"Century shard {century} must hold {CENTURY} codes, got {len(codes)}")
        if (not overwrite) and (century in self._shards):
            raise KeyError(f"Century {century} already registered. Use overwrite=True to replace.")
        self._shards[century] = tuple(int(c) for c in codes)
        log.debug("registered year codes %d..%d", century * CENTURY, century * CENTURY + CENTURY - 1)

    def lookup(self, year: int) -> int:
        shard = self._shards.get(year // CENTURY)
        if shard is None:
            raise YearNotSupportedError(year)
        return shard[year % CENTURY]

    def __contains__(self, year: object) -> bool:
        return isinstance(year, int) and (year // CENTURY) in self._shards

    def centuries(self) -> List[int]:
        return sorted(self._shards)

    @property
    def min_year(self) -> int:
        if not self._shards:
            raise YearNotSupportedError(MIN_YEAR)
        return min(self._shards) * CENTURY

    @property
    def max_year(self) -> int:
        if not self._shards:
            raise YearNotSupportedError(MAX_YEAR)
        return max(self._shards) * CENTURY + CENTURY - 1
