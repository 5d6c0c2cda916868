"""Ephemeris adapters (optional).

Thin wrapper around Skyfield, used to validate the year-code tables against
a JPL ephemeris. Install with:
  pip install "amlich[ephemeris]"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

log = logging.getLogger(__name__)

DEFAULT_EPHEMERIS = "de421.bsp"  # covers 1900..2050


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "amlich[ephemeris]"') from e


def load_ephemeris(name: str = DEFAULT_EPHEMERIS, directory: Optional[Union[str, Path]] = None):
    """Return (timescale, ephemeris); the BSP file is downloaded into `directory` on first use."""
    require_ephemeris()
    from skyfield.api import Loader

    load = Loader(str(directory) if directory is not None else ".")
    log.info("loading ephemeris %s from %s", name, load.directory)
    return load.timescale(), load(name)
