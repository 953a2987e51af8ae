"""
Header-driven discovery of the miles / elevation columns.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from hikelog.config import MILES_HEADER_KEYWORDS, ELEVATION_HEADER_KEYWORDS
from hikelog.data.schemas import MeasureColumns

log = logging.getLogger("hikelog.data.columns")


def _find(header: Sequence[str], keywords: list[str]) -> Optional[int]:
    for i, name in enumerate(header):
        lowered = str(name).lower()
        if any(kw in lowered for kw in keywords):
            return i
    return None


def resolve_measure_columns(header: Sequence[str]) -> MeasureColumns:
    """Locate the measure columns by name, else fall back to trailing positions.

    Miles falls back to the second-to-last column, elevation to the last.
    """
    miles = _find(header, MILES_HEADER_KEYWORDS)
    elevation = _find(header, ELEVATION_HEADER_KEYWORDS)
    miles_fallback = miles is None
    elevation_fallback = elevation is None

    if miles_fallback:
        miles = len(header) - 2 if len(header) >= 2 else None
        log.warning("No miles header in %s; using column %s", list(header), miles)
    if elevation_fallback:
        elevation = len(header) - 1 if len(header) >= 1 else None
        log.warning("No elevation header in %s; using column %s", list(header), elevation)

    return MeasureColumns(
        miles=miles,
        elevation=elevation,
        miles_fallback=miles_fallback,
        elevation_fallback=elevation_fallback,
    )
