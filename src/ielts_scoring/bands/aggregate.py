"""
Module: bands.aggregate

Purpose:
    Combines section bands into the overall band using IELTS rounding:
    a fractional part of .75 or more rounds up to the next whole band,
    .25 up to .75 becomes .5, anything lower rounds down.

Key Functions:
    - aggregate_overall(listening, reading, writing, speaking)
    - aggregate_partial(bands)
    - ielts_round(average)
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from ..core.errors import BandRangeError
from ..core.models.bands import MAX_BAND, MIN_BAND

logger = logging.getLogger(__name__)


def ielts_round(average: float) -> float:
    """
    Round an average band the IELTS way.

    Example:
        >>> ielts_round(6.1875)
        6.0
        >>> ielts_round(6.75)
        7.0
    """
    whole = math.floor(average)
    decimal = average - whole
    if decimal >= 0.75:
        return float(whole + 1)
    if decimal >= 0.25:
        return whole + 0.5
    return float(whole)


def _check_band(band: object, label: str) -> float:
    if isinstance(band, bool) or not isinstance(band, (int, float)) or math.isnan(band):
        raise BandRangeError(f"{label} band is not a number: {band!r}")
    if not MIN_BAND <= band <= MAX_BAND:
        raise BandRangeError(f"{label} band outside 0-9: {band}")
    return float(band)


def aggregate_overall(
    listening: float,
    reading: float,
    writing: float,
    speaking: float,
) -> float:
    """
    Overall band from all four section bands.

    Raises:
        BandRangeError: If a band is not a number in [0, 9]
    """
    bands = [
        _check_band(listening, "listening"),
        _check_band(reading, "reading"),
        _check_band(writing, "writing"),
        _check_band(speaking, "speaking"),
    ]
    return ielts_round(sum(bands) / len(bands))


def aggregate_partial(bands: Iterable[Optional[float]]) -> float:
    """
    Overall band from whichever section bands are available.

    None and zero bands count as not yet scored and are left out of the
    average. With nothing available the overall band is 0.

    Raises:
        BandRangeError: If a supplied band is not a number in [0, 9]
    """
    available: list[float] = []
    for position, band in enumerate(bands, start=1):
        if band is None:
            continue
        checked = _check_band(band, f"section {position}")
        if checked > 0:
            available.append(checked)
    if not available:
        logger.debug("No section bands available, overall band is 0")
        return 0.0
    return ielts_round(sum(available) / len(available))
