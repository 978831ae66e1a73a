"""Public IELTS user descriptors for half bands."""

from __future__ import annotations

import math

from ..core.models.bands import is_half_band


_DESCRIPTORS: dict[int, str] = {
    9: "Expert User",
    8: "Very Good User",
    7: "Good User",
    6: "Competent User",
    5: "Modest User",
    4: "Limited User",
    3: "Extremely Limited User",
    2: "Intermittent User",
    1: "Non User",
}

UNKNOWN_DESCRIPTOR = "Unknown"
NOT_ATTEMPTED = "Did not attempt"


def band_descriptor(band: float) -> str:
    """
    Describe a band the way results are labelled for candidates.

    A half band shares the label of the whole band below it; 0.5 counts
    as a non user. Values off the 0.5 grid are "Unknown".

    Example:
        >>> band_descriptor(7.5)
        'Good User'
    """
    if isinstance(band, bool) or not isinstance(band, (int, float)) or not is_half_band(band):
        return UNKNOWN_DESCRIPTOR
    if band == 0:
        return NOT_ATTEMPTED
    return _DESCRIPTORS[max(1, math.floor(band))]
