"""
Metrics Handler Module

Reduces a timing series to the samples that are reported and their mean.
"""

import statistics
from typing import Sequence, Tuple

from .types import TimingSeries

# Reported when no samples remain after the first one is dropped.
NO_AVERAGE = -1.0


def aggregate(series: Sequence[int]) -> Tuple[TimingSeries, float]:
    """
    Drop the first sample and average the rest.

    The first call pays for cold caches and lazy initialisation, so it is
    always excluded, whatever its value.

    Args:
        series: Timing samples in call order

    Returns:
        Tuple of (trimmed series, average). The average is NO_AVERAGE when
        the trimmed series is empty.
    """
    trimmed = list(series[1:])
    if not trimmed:
        return trimmed, NO_AVERAGE
    return trimmed, statistics.fmean(trimmed)
