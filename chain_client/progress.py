"""Sync progress estimation."""

from __future__ import annotations

import math
from typing import Callable, Optional

from . import clock

# Opaque tunable: lets the ratio reach 1 shortly before real-time parity.
SYNC_BUFFER_SECONDS = 40 * 60


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def calc_progress(
    start: float,
    tip: float,
    now: Optional[Callable[[], float]] = None,
) -> float:
    """Return how far ``tip`` has advanced from ``start`` towards the present.

    ``start`` and ``tip`` are Unix timestamps in seconds. The result is capped
    at ``1.0`` but has no lower bound. When ``start`` is within the last
    :data:`SYNC_BUFFER_SECONDS` the denominator is zero or negative, so the
    result may be negative, ``-inf`` or ``nan``; callers must check with
    :func:`math.isfinite` before displaying it.
    """

    current_time = (now or clock.now)()
    current = tip - start
    total = current_time - start - SYNC_BUFFER_SECONDS
    ratio = _divide(current, total)
    if math.isnan(ratio):
        return ratio
    return min(1.0, ratio)
