"""Wall-clock helpers."""

from __future__ import annotations

import time


def now() -> float:
    """Return the current Unix time in seconds."""

    return time.time()
