"""Elapsed-time measurement for the menu actions.

Usage::

    with timed("quick-sort") as stats:
        quick_sort(bids)

    print(stats.ticks, stats.seconds)
"""

from __future__ import annotations

import contextlib
import logging
import time
from dataclasses import dataclass, field
from typing import Generator

logger = logging.getLogger(__name__)

# Resolution of the reported CPU clock, matching POSIX CLOCKS_PER_SEC.
CLOCKS_PER_SEC = 1_000_000
_NANOSECONDS_PER_TICK = 1_000_000_000 // CLOCKS_PER_SEC


@dataclass
class TimingResult:
    """Measurements collected by :func:`timed`; populated when the block exits."""

    label: str
    ticks: int = field(default=0)
    seconds: float = field(default=0.0)
    wall_seconds: float = field(default=0.0)


@contextlib.contextmanager
def timed(label: str) -> Generator[TimingResult, None, None]:
    """Measure CPU ticks and wall-clock time spent inside the block."""

    result = TimingResult(label=label)
    cpu_start = time.process_time_ns()
    wall_start = time.perf_counter()
    try:
        yield result
    finally:
        result.ticks = (time.process_time_ns() - cpu_start) // _NANOSECONDS_PER_TICK
        result.seconds = result.ticks / CLOCKS_PER_SEC
        result.wall_seconds = time.perf_counter() - wall_start
        logger.debug(
            "%s took %d ticks (%.6f s cpu, %.6f s wall)",
            label,
            result.ticks,
            result.seconds,
            result.wall_seconds,
        )


__all__ = ["CLOCKS_PER_SEC", "TimingResult", "timed"]
