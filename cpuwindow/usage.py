"""Sliding window of CPU usage measurements for the current process."""

from __future__ import annotations

import enum
import math
import operator
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

NANOSEC_PER_SEC = 1_000_000_000
NANOSEC_PER_MICROSEC = 1_000

Clock = Callable[[], int]
RusageSource = Callable[[], Tuple[int, int]]


class UsageTarget(enum.IntEnum):
    """Whose CPU time is measured."""

    PROCESS = 1
    THREAD = 2


@dataclass(frozen=True)
class IntervalStats:
    """CPU usage over one measured interval."""

    user_pct: float
    sys_pct: float
    overall_pct: float
    start_ns: int
    duration_ns: int

    @property
    def start_sec(self) -> int:
        """Whole seconds of the interval start time."""
        return self.start_ns // NANOSEC_PER_SEC

    @property
    def start_nsec(self) -> int:
        """Nanosecond remainder of the interval start time."""
        return self.start_ns % NANOSEC_PER_SEC


def current_time_ns() -> int:
    """Wall-clock time in nanoseconds."""
    return time.time_ns()


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        if part == 0:
            return math.nan
        return math.copysign(math.inf, part)
    return part / whole * 100.0


def calculate_interval(
    start_ns: int,
    end_ns: int,
    utime_start_ns: int,
    utime_end_ns: int,
    stime_start_ns: int,
    stime_end_ns: int,
) -> IntervalStats:
    """Compute usage percentages for an interval from raw time readings."""
    duration = end_ns - start_ns
    utime_delta = utime_end_ns - utime_start_ns
    stime_delta = stime_end_ns - stime_start_ns
    return IntervalStats(
        user_pct=_percent(utime_delta, duration),
        sys_pct=_percent(stime_delta, duration),
        overall_pct=_percent(utime_delta + stime_delta, duration),
        start_ns=start_ns,
        duration_ns=duration,
    )


def _seconds_to_ns(seconds: float) -> int:
    # Resource usage is reported at microsecond granularity.
    return round(seconds * 1_000_000) * NANOSEC_PER_MICROSEC


def _process_rusage() -> Tuple[int, int]:
    import resource

    usage = resource.getrusage(resource.RUSAGE_SELF)
    return _seconds_to_ns(usage.ru_utime), _seconds_to_ns(usage.ru_stime)


class CPUUsage:
    """Keeps the most recent ``window_size`` CPU usage intervals."""

    def __init__(
        self,
        window_size: int,
        who: UsageTarget = UsageTarget.PROCESS,
        clock: Optional[Clock] = None,
        rusage: Optional[RusageSource] = None,
    ) -> None:
        if window_size < 1:
            raise ValueError(f"window size must be at least 1, got {window_size}")
        who = UsageTarget(who)
        if who is not UsageTarget.PROCESS:
            raise ValueError(f"unsupported usage target: {who.name}")
        self.window_size = window_size
        self.who = who
        self._clock = clock or current_time_ns
        self._rusage = rusage or _process_rusage
        self._intervals: deque[IntervalStats] = deque(maxlen=window_size)
        self._last_utime, self._last_stime = self._rusage()
        self._last_time = self._clock()

    def update(self) -> IntervalStats:
        """Close the current interval, add it to the window and return it."""
        utime, stime = self._rusage()
        now = self._clock()
        interval = calculate_interval(
            self._last_time, now, self._last_utime, utime, self._last_stime, stime
        )
        self._intervals.append(interval)
        self._last_utime, self._last_stime, self._last_time = utime, stime, now
        return interval

    def __len__(self) -> int:
        return len(self._intervals)

    def __getitem__(self, index: int) -> IntervalStats:
        index = operator.index(index)
        if not 0 <= index < len(self._intervals):
            raise IndexError(f"interval index {index} out of range")
        return self._intervals[index]

    def __iter__(self) -> Iterator[IntervalStats]:
        return iter(tuple(self._intervals))