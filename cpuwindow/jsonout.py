"""JSON reports of a CPU usage window."""

from __future__ import annotations

import json
from typing import Any, Dict, TextIO

from .usage import CPUUsage, IntervalStats

WINDOW_ALL_INTERVALS_KEY = "allIntervals"
INTERVAL_START_TIME_KEY = "intervalStartTimespec"
INTERVAL_DURATION_KEY = "intervalDuraitonNSec"
INTERVAL_UTIME_PERCENT_KEY = "intervalUTimePercent"
INTERVAL_STIME_PERCENT_KEY = "intervalSTimePercent"
INTERVAL_OVERALL_PERCENT_KEY = "intervalOverallCPUPercent"
TIMESPEC_SEC_KEY = "tvSec"
TIMESPEC_NSEC_KEY = "tvNSec"


def timespec_to_json(seconds: int, nanoseconds: int) -> Dict[str, int]:
    """Represent a seconds/nanoseconds pair as a JSON object."""
    return {TIMESPEC_SEC_KEY: seconds, TIMESPEC_NSEC_KEY: nanoseconds}


def interval_to_json(interval: IntervalStats) -> Dict[str, Any]:
    """Represent one interval as a JSON object."""
    return {
        INTERVAL_START_TIME_KEY: timespec_to_json(interval.start_sec, interval.start_nsec),
        INTERVAL_DURATION_KEY: interval.duration_ns,
        INTERVAL_UTIME_PERCENT_KEY: float(interval.user_pct),
        INTERVAL_STIME_PERCENT_KEY: float(interval.sys_pct),
        INTERVAL_OVERALL_PERCENT_KEY: float(interval.overall_pct),
    }


def window_to_json(usage: CPUUsage) -> Dict[str, Any]:
    """Represent the whole window as a JSON object."""
    return {WINDOW_ALL_INTERVALS_KEY: [interval_to_json(i) for i in usage]}


def _dump(obj: Any, outfile: TextIO) -> None:
    outfile.write(json.dumps(obj, allow_nan=False))


def dump_interval_json(usage: CPUUsage, outfile: TextIO, index: int) -> None:
    """Write the interval at ``index`` as JSON, or a note that it does not exist."""
    try:
        interval = usage[index]
    except IndexError:
        outfile.write(f"Invalid interval number {index}.\n")
        return
    _dump(interval_to_json(interval), outfile)


def dump_latest_interval_json(usage: CPUUsage, outfile: TextIO) -> None:
    """Write the most recent interval as JSON."""
    dump_interval_json(usage, outfile, len(usage) - 1)


def dump_all_intervals_json(usage: CPUUsage, outfile: TextIO) -> None:
    """Write the whole window as JSON."""
    _dump(window_to_json(usage), outfile)