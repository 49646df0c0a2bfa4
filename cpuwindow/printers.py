"""Plain-text reports of a CPU usage window."""

from __future__ import annotations

from typing import TextIO

from .usage import CPUUsage, IntervalStats


def format_interval(interval: IntervalStats) -> str:
    """Render one interval as text lines."""
    return (
        f"Interval Start: {interval.start_sec} s {interval.start_nsec} ns\n"
        f"Interval Duration (ns): {interval.duration_ns}\n"
        f"User Percent: {interval.user_pct:f}\n"
        f"Sys Percent: {interval.sys_pct:f}\n"
        f"Sys Percent: {interval.overall_pct:f}\n"
    )


def print_interval(usage: CPUUsage, outfile: TextIO, index: int) -> None:
    """Write the interval at ``index`` or a note that it does not exist."""
    try:
        interval = usage[index]
    except IndexError:
        outfile.write(f"Invalid interval number {index}.\n")
        return
    outfile.write(format_interval(interval))


def print_latest_interval(usage: CPUUsage, outfile: TextIO) -> None:
    """Write the most recent interval."""
    print_interval(usage, outfile, len(usage) - 1)


def print_all_intervals(usage: CPUUsage, outfile: TextIO) -> None:
    """Write every interval in the window, oldest first."""
    outfile.write("CPUUsage Window Contents: \n")
    for i in range(len(usage)):
        outfile.write(f"Interval {i}:\n")
        print_interval(usage, outfile, i)
    outfile.write("End CPUUsage Window\n")