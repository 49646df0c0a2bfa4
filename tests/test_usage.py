import math
import time

import pytest

from cpuwindow.usage import (
    CPUUsage,
    IntervalStats,
    UsageTarget,
    calculate_interval,
    current_time_ns,
)


def make_usage(times, usages, window=2):
    return CPUUsage(
        window,
        UsageTarget.PROCESS,
        clock=iter(times).__next__,
        rusage=iter(usages).__next__,
    )


def test_calculate_interval_percentages():
    stats = calculate_interval(0, 1_000_000_000, 0, 250_000_000, 0, 500_000_000)
    assert stats.user_pct == pytest.approx(25.0)
    assert stats.sys_pct == pytest.approx(50.0)
    assert stats.overall_pct == pytest.approx(75.0)
    assert stats.duration_ns == 1_000_000_000
    assert stats.start_ns == 0


def test_overall_is_sum_of_user_and_sys():
    stats = calculate_interval(10, 7_010, 100, 1_300, 50, 2_050)
    assert stats.overall_pct == pytest.approx(stats.user_pct + stats.sys_pct)


def test_zero_duration_gives_nan():
    stats = calculate_interval(5, 5, 0, 0, 0, 0)
    assert math.isnan(stats.user_pct)
    assert stats.duration_ns == 0


def test_interval_start_split():
    stats = IntervalStats(0.0, 0.0, 0.0, 3_000_000_005, 1)
    assert stats.start_sec == 3
    assert stats.start_nsec == 5


def test_empty_window():
    usage = make_usage([0], [(0, 0)])
    assert len(usage) == 0
    with pytest.raises(IndexError):
        usage[0]


def test_window_slides():
    times = [0, 100, 200, 300]
    usages = [(0, 0), (10, 0), (20, 10), (30, 20)]
    usage = make_usage(times, usages, window=2)
    for _ in range(3):
        usage.update()
    assert len(usage) == 2
    assert [s.start_ns for s in usage] == [100, 200]
    assert usage[0].start_ns == 100
    assert usage[1].start_ns == 200


def test_update_returns_latest():
    usage = make_usage([0, 1000], [(0, 0), (500, 0)], window=3)
    stats = usage.update()
    assert usage[len(usage) - 1] == stats
    assert stats.user_pct == pytest.approx(50.0)


def test_negative_index_rejected():
    usage = make_usage([0, 10], [(0, 0), (0, 0)])
    stats = usage.update()
    assert len(usage) == 1
    assert usage[0] == stats
    assert usage[0].duration_ns == 10
    with pytest.raises(IndexError):
        usage[-1]


def test_thread_target_rejected():
    with pytest.raises(ValueError):
        CPUUsage(2, UsageTarget.THREAD, clock=lambda: 0, rusage=lambda: (0, 0))


def test_zero_window_rejected():
    with pytest.raises(ValueError):
        CPUUsage(0, clock=lambda: 0, rusage=lambda: (0, 0))


def test_current_time_ns_tracks_wall_clock():
    before = time.time_ns()
    now = current_time_ns()
    after = time.time_ns()
    assert before <= now <= after


def test_default_sources():
    usage = CPUUsage(1)
    usage.update()
    usage.update()
    assert len(usage) == 1
    assert usage[0].duration_ns >= 0