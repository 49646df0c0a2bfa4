# cpuwindow

`cpuwindow` measures how much CPU time the current process uses. It reads the
process's user and system CPU times together with the wall clock. It keeps the
most recent intervals in a sliding window of fixed size. Once the window is
full, each new interval pushes out the oldest one.

Each interval is an `IntervalStats` with these fields:

- `user_pct`: user CPU time as a percentage of the interval's wall-clock length
- `sys_pct`: system CPU time as a percentage of that length
- `overall_pct`: user and system time together, as a percentage of that length
- `start_ns`: when the interval started, in nanoseconds of wall-clock time
- `duration_ns`: how long the interval lasted, in nanoseconds

The properties `start_sec` and `start_nsec` split `start_ns` into whole seconds
and the nanoseconds left over.

When an interval has zero duration, each percentage is `nan` if no CPU time was
used and infinite if some was.

CPU times are read with `resource.getrusage`, so the default time source needs
a POSIX system.

## Installation

```
pip install cpuwindow
```

## Using the library

```python
import sys

from cpuwindow.usage import CPUUsage, UsageTarget
from cpuwindow.printers import print_all_intervals
from cpuwindow.jsonout import dump_all_intervals_json, window_to_json

usage = CPUUsage(window_size=4, who=UsageTarget.PROCESS)

# ... do some work ...
interval = usage.update()   # closes the current interval, stores it and returns it

print(len(usage))               # number of intervals in the window
latest = usage[len(usage) - 1]  # indices run from 0 (oldest) to len(usage) - 1
print(latest.user_pct, latest.sys_pct, latest.overall_pct)

for interval in usage:          # oldest first
    print(interval.duration_ns)

print_all_intervals(usage, sys.stdout)      # plain-text report
dump_all_intervals_json(usage, sys.stdout)  # JSON report
data = window_to_json(usage)                # the same report as a dict
```

Keep the following in mind:

- `window_size` must be at least 1, or `CPUUsage` raises `ValueError`.
- Only `UsageTarget.PROCESS` is supported. Passing `UsageTarget.THREAD` raises
  `ValueError`.
- Indexing accepts only `0 <= index < len(usage)`. Any other index, including a
  negative one, raises `IndexError`.

`CPUUsage` also takes a `clock` argument, which returns nanoseconds, and a
`rusage` argument, which returns a `(user_ns, system_ns)` pair. Use them to
supply your own time sources, for example in tests. By default the clock is
`current_time_ns()`, the wall-clock time in nanoseconds.
`calculate_interval(start_ns, end_ns, utime_start_ns, utime_end_ns,
stime_start_ns, stime_end_ns)` computes the statistics for one interval from raw
nanosecond readings.

### Text reports (`cpuwindow.printers`)

- `format_interval(interval)` returns the text lines for one interval.
- `print_interval(usage, outfile, index)` writes those lines for one interval.
- `print_latest_interval(usage, outfile)` writes the most recent interval.
- `print_all_intervals(usage, outfile)` writes every interval between a header
  line and a footer line.

If an index does not exist, the printing functions write
`Invalid interval number <index>.` and do not raise.

Each interval is written like this:

```
Interval Start: 12 s 500 ns
Interval Duration (ns): 1000000000
User Percent: 10.000000
Sys Percent: 5.000000
Sys Percent: 15.000000
```

The third percentage line holds the overall percentage, although its label
also reads `Sys Percent`.

### JSON reports (`cpuwindow.jsonout`)

- `timespec_to_json(seconds, nanoseconds)` builds the start-time object.
- `interval_to_json(interval)` builds the object for one interval.
- `window_to_json(usage)` builds the object for the whole window.
- `dump_interval_json(usage, outfile, index)`, `dump_latest_interval_json(usage,
  outfile)` and `dump_all_intervals_json(usage, outfile)` write the JSON
  objects.

A missing index gets the same `Invalid interval number` note as in the text
reports. Writing JSON raises `ValueError` if a percentage is `nan` or infinite.

The report has this shape:

```json
{"allIntervals": [{"intervalStartTimespec": {"tvSec": 0, "tvNSec": 0},
                   "intervalDuraitonNSec": 0,
                   "intervalUTimePercent": 0.0,
                   "intervalSTimePercent": 0.0,
                   "intervalOverallCPUPercent": 0.0}]}
```

The key names are fixed by the output format, including the spelling of
`intervalDuraitonNSec`.

## Command line

```
cpuwindow
```

The command measures its own CPU usage through several phases, using a window
of two intervals:

1. It sleeps for `--warmup` seconds (default 1), then closes an interval.
2. It busy-waits for `--busy` seconds (default 10), then closes an interval.
3. It busy-waits for `--second-busy` seconds (default 5), then sleeps for
   `--idle` seconds (default 5), and closes a third interval.

With the defaults this takes about 21 seconds. The command then writes the
window as JSON and ends with the word `done`.

Options:

- `--window N`: the number of intervals to keep (default 2)
- `--text`: print the plain-text report instead of JSON

## What it does not do

- It does not sample in the background. Intervals are recorded only when
  `update()` is called.
- It measures the whole process only, not single threads.
- It does not store any history beyond the in-memory window.

## Running the tests

```
pip install -e .[test]
pytest
```