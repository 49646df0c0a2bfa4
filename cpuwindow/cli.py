"""Command that measures its own CPU usage through idle and busy phases."""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from .jsonout import dump_all_intervals_json
from .printers import print_all_intervals
from .usage import CPUUsage, NANOSEC_PER_SEC, UsageTarget, current_time_ns


def _busy_wait(seconds: float) -> None:
    start = current_time_ns()
    limit = int(seconds * NANOSEC_PER_SEC)
    while current_time_ns() - start < limit:
        pass


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpuwindow",
        description="Measure this process's CPU usage over idle and busy phases.",
    )
    parser.add_argument("--window", type=int, default=2, help="intervals kept (default 2)")
    parser.add_argument("--warmup", type=float, default=1.0, help="initial sleep in seconds")
    parser.add_argument("--busy", type=float, default=10.0, help="first busy phase in seconds")
    parser.add_argument(
        "--second-busy", type=float, default=5.0, help="second busy phase in seconds"
    )
    parser.add_argument("--idle", type=float, default=5.0, help="sleep after second busy phase")
    parser.add_argument("--text", action="store_true", help="print plain text instead of JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        usage = CPUUsage(args.window, UsageTarget.PROCESS)
    except ValueError as exc:
        parser.error(str(exc))

    time.sleep(args.warmup)
    usage.update()

    _busy_wait(args.busy)
    usage.update()

    _busy_wait(args.second_busy)
    time.sleep(args.idle)
    usage.update()

    if args.text:
        print_all_intervals(usage, sys.stdout)
    else:
        dump_all_intervals_json(usage, sys.stdout)
    sys.stdout.write("done")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())