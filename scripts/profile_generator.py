#!/usr/bin/env python3
"""Per-accessor throughput profiler for the xorshift128 generator.

Usage:
    python scripts/profile_generator.py --draws 200000 --seed 42
    python scripts/profile_generator.py --draws 500000 --cprofile profile.prof

Reports:
    - Time per batch for every accessor (min, p50, p95, max)
    - Throughput (values/sec) and relative cost against next_uint
    - Optional: cProfile dump for flame graph generation
"""

from __future__ import annotations

import argparse
import cProfile
import io
import os
import pstats
import statistics
import sys
import time
from array import array
from typing import Callable

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from fastrandom.systems.xorshift import Xorshift128

_BATCH = 1000


def _scalar(method: Callable[[], object]) -> Callable[[], None]:
    def _run() -> None:
        for _ in range(_BATCH):
            method()
    return _run


def _build_cases(gen: Xorshift128) -> dict[str, Callable[[], None]]:
    byte_buffer = bytearray(_BATCH * 4)
    float_buffer = array("f", [0.0] * _BATCH)
    return {
        "next_uint": _scalar(gen.next_uint),
        "next_int": _scalar(gen.next_int),
        "next": _scalar(gen.next),
        "next(100)": _scalar(lambda: gen.next(100)),
        "next(-50, 50)": _scalar(lambda: gen.next(-50, 50)),
        "next(min, max)": _scalar(lambda: gen.next(-(1 << 31), (1 << 31) - 1)),
        "next_double": _scalar(gen.next_double),
        "next_float": _scalar(gen.next_float),
        "next_bool": _scalar(gen.next_bool),
        "next_bytes (4/step)": lambda: gen.next_bytes(byte_buffer),
        "next_floats": lambda: gen.next_floats(float_buffer),
    }


def _run_profile(seed: int, draws: int) -> dict[str, list[float]]:
    """Time every accessor in batches of ``_BATCH`` values."""
    gen = Xorshift128(seed)
    batches = max(1, draws // _BATCH)
    timings: dict[str, list[float]] = {}
    for name, case in _build_cases(gen).items():
        times: list[float] = []
        for _ in range(batches):
            t_start = time.perf_counter()
            case()
            times.append(time.perf_counter() - t_start)
        timings[name] = times
    return timings


def _percentile(data: list[float], p: float) -> float:
    """Simple percentile calculation."""
    if not data:
        return 0.0
    sorted_data = sorted(data)
    k = (len(sorted_data) - 1) * (p / 100.0)
    f = int(k)
    c = f + 1
    if c >= len(sorted_data):
        return sorted_data[f]
    return sorted_data[f] + (k - f) * (sorted_data[c] - sorted_data[f])


def _print_report(timings: dict[str, list[float]], wall_time: float) -> None:
    """Print a formatted throughput report."""
    print("\n" + "=" * 78)
    print("  GENERATOR THROUGHPUT REPORT")
    print("=" * 78)
    print(f"\n  Batch size:        {_BATCH} values")
    print(f"  Wall clock time:   {wall_time:.3f}s")

    baseline = statistics.mean(timings["next_uint"]) if timings.get("next_uint") else 0.0

    print(f"\n  {'Accessor':<22} {'P50 (us)':>10} {'P95 (us)':>10} {'Max (us)':>10} {'M vals/s':>10} {'x uint':>7}")
    print(f"  {'-' * 22} {'-' * 10} {'-' * 10} {'-' * 10} {'-' * 10} {'-' * 7}")
    for name, times in timings.items():
        mean = statistics.mean(times)
        rate = _BATCH / mean / 1e6 if mean > 0 else 0.0
        rel = mean / baseline if baseline > 0 else 0.0
        print(
            f"  {name:<22} {_percentile(times, 50) * 1e6:>10.1f} {_percentile(times, 95) * 1e6:>10.1f}"
            f" {max(times) * 1e6:>10.1f} {rate:>10.2f} {rel:>7.2f}"
        )

    print("\n" + "=" * 78)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the xorshift128 generator")
    parser.add_argument("--draws", type=int, default=200_000, help="Values drawn per accessor")
    parser.add_argument("--seed", type=int, default=42, help="Generator seed")
    parser.add_argument("--cprofile", type=str, default=None, help="Save cProfile output to file")
    args = parser.parse_args()

    print(f"Profiling: {args.draws} draws per accessor, seed={args.seed}")

    profiler = None
    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()

    wall_start = time.perf_counter()
    timings = _run_profile(args.seed, args.draws)
    wall_time = time.perf_counter() - wall_start

    if profiler:
        profiler.disable()

    _print_report(timings, wall_time)

    if profiler and args.cprofile:
        profiler.dump_stats(args.cprofile)
        print(f"\n  cProfile data saved to: {args.cprofile}")
        print(f"  View with: python -m pstats {args.cprofile}")

        print(f"\n  Top 20 functions by cumulative time:")
        stream = io.StringIO()
        ps = pstats.Stats(profiler, stream=stream)
        ps.sort_stats("cumulative")
        ps.print_stats(20)
        print(stream.getvalue())


if __name__ == "__main__":
    main()
