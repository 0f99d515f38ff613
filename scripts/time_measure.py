#!/usr/bin/env python3
"""Time how long it takes to sequence every line of a tree of text files."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from strlenpy import ZERO, MeasureOptions, TextLength, sequence_lengths


def measure_files(
    files: list[Path],
    options: MeasureOptions,
    *,
    show_progress: bool = False,
) -> tuple[int, TextLength]:
    """Sequence each file line by line; return the line count and the summed length."""
    lines = 0
    total = ZERO
    for path in tqdm(files, unit="file", disable=not show_progress):
        segments = path.read_bytes().splitlines(keepends=True)
        ranges, length = sequence_lengths(segments, options=options)
        lines += len(ranges)
        total = total + length
    return lines, total


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark line sequencing throughput")
    parser.add_argument("root", type=Path, help="Directory of text files")
    parser.add_argument("--glob", default="*.txt", help="File pattern (default: *.txt)")
    parser.add_argument("--encoding", default="utf-8", help="Storage encoding (default: utf-8)")
    parser.add_argument("--runs", type=int, default=3, help="Timed runs")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    args = parser.parse_args()

    files = sorted(path for path in args.root.rglob(args.glob) if path.is_file())
    if not files:
        raise SystemExit(f"No {args.glob} files found under {args.root}")

    options = MeasureOptions(encoding=args.encoding)
    timings: list[float] = []
    for _ in range(max(args.runs, 1)):
        start = time.perf_counter()
        lines, total = measure_files(files, options, show_progress=not args.no_progress)
        timings.append(time.perf_counter() - start)

    print(f"{len(files)} files, {lines} lines, {total!r}")
    print(f"best {min(timings):.4f}s, median {statistics.median(timings):.4f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
