#!/usr/bin/env python3
"""Quick perf benchmark for parsing and evaluating went sources."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import random
import statistics
import time

from tqdm import tqdm

from wentpy.parser import parse
from wentpy.runtime import evaluate


def _collect_sources(root: Path) -> list[tuple[str, str]]:
    files = sorted(path for path in root.rglob("*.went") if path.is_file())
    return [(path.name, path.read_text(encoding="utf-8")) for path in files]


def _generate_sources(count: int, statements: int, seed: int) -> list[tuple[str, str]]:
    """Synthetic programs of arithmetic, comparisons and list literals."""
    rng = random.Random(seed)
    operators = ["+", "-", "*", "%"]
    sources: list[tuple[str, str]] = []
    for index in range(count):
        lines: list[str] = []
        for _ in range(statements):
            terms = [str(rng.randint(1, 999)) for _ in range(rng.randint(2, 6))]
            expr = terms[0]
            for term in terms[1:]:
                expr = f"({expr} {rng.choice(operators)} {term})"
            row = f"[{expr} < {rng.randint(1, 999)}, '{index}', {rng.random():.3f}]"
            lines.append(f"{row} == [] || {terms[0]} in [1, 2]")
        sources.append((f"generated_{index}.went", "\n".join(lines) + "\n"))
    return sources


def _run_once(
    sources: list[tuple[str, str]],
    *,
    label: str,
    show_progress: bool,
    evaluate_trees: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_statements = 0
    total_errors = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for name, text in iterator:
        parsed = parse(text, name)
        if parsed.root is None:
            total_errors += 1
            continue
        total_statements += len(parsed.root.statements)
        if evaluate_trees and evaluate(parsed.root, name).error is not None:
            total_errors += 1
    duration = time.perf_counter() - start
    return duration, total_statements, total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark went parse/evaluate throughput")
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory of .went files (default: generate synthetic programs)",
    )
    parser.add_argument("--generate", type=int, default=200, help="Synthetic programs to generate")
    parser.add_argument("--statements", type=int, default=50, help="Statements per synthetic program")
    parser.add_argument("--seed", type=int, default=0, help="Seed for synthetic programs")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument("--parse-only", action="store_true", help="Skip evaluation")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    if args.root is not None:
        root: Path = args.root
        if not root.is_dir():
            raise SystemExit(f"Invalid --root: {root}")
        sources = _collect_sources(root)
        if not sources:
            raise SystemExit(f"No .went files found under {root}")
        dataset = str(root)
    else:
        sources = _generate_sources(args.generate, args.statements, args.seed)
        dataset = f"generated ({args.generate} x {args.statements} statements, seed={args.seed})"

    show_progress = not args.no_progress
    evaluate_trees = not args.parse_only
    warmups = max(args.warmups, 0)
    runs = max(args.runs, 1)

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(warmups):
            _run_once(
                sources,
                label=f"warmup {warmup_idx + 1}/{warmups}",
                show_progress=show_progress,
                evaluate_trees=evaluate_trees,
            )

        timings: list[float] = []
        statements_count = 0
        errors_count = 0
        for run_idx in range(runs):
            duration, statements_count, errors_count = _run_once(
                sources,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
                evaluate_trees=evaluate_trees,
            )
            timings.append(duration)
        return timings, statements_count, errors_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, statements_count, errors_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, statements_count, errors_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {dataset}")
    print(f"Files: {len(sources)}")
    print(f"Statements: {statements_count}")
    print(f"Failed inputs: {errors_count}")
    print(f"Runs: {len(timings)} (warmups={warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean):      {len(sources) / mean:.1f}")
    print(f"Statements/s (mean): {statements_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
