#!/usr/bin/env python3
"""
withcell Micro Benchmarks

Measures the cost of the placeholder swap against touching a bare value, and
renders the results with rich.

Usage:
    python scripts/benchmark.py            # Run all benchmarks
    python scripts/benchmark.py --config   # Show current benchmark configuration
    python scripts/benchmark.py --quiet    # Only print the results table

Configuration:
    Adjust the constants at the top of the file to change benchmark parameters.
"""

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Callable, List

# Add the project root to the Python path
sys.path.insert(0, ".")

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table, box

from withcell import WithCell

# Configuration constants - adjust these to change benchmark behavior
TIME_LIMIT_SECONDS = 0.5  # Stop scaling once a run takes this long
STARTING_N = 1000  # Starting number of accesses
SCALE_FACTOR = 2.0  # How much to multiply N by each iteration


@dataclass
class BenchmarkResult:
    """Outcome of one scaled benchmark."""

    name: str
    max_n: int
    operation_time: float

    @property
    def per_op_ns(self) -> float:
        return self.operation_time / max(self.max_n, 1) * 1e9

    @property
    def operations_per_second(self) -> float:
        return self.max_n / self.operation_time if self.operation_time > 0 else 0.0


def _bare_append(n: int) -> None:
    value: List[int] = []
    for i in range(n):
        value.append(i)


def _with_append(n: int) -> None:
    cell = WithCell([])
    for i in range(n):
        cell.with_(lambda v: v.append(i))


def _restoring_with_append(n: int) -> None:
    cell = WithCell([], restore_on_error=True)
    for i in range(n):
        cell.with_(lambda v: v.append(i))


def _map_increment(n: int) -> None:
    cell = WithCell(0)
    for _ in range(n):
        cell.map(lambda x: x + 1)


def _reentrant_append(n: int) -> None:
    cell = WithCell([])

    def outer(v):
        cell.with_(lambda inner: inner.append(0))
        v.append(1)

    for _ in range(n):
        cell.with_(outer)


BENCHMARKS = [
    ("Bare list append", _bare_append),
    ("with_ append", _with_append),
    ("with_ append (restore_on_error)", _restoring_with_append),
    ("map increment", _map_increment),
    ("Reentrant with_", _reentrant_append),
]


def scale(name: str, operation: Callable[[int], None]) -> BenchmarkResult:
    """Grow N until one run of ``operation`` exceeds the time limit."""
    n = STARTING_N
    while True:
        start = time.perf_counter()
        operation(n)
        elapsed = time.perf_counter() - start

        if elapsed >= TIME_LIMIT_SECONDS:
            return BenchmarkResult(name, n, elapsed)
        n = int(n * SCALE_FACTOR)


class WithCellBenchmark:
    """Rich-formatted display for withcell benchmarks."""

    def __init__(self, quiet: bool = False):
        self.console = Console()
        self.quiet = quiet
        self.results: List[BenchmarkResult] = []

    def run_benchmarks(self) -> None:
        start_time = time.time()

        if not self.quiet:
            self._display_header()

        for name, operation in BENCHMARKS:
            if not self.quiet:
                self.console.print(f"[yellow]Running {name}...[/yellow]")
            self.results.append(scale(name, operation))

        self._display_final_results(start_time)

    def _display_header(self) -> None:
        header = Panel(
            Align.center("withcell Micro Benchmarks"),
            title="WithCell",
            border_style="blue",
        )
        self.console.print(header)
        self.console.print()

    def _display_final_results(self, start_time: float) -> None:
        baseline = self.results[0].per_op_ns if self.results else 0.0

        table = Table(title="Benchmark Results", box=box.SIMPLE_HEAVY)
        table.add_column("Benchmark", style="cyan", no_wrap=True)
        table.add_column("Max N", style="magenta", justify="right")
        table.add_column("ns/op", style="green", justify="right")
        table.add_column("ops/sec", style="green", justify="right")
        table.add_column("vs bare", style="yellow", justify="right")

        for result in self.results:
            ratio = result.per_op_ns / baseline if baseline else 0.0
            table.add_row(
                result.name,
                f"{result.max_n:,}",
                f"{result.per_op_ns:,.0f}",
                f"{result.operations_per_second:,.0f}",
                f"{ratio:.1f}x",
            )

        self.console.print()
        self.console.print(table)

        elapsed = time.time() - start_time
        self.console.print(f"[dim]Benchmark completed in {elapsed:.2f} seconds[/dim]")


def print_config():
    """Print the current benchmark configuration."""
    print("withcell Benchmark Configuration:")
    print(f"  TIME_LIMIT_SECONDS: {TIME_LIMIT_SECONDS}")
    print(f"  STARTING_N: {STARTING_N}")
    print(f"  SCALE_FACTOR: {SCALE_FACTOR}")


def main():
    """Main entry point for the benchmark script."""
    parser = argparse.ArgumentParser(description="withcell Micro Benchmarks")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output, show only final results",
    )

    args = parser.parse_args()

    if args.config:
        print_config()
        return

    if not args.quiet:
        print_config()
        print()

    WithCellBenchmark(quiet=args.quiet).run_benchmarks()


if __name__ == "__main__":
    main()
