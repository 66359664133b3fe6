#!/usr/bin/env python3
"""
Sample Benchmark Script

Demonstrates how to use hashbench programmatically: benchmark every
supported algorithm against one result table and write a single CSV.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hashbench.benchmark import BenchmarkInvocation, HashAlgorithm, HashBenchmark, ResultTable, serialize
from hashbench.cli.formatting import console, format_result_summary
from hashbench.core.config import get_config

RUNS = 100
PHRASE = "The quick brown fox jumps over the lazy dog"


def run_all_algorithms(output: Path) -> None:
    """Benchmark every algorithm into one table."""
    console.print(f"Benchmarking {len(HashAlgorithm)} algorithms, {RUNS} runs each...")

    benchmark = HashBenchmark(config=get_config())
    table = ResultTable()
    results = []

    for algorithm in HashAlgorithm:
        invocation = BenchmarkInvocation(algorithm, RUNS, PHRASE)
        results.append(benchmark.benchmark(invocation, table))

    serialize(table, output)

    console.print(format_result_summary(results))
    console.print(f"[green]✓ Wrote {len(table)} rows to {output}[/green]")


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("all_algorithms.csv")
    run_all_algorithms(target)
