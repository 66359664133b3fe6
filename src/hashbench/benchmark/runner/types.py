"""
Benchmark Types

Type definitions for timing series and benchmark results.
"""

from typing import List
from dataclasses import dataclass

from .config import HashAlgorithm

# Per-run elapsed times in nanoseconds, index 0 first.
TimingSeries = List[int]


@dataclass
class BenchmarkResult:
    """Complete result of one benchmark invocation."""
    algorithm: HashAlgorithm
    run_count: int
    series: TimingSeries
    trimmed: TimingSeries
    average: float
    row: List[str]

    @property
    def has_average(self) -> bool:
        """False when every sample was discarded and the average is the sentinel."""
        return bool(self.trimmed)

    @property
    def discarded_sample(self) -> int:
        return self.series[0]
