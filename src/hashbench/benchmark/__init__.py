"""
Benchmark Module

Hash timing, result table building and CSV output.
"""

from .runner import (
    HashAlgorithm,
    BenchmarkInvocation,
    BenchmarkResult,
    HashBenchmark,
    aggregate,
    run,
    serialize,
)
from .reporting import ResultTable, build_header, new_row, append_row
from .providers import build_providers

__all__ = [
    "HashAlgorithm",
    "BenchmarkInvocation",
    "BenchmarkResult",
    "HashBenchmark",
    "aggregate",
    "run",
    "serialize",
    "ResultTable",
    "build_header",
    "new_row",
    "append_row",
    "build_providers",
]
