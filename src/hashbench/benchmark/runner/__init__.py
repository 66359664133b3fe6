"""
Benchmark Runner Module

Timing, aggregation and persistence of hash benchmarks, split into
configuration, types and execution logic.
"""

from .config import HashAlgorithm, BenchmarkInvocation, encode_phrase, validate_run_count
from .types import BenchmarkResult, TimingSeries
from .metrics_handler import aggregate, NO_AVERAGE
from .result_saver import serialize
from .core import HashBenchmark, run

__all__ = [
    "HashAlgorithm",
    "BenchmarkInvocation",
    "validate_run_count",
    "encode_phrase",
    "BenchmarkResult",
    "TimingSeries",
    "aggregate",
    "NO_AVERAGE",
    "serialize",
    "HashBenchmark",
    "run",
]
