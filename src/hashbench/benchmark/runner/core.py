"""
Benchmark Runner Core

Times repeated calls to a hashing provider and coordinates aggregation and
result table updates for each benchmark invocation.
"""

import time
from typing import Callable, Mapping, Optional

from hashbench.core.config import get_config
from hashbench.core.exceptions import HashProviderError, TableShapeError
from hashbench.utils.logging import get_logger, get_benchmark_logger, PerformanceTimer

from ..providers import HashFunction, build_providers, resolve_provider
from ..reporting import ResultTable, append_row, new_row
from .config import BenchmarkInvocation, HashAlgorithm, encode_phrase, validate_run_count
from .metrics_handler import aggregate
from .types import BenchmarkResult, TimingSeries

logger = get_logger(__name__)

Clock = Callable[[], int]


def run(algorithm: HashAlgorithm,
        run_count: int,
        phrase: str,
        providers: Optional[Mapping[HashAlgorithm, HashFunction]] = None,
        clock: Clock = time.perf_counter_ns) -> TimingSeries:
    """
    Time run_count sequential hash computations of phrase.

    Each sample covers exactly one provider call: the clock is read
    immediately before and after it. Digests are discarded.

    Args:
        algorithm: Algorithm to benchmark
        run_count: Number of timed calls (at least 1)
        phrase: Text to hash, encoded as UTF-8
        providers: Optional algorithm -> hash function table
        clock: Nanosecond clock

    Returns:
        run_count elapsed times in nanoseconds, in call order

    Raises:
        UsageError: if run_count is below 1 or the phrase has no UTF-8 form
        HashProviderError: if any hash call fails; no partial series is returned
    """
    validate_run_count(run_count)
    hash_function = resolve_provider(algorithm, providers)
    payload = encode_phrase(phrase)
    bench_logger = get_benchmark_logger(algorithm.name, run_count)

    series: TimingSeries = []
    for index in range(run_count):
        try:
            start = clock()
            hash_function(payload)
            elapsed = clock() - start
        except Exception as e:
            bench_logger.error(f"Failed on run {index}: {e}")
            raise HashProviderError(
                f"Hashing provider failed for {algorithm.name} on run {index}: {e}",
                algorithm=algorithm.name,
                run_index=index,
            ) from e

        series.append(elapsed)
        bench_logger.debug(f"Run {index}: {elapsed} ns")

    return series


class HashBenchmark:
    """Runs benchmark invocations and records them in a result table."""

    def __init__(self, config=None,
                 providers: Optional[Mapping[HashAlgorithm, HashFunction]] = None,
                 clock: Clock = time.perf_counter_ns):
        """
        Initialize the benchmark.

        Args:
            config: Configuration object (uses get_config() if None)
            providers: Optional hash function table (built from config if None)
            clock: Nanosecond clock used for every sample
        """
        self.config = config or get_config()
        self.providers = providers if providers is not None else build_providers(
            self.config.benchmark.siphash_key_bytes
        )
        self.clock = clock

    def benchmark(self, invocation: BenchmarkInvocation, table: ResultTable) -> BenchmarkResult:
        """
        Run one invocation and append its row to the table.

        Args:
            invocation: What to benchmark
            table: Table receiving the row; its header is set on first use

        Returns:
            BenchmarkResult with the raw series, trimmed samples, average and row
        """
        if table.run_count is not None and table.run_count != invocation.run_count:
            raise TableShapeError(
                f"Table was started with {table.run_count} runs, "
                f"cannot add {invocation.algorithm.name} with {invocation.run_count} runs",
                expected_width=table.width,
                actual_width=invocation.run_count + 1,
            )

        name = invocation.algorithm.name
        with PerformanceTimer(f"{name} benchmark ({invocation.run_count} runs)", logger):
            series = run(
                invocation.algorithm,
                invocation.run_count,
                invocation.phrase,
                providers=self.providers,
                clock=self.clock,
            )

        trimmed, average = aggregate(series)
        row = new_row(invocation.algorithm, trimmed, average)

        table.ensure_header(invocation.run_count)
        append_row(table, row)

        logger.info(f"{name}: discarded first sample of {series[0]} ns, average of {len(trimmed)} samples is {average} ns")

        return BenchmarkResult(
            algorithm=invocation.algorithm,
            run_count=invocation.run_count,
            series=series,
            trimmed=trimmed,
            average=average,
            row=row,
        )
