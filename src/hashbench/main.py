"""
CLI Entry Point

Command-line interface for the hashbench harness using the Click framework
with rich output formatting.

    hashbench [OPTIONS] ALGORITHM RUNS PHRASE OUTPUT
"""

import sys
from pathlib import Path

import click

from hashbench.benchmark.reporting import ResultTable
from hashbench.benchmark.runner import BenchmarkInvocation, HashAlgorithm, HashBenchmark, serialize
from hashbench.cli.formatting import console, display_error, display_success, format_result_summary
from hashbench.core.config import get_config, reload_config
from hashbench.core.exceptions import (
    HashBenchException,
    HashProviderError,
    ResultStorageError,
    UsageError,
)
from hashbench.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)

FAILURE_EXIT_CODE = 1
USAGE_EXIT_CODE = 2


def usage_message() -> str:
    """Two-line usage text: the argument pattern and the supported algorithms."""
    return (
        "Usage: hashbench [Algorithm] [Number of Runs] [Phrase to hash] [Path to Output]\n"
        f"Supported algorithms: {', '.join(HashAlgorithm.names())}"
    )


def exit_with_usage(ctx: click.Context) -> None:
    click.echo(usage_message())
    ctx.exit(USAGE_EXIT_CODE)


class BenchmarkCommand(click.Command):
    """Click command that answers every argument error with the usage message."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            logger.debug(f"Rejected arguments {args!r}: {e.format_message()}")
            exit_with_usage(ctx)


@click.command(cls=BenchmarkCommand, context_settings={"allow_interspersed_args": False})
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.argument('algorithm', type=click.Choice(HashAlgorithm.names(), case_sensitive=True))
@click.argument('runs', type=click.IntRange(min=1))
@click.argument('phrase')
@click.argument('output', type=click.Path())
@click.pass_context
def cli(ctx, config, verbose, debug, algorithm, runs, phrase, output):
    """Time RUNS hashes of PHRASE with ALGORITHM and write the timings to OUTPUT.

    \b
    EXAMPLES:

    hashbench MD5 5 hello out.csv
    hashbench --verbose SHA256 1000 "the quick brown fox" sha256.csv

    \b
    The first run is discarded; the remaining runs and their average
    (in nanoseconds) are written as CSV.

    \b
    Options go before ALGORITHM. Everything from ALGORITHM on is taken
    literally, so a PHRASE may start with a dash.
    """
    try:
        # Load configuration
        if config:
            app_config = reload_config(Path(config))
        else:
            app_config = get_config()

        if debug:
            app_config.debug = debug
    except (HashBenchException, OSError) as e:
        display_error(f"Error initializing application: {e}")
        ctx.exit(FAILURE_EXIT_CODE)

    # Usage errors are settled before logging creates any files
    if runs > app_config.benchmark.max_runs:
        exit_with_usage(ctx)

    try:
        invocation = BenchmarkInvocation(HashAlgorithm.from_name(algorithm), runs, phrase)
    except UsageError:
        exit_with_usage(ctx)

    try:
        app_config.logging.level = 'DEBUG' if (verbose or debug) else app_config.logging.level
        setup_logging(app_config)
    except OSError as e:
        display_error(f"Error initializing logging: {e}")
        ctx.exit(FAILURE_EXIT_CODE)

    logger.debug(f"Benchmarking {invocation.algorithm.name} with {invocation.run_count} runs")

    table = ResultTable()

    try:
        result = HashBenchmark(config=app_config).benchmark(invocation, table)
    except HashProviderError as e:
        logger.error(f"Benchmark failed: {e}")
        display_error(str(e), "Benchmark failed")
        ctx.exit(FAILURE_EXIT_CODE)

    try:
        output_path = serialize(table, output)
    except ResultStorageError as e:
        display_error(str(e), "Error writing results")
        ctx.exit(FAILURE_EXIT_CODE)

    if app_config.reporting.show_summary:
        console.print(format_result_summary([result]))
    display_success(f"Wrote {len(table)} result row(s) to {output_path}")


def main():
    """Main entry point with error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(FAILURE_EXIT_CODE)
    except HashBenchException as e:
        logger.error(f"Application error: {str(e)}")
        display_error(str(e))
        sys.exit(FAILURE_EXIT_CODE)


if __name__ == "__main__":
    main()
