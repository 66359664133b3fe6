"""
CLI Output Formatting

Rich text formatting utilities for summarising benchmark results in the
terminal.
"""

from typing import Iterable

from rich.console import Console
from rich.table import Table

from hashbench.benchmark.runner.types import BenchmarkResult

console = Console()
error_console = Console(stderr=True)


def format_result_summary(results: Iterable[BenchmarkResult], title: str = "Hash Benchmark Results") -> Table:
    """
    Format benchmark results as a Rich table.

    Args:
        results: Benchmark results to show, one line each
        title: Table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, show_header=True, header_style="bold blue")
    table.add_column("Algorithm", style="cyan")
    table.add_column("Runs", justify="right")
    table.add_column("Discarded (ns)", justify="right", style="dim")
    table.add_column("Kept", justify="right")
    table.add_column("Min (ns)", justify="right")
    table.add_column("Max (ns)", justify="right")
    table.add_column("Average (ns)", justify="right", style="green")

    for result in results:
        if result.has_average:
            fastest = f"{min(result.trimmed):,}"
            slowest = f"{max(result.trimmed):,}"
            average = f"{result.average:,.1f}"
        else:
            fastest = slowest = "N/A"
            average = "[yellow]N/A (needs 2+ runs)[/yellow]"

        table.add_row(
            result.algorithm.name,
            str(result.run_count),
            f"{result.discarded_sample:,}",
            str(len(result.trimmed)),
            fastest,
            slowest,
            average,
        )

    return table


def display_error(message: str, error_type: str = "Error") -> None:
    """Print an error line on stderr."""
    error_console.print(f"[red]{error_type}: {message}[/red]")


def display_success(message: str) -> None:
    """Print a confirmation line on stdout."""
    console.print(f"[green]✓ {message}[/green]")
