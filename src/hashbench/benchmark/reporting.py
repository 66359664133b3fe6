"""
Result Table Builder

Accumulates one row per benchmark invocation under a header derived from
the first invocation's run count.
"""

from typing import List, Optional, Sequence

from hashbench.core.exceptions import TableShapeError
from hashbench.utils.logging import get_logger
from .runner.config import HashAlgorithm, validate_run_count

logger = get_logger(__name__)

RUN_COLUMN = "Run #"
AVERAGE_COLUMN = "Average (ns)"

Row = List[str]


def build_header(run_count: int) -> Row:
    """
    Build the header row for a table of benchmarks with the given run count.

    The first sample of every run is discarded, so a run count of N yields
    N - 1 sample columns labelled 0 .. N-2.
    """
    validate_run_count(run_count)
    return [RUN_COLUMN] + [str(i) for i in range(run_count - 1)] + [AVERAGE_COLUMN]


def new_row(algorithm: HashAlgorithm, trimmed: Sequence[int], average: float) -> Row:
    """Render one benchmark result as text fields."""
    return [algorithm.name] + [str(int(sample)) for sample in trimmed] + [repr(float(average))]


class ResultTable:
    """In-memory table of benchmark rows sharing one header."""

    def __init__(self):
        self.header: Optional[Row] = None
        self.run_count: Optional[int] = None
        self.rows: List[Row] = []

    @property
    def is_empty(self) -> bool:
        return self.header is None

    @property
    def width(self) -> Optional[int]:
        return len(self.header) if self.header is not None else None

    def ensure_header(self, run_count: int) -> Row:
        """Set the header from the first invocation; later calls leave it alone."""
        if self.header is None:
            self.header = build_header(run_count)
            self.run_count = run_count
            logger.debug(f"Result table header set for {run_count} runs")
        return self.header

    def all_rows(self) -> List[Row]:
        """Header followed by every appended row."""
        if self.header is None:
            return []
        return [list(self.header)] + [list(row) for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)


def append_row(table: ResultTable, row: Row) -> ResultTable:
    """
    Append a row to the table.

    Every row must have exactly as many fields as the header; a row from a
    benchmark with a different run count is rejected.

    Args:
        table: Table to append to (its header must already be set)
        row: Row produced by new_row()

    Returns:
        The same table, for chaining
    """
    if table.header is None:
        raise TableShapeError("Result table has no header; set it before appending rows")

    if len(row) != table.width:
        raise TableShapeError(
            f"Row for {row[0] if row else '<empty>'} has {len(row)} fields, header has {table.width}",
            expected_width=table.width,
            actual_width=len(row),
        )

    table.rows.append(list(row))
    logger.debug(f"Appended row for {row[0]} ({len(table.rows)} rows)")
    return table
