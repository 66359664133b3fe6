"""
Result Saver Module

Writes a result table to disk as CSV. The file either appears complete at
its destination or not at all.
"""

import csv
import os
import tempfile
from pathlib import Path
from typing import Union

from hashbench.core.exceptions import ResultStorageError
from hashbench.utils.logging import get_logger
from ..reporting import ResultTable

logger = get_logger(__name__)


def serialize(table: ResultTable, destination: Union[str, Path]) -> Path:
    """
    Write the table to a comma-separated file.

    Rows are written to a temporary file next to the destination, which is
    then moved over the destination in one step. On failure the temporary
    file is removed and any existing destination file is left as it was.

    Args:
        table: Table to persist
        destination: Output file path

    Returns:
        Path of the written file

    Raises:
        ResultStorageError: if the file cannot be written
    """
    output_path = Path(destination)
    rows = table.all_rows()
    directory = output_path.parent if str(output_path.parent) else Path(".")

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            newline="",
            encoding="utf-8",
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            dir=str(directory),
            delete=False,
        ) as handle:
            tmp_name = handle.name
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerows(rows)
            handle.flush()
            os.fsync(handle.fileno())

        os.replace(tmp_name, output_path)
        tmp_name = None
    except OSError as e:
        logger.error(f"Failed to write results to {output_path}: {e}")
        raise ResultStorageError(
            f"Could not write results to {output_path}: {e.strerror or e}",
            path=str(output_path),
        ) from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass

    logger.info(f"Wrote {len(rows)} rows to {output_path}")
    return output_path
