"""
Module: loading.loader

Purpose:
    Load a delimited text file into a Dataset. Errors are fatal and
    reported immediately with LoaderError; they never reach a render
    session.

Key Functions:
    - default_input_path(): Input path from argv or the default file name
    - load_dataset(): Parse a CSV file into a Dataset

Key Classes:
    - LoaderError: Exception for loading failures

Dependencies:
    - csv (std)
    - core.models.Dataset

Used By:
    - report.controller: generate_report()
    - cli: main()
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from report_toolkit.core.models import Dataset

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("ordersReport.csv")


class LoaderError(Exception):
    """Error loading tabular input."""
    pass


def default_input_path(argv: Optional[Sequence[str]] = None) -> Path:
    """
    Return the input path given on the command line, or the default.

    Args:
        argv: Positional arguments without the program name

    Example:
        >>> default_input_path([])
        PosixPath('ordersReport.csv')
        >>> default_input_path(["orders.csv"])
        PosixPath('orders.csv')
    """
    if not argv:
        return DEFAULT_INPUT
    return Path(argv[0])


def load_dataset(
    path: Union[str, Path],
    *,
    delimiter: str = ",",
    encoding: str = "utf-8-sig",
) -> Dataset:
    """
    Read a delimited file into a Dataset.

    Blank lines are skipped. The first row is the header.

    Args:
        path: File to read
        delimiter: Field separator
        encoding: Text encoding (BOM tolerated by default)

    Returns:
        Dataset with the header at row 0

    Raises:
        LoaderError: If the file cannot be opened or parsed, is empty, or
            has rows whose field count differs from the header
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            rows = [row for row in csv.reader(f, delimiter=delimiter, strict=True) if row]
    except FileNotFoundError as e:
        raise LoaderError(f"Cannot open '{path}': file not found") from e
    except OSError as e:
        raise LoaderError(f"Cannot open '{path}': {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise LoaderError(f"Cannot read CSV data from '{path}': {e}") from e

    if not rows:
        raise LoaderError(f"No data in '{path}'")

    try:
        dataset = Dataset.from_rows(rows)
    except ValueError as e:
        raise LoaderError(f"Malformed table in '{path}': {e}") from e

    logger.info(
        f"Loaded {dataset.row_count} rows x {dataset.column_count} columns from {path}"
    )
    return dataset
