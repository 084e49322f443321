"""
Module: dataset

Purpose:
    Provides the Dataset dataclass - the read-only table handed from the
    loader to the report builder. Row 0 holds the header labels; the
    remaining rows are the table body.

Key Classes:
    - Dataset: Rectangular table of text fields

Dependencies:
    - dataclasses (std)

Used By:
    - loading.loader: load_dataset()
    - report.builder: build_report()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class Dataset:
    """
    Ordered rows of ordered text fields (immutable).

    Attributes:
        rows: All rows including the header row at index 0

    Invariants:
        - at least one row (the header)
        - the header has at least one field
        - every row has exactly as many fields as the header

    Example:
        >>> ds = Dataset.from_rows([["Date", "Qty"], ["2018-01-16", "3"]])
        >>> ds.header
        ('Date', 'Qty')
        >>> ds.row_count
        1
    """

    rows: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        """Validate table shape on construction."""
        if not self.rows:
            raise ValueError("Dataset requires a header row")
        width = len(self.rows[0])
        if width == 0:
            raise ValueError("Header row has no fields")
        for index, row in enumerate(self.rows[1:], start=1):
            if len(row) != width:
                raise ValueError(
                    f"Row {index} has {len(row)} fields, header has {width}"
                )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "Dataset":
        """Build a dataset from any iterable of string sequences."""
        return cls(rows=tuple(tuple(str(field) for field in row) for row in rows))

    @property
    def header(self) -> tuple[str, ...]:
        return self.rows[0]

    @property
    def body(self) -> tuple[tuple[str, ...], ...]:
        return self.rows[1:]

    @property
    def column_count(self) -> int:
        return len(self.rows[0])

    @property
    def row_count(self) -> int:
        """Number of body rows (header excluded)."""
        return len(self.rows) - 1
