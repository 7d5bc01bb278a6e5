"""
Dataset model for csvviz.

A ``Dataset`` is the immutable result of parsing one delimited-text file:
an ordered tuple of rows (column name -> raw cell value) plus the ordered
column names. It is constructed once by the loader (or any other parser via
``Dataset.from_records``) and never mutated; a new upload produces a new
``Dataset`` object.

Missing cells are modelled as ``None``; empty cells stay ``""``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Sequence

Row = Mapping[str, Any]

_SCALAR_TYPES = (str, int, float, bool)


def _normalize_cell(value: Any) -> Any:
    if value is None or isinstance(value, _SCALAR_TYPES):
        return value
    return str(value)


@dataclass(frozen=True)
class Dataset:
    """An ordered, read-only collection of rows.

    Parameters
    ----------
    rows : tuple of Row
        Rows in file order. Each row is a read-only mapping.
    columns : tuple of str
        Column names in the order they were encountered.
    source : str, optional
        Where the rows came from (file path or label), for display only.
    """

    rows: tuple[Row, ...] = ()
    columns: tuple[str, ...] = ()
    source: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Optional[Sequence[str]] = None,
        source: Optional[str] = None,
    ) -> "Dataset":
        """Build a dataset from row mappings.

        When ``columns`` is omitted, the keys of the first row define the
        column set.
        """
        rows = tuple(
            MappingProxyType(
                {str(key): _normalize_cell(value) for key, value in record.items()}
            )
            for record in records
        )
        if columns is None:
            columns = tuple(rows[0].keys()) if rows else ()
        return cls(rows=rows, columns=tuple(str(c) for c in columns), source=source)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def has_column(self, column: Optional[str]) -> bool:
        return column is not None and column in self.columns

    def values(self, column: str) -> list[Any]:
        """Raw values of ``column`` in row order; absent keys read as ``None``."""
        return [row.get(column) for row in self.rows]

    def describe(self) -> dict[str, Any]:
        """Short summary used by the CLI header line."""
        return {
            "source": self.source,
            "rows": self.row_count,
            "columns": self.column_count,
            "column_names": list(self.columns),
        }
