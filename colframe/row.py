"""Read-only row projections.

A :class:`DataRow` holds no values of its own: it is a table reference plus a
row index, and every read is resolved against the table's columns.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from .errors import check_index
from .types import ColName, ColumnRef, RowIndex

if TYPE_CHECKING:
    from .table import DataTable


class DataRow:
    """A lazy, read-only view of one row of a table.

    Parameters
    ----------
    table : DataTable
        The table whose columns back this row.
    row_idx : int
        Position of the row in the table's column storage.
    """

    __slots__ = ("_table", "_row_idx")

    def __init__(self, table: DataTable, row_idx: RowIndex) -> None:
        self._table = table
        self._row_idx = check_index(row_idx, table.row_count, "Row index")

    @property
    def table(self) -> DataTable:
        """The table this row belongs to."""
        return self._table

    @property
    def row_idx(self) -> RowIndex:
        """Position of this row in the source table."""
        return self._row_idx

    def get(self, ref: ColumnRef) -> Any:
        """Return the value in the column named or positioned at ``ref``."""
        return self._table.column(ref).value_at(self._row_idx)

    def __getitem__(self, ref: ColumnRef) -> Any:
        return self.get(ref)

    def values(self) -> tuple[Any, ...]:
        """Return the row's values in column order."""
        return tuple(col.value_at(self._row_idx) for col in self._table.columns)

    def as_dict(self) -> dict[ColName, Any]:
        """Return a mapping of column name to value."""
        return {col.name: col.value_at(self._row_idx) for col in self._table.columns}

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self._table.columns)

    def __repr__(self) -> str:
        return f"DataRow({self._row_idx}, {self.as_dict()!r})"
