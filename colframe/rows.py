"""Row collections: ordered sequences of row indices bound to a table.

Two flavors exist:

- :class:`DataRowCollection` owns the canonical ``0..n-1`` ordering of a
  :class:`~colframe.table.DataTable` and offers copy-on-write row edits.
- :class:`DataViewRowCollection` holds an arbitrary ordering (a permutation,
  subset, or repetition of indices) for a :class:`~colframe.view.DataView`.

Both share the traversal combinators in :class:`BaseRowCollection`, which
resolve each index to a :class:`~colframe.row.DataRow` lazily and traverse in
collection order.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np

from .column import DataColumn
from .errors import (
    EmptyReduceError,
    IndexOutOfRangeError,
    RowShapeError,
    check_index,
)
from .row import DataRow

if TYPE_CHECKING:
    from .table import DataTable
    from .view import DataView

K = TypeVar("K")
U = TypeVar("U")


def _readonly_indices(indices: Iterable[int], row_count: int) -> np.ndarray:
    if not isinstance(indices, np.ndarray):
        indices = list(indices)
    arr = np.array(indices, dtype=np.intp, copy=True)
    if arr.ndim != 1:
        raise IndexOutOfRangeError("Row indices must be one-dimensional")
    if len(arr) and (arr.min() < 0 or arr.max() >= row_count):
        bad = arr[(arr < 0) | (arr >= row_count)][0]
        raise IndexOutOfRangeError(
            f"Row index {bad} out of range for table with {row_count} rows"
        )
    arr.flags.writeable = False
    return arr


class BaseRowCollection:
    """An ordered sequence of row indices into one table."""

    def __init__(self, table: DataTable, indices: Iterable[int]) -> None:
        self._table = table
        self._indices = _readonly_indices(indices, table.row_count)

    @property
    def table(self) -> DataTable:
        """The table whose columns the indices refer to."""
        return self._table

    def row_indices(self) -> np.ndarray:
        """Return the read-only array of source-table row indices."""
        return self._indices

    def __len__(self) -> int:
        return len(self._indices)

    def count(self) -> int:
        """Number of rows in the collection."""
        return len(self._indices)

    def get(self, index: int) -> DataRow:
        """Return the row at position ``index`` of this collection."""
        idx = check_index(index, len(self._indices), "Row index")
        return DataRow(self._table, int(self._indices[idx]))

    def __getitem__(self, index: int) -> DataRow:
        return self.get(index)

    def __iter__(self) -> Iterator[DataRow]:
        table = self._table
        return (DataRow(table, int(i)) for i in self._indices)

    def filter(self, predicate: Callable[[DataRow], bool]) -> DataView:
        """Return a view of the rows for which ``predicate`` is true."""
        from .view import DataView

        kept = [row.row_idx for row in self if predicate(row)]
        return DataView.build(self._table, kept)

    def map(self, mapper: Callable[[DataRow], U]) -> list[U]:
        """Apply ``mapper`` to each row in order."""
        return [mapper(row) for row in self]

    def flat_map(self, mapper: Callable[[DataRow], Iterable[U]]) -> list[U]:
        """Apply ``mapper`` to each row and concatenate the results."""
        return [item for row in self for item in mapper(row)]

    def reduce(self, reducer: Callable[[DataRow, DataRow], DataRow]) -> DataRow:
        """Combine the rows left to right into a single row.

        Raises
        ------
        EmptyReduceError
            If the collection has no rows.
        """
        if not len(self._indices):
            raise EmptyReduceError("Cannot reduce an empty row collection")
        return functools.reduce(reducer, self)

    def group_by(self, grouper: Callable[[DataRow], K]) -> dict[K, list[DataRow]]:
        """Group rows by key, keeping first-seen key order and row order."""
        groups: dict[K, list[DataRow]] = {}
        for row in self:
            groups.setdefault(grouper(row), []).append(row)
        return groups

    def fold_left(self, zero: U, folder: Callable[[U, DataRow], U]) -> U:
        """Accumulate ``folder(acc, row)`` over rows in ascending order."""
        acc = zero
        for row in self:
            acc = folder(acc, row)
        return acc

    def fold_right(self, zero: U, folder: Callable[[DataRow, U], U]) -> U:
        """Accumulate ``folder(row, acc)`` over rows in descending order."""
        acc = zero
        table = self._table
        for i in self._indices[::-1]:
            acc = folder(DataRow(table, int(i)), acc)
        return acc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table={self._table.name!r}, rows={len(self)})"


class DataRowCollection(BaseRowCollection):
    """The canonical identity ordering of a table's rows.

    Row edits never touch the owning table: ``add``, ``insert`` and
    ``remove`` each return a new :class:`~colframe.table.DataTable`.
    """

    def __init__(self, table: DataTable) -> None:
        super().__init__(table, np.arange(table.row_count, dtype=np.intp))

    @classmethod
    def build(cls, table: DataTable) -> DataRowCollection:
        """Create the identity row collection for ``table``."""
        return cls(table)

    def add(self, values: Sequence[Any]) -> DataTable:
        """Return a new table with a row appended."""
        return self.insert(self._table.row_count, values)

    def insert(self, index: int, values: Sequence[Any]) -> DataTable:
        """Return a new table with a row inserted before ``index``.

        Parameters
        ----------
        index : int
            Insert position, ``0 <= index <= row_count``.
        values : Sequence[Any]
            One value per column, in column order.

        Raises
        ------
        RowShapeError
            If the table has no columns, or the number of values differs
            from the number of columns.
        """
        columns = list(self._table.columns)
        if not columns:
            raise RowShapeError(f"Table {self._table.name!r} has no columns to hold a row")
        values = list(values)
        if len(values) != len(columns):
            raise RowShapeError(
                f"Row has {len(values)} values but table has {len(columns)} columns"
            )
        check_index(index, self._table.row_count + 1, "Insert index")
        new_columns = [col.insert(index, v) for col, v in zip(columns, values)]
        return self._table.with_columns(new_columns)

    def remove(self, index: int) -> DataTable:
        """Return a new table without the row at ``index``."""
        check_index(index, self._table.row_count, "Row index")
        new_columns: list[DataColumn] = [col.remove(index) for col in self._table.columns]
        return self._table.with_columns(new_columns)


class DataViewRowCollection(BaseRowCollection):
    """An arbitrary ordering of a table's row indices, owned by a view.

    Indices may appear in any order and may repeat; every index must be a
    valid row of the source table.
    """

    @classmethod
    def build(cls, table: DataTable, indices: Iterable[int]) -> DataViewRowCollection:
        """Create a collection over ``indices``, validating each one."""
        return cls(table, indices)
