"""Immutable, validated tables.

A :class:`DataTable` owns a :class:`~colframe.columns.DataColumnCollection`
and the canonical :class:`~colframe.rows.DataRowCollection`. The constructor
validates the columns before any state is set, and :meth:`DataTable.build`
adds logging around it: either every invariant holds and a table is
returned, or an exception is raised and no table is produced.

Column invariants
-----------------
* No two columns share a name (exact, case-sensitive comparison).
* All columns have the same length.
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, TypeVar

import pandas as pd

from .column import DataColumn
from .columns import DataColumnCollection
from .errors import DuplicateColumnNameError, InconsistentColumnLengthError
from .row import DataRow
from .rows import BaseRowCollection, DataRowCollection
from .sorting import SortItem, SortOrder, quick_sort, sort_items_for
from .types import ColumnRef

if TYPE_CHECKING:
    from .view import DataView

logger = logging.getLogger(__name__)

K = TypeVar("K")
U = TypeVar("U")


def validate_columns(columns: Iterable[DataColumn]) -> list[DataColumn]:
    """Check column names are unique and lengths consistent.

    Checks run in order and stop at the first failure.

    Parameters
    ----------
    columns : Iterable[DataColumn]
        Candidate columns for a table.

    Returns
    -------
    list[DataColumn]
        The columns, unchanged and in the same order.

    Raises
    ------
    DuplicateColumnNameError
        If two columns share a name.
    InconsistentColumnLengthError
        If the columns do not all have the same length.
    """
    cols = list(columns)
    for col in cols:
        if not isinstance(col, DataColumn):
            raise TypeError(f"Expected DataColumn, got {type(col).__name__}")

    names: dict[str, int] = {}
    for col in cols:
        names[col.name] = names.get(col.name, 0) + 1
    if len(names) != len(cols):
        dupes = sorted(name for name, n in names.items() if n > 1)
        raise DuplicateColumnNameError(f"Columns contain duplicate names: {dupes}")

    lengths = {len(col) for col in cols}
    if len(lengths) > 1:
        raise InconsistentColumnLengthError(
            f"Columns have different lengths: {sorted(lengths)}"
        )
    return cols


class BaseTable(abc.ABC):
    """Shared read and traversal surface of tables and views.

    Subclasses provide the source table and a row collection; every
    traversal combinator is delegated to that row collection.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The table name."""

    @property
    @abc.abstractmethod
    def columns(self) -> DataColumnCollection:
        """The column collection of the backing table."""

    @property
    @abc.abstractmethod
    def rows(self) -> BaseRowCollection:
        """The rows, in this object's order."""

    @property
    @abc.abstractmethod
    def table(self) -> DataTable:
        """The table that owns the column storage."""

    @abc.abstractmethod
    def to_data_table(self) -> DataTable:
        """Return an independent table holding this object's rows."""

    @abc.abstractmethod
    def to_data_view(self) -> DataView:
        """Return a view over this object's rows."""

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def __len__(self) -> int:
        return self.row_count

    def __iter__(self) -> Iterator[DataRow]:
        return iter(self.rows)

    def row(self, index: int) -> DataRow:
        """Return the row at position ``index``."""
        return self.rows.get(index)

    def column(self, ref: ColumnRef) -> DataColumn:
        """Return the column with the given name or position."""
        return self.columns.get(ref)

    def filter(self, predicate: Callable[[DataRow], bool]) -> DataView:
        """Return a view of the rows for which ``predicate`` is true."""
        return self.rows.filter(predicate)

    def map(self, mapper: Callable[[DataRow], U]) -> list[U]:
        """Apply ``mapper`` to each row in order."""
        return self.rows.map(mapper)

    def flat_map(self, mapper: Callable[[DataRow], Iterable[U]]) -> list[U]:
        """Apply ``mapper`` to each row and concatenate the results."""
        return self.rows.flat_map(mapper)

    def reduce(self, reducer: Callable[[DataRow, DataRow], DataRow]) -> DataRow:
        """Combine all rows left to right into one row."""
        return self.rows.reduce(reducer)

    def group_by(self, grouper: Callable[[DataRow], K]) -> dict[K, list[DataRow]]:
        """Group rows by the key ``grouper`` returns."""
        return self.rows.group_by(grouper)

    def fold_left(self, zero: U, folder: Callable[[U, DataRow], U]) -> U:
        """Fold rows from first to last."""
        return self.rows.fold_left(zero, folder)

    def fold_right(self, zero: U, folder: Callable[[DataRow, U], U]) -> U:
        """Fold rows from last to first."""
        return self.rows.fold_right(zero, folder)

    def quick_sort(
        self,
        by: ColumnRef | SortItem | Iterable[SortItem],
        order: SortOrder = SortOrder.ASCENDING,
    ) -> DataView:
        """Sort the rows into a new view.

        Parameters
        ----------
        by : str | int | SortItem | Iterable[SortItem]
            A column name or index (sorted in ``order``), a single sort
            item, or several sort items, most significant first.
        order : SortOrder, default SortOrder.ASCENDING
            Direction used when ``by`` is a bare column reference.

        Returns
        -------
        DataView
            A stable, sorted view over the backing table.
        """
        items = sort_items_for(by, order)
        return quick_sort(self.table, self.rows.row_indices(), items)

    def to_frame(self) -> pd.DataFrame:
        """Materialize the rows as a pandas DataFrame, in row order."""
        indices = self.rows.row_indices()
        return pd.DataFrame(
            {col.name: col.data[indices] for col in self.columns},
            columns=self.columns.names(),
        )


class DataTable(BaseTable):
    """An immutable table of named, equal-length columns.

    Use :meth:`build` or :meth:`from_frame` to create instances.
    """

    def __init__(self, name: str, columns: Iterable[DataColumn] = ()) -> None:
        self._name = name
        self._columns = DataColumnCollection(self, validate_columns(columns))
        self._rows = DataRowCollection.build(self)

    @classmethod
    def build(cls, name: str, columns: Iterable[DataColumn] | None = None) -> DataTable:
        """Create a validated table.

        Parameters
        ----------
        name : str
            The table name.
        columns : Iterable[DataColumn], optional
            Columns in table order. If None, the table has no columns and
            no rows, and no validation is needed.

        Returns
        -------
        DataTable
            The new table.

        Raises
        ------
        DuplicateColumnNameError
            If two columns share a name.
        InconsistentColumnLengthError
            If the columns differ in length.
        """
        if columns is None:
            return cls(name)
        try:
            table = cls(name, columns)
        except (DuplicateColumnNameError, InconsistentColumnLengthError) as exc:
            logger.debug("Rejected columns for table %r: %s", name, exc)
            raise
        logger.debug(
            "Built table %r with %d columns and %d rows",
            name,
            len(table.columns),
            table.row_count,
        )
        return table

    @classmethod
    def from_frame(cls, df: pd.DataFrame, name: str | None = None) -> DataTable:
        """Build a table from a pandas DataFrame.

        Column labels are converted with ``str``. Values are copied.
        """
        columns = [
            DataColumn(str(label), df.iloc[:, i].to_numpy())
            for i, label in enumerate(df.columns)
        ]
        return cls.build(name if name is not None else "table", columns)

    @property
    def name(self) -> str:
        return self._name

    @property
    def columns(self) -> DataColumnCollection:
        return self._columns

    @property
    def rows(self) -> DataRowCollection:
        return self._rows

    @property
    def table(self) -> DataTable:
        return self

    @property
    def row_count(self) -> int:
        """Number of rows: the length of the first column, or 0."""
        return len(self._columns.get(0)) if len(self._columns) else 0

    def with_columns(self, columns: Iterable[DataColumn]) -> DataTable:
        """Return a new validated table with this name and ``columns``."""
        return DataTable.build(self._name, columns)

    def to_data_table(self) -> DataTable:
        """Return a copy of this table.

        Column storage is immutable, so the copy shares the column objects.
        """
        return DataTable.build(self._name, self._columns)

    def to_data_view(self) -> DataView:
        """Return a view over all rows in table order."""
        from .view import DataView

        return DataView.build(self, self._rows.row_indices())

    def __repr__(self) -> str:
        return (
            f"DataTable(name={self._name!r}, columns={self._columns.names()!r}, "
            f"rows={self.row_count})"
        )
