"""Non-owning, reordered projections of a table.

A :class:`DataView` pairs a source :class:`~colframe.table.DataTable` with its
own ordering of row indices. The view shares the table's column storage by
reference; only :meth:`DataView.to_data_table` copies values out.

Views are produced by filtering, sorting and ``to_data_view``. A view can be
filtered or sorted again, and the result still refers to the original table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from .columns import DataColumnCollection
from .errors import MixedTableRowsError
from .row import DataRow
from .rows import DataViewRowCollection
from .table import BaseTable, DataTable

logger = logging.getLogger(__name__)


class DataView(BaseTable):
    """A view over a table's rows in an independent order.

    Use :meth:`build` or :meth:`from_rows` to create instances.

    Parameters
    ----------
    table : DataTable
        The source table.
    rows : DataViewRowCollection
        The ordering of source-table row indices.
    """

    def __init__(self, table: DataTable, rows: DataViewRowCollection) -> None:
        if not isinstance(rows, DataViewRowCollection):
            raise TypeError(
                f"Expected DataViewRowCollection, got {type(rows).__name__}"
            )
        if rows.table is not table:
            raise MixedTableRowsError(
                f"Row collection belongs to table {rows.table.name!r}, not {table.name!r}"
            )
        self._table = table
        self._rows = rows

    @classmethod
    def build(
        cls,
        table: DataTable,
        rows: Iterable[int] | Iterable[DataRow] | np.ndarray,
    ) -> DataView:
        """Create a view from row indices or rows of ``table``.

        Parameters
        ----------
        table : DataTable
            The source table.
        rows : Iterable[int] | Iterable[DataRow]
            Either source-table row indices, or rows that all belong to
            ``table``. Indices may repeat.

        Raises
        ------
        IndexOutOfRangeError
            If an index is not a valid row of ``table``.
        MixedTableRowsError
            If a row belongs to a different table.
        """
        if isinstance(rows, np.ndarray):
            indices = rows
        else:
            items = list(rows)
            if any(isinstance(item, DataRow) for item in items):
                return cls.from_rows(items, table=table)
            indices = items
        view = cls(table, DataViewRowCollection.build(table, indices))
        logger.debug("Built view over table %r with %d rows", table.name, len(view))
        return view

    @classmethod
    def from_rows(
        cls, rows: Iterable[DataRow], table: DataTable | None = None
    ) -> DataView:
        """Create a view from rows, which must all come from one table.

        Parameters
        ----------
        rows : Iterable[DataRow]
            The rows, in view order.
        table : DataTable, optional
            The expected source table. If None, the first row's table is
            used; an empty ``rows`` then requires ``table``.

        Raises
        ------
        MixedTableRowsError
            If any row belongs to a table other than the source table, or
            ``rows`` is empty and no ``table`` is given.
        """
        rows = list(rows)
        if table is None:
            if not rows:
                raise MixedTableRowsError("Cannot infer the source table from no rows")
            table = rows[0].table
        for row in rows:
            if not isinstance(row, DataRow) or row.table is not table:
                raise MixedTableRowsError(
                    f"All rows must belong to table {table.name!r}"
                )
        return cls.build(table, np.array([row.row_idx for row in rows], dtype=np.intp))

    @property
    def name(self) -> str:
        return self._table.name

    @property
    def columns(self) -> DataColumnCollection:
        """The source table's columns (shared, not copied)."""
        return self._table.columns

    @property
    def rows(self) -> DataViewRowCollection:
        return self._rows

    @property
    def table(self) -> DataTable:
        return self._table

    def to_data_table(self) -> DataTable:
        """Copy this view's rows, in view order, into a new independent table."""
        indices = self._rows.row_indices()
        return DataTable.build(
            self._table.name, [col.take(indices) for col in self._table.columns]
        )

    def to_data_view(self) -> DataView:
        """Return a new view with the same source table and ordering."""
        return DataView(self._table, self._rows)

    def __repr__(self) -> str:
        return f"DataView(table={self._table.name!r}, rows={len(self)})"
