"""The ordered, name-indexed set of columns belonging to one table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Integral
from typing import TYPE_CHECKING

from .column import DataColumn
from .errors import ColumnNotFoundError, check_index
from .types import ColName, ColumnRef

if TYPE_CHECKING:
    from .table import DataTable


class DataColumnCollection:
    """Columns of a table, addressable by position or by name.

    The collection is immutable. Editing methods (``add``, ``insert``,
    ``remove``, ``replace``) build and return a new, validated
    :class:`~colframe.table.DataTable`, leaving the owner unchanged.

    Parameters
    ----------
    owner : DataTable
        The table that owns these columns.
    columns : Iterable[DataColumn], optional
        The columns in table order. Validation is the owner's job.
    """

    __slots__ = ("_owner", "_columns", "_positions")

    def __init__(
        self, owner: DataTable, columns: Iterable[DataColumn] = ()
    ) -> None:
        self._owner = owner
        self._columns: tuple[DataColumn, ...] = tuple(columns)
        self._positions = {col.name: i for i, col in enumerate(self._columns)}

    @property
    def owner(self) -> DataTable:
        """The owning table."""
        return self._owner

    def __len__(self) -> int:
        return len(self._columns)

    def count(self) -> int:
        """Number of columns."""
        return len(self._columns)

    def __iter__(self) -> Iterator[DataColumn]:
        return iter(self._columns)

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    def contains(self, name: ColName) -> bool:
        """True if a column called ``name`` exists (exact match)."""
        return name in self._positions

    def names(self) -> list[ColName]:
        """Column names in table order."""
        return [col.name for col in self._columns]

    def index_of(self, name: ColName) -> int:
        """Return the position of the column called ``name``.

        Raises
        ------
        ColumnNotFoundError
            If no column has that name.
        """
        try:
            return self._positions[name]
        except KeyError:
            raise ColumnNotFoundError(
                f"Column {name!r} not found in table {self._owner.name!r}"
            ) from None

    def resolve(self, ref: ColumnRef) -> int:
        """Return the position referred to by a column name or index."""
        if isinstance(ref, str):
            return self.index_of(ref)
        if isinstance(ref, Integral) and not isinstance(ref, bool):
            return check_index(ref, len(self._columns), "Column index")
        raise TypeError(f"Column reference must be str or int, got {type(ref).__name__}")

    def get(self, ref: ColumnRef) -> DataColumn:
        """Return the column named or positioned at ``ref``."""
        return self._columns[self.resolve(ref)]

    def __getitem__(self, ref: ColumnRef) -> DataColumn:
        return self.get(ref)

    def add(self, column: DataColumn) -> DataTable:
        """Return a new table with ``column`` appended."""
        return self._owner.with_columns(self._columns + (column,))

    def insert(self, index: int, column: DataColumn) -> DataTable:
        """Return a new table with ``column`` inserted before ``index``."""
        idx = check_index(index, len(self._columns) + 1, "Column index")
        cols = list(self._columns)
        cols.insert(idx, column)
        return self._owner.with_columns(cols)

    def remove(self, ref: ColumnRef) -> DataTable:
        """Return a new table without the referenced column."""
        idx = self.resolve(ref)
        return self._owner.with_columns(self._columns[:idx] + self._columns[idx + 1 :])

    def replace(self, ref: ColumnRef, column: DataColumn) -> DataTable:
        """Return a new table with the referenced column swapped for ``column``."""
        idx = self.resolve(ref)
        cols = list(self._columns)
        cols[idx] = column
        return self._owner.with_columns(cols)

    def __repr__(self) -> str:
        return f"DataColumnCollection({self.names()!r})"
