"""Exceptions raised by colframe.

Every failure is a subclass of :class:`TableError`, and additionally of the
builtin exception a caller would naturally expect (``ValueError``,
``KeyError`` or ``IndexError``), so either can be caught.
"""

from numbers import Integral


class TableError(Exception):
    """Base class for all table, view and column errors."""


class DuplicateColumnNameError(TableError, ValueError):
    """Two or more columns share the same name."""


class InconsistentColumnLengthError(TableError, ValueError):
    """Columns in one table have different lengths."""


class ColumnNotFoundError(TableError, KeyError):
    """No column exists with the requested name."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class IndexOutOfRangeError(TableError, IndexError):
    """A row or column index is outside the valid range."""


class EmptyReduceError(TableError, ValueError):
    """Reduce was called on a collection with no rows."""


class MixedTableRowsError(TableError, ValueError):
    """Rows from different tables were combined into one view."""


class RowShapeError(TableError, ValueError):
    """A row's values do not match the table's column count."""


def check_index(index: int, count: int, what: str = "index") -> int:
    """Validate ``0 <= index < count`` and return the index.

    Raises
    ------
    IndexOutOfRangeError
        If ``index`` is not an integer within range.
    """
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise IndexOutOfRangeError(f"{what} must be an integer, got {index!r}")
    if index < 0 or index >= count:
        raise IndexOutOfRangeError(
            f"{what} {index} out of range for length {count}"
        )
    return int(index)
