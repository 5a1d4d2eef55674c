"""Stable multi-key sorting that produces views.

Sorting never moves column data. It computes a new ordering of row indices
and wraps it in a :class:`~colframe.view.DataView` over the source table.

The ordering is lexicographic over the sort items: rows are compared by the
first item's column, ties are broken by the second, and so on. It is built
with one stable ``numpy.argsort`` pass per item, applied from the least
significant item to the most significant, so rows that compare equal on every
item keep their input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import TYPE_CHECKING

import numpy as np

from .types import ColumnRef

if TYPE_CHECKING:
    from .table import DataTable
    from .view import DataView

logger = logging.getLogger(__name__)


class SortOrder(Enum):
    """Direction of a sort item."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortItem:
    """A column reference paired with a sort direction.

    Attributes
    ----------
    column : str | int
        Column name or column position.
    order : SortOrder, default SortOrder.ASCENDING
        Sort direction for this column.
    """

    column: ColumnRef
    order: SortOrder = SortOrder.ASCENDING


def sort_items_for(
    by: ColumnRef | SortItem | Iterable[SortItem],
    order: SortOrder = SortOrder.ASCENDING,
) -> list[SortItem]:
    """Normalize the accepted ``quick_sort`` arguments to a list of items.

    A bare column name or index becomes a single item with ``order``. A
    single :class:`SortItem` or an iterable of them is used as given, and
    ``order`` is ignored.
    """
    if isinstance(by, SortItem):
        return [by]
    if isinstance(by, str | Integral):
        return [SortItem(by, order)]
    items = list(by)
    for item in items:
        if not isinstance(item, SortItem):
            raise TypeError(f"Expected SortItem, got {type(item).__name__}")
    return items


def _stable_order(values: np.ndarray, order: SortOrder) -> np.ndarray:
    """Return a stable permutation sorting ``values`` in ``order``."""
    if order is SortOrder.ASCENDING:
        return np.argsort(values, kind="stable")
    # Sorting the reversed input and reversing the result keeps ties in
    # their original relative order.
    n = len(values)
    perm = np.argsort(values[::-1], kind="stable")
    return (n - 1 - perm)[::-1]


def sorted_indices(
    table: DataTable,
    row_indices: Sequence[int] | np.ndarray,
    sort_items: Iterable[SortItem],
) -> np.ndarray:
    """Compute the sorted ordering of ``row_indices`` without building a view.

    Raises
    ------
    ColumnNotFoundError
        If a sort item names a column the table does not have.
    IndexOutOfRangeError
        If a sort item's column position is out of range.
    """
    items = list(sort_items)
    # Resolve everything up front so a bad reference fails before sorting.
    columns = [table.column(item.column) for item in items]
    ordering = np.asarray(row_indices, dtype=np.intp)
    for item, column in zip(reversed(items), reversed(columns)):
        perm = _stable_order(column.data[ordering], item.order)
        ordering = ordering[perm]
    return ordering


def quick_sort(
    table: DataTable,
    row_indices: Sequence[int] | np.ndarray,
    sort_items: Iterable[SortItem],
) -> DataView:
    """Sort ``row_indices`` of ``table`` by ``sort_items`` into a view.

    Parameters
    ----------
    table : DataTable
        The table whose columns supply the sort values.
    row_indices : Sequence[int]
        The rows to sort, in their current order.
    sort_items : Iterable[SortItem]
        Sort keys, most significant first. An empty iterable keeps the
        input order.

    Returns
    -------
    DataView
        A view over ``table`` in sorted order. ``table`` is not modified.
    """
    from .view import DataView

    items = list(sort_items)
    ordering = sorted_indices(table, row_indices, items)
    logger.debug(
        "Sorted %d rows of table %r by %s",
        len(ordering),
        table.name,
        [(item.column, item.order.value) for item in items],
    )
    return DataView.build(table, ordering)
