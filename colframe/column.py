"""Named, typed, fixed-length columns.

A :class:`DataColumn` wraps a one-dimensional numpy array that is copied on
construction and marked read-only, so a column can be shared freely between
tables and views without any risk of one of them changing its values.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import numpy as np

from .errors import check_index
from .types import ColName


def _to_python(value: Any) -> Any:
    """Convert numpy scalars to their native Python equivalents."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def _as_array(data: Iterable[Any], dtype: Any = None) -> np.ndarray:
    """Copy ``data`` into a fresh one-dimensional array."""
    if isinstance(data, np.ndarray):
        values = data
    else:
        values = list(data)

    if dtype is None:
        if isinstance(values, np.ndarray):
            if values.dtype.kind == "U":
                dtype = object
        elif any(isinstance(v, str) for v in values):
            # Fixed-width numpy strings drop trailing NULs and would
            # stringify any non-string values.
            dtype = object

    try:
        arr = np.array(values, dtype=dtype, copy=True)
    except ValueError:
        arr = None
    if arr is None or arr.ndim != 1:
        # Sequence-like values (tuples, lists) are kept as opaque objects.
        arr = np.empty(len(values), dtype=object)
        for i, v in enumerate(values):
            arr[i] = v
    arr.flags.writeable = False
    return arr


class DataColumn:
    """An immutable, named column of values.

    Parameters
    ----------
    name : str
        The column name. Names are compared case-sensitively.
    data : Iterable[Any]
        The column values. They are copied into a read-only numpy array.
    dtype : numpy dtype-like, optional
        Explicit storage type. If None, numpy infers it, except that any
        column holding strings is stored as ``object``.
    """

    __slots__ = ("_name", "_data")

    def __init__(
        self, name: ColName, data: Iterable[Any] = (), dtype: Any = None
    ) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Column name must be a str, got {type(name).__name__}")
        self._name = name
        self._data = _as_array(data, dtype)

    @classmethod
    def build(
        cls, name: ColName, data: Iterable[Any] = (), dtype: Any = None
    ) -> DataColumn:
        """Create a column; equivalent to calling the constructor."""
        return cls(name, data, dtype)

    @classmethod
    def _wrap(cls, name: ColName, arr: np.ndarray) -> DataColumn:
        # Skips the defensive copy for arrays created internally.
        col = cls.__new__(cls)
        col._name = name
        arr.flags.writeable = False
        col._data = arr
        return col

    @property
    def name(self) -> ColName:
        """The column name."""
        return self._name

    @property
    def data(self) -> np.ndarray:
        """The read-only array of values."""
        return self._data

    @property
    def dtype(self) -> np.dtype:
        """The numpy dtype of the stored values."""
        return self._data.dtype

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return (_to_python(v) for v in self._data)

    def __getitem__(self, index: int) -> Any:
        return self.value_at(index)

    def value_at(self, index: int) -> Any:
        """Return the value at ``index`` as a native Python object.

        Raises
        ------
        IndexOutOfRangeError
            If ``index`` is negative or not less than the column length.
        """
        idx = check_index(index, len(self._data), "Row index")
        return _to_python(self._data[idx])

    def to_list(self) -> list[Any]:
        """Return the values as a Python list."""
        return self._data.tolist()

    def take(self, indices: Sequence[int] | np.ndarray) -> DataColumn:
        """Return a new column holding the values at ``indices``, in order."""
        idx = np.asarray(indices, dtype=np.intp)
        return DataColumn._wrap(self._name, self._data[idx])

    def rename(self, name: ColName) -> DataColumn:
        """Return a column with the same values under a new name."""
        return DataColumn._wrap(name, self._data)

    def append(self, value: Any) -> DataColumn:
        """Return a new column with ``value`` added at the end."""
        return self.insert(len(self._data), value)

    def insert(self, index: int, value: Any) -> DataColumn:
        """Return a new column with ``value`` inserted before ``index``.

        ``index`` may equal the column length, which appends.
        """
        idx = check_index(index, len(self._data) + 1, "Insert index")
        values = self._data.tolist()
        values.insert(idx, value)
        dtype = object if self.dtype == object else None
        return DataColumn(self._name, values, dtype=dtype)

    def remove(self, index: int) -> DataColumn:
        """Return a new column without the value at ``index``."""
        idx = check_index(index, len(self._data), "Row index")
        return DataColumn._wrap(self._name, np.delete(self._data, idx))

    def __repr__(self) -> str:
        return f"DataColumn(name={self._name!r}, dtype={self.dtype}, length={len(self)})"
