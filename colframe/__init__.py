"""colframe: immutable columnar tables with non-destructive views.

The colframe package provides:
- Validated, immutable tables of named, equal-length columns
- Functional traversal (filter, map, flat_map, reduce, folds, group_by)
- Lightweight views that reorder or subset rows without copying columns
- Stable multi-key sorting that yields views
- Conversion to and from pandas DataFrames
"""

import logging
from importlib import metadata

# Core data structures
from .column import DataColumn
from .columns import DataColumnCollection

# Errors
from .errors import (
    ColumnNotFoundError,
    DuplicateColumnNameError,
    EmptyReduceError,
    InconsistentColumnLengthError,
    IndexOutOfRangeError,
    MixedTableRowsError,
    RowShapeError,
    TableError,
)
from .row import DataRow
from .rows import BaseRowCollection, DataRowCollection, DataViewRowCollection

# Sorting
from .sorting import SortItem, SortOrder, quick_sort
from .table import BaseTable, DataTable
from .types import ColName, ColumnRef, RowIndex
from .view import DataView

try:
    __version__ = metadata.version("colframe")
except metadata.PackageNotFoundError:
    # Fallback for development installs
    __version__ = "0.1.0"

__all__ = [
    # Types
    "ColName",
    "ColumnRef",
    "RowIndex",
    # Columns
    "DataColumn",
    "DataColumnCollection",
    # Rows
    "DataRow",
    "BaseRowCollection",
    "DataRowCollection",
    "DataViewRowCollection",
    # Tables and views
    "BaseTable",
    "DataTable",
    "DataView",
    # Sorting
    "SortItem",
    "SortOrder",
    "quick_sort",
    # Errors
    "TableError",
    "DuplicateColumnNameError",
    "InconsistentColumnLengthError",
    "ColumnNotFoundError",
    "IndexOutOfRangeError",
    "EmptyReduceError",
    "MixedTableRowsError",
    "RowShapeError",
    # Logging
    "get_logger",
]


# Configure package-wide logging
def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for the colframe package.

    Parameters
    ----------
    name : str | None, optional
        Logger name. If None, uses the package name.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    if name is None:
        name = __name__.split(".")[0]
    return logging.getLogger(name)


# Set up default logging configuration
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
