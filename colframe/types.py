"""Type aliases for colframe.

This module defines type aliases used throughout the package for clarity
and consistency. The actual data structures live in their own modules.
"""

ColName = str
"""Alias for column names.

Names are compared by exact, case-sensitive string equality.
"""

RowIndex = int
"""Alias for positional row indices into a table's column storage."""

ColumnRef = str | int
"""Alias for a reference to a column, either by name or by position."""
