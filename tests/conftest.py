"""Shared test fixtures for colframe tests."""

import pytest

from colframe import DataColumn, DataTable


@pytest.fixture
def sample_table():
    """Small table with mixed column types."""
    return DataTable.build(
        "people",
        [
            DataColumn("name", ["Alice", "Bob", "Charlie", "Dana"]),
            DataColumn("age", [30, 25, 35, 25]),
            DataColumn("city", ["NYC", "LA", "NYC", "SF"]),
        ],
    )


@pytest.fixture
def tie_table():
    """Rows (A, 1), (B, 1), (C, 2) for stability checks."""
    return DataTable.build(
        "ties",
        [DataColumn("label", ["A", "B", "C"]), DataColumn("value", [1, 1, 2])],
    )


@pytest.fixture
def xy_table():
    """Rows (x=1, y=2), (x=1, y=1), (x=0, y=5) for multi-key sorting."""
    return DataTable.build(
        "xy", [DataColumn("x", [1, 1, 0]), DataColumn("y", [2, 1, 5])]
    )


@pytest.fixture
def empty_table():
    """Table with no columns and no rows."""
    return DataTable.build("t")
