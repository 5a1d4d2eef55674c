"""Walkthrough of the colframe API.

This example demonstrates:
1. Building validated tables (and what happens when validation fails)
2. Functional traversal: filter, map, group_by, folds
3. Sorting into views, re-sorting views, and materializing them
4. Round-tripping through pandas
"""

import pandas as pd

from colframe import (
    DataColumn,
    DataTable,
    DuplicateColumnNameError,
    SortItem,
    SortOrder,
    get_logger,
)

# Set up logging
logger = get_logger(__name__)


def create_orders():
    """Create a small orders table."""
    return DataTable.build(
        "orders",
        [
            DataColumn("order_id", [101, 102, 103, 104, 105, 106]),
            DataColumn("region", ["EU", "US", "EU", "APAC", "US", "EU"]),
            DataColumn("amount", [250.0, 99.5, 250.0, 40.0, 310.0, 75.25]),
        ],
    )


def demo_validation():
    """Show that bad column sets never produce a table."""
    try:
        DataTable.build("bad", [DataColumn("a", [1]), DataColumn("a", [2])])
    except DuplicateColumnNameError as exc:
        logger.info("Rejected: %s", exc)


def demo_traversal(orders):
    """Filter, map, group and fold over rows."""
    large = orders.filter(lambda r: r["amount"] >= 100)
    logger.info("Large orders: %s", large.map(lambda r: r["order_id"]))

    by_region = orders.group_by(lambda r: r["region"])
    for region, rows in by_region.items():
        total = sum(r["amount"] for r in rows)
        logger.info("%s: %d orders, total %.2f", region, len(rows), total)

    total = orders.fold_left(0.0, lambda acc, r: acc + r["amount"])
    logger.info("Grand total: %.2f", total)


def demo_sorting(orders):
    """Sort by several keys; the source table is never touched."""
    view = orders.quick_sort(
        [SortItem("region"), SortItem("amount", SortOrder.DESCENDING)]
    )
    for row in view:
        logger.info("  %s", row.as_dict())

    top_eu = view.filter(lambda r: r["region"] == "EU").to_data_table()
    logger.info("Materialized %d EU rows into %r", top_eu.row_count, top_eu)
    logger.info("Original first row still: %s", orders.row(0).values())


def demo_pandas(orders):
    """Convert to and from pandas."""
    df = orders.quick_sort("amount").to_frame()
    logger.info("As DataFrame:\n%s", df)

    back = DataTable.from_frame(pd.DataFrame({"k": ["b", "a"], "v": [2, 1]}), "kv")
    logger.info("From DataFrame: %s", back.quick_sort("k").map(lambda r: r.values()))


if __name__ == "__main__":
    orders = create_orders()
    demo_validation()
    demo_traversal(orders)
    demo_sorting(orders)
    demo_pandas(orders)
