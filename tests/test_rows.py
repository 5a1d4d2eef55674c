"""Tests for row traversal combinators on tables and views."""

import pytest

from colframe import DataRow, DataView, EmptyReduceError


class TestTraversal:
    """Test filter, map, flat_map, reduce, folds and group_by."""

    def test_filter_returns_view(self, sample_table):
        view = sample_table.filter(lambda r: r["age"] == 25)

        assert isinstance(view, DataView)
        assert view.table is sample_table
        assert [r["name"] for r in view] == ["Bob", "Dana"]

    def test_filter_does_not_change_table(self, sample_table):
        before = sample_table.map(lambda r: r.values())
        sample_table.filter(lambda r: r["city"] == "NYC")

        assert sample_table.map(lambda r: r.values()) == before

    def test_filter_nothing_matches(self, sample_table):
        view = sample_table.filter(lambda r: False)
        assert view.row_count == 0

    def test_map(self, sample_table):
        assert sample_table.map(lambda r: r["age"] * 2) == [60, 50, 70, 50]

    def test_flat_map(self, sample_table):
        result = sample_table.flat_map(lambda r: [r["name"], r["city"]])
        assert result[:4] == ["Alice", "NYC", "Bob", "LA"]
        assert len(result) == 8

    def test_reduce(self, sample_table):
        oldest = sample_table.reduce(lambda a, b: a if a["age"] >= b["age"] else b)

        assert isinstance(oldest, DataRow)
        assert oldest["name"] == "Charlie"

    def test_reduce_is_left_to_right(self, sample_table):
        seen = []

        def reducer(a, b):
            seen.append((a.row_idx, b.row_idx))
            return b

        sample_table.reduce(reducer)
        assert seen == [(0, 1), (1, 2), (2, 3)]

    def test_reduce_single_row(self, sample_table):
        single = sample_table.filter(lambda r: r["name"] == "Bob")
        assert single.reduce(lambda a, b: a)["name"] == "Bob"

    def test_reduce_empty(self, empty_table):
        with pytest.raises(EmptyReduceError):
            empty_table.reduce(lambda a, b: a)

    def test_reduce_empty_view(self, sample_table):
        with pytest.raises(EmptyReduceError, match="empty"):
            sample_table.filter(lambda r: False).reduce(lambda a, b: a)

    def test_group_by(self, sample_table):
        groups = sample_table.group_by(lambda r: r["city"])

        assert list(groups) == ["NYC", "LA", "SF"]
        assert [r["name"] for r in groups["NYC"]] == ["Alice", "Charlie"]
        assert [r["name"] for r in groups["SF"]] == ["Dana"]

    def test_fold_left_order(self, sample_table):
        result = sample_table.fold_left("", lambda acc, r: acc + r["name"][0])
        assert result == "ABCD"

    def test_fold_right_order(self, sample_table):
        result = sample_table.fold_right("", lambda r, acc: acc + r["name"][0])
        assert result == "DCBA"

    def test_fold_sum(self, sample_table):
        assert sample_table.fold_left(0, lambda acc, r: acc + r["age"]) == 115
        assert sample_table.fold_right(0, lambda r, acc: acc + r["age"]) == 115

    def test_folds_on_empty_return_zero(self, empty_table):
        zero = object()
        assert empty_table.fold_left(zero, lambda acc, r: acc) is zero
        assert empty_table.fold_right(zero, lambda r, acc: acc) is zero

    def test_traversal_on_empty(self, empty_table):
        assert empty_table.map(lambda r: r) == []
        assert empty_table.flat_map(lambda r: [r]) == []
        assert empty_table.group_by(lambda r: 1) == {}
        assert empty_table.filter(lambda r: True).row_count == 0


class TestViewTraversal:
    """Traversal on a view follows the view's ordering."""

    def test_view_traversal_order(self, sample_table):
        view = DataView.build(sample_table, [3, 0, 2])

        assert view.map(lambda r: r["name"]) == ["Dana", "Alice", "Charlie"]
        assert view.fold_left([], lambda acc, r: acc + [r.row_idx]) == [3, 0, 2]
        assert view.fold_right([], lambda r, acc: acc + [r.row_idx]) == [2, 0, 3]

    def test_filter_on_view_keeps_order_and_source(self, sample_table):
        view = DataView.build(sample_table, [3, 2, 1, 0])
        filtered = view.filter(lambda r: r["age"] < 35)

        assert filtered.table is sample_table
        assert filtered.map(lambda r: r["name"]) == ["Dana", "Bob", "Alice"]


class TestRowCollection:
    """Test row collection accessors."""

    def test_canonical_indices(self, sample_table):
        assert list(sample_table.rows.row_indices()) == [0, 1, 2, 3]
        assert sample_table.rows.count() == 4
        assert sample_table.rows.table is sample_table

    def test_indices_are_read_only(self, sample_table):
        with pytest.raises(ValueError):
            sample_table.rows.row_indices()[0] = 3

    def test_get_by_position(self, sample_table):
        assert sample_table.rows[2]["name"] == "Charlie"

    def test_row_len_and_iter(self, sample_table):
        row = sample_table.row(0)
        assert len(row) == 3
        assert list(row) == ["Alice", 30, "NYC"]
