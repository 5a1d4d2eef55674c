"""Tests for DataView construction and materialization."""

import numpy as np
import pytest

from colframe import (
    DataColumn,
    DataTable,
    DataView,
    DataViewRowCollection,
    IndexOutOfRangeError,
    MixedTableRowsError,
    TableError,
)


class TestViewBuild:
    """Test building views from indices and rows."""

    def test_build_from_indices(self, sample_table):
        view = DataView.build(sample_table, [2, 0])

        assert view.row_count == 2
        assert view.name == "people"
        assert view.row(0)["name"] == "Charlie"
        assert view.row(0).row_idx == 2

    def test_duplicate_indices_allowed(self, sample_table):
        view = DataView.build(sample_table, [1, 1, 1])
        assert view.map(lambda r: r["name"]) == ["Bob", "Bob", "Bob"]

    @pytest.mark.parametrize("indices", [[0, 4], [-1], [10, 0]])
    def test_out_of_range_indices(self, sample_table, indices):
        with pytest.raises(IndexOutOfRangeError):
            DataView.build(sample_table, indices)

    def test_build_from_rows(self, sample_table):
        rows = [sample_table.row(3), sample_table.row(1)]
        view = DataView.build(sample_table, rows)

        assert view.map(lambda r: r["name"]) == ["Dana", "Bob"]

    def test_from_rows_infers_table(self, sample_table):
        view = DataView.from_rows([sample_table.row(2)])
        assert view.table is sample_table

    def test_from_rows_of_view_rows(self, sample_table):
        sorted_view = sample_table.quick_sort("age")
        view = DataView.from_rows(list(sorted_view)[:2])

        assert view.table is sample_table
        assert view.map(lambda r: r["name"]) == ["Bob", "Dana"]

    def test_mixed_table_rows(self, sample_table):
        other = sample_table.to_data_table()
        with pytest.raises(MixedTableRowsError):
            DataView.from_rows([sample_table.row(0), other.row(0)])

    def test_rows_from_wrong_table(self, sample_table):
        other = sample_table.to_data_table()
        with pytest.raises(MixedTableRowsError):
            DataView.build(sample_table, [other.row(1)])

    def test_from_rows_empty_needs_table(self, sample_table):
        with pytest.raises(ValueError):
            DataView.from_rows([])
        assert DataView.from_rows([], table=sample_table).row_count == 0


class TestViewSharing:
    """Views share column storage with their table."""

    def test_columns_shared(self, sample_table):
        view = sample_table.filter(lambda r: r["age"] > 26)

        assert view.columns is sample_table.columns
        assert view.column("age").data is sample_table.column("age").data

    def test_to_data_view_of_view(self, sample_table):
        view = DataView.build(sample_table, [3, 1])
        again = view.to_data_view()

        assert again is not view
        assert again.table is sample_table
        assert list(again.rows.row_indices()) == [3, 1]


class TestMaterialize:
    """Test to_data_table on views."""

    def test_to_data_table_round_trip(self, sample_table):
        view = DataView.build(sample_table, [3, 0, 0])
        table = view.to_data_table()

        assert table.row_count == 3
        for i in range(view.row_count):
            assert table.row(i).values() == view.row(i).values()

    def test_to_data_table_is_independent(self, sample_table):
        view = DataView.build(sample_table, [1, 2])
        table = view.to_data_table()

        assert table.table is table
        assert table.column("age").data is not sample_table.column("age").data
        assert np.array_equal(table.column("age").data, [25, 35])

    def test_to_data_table_of_empty_view(self, sample_table):
        table = sample_table.filter(lambda r: False).to_data_table()

        assert table.row_count == 0
        assert table.columns.names() == ["name", "age", "city"]

    def test_keeps_dtype(self):
        table = DataTable.build("t", [DataColumn("f", [1.5, 2.5, 3.5])])
        copied = DataView.build(table, [2]).to_data_table()

        assert copied.column("f").dtype == np.float64
        assert copied.row(0)["f"] == 3.5


class TestDirectViewConstruction:
    """The view constructor only accepts rows bound to its table."""

    def test_rows_of_other_table_rejected(self, sample_table):
        other = sample_table.to_data_table()
        rows = DataViewRowCollection.build(other, [0, 1])

        with pytest.raises(MixedTableRowsError):
            DataView(sample_table, rows)

    def test_plain_index_list_rejected(self, sample_table):
        with pytest.raises(TypeError):
            DataView(sample_table, [0, 1])

    def test_matching_rows_accepted(self, sample_table):
        view = DataView(sample_table, DataViewRowCollection.build(sample_table, [2]))
        assert view.row(0)["name"] == "Charlie"

    def test_from_rows_empty_without_table_is_table_error(self):
        with pytest.raises(TableError, match="no rows"):
            DataView.from_rows([])
