import polars as pl
import pytest
from polars.testing import assert_frame_equal

from processed_metrics.datatable import DataTable, Row


def test_row_column_access():
    row = Row({"nb_visits": 3})
    assert row.get_column("nb_visits") == 3
    assert row.get_column("nb_actions") is None

    row.set_column("nb_actions", 7)
    assert row.has_column("nb_actions")
    assert row.delete_column("nb_actions") is True
    assert row.delete_column("nb_actions") is False


def test_add_and_delete_rows():
    table = DataTable()
    first = table.add_row(Row({"nb_visits": 1}))
    second = table.add_row(Row({"nb_visits": 2}))
    assert (first, second) == (0, 1)

    table.delete_row(first)
    assert table.get_row_keys() == [second]
    assert len(table) == 1

    with pytest.raises(KeyError):
        table.delete_row(first)


def test_explicit_keys_must_be_unique():
    table = DataTable()
    table.add_row(Row(), key="google")
    with pytest.raises(KeyError):
        table.add_row(Row(), key="google")


def test_auto_keys_skip_explicit_ones():
    table = DataTable()
    table.add_row(Row(), key=0)
    assert table.add_row(Row()) == 1


def test_metadata_round_trip():
    table = DataTable()
    assert table.get_metadata("missing") is None
    assert table.get_metadata("missing", []) == []
    table.set_metadata("period", "day")
    assert table.get_all_metadata() == {"period": "day"}
    assert table.extra_processed_metrics == []


def test_from_polars_with_key_column():
    df = pl.DataFrame({"label": ["google", "bing"], "nb_visits": [10, 0]})
    table = DataTable.from_polars(df, key_column="label")

    assert table.get_row_keys() == ["google", "bing"]
    assert table.get_row("bing").get_columns() == {"nb_visits": 0}


def test_from_polars_missing_key_column():
    with pytest.raises(KeyError):
        DataTable.from_polars(pl.DataFrame({"nb_visits": [1]}), key_column="label")


def test_to_polars():
    table = DataTable()
    table.add_rows_from_simple_array([{"nb_visits": 1, 3: 4}, {"nb_visits": 2}])

    expected = pl.DataFrame({"nb_visits": [1, 2], "3": [4, None]})
    assert_frame_equal(table.to_polars(), expected)
