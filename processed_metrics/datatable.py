"""Keyed row container with a metadata side-channel."""

import itertools
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional

import polars as pl

from .config.metric_lists import EXTRA_PROCESSED_METRICS_METADATA_NAME


class Row:
    """A single table row: column name (or legacy index) -> value."""

    def __init__(self, columns: Optional[Mapping[Hashable, Any]] = None):
        self._columns: Dict[Hashable, Any] = dict(columns or {})

    def get_column(self, name: Hashable) -> Any:
        """Return the column value, or ``None`` when the column is not set."""
        return self._columns.get(name)

    def has_column(self, name: Hashable) -> bool:
        return name in self._columns

    def set_column(self, name: Hashable, value: Any) -> None:
        self._columns[name] = value

    def delete_column(self, name: Hashable) -> bool:
        """Remove a column. Returns False if it was not present."""
        if name not in self._columns:
            return False
        del self._columns[name]
        return True

    def get_columns(self) -> Dict[Hashable, Any]:
        return dict(self._columns)

    def __repr__(self) -> str:
        return f"Row({self._columns!r})"


class DataTable:
    """Rows addressed by an opaque key, plus table-level metadata."""

    def __init__(self, rows: Optional[Iterable[Row]] = None):
        self._rows: Dict[Hashable, Row] = {}
        self._metadata: Dict[str, Any] = {}
        self._next_key = itertools.count()
        for row in rows or []:
            self.add_row(row)

    # --- rows ---

    def add_row(self, row: Row, key: Optional[Hashable] = None) -> Hashable:
        """Add a row and return its key. Auto-assigns an int key when none is given."""
        if key is None:
            key = next(self._next_key)
            while key in self._rows:
                key = next(self._next_key)
        elif key in self._rows:
            raise KeyError(f"Row key already present: {key!r}")
        self._rows[key] = row
        return key

    def add_rows_from_simple_array(self, records: Iterable[Mapping[Hashable, Any]]) -> List[Hashable]:
        return [self.add_row(Row(record)) for record in records]

    def get_row(self, key: Hashable) -> Optional[Row]:
        return self._rows.get(key)

    def get_rows(self) -> Dict[Hashable, Row]:
        return dict(self._rows)

    def get_row_keys(self) -> List[Hashable]:
        """Snapshot of the current row keys, safe to iterate while deleting."""
        return list(self._rows)

    def delete_row(self, key: Hashable) -> None:
        if key not in self._rows:
            raise KeyError(f"Trying to delete unknown row with key {key!r}")
        del self._rows[key]

    def get_row_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    # --- metadata ---

    def get_metadata(self, name: str, default: Any = None) -> Any:
        return self._metadata.get(name, default)

    def set_metadata(self, name: str, value: Any) -> None:
        self._metadata[name] = value

    def get_all_metadata(self) -> Dict[str, Any]:
        return dict(self._metadata)

    @property
    def extra_processed_metrics(self) -> list:
        """Processed metric definitions registered for this table, in display order."""
        return list(self._metadata.get(EXTRA_PROCESSED_METRICS_METADATA_NAME) or [])

    @extra_processed_metrics.setter
    def extra_processed_metrics(self, metrics: Iterable) -> None:
        self._metadata[EXTRA_PROCESSED_METRICS_METADATA_NAME] = list(metrics)

    # --- filters ---

    def filter(self, table_filter, *args, **kwargs) -> "DataTable":
        """Run ``table_filter.apply(self, ...)`` and return this table."""
        table_filter.apply(self, *args, **kwargs)
        return self

    # --- polars interop ---

    @classmethod
    def from_polars(cls, df: pl.DataFrame, key_column: Optional[str] = None) -> "DataTable":
        """Build a table from a DataFrame, one row per record.

        When ``key_column`` is given its values become the row keys and the
        column itself is not stored on the rows.
        """
        if key_column is not None and key_column not in df.columns:
            raise KeyError(f"Key column not found in DataFrame: {key_column}")

        table = cls()
        for record in df.iter_rows(named=True):
            if key_column is None:
                table.add_row(Row(record))
            else:
                key = record.pop(key_column)
                table.add_row(Row(record), key=key)
        return table

    def to_polars(self) -> pl.DataFrame:
        """Export raw row columns; non-string column ids are stringified."""
        records = [
            {str(name): value for name, value in row.get_columns().items()}
            for row in self._rows.values()
        ]
        if not records:
            return pl.DataFrame()
        return pl.from_dicts(records, infer_schema_length=None)
