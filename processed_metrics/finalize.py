import logging
from typing import Any, Dict, List

import polars as pl

from .config.metric_lists import RAW_COLUMN_NAMES_BY_INDEX, RAW_COLUMNS
from .datatable import DataTable, Row
from .diagnostics import log_raw_column_coverage

logger = logging.getLogger(__name__)

METRIC_KIND_DTYPES = {
    "percent": pl.Float64,
    "number": pl.Float64,
    "duration": pl.Int64,
}


def _canonical_columns(row: Row) -> Dict[str, Any]:
    """Row columns keyed by name; legacy numeric ids are mapped back to names."""
    columns = row.get_columns()
    record = {}
    for name, value in columns.items():
        if not isinstance(name, str):
            record[RAW_COLUMN_NAMES_BY_INDEX.get(name, str(name))] = value
    # Named columns win over their legacy index
    for name, value in columns.items():
        if isinstance(name, str):
            record[name] = value
    return record


def render_processed_metrics(table: DataTable) -> pl.DataFrame:
    """Evaluate the table's registered processed metrics row by row.

    Raw columns come first, then one column per registered metric name in
    registration order. When a name is registered more than once the last
    definition's value is kept.
    """
    metrics = table.extra_processed_metrics
    log_raw_column_coverage(table, RAW_COLUMNS)

    metric_names: List[str] = []
    metric_dtypes: Dict[str, pl.DataType] = {}
    for metric in metrics:
        if metric.name not in metric_dtypes:
            metric_names.append(metric.name)
        metric_dtypes[metric.name] = METRIC_KIND_DTYPES.get(metric.kind, pl.Float64)

    if table.get_row_count() == 0:
        return pl.DataFrame(schema={name: metric_dtypes[name] for name in metric_names})

    records = []
    raw_names: List[str] = []
    for row in table.get_rows().values():
        record = _canonical_columns(row)
        for name in record:
            if name not in raw_names and name not in metric_dtypes:
                raw_names.append(name)
        for metric in metrics:
            record[metric.name] = metric.compute(row)
        records.append(record)

    df = pl.from_dicts(records, infer_schema_length=None)
    logger.info(f"Rendered {df.height} rows with processed metrics {metric_names}")

    return df.select(
        [pl.col(name) for name in raw_names]
        + [pl.col(name).cast(metric_dtypes[name]) for name in metric_names]
    )
