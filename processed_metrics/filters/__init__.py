"""Table filters."""

from .add_columns_processed_metrics import (
    MetricsFilter,
    dedupe_processed_metrics,
    delete_rows_with_no_visit,
)

__all__ = [
    "MetricsFilter",
    "dedupe_processed_metrics",
    "delete_rows_with_no_visit",
]
