"""Filter registering visit processed metrics on a table."""

import logging
from typing import Iterable, List, Optional

from ..analysis import ProcessedMetric, default_processed_metrics, get_raw_column
from ..config.metric_lists import (
    EXTRA_PROCESSED_METRICS_METADATA_NAME,
    NB_ACTIONS,
    NB_VISITS,
)
from ..config.settings import ProcessedMetricsSettings, load_settings
from ..datatable import DataTable
from ..diagnostics import log_processed_metrics_registration

logger = logging.getLogger(__name__)


def delete_rows_with_no_visit(table: DataTable) -> int:
    """Delete rows with neither visits nor actions. Returns how many were deleted.

    A row with actions but no visit (e.g. a conversion without a qualifying
    visit that day) is kept.
    """
    deleted = 0
    for key in table.get_row_keys():
        row = table.get_row(key)
        nb_visits = get_raw_column(row, NB_VISITS)
        nb_actions = get_raw_column(row, NB_ACTIONS)

        if nb_visits == 0 and nb_actions == 0:
            table.delete_row(key)
            deleted += 1
    return deleted


def dedupe_processed_metrics(metrics: Iterable[ProcessedMetric]) -> List[ProcessedMetric]:
    """Keep the first definition for each metric name, preserving order."""
    seen = set()
    unique = []
    for metric in metrics:
        if metric.name in seen:
            continue
        seen.add(metric.name)
        unique.append(metric)
    return unique


class MetricsFilter:
    """Adds conversion_rate, nb_actions_per_visit, avg_time_on_site and bounce_rate.

    The metrics are not computed here. Their definitions are appended to the
    table's ``extra_processed_metrics`` metadata and evaluated per row when the
    table is rendered. Applying the filter twice registers them twice.
    """

    def __init__(self, settings: Optional[ProcessedMetricsSettings] = None):
        self.settings = settings or load_settings()

    def get_processed_metrics(self) -> List[ProcessedMetric]:
        """Definitions appended by ``apply``; override to register others."""
        return default_processed_metrics(
            round_precision=self.settings.round_precision,
            invalid_division=self.settings.invalid_division,
        )

    def apply(self, table: DataTable, prune_zero_activity_rows: Optional[bool] = None) -> DataTable:
        if not isinstance(table, DataTable):
            raise TypeError(f"MetricsFilter expects a DataTable, got {type(table).__name__}")

        if prune_zero_activity_rows is None:
            prune_zero_activity_rows = self.settings.delete_rows_with_no_visit

        if prune_zero_activity_rows:
            rows_before = table.get_row_count()
            deleted = delete_rows_with_no_visit(table)
            logger.info(f"Deleted {deleted}/{rows_before} rows with no visit and no action")

        extra_processed_metrics = list(table.get_metadata(EXTRA_PROCESSED_METRICS_METADATA_NAME) or [])
        extra_processed_metrics.extend(self.get_processed_metrics())
        table.set_metadata(EXTRA_PROCESSED_METRICS_METADATA_NAME, extra_processed_metrics)

        log_processed_metrics_registration(table)
        return table
