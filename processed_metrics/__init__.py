"""Processed metrics for aggregated visit reports."""

from .datatable import DataTable, Row
from .analysis import (
    ProcessedMetric,
    ConversionRate,
    ActionsPerVisit,
    AverageTimeOnSite,
    BounceRate,
    default_processed_metrics,
    safe_ratio,
)
from .filters import MetricsFilter, dedupe_processed_metrics, delete_rows_with_no_visit
from .finalize import render_processed_metrics
from .config import ProcessedMetricsSettings, load_settings

__all__ = [
    "DataTable",
    "Row",
    "ProcessedMetric",
    "ConversionRate",
    "ActionsPerVisit",
    "AverageTimeOnSite",
    "BounceRate",
    "default_processed_metrics",
    "safe_ratio",
    "MetricsFilter",
    "dedupe_processed_metrics",
    "delete_rows_with_no_visit",
    "render_processed_metrics",
    "ProcessedMetricsSettings",
    "load_settings",
]
