"""Configuration for the processed metrics filter."""

from .metric_lists import (
    RAW_COLUMNS,
    RAW_COLUMN_INDEXES,
    EXTRA_PROCESSED_METRICS_METADATA_NAME,
)
from .settings import ProcessedMetricsSettings, load_settings

__all__ = [
    "RAW_COLUMNS",
    "RAW_COLUMN_INDEXES",
    "EXTRA_PROCESSED_METRICS_METADATA_NAME",
    "ProcessedMetricsSettings",
    "load_settings",
]
