"""Diagnostics package: optional, opt-in via env switches."""

from .metrics import (
    log_processed_metrics_registration,
    log_raw_column_coverage,
)

__all__ = [
    "log_processed_metrics_registration",
    "log_raw_column_coverage",
]
