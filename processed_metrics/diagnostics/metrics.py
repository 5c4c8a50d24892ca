"""Diagnostics helpers (opt-in via PROCESSED_METRICS_DIAG).

Keep diagnostics separate from core logic. Never mutate inputs.
Failures are logged as errors and do not raise.
"""

from __future__ import annotations

import logging
import os
from collections import Counter

from ..config.metric_lists import (
    EXTRA_PROCESSED_METRICS_METADATA_NAME,
    RAW_COLUMN_INDEXES,
)


def _diag_enabled() -> bool:
    val = os.getenv("PROCESSED_METRICS_DIAG", "1").strip().lower()
    return val in {"1", "true", "yes", "on"}


def log_processed_metrics_registration(table) -> None:
    """Log registered processed metric names and warn about duplicates."""
    if not _diag_enabled():
        return
    logger = logging.getLogger(__name__)
    try:
        metrics = table.get_metadata(EXTRA_PROCESSED_METRICS_METADATA_NAME) or []
        names = [getattr(m, "name", repr(m)) for m in metrics]
        logger.info(f"Processed metrics registered: rows={table.get_row_count()}, metrics={names}")

        dups = {name: ct for name, ct in Counter(names).items() if ct > 1}
        if dups:
            logger.warning(f"Processed metrics registered more than once: {dups}")
    except Exception:
        logger.error("Processed metrics diagnostics failed", exc_info=True)


def log_raw_column_coverage(table, columns) -> None:
    """Log, per raw column, how many rows carry a non-null value."""
    if not _diag_enabled():
        return
    logger = logging.getLogger(__name__)
    try:
        rows = table.get_rows().values()
        coverage = {
            col: sum(
                1 for row in rows
                if row.get_column(col) is not None
                or row.get_column(RAW_COLUMN_INDEXES.get(col)) is not None
            )
            for col in columns
        }
        logger.info(f"Raw column coverage: rows={table.get_row_count()}, non-null={coverage}")
    except Exception:
        logger.error("Raw column coverage diagnostics failed", exc_info=True)
