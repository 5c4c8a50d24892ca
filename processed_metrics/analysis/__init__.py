"""Processed metric definitions."""

from typing import List

from .computations import ProcessedMetric, RatioMetric, get_raw_column, round_half_away, safe_ratio
from .metrics_computations import (
    ConversionRate,
    ActionsPerVisit,
    AverageTimeOnSite,
    BounceRate,
)

__all__ = [
    "ProcessedMetric",
    "RatioMetric",
    "get_raw_column",
    "safe_ratio",
    "round_half_away",
    "ConversionRate",
    "ActionsPerVisit",
    "AverageTimeOnSite",
    "BounceRate",
    "default_processed_metrics",
]


def default_processed_metrics(round_precision: int = 2, invalid_division=0) -> List[ProcessedMetric]:
    """Return the visit metrics in display order."""
    # Order is the column order downstream renderers present
    return [
        ConversionRate(precision=round_precision, invalid_default=invalid_division),
        ActionsPerVisit(precision=round_precision, invalid_default=invalid_division),
        AverageTimeOnSite(invalid_default=invalid_division),
        BounceRate(precision=round_precision, invalid_default=invalid_division),
    ]
