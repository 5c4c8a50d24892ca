"""Processed metrics added to visit-based reports."""

import math
from dataclasses import dataclass

from ..config.metric_lists import (
    BOUNCE_COUNT,
    NB_ACTIONS,
    NB_VISITS,
    NB_VISITS_CONVERTED,
    VISIT_LENGTH,
)
from ..datatable import Row
from .computations import (
    ProcessedMetric,
    RatioMetric,
    get_raw_column,
    round_half_away,
    safe_ratio,
)


@dataclass(frozen=True)
class ConversionRate(RatioMetric):
    """Share of visits that converted, as a fraction in [0, 1]."""

    name = "conversion_rate"
    label = "Conversion Rate"
    kind = "percent"
    required_columns = frozenset({NB_VISITS_CONVERTED, NB_VISITS})
    numerator = NB_VISITS_CONVERTED
    denominator = NB_VISITS


@dataclass(frozen=True)
class ActionsPerVisit(RatioMetric):
    name = "nb_actions_per_visit"
    label = "Actions per Visit"
    kind = "number"
    required_columns = frozenset({NB_ACTIONS, NB_VISITS})
    numerator = NB_ACTIONS
    denominator = NB_VISITS


@dataclass(frozen=True)
class AverageTimeOnSite(ProcessedMetric):
    """Average visit duration in whole seconds. Left unformatted."""

    name = "avg_time_on_site"
    label = "Avg. Time on Website"
    kind = "duration"
    required_columns = frozenset({VISIT_LENGTH, NB_VISITS})

    precision: int = 0

    def compute(self, row: Row) -> int:
        seconds = safe_ratio(
            get_raw_column(row, VISIT_LENGTH),
            get_raw_column(row, NB_VISITS),
            self.invalid_default,
            self.precision,
        )
        if isinstance(seconds, float) and not math.isfinite(seconds):
            seconds = self.invalid_default
        return round_half_away(seconds, 0)


@dataclass(frozen=True)
class BounceRate(RatioMetric):
    """Share of single-page visits, as a fraction in [0, 1]."""

    name = "bounce_rate"
    label = "Bounce Rate"
    kind = "percent"
    required_columns = frozenset({BOUNCE_COUNT, NB_VISITS})
    numerator = BOUNCE_COUNT
    denominator = NB_VISITS
