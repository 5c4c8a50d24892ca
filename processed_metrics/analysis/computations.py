"""Processed metric base class and shared numeric helpers."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import ClassVar, FrozenSet, Hashable, Optional, Union

from ..config.metric_lists import RAW_COLUMN_INDEXES
from ..datatable import Row

Number = Union[int, float]


def safe_ratio(
    numerator: Number,
    denominator: Number,
    invalid_default: Number = 0,
    precision: int = 2,
) -> Number:
    """Divide and round, returning ``invalid_default`` (unrounded) when the divisor is 0.

    Ties round half away from zero. ``precision=0`` yields an int. A NaN or
    infinite quotient is returned as is.
    """
    if denominator == 0:
        return invalid_default
    return round_half_away(numerator / denominator, precision)


def round_half_away(value: Number, precision: int = 2) -> Number:
    """Round to ``precision`` digits with ties away from zero; non-finite floats pass through."""
    if isinstance(value, float) and not math.isfinite(value):
        return value

    exact = Decimal(str(value))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + precision + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
    if precision == 0:
        return int(rounded)
    return float(rounded)


def get_raw_column(row: Row, column: Hashable) -> Number:
    """Read a raw counter by name, falling back to its legacy index; 0 when unset.

    Only a missing or null value counts as unset. Bools are numbers here
    (False is 0, True is 1).
    """
    value = row.get_column(column)
    if value is None and column in RAW_COLUMN_INDEXES:
        value = row.get_column(RAW_COLUMN_INDEXES[column])
    if value is None:
        return 0
    return value


@dataclass(frozen=True)
class ProcessedMetric(ABC):
    """A derived column evaluated per row from raw counters.

    Subclasses declare ``name``, ``label``, ``kind`` and ``required_columns``
    and implement ``compute``. ``compute`` must only read ``required_columns``
    and never mutate the row.
    """

    name: ClassVar[str] = ""
    label: ClassVar[str] = ""
    kind: ClassVar[str] = "number"
    required_columns: ClassVar[FrozenSet[str]] = frozenset()

    precision: int = 2
    invalid_default: Number = 0

    @abstractmethod
    def compute(self, row: Row) -> Optional[Number]:
        """Return the metric value for ``row``."""
        pass


@dataclass(frozen=True)
class RatioMetric(ProcessedMetric):
    """``numerator / denominator`` of two raw columns, as a float."""

    numerator: ClassVar[str] = ""
    denominator: ClassVar[str] = ""

    def compute(self, row: Row) -> float:
        value = safe_ratio(
            get_raw_column(row, self.numerator),
            get_raw_column(row, self.denominator),
            self.invalid_default,
            self.precision,
        )
        return float(value)
