import math

import pytest

from processed_metrics.analysis.computations import round_half_away, safe_ratio


@pytest.mark.parametrize(
    "numerator, denominator, precision, expected",
    [
        (2, 10, 2, 0.2),
        (1, 3, 2, 0.33),
        (2, 3, 2, 0.67),
        (1, 8, 2, 0.13),  # ties round away from zero
        (30, 10, 2, 3.0),
        (5, 2, 0, 3),
        (-5, 2, 0, -3),
        (599, 10, 0, 60),
    ]
)
def test_safe_ratio_rounds(numerator, denominator, precision, expected):
    assert safe_ratio(numerator, denominator, 0, precision) == expected


def test_safe_ratio_zero_precision_returns_int():
    result = safe_ratio(600, 10, 0, 0)
    assert result == 60
    assert isinstance(result, int)


def test_safe_ratio_zero_denominator_returns_default():
    assert safe_ratio(5, 0) == 0
    assert safe_ratio(5, 0, invalid_default=-1) == -1
    assert safe_ratio(0, 0.0) == 0


def test_safe_ratio_default_is_not_rounded():
    assert safe_ratio(1, 0, invalid_default=0.123456, precision=2) == 0.123456


@pytest.mark.parametrize("precision, expected", [(0, 10**27), (2, 1e27)])
def test_safe_ratio_large_quotient(precision, expected):
    assert safe_ratio(10**27, 1, 0, precision) == expected


@pytest.mark.parametrize("numerator", [float("inf"), float("-inf")])
def test_safe_ratio_infinite_quotient_passes_through(numerator):
    assert safe_ratio(numerator, 1) == numerator


def test_safe_ratio_nan_quotient_passes_through():
    assert math.isnan(safe_ratio(float("nan"), 1))
    assert math.isnan(safe_ratio(1, float("nan"), 0, 0))


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (-2.5, -3), (2.5, 3), (7, 7)]
)
def test_round_half_away_to_integer(value, expected):
    assert round_half_away(value, 0) == expected
