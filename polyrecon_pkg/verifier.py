"""Check a recovered coefficient vector against known samples."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .config import VERIFY_TOLERANCE
from .interpolation import as_points, to_float
from .types import (
    DimensionMismatchError,
    Point,
    VerificationRecord,
    VerificationReport,
)


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Evaluate sum(coefficients[i] * x**i) using Horner's method."""
    result = 0.0
    for coefficient in reversed(coefficients):
        result = result * x + coefficient
    return result


def verify(
    points: Iterable[Point | Sequence[int]],
    coefficients: Sequence[float],
    tolerance: float = VERIFY_TOLERANCE,
) -> VerificationReport:
    """Compare the polynomial given by ``coefficients`` with every point.

    A point matches when ``abs(computed - expected) < tolerance``. Mismatches
    are reported, not raised: points left out of the fit are expected to
    expose outliers here.

    Args:
        points: Samples to check, including ones not used for the fit
        coefficients: Monomial coefficients, index i for x**i
        tolerance: Absolute tolerance per point

    Returns:
        VerificationReport with one record per point, in input order

    Raises:
        DimensionMismatchError: If the coefficient vector is empty
        ValidationError: If a coordinate is too large for a float
    """
    if len(coefficients) == 0:
        raise DimensionMismatchError("Cannot verify an empty coefficient vector")
    records = []
    for point in as_points(points):
        computed = evaluate_polynomial(coefficients, to_float(point.x))
        matched = abs(computed - to_float(point.y)) < tolerance
        records.append(
            VerificationRecord(x=point.x, expected=point.y, computed=computed, matched=matched)
        )
    return VerificationReport(records=records, tolerance=tolerance)
