"""Polynomial interpolation through n points with distinct x-coordinates.

Two independent methods are provided so their results can be cross-checked:

1. Vandermonde system:
   - Row i is [x_i**0, x_i**1, ..., x_i**(n-1) | y_i]
   - Solved with Gaussian elimination (partial pivoting)
   - Yields the full coefficient vector in the monomial basis

2. Newton divided differences:
   - table[i][0] = y_i
   - table[i][j] = (table[i+1][j-1] - table[i][j-1]) / (x_{i+j} - x_i)
   - P(t) = f[x0] + f[x0,x1](t-x0) + f[x0,x1,x2](t-x0)(t-x1) + ...
   - Evaluated directly at a target point (x=0 recovers the constant term)

Both are exact in exact arithmetic; in floating point they accumulate error
differently, which is what makes the comparison useful.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from numbers import Integral
from typing import Any

from .config import DEFAULT_TARGET_X, PIVOT_EPSILON
from .linalg import gaussian_elimination
from .types import (
    DimensionMismatchError,
    NewtonFit,
    Point,
    SingularMatrixError,
    ValidationError,
    VandermondeFit,
)


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{what} must be an integer, got {value!r}", code="INVALID_POINT")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValidationError(f"{what} must be an integer, got {value!r}", code="INVALID_POINT")


def as_points(points: Iterable[Point | Sequence[int]]) -> list[Point]:
    """Normalize Points or (x, y) pairs into a list of Point."""
    result = []
    for item in points:
        if isinstance(item, Point):
            result.append(item)
            continue
        try:
            x, y = item
        except (TypeError, ValueError):
            raise ValidationError(
                f"Expected a Point or an (x, y) pair, got {item!r}", code="INVALID_POINT"
            ) from None
        result.append(Point(_as_int(x, "x"), _as_int(y, "y")))
    return result


def _require_points(points: Iterable[Point | Sequence[int]]) -> list[Point]:
    pts = as_points(points)
    if not pts:
        raise DimensionMismatchError("At least one point is required to fit a polynomial")
    return pts


def to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        raise ValidationError(
            f"Value {value} is too large for floating-point interpolation",
            code="INVALID_POINT",
        ) from None


def _check_distinct_x(points: list[Point]) -> None:
    seen: dict[int, int] = {}
    for index, point in enumerate(points):
        if point.x in seen:
            raise SingularMatrixError(
                f"Duplicate x-coordinate {point.x} at positions {seen[point.x]} and {index}",
                location=(seen[point.x], index),
            )
        seen[point.x] = index


def build_vandermonde_matrix(points: Iterable[Point | Sequence[int]]) -> list[list[float]]:
    """Build the n x (n+1) augmented Vandermonde system for the points.

    Args:
        points: n points

    Returns:
        Rows [x**0, x**1, ..., x**(n-1), y], one per point, in input order
    """
    pts = _require_points(points)
    n = len(pts)
    matrix = []
    for point in pts:
        x = to_float(point.x)
        row = [x**j for j in range(n)]
        row.append(to_float(point.y))
        matrix.append(row)
    return matrix


def fit_vandermonde(
    points: Iterable[Point | Sequence[int]], epsilon: float = PIVOT_EPSILON
) -> VandermondeFit:
    """Recover monomial coefficients of the degree n-1 polynomial through n points.

    Args:
        points: n points with pairwise distinct x-coordinates
        epsilon: Relative pivot threshold passed to the solver

    Returns:
        VandermondeFit with coefficients (index i is the coefficient of x**i)
        and the augmented matrix as built, before elimination

    Raises:
        DimensionMismatchError: If no points are given
        SingularMatrixError: If two points share an x-coordinate

    Example:
        >>> fit_vandermonde([(1, 4), (2, 7), (3, 12)]).coefficients
        [3.0, 0.0, 1.0]
    """
    pts = _require_points(points)
    matrix = build_vandermonde_matrix(pts)
    _check_distinct_x(pts)
    working = [row[:] for row in matrix]
    coefficients = gaussian_elimination(working, epsilon=epsilon)
    return VandermondeFit(coefficients=coefficients, matrix=matrix)


def build_divided_differences(points: Iterable[Point | Sequence[int]]) -> list[list[float]]:
    """Build the n x n divided-difference table.

    ``table[i][j]`` is the j-th order divided difference starting at sample i.
    Entries with ``i + j >= n`` are unused and stay 0.0.

    Raises:
        DimensionMismatchError: If no points are given
        SingularMatrixError: If a denominator x_{i+j} - x_i is zero
    """
    pts = _require_points(points)
    n = len(pts)
    xs = [p.x for p in pts]
    table = [[0.0] * n for _ in range(n)]

    for i in range(n):
        table[i][0] = to_float(pts[i].y)

    for j in range(1, n):
        for i in range(n - j):
            denominator = xs[i + j] - xs[i]
            if denominator == 0:
                raise SingularMatrixError(
                    f"Duplicate x-coordinate {xs[i]} at positions {i} and {i + j}",
                    location=(i, j),
                )
            table[i][j] = (table[i + 1][j - 1] - table[i][j - 1]) / denominator

    return table


def newton_terms(
    table: list[list[float]], xs: Sequence[float], target_x: float = DEFAULT_TARGET_X
) -> list[tuple[float, float]]:
    """Break the Newton form at ``target_x`` into (divided difference, product) pairs.

    The first pair is (f[x0], 1.0); pair i holds f[x0..xi] and
    (t - x0)(t - x1)...(t - x_{i-1}). Summing coefficient * product over the
    pairs gives P(target_x).
    """
    n = len(table)
    if n == 0 or len(xs) < n:
        raise DimensionMismatchError(
            f"Need {n} x-coordinates for a table of size {n}, got {len(xs)}"
        )
    terms = [(table[0][0], 1.0)]
    product = 1.0
    for i in range(1, n):
        product *= target_x - xs[i - 1]
        terms.append((table[0][i], product))
    return terms


def newton_evaluate(
    table: list[list[float]], xs: Sequence[float], target_x: float = DEFAULT_TARGET_X
) -> float:
    """Evaluate the Newton forward form of a divided-difference table at ``target_x``."""
    result = 0.0
    for coefficient, product in newton_terms(table, xs, target_x):
        result += coefficient * product
    return result


def fit_newton(
    points: Iterable[Point | Sequence[int]], target_x: float = DEFAULT_TARGET_X
) -> NewtonFit:
    """Evaluate the interpolating polynomial through the points at ``target_x``.

    Args:
        points: n points with pairwise distinct x-coordinates
        target_x: Where to evaluate (0 gives the constant term)

    Returns:
        NewtonFit with the value and the divided-difference table

    Raises:
        DimensionMismatchError: If no points are given
        SingularMatrixError: If two points share an x-coordinate

    Example:
        >>> fit_newton([(1, 4), (2, 7), (3, 12)]).value
        3.0
    """
    pts = _require_points(points)
    table = build_divided_differences(pts)
    value = newton_evaluate(table, [p.x for p in pts], target_x)
    return NewtonFit(value=value, table=table, target_x=target_x)
