"""Tests for Vandermonde and Newton interpolation."""

import random

import numpy as np
import pytest

from polyrecon_pkg.interpolation import (
    as_points,
    build_divided_differences,
    build_vandermonde_matrix,
    fit_newton,
    fit_vandermonde,
    newton_evaluate,
    newton_terms,
)
from polyrecon_pkg.types import (
    DimensionMismatchError,
    Point,
    SingularMatrixError,
    ValidationError,
)

PARABOLA = [(1, 4), (2, 7), (3, 12)]  # y = x^2 + 3


def _random_polynomial_points(rng, degree, x_range=(-8, 8), coeff_range=(-9, 9)):
    coefficients = [rng.randint(*coeff_range) for _ in range(degree + 1)]
    xs = rng.sample(range(x_range[0], x_range[1] + 1), degree + 1)
    points = [(x, sum(c * x**i for i, c in enumerate(coefficients))) for x in xs]
    return coefficients, points


class TestVandermonde:
    def test_parabola_coefficients(self):
        fit = fit_vandermonde(PARABOLA)
        assert fit.coefficients == pytest.approx([3.0, 0.0, 1.0], abs=1e-9)
        assert fit.constant == pytest.approx(3.0)
        assert fit.degree == 2

    def test_matrix_artifact_is_unreduced(self):
        fit = fit_vandermonde(PARABOLA)
        assert fit.matrix == [
            [1.0, 1.0, 1.0, 4.0],
            [1.0, 2.0, 4.0, 7.0],
            [1.0, 3.0, 9.0, 12.0],
        ]

    def test_build_matrix_rows_follow_point_order(self):
        matrix = build_vandermonde_matrix([Point(3, 12), Point(0, 3)])
        assert matrix == [[1.0, 3.0, 12.0], [1.0, 0.0, 3.0]]

    def test_single_point_is_constant(self):
        assert fit_vandermonde([(5, 42)]).coefficients == [42.0]

    def test_matches_numpy_solve(self):
        xs = [-2, 1, 3, 5]
        ys = [int(np.polyval([2, 0, -1, 7], x)) for x in xs]
        expected = np.linalg.solve(np.vander(xs, increasing=True), ys)
        actual = fit_vandermonde(list(zip(xs, ys))).coefficients
        np.testing.assert_allclose(actual, expected, rtol=1e-9, atol=1e-9)

    def test_recovers_random_polynomials(self):
        rng = random.Random(2024)
        for _ in range(50):
            degree = rng.randint(0, 5)
            coefficients, points = _random_polynomial_points(rng, degree)
            recovered = fit_vandermonde(points).coefficients
            assert recovered == pytest.approx(coefficients, rel=1e-6, abs=1e-6)

    def test_order_invariance(self):
        rng = random.Random(17)
        for _ in range(20):
            _, points = _random_polynomial_points(rng, rng.randint(1, 5))
            shuffled = points[:]
            rng.shuffle(shuffled)
            assert fit_vandermonde(shuffled).coefficients == pytest.approx(
                fit_vandermonde(points).coefficients, rel=1e-6, abs=1e-6
            )

    def test_wide_x_range_is_solvable(self):
        # x**2 + 3 sampled at x = 1, 2 and 10**6
        points = [(1, 4), (2, 7), (10**6, 10**12 + 3)]
        fit = fit_vandermonde(points)
        assert fit.coefficients == pytest.approx([3.0, 0.0, 1.0], abs=1e-6)
        assert fit.constant == pytest.approx(fit_newton(points).value, abs=1e-6)

    def test_duplicate_x_is_singular(self):
        with pytest.raises(SingularMatrixError):
            fit_vandermonde([(1, 2), (1, 3)])
        with pytest.raises(SingularMatrixError):
            fit_vandermonde([(1, 4), (2, 5), (1, 6)])

    def test_empty_points(self):
        with pytest.raises(DimensionMismatchError):
            fit_vandermonde([])


class TestNewton:
    def test_parabola_at_zero(self):
        fit = fit_newton(PARABOLA)
        assert fit.value == pytest.approx(3.0)
        assert fit.target_x == 0

    def test_divided_difference_table(self):
        table = build_divided_differences(PARABOLA)
        assert table == [
            [4.0, 3.0, 1.0],
            [7.0, 5.0, 0.0],
            [12.0, 0.0, 0.0],
        ]

    def test_fit_exposes_table(self):
        assert fit_newton(PARABOLA).table == build_divided_differences(PARABOLA)

    def test_evaluate_elsewhere(self):
        assert fit_newton(PARABOLA, target_x=6).value == pytest.approx(39.0)
        assert fit_newton(PARABOLA, target_x=2.5).value == pytest.approx(9.25)

    def test_terms_sum_to_value(self):
        table = build_divided_differences(PARABOLA)
        terms = newton_terms(table, [1, 2, 3], 0)
        assert terms == [(4.0, 1.0), (3.0, -1.0), (1.0, 2.0)]
        assert sum(c * p for c, p in terms) == newton_evaluate(table, [1, 2, 3], 0)

    def test_terms_need_enough_xs(self):
        with pytest.raises(DimensionMismatchError):
            newton_terms([[1.0, 0.0], [2.0, 0.0]], [1])

    def test_agrees_with_vandermonde_constant(self):
        rng = random.Random(31)
        for _ in range(50):
            coefficients, points = _random_polynomial_points(rng, rng.randint(0, 5))
            newton = fit_newton(points).value
            vandermonde = fit_vandermonde(points).constant
            assert newton == pytest.approx(coefficients[0], rel=1e-6, abs=1e-6)
            assert newton == pytest.approx(vandermonde, rel=1e-6, abs=1e-6)

    def test_order_invariance(self):
        rng = random.Random(5)
        for _ in range(20):
            _, points = _random_polynomial_points(rng, rng.randint(1, 5))
            shuffled = points[:]
            rng.shuffle(shuffled)
            assert fit_newton(shuffled).value == pytest.approx(
                fit_newton(points).value, rel=1e-6, abs=1e-6
            )

    def test_duplicate_x_is_singular(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            fit_newton([(1, 4), (2, 5), (1, 6)])
        assert exc_info.value.code == "SINGULAR_MATRIX"
        assert exc_info.value.location == (0, 2)

    def test_empty_points(self):
        with pytest.raises(DimensionMismatchError):
            fit_newton([])


class TestPointCoercion:
    def test_accepts_points_and_pairs(self):
        assert as_points([Point(1, 2), (3, 4)]) == [Point(1, 2), Point(3, 4)]

    def test_integral_floats_are_accepted(self):
        assert as_points([(2.0, 8.0)]) == [Point(2, 8)]

    def test_fractional_x_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            as_points([(1.5, 2)])
        assert exc_info.value.code == "INVALID_POINT"

    def test_malformed_pair_is_rejected(self):
        with pytest.raises(ValidationError):
            as_points([(1, 2, 3)])
