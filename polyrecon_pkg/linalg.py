"""Dense Gaussian elimination with partial pivoting."""

from __future__ import annotations

from .config import PIVOT_EPSILON
from .types import DimensionMismatchError, SingularMatrixError


def _check_augmented_shape(matrix: list[list[float]]) -> int:
    n = len(matrix)
    if n == 0:
        raise DimensionMismatchError("Cannot solve an empty system")
    for index, row in enumerate(matrix):
        if len(row) != n + 1:
            raise DimensionMismatchError(
                f"Augmented matrix row {index} has {len(row)} entries, expected {n + 1}"
            )
    return n


def gaussian_elimination(
    matrix: list[list[float]], epsilon: float = PIVOT_EPSILON
) -> list[float]:
    """Solve the square system held in an n x (n+1) augmented matrix [A | b].

    The matrix is reduced in place. At column i the row with the largest
    ``abs(matrix[k][i])`` for k >= i is swapped into position i, then every
    row below has a multiple of row i subtracted from it across columns
    i..n. Back substitution yields the solution vector.

    Args:
        matrix: Augmented matrix as a list of n rows of n+1 floats (mutated)
        epsilon: A pivot is treated as zero when ``abs(pivot) <= epsilon * scale``,
            where scale is the largest absolute entry of column i of A

    Returns:
        Solution vector of length n

    Raises:
        DimensionMismatchError: If the matrix is empty or not n x (n+1)
        SingularMatrixError: If a pivot is zero or numerically negligible
    """
    n = _check_augmented_shape(matrix)
    # Column scales are taken before elimination
    thresholds = [epsilon * max(abs(row[i]) for row in matrix) for i in range(n)]

    # Forward elimination
    for i in range(n):
        max_row = i
        for k in range(i + 1, n):
            if abs(matrix[k][i]) > abs(matrix[max_row][i]):
                max_row = k
        matrix[i], matrix[max_row] = matrix[max_row], matrix[i]

        pivot = matrix[i][i]
        if abs(pivot) <= thresholds[i]:
            raise SingularMatrixError(
                f"Singular matrix: pivot {pivot!r} in column {i} is zero or negligible",
                location=(i,),
            )

        for k in range(i + 1, n):
            factor = matrix[k][i] / pivot
            for j in range(i, n + 1):
                matrix[k][j] -= factor * matrix[i][j]

    # Back substitution
    solution = [0.0] * n
    for i in range(n - 1, -1, -1):
        acc = matrix[i][n]
        for j in range(i + 1, n):
            acc -= matrix[i][j] * solution[j]
        solution[i] = acc / matrix[i][i]

    return solution
