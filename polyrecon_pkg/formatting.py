"""Result formatting: numbers, polynomials, matrices and divided-difference tables."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

import sympy as sp

from .config import OUTPUT_PRECISION, TABLE_CELL_WIDTH, TABLE_PRECISION

# Coefficients this close to an integer are shown as that integer
INTEGER_SNAP_TOLERANCE = 1e-9

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def format_superscript(expr_str: str) -> str:
    """Replace Python power notation (**) with Unicode superscripts.

    Args:
        expr_str: Expression string (e.g., "x**2", "x**-3")

    Returns:
        String with superscripts (e.g., "x²", "x⁻³")
    """
    return re.sub(r"\*\*(\-?\d+)", lambda m: m.group(1).translate(_SUPERSCRIPTS), expr_str)


def format_number(val: Any, precision: int = OUTPUT_PRECISION) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        return str(val)


def _coefficient_to_sympy(value: float, precision: int) -> sp.Expr:
    nearest = round(value)
    if abs(value - nearest) <= INTEGER_SNAP_TOLERANCE * max(1.0, abs(value)):
        return sp.Integer(nearest)
    return sp.Float(value, precision)


def polynomial_expr(
    coefficients: Sequence[float], precision: int = OUTPUT_PRECISION, symbol: str = "x"
) -> sp.Expr:
    """Build a SymPy expression sum(coefficients[i] * x**i)."""
    x = sp.Symbol(symbol)
    return sp.Add(
        *[
            _coefficient_to_sympy(float(c), precision) * x**i
            for i, c in enumerate(coefficients)
        ]
    )


def format_polynomial(
    coefficients: Sequence[float],
    precision: int = OUTPUT_PRECISION,
    symbol: str = "x",
    superscript: bool = False,
) -> str:
    """Render monomial coefficients as a polynomial, highest degree first.

    Example:
        >>> format_polynomial([3.0, 0.0, 1.0])
        'x**2 + 3'
    """
    expr = polynomial_expr(coefficients, precision, symbol)
    text = sp.sstr(expr, full_prec=False)
    return format_superscript(text) if superscript else text


def format_row(row: Sequence[float], precision: int = OUTPUT_PRECISION) -> str:
    """Format one augmented matrix row as "a b c = y"."""
    left = " ".join(format_number(v, precision) for v in row[:-1])
    return f"{left} = {format_number(row[-1], precision)}"


def format_table(
    table: Sequence[Sequence[float]],
    precision: int = TABLE_PRECISION,
    width: int = TABLE_CELL_WIDTH,
) -> list[str]:
    """Format the used (upper-left triangular) part of a divided-difference table."""
    n = len(table)
    lines = []
    for i, row in enumerate(table):
        cells = [f"{row[j]:{width}.{precision}f}" for j in range(n - i)]
        lines.append(" ".join(cells))
    return lines


def format_newton_expansion(
    terms: Sequence[tuple[float, float]], value: float, precision: int = OUTPUT_PRECISION
) -> str:
    """Render "f[x0] + c1*p1 + ... = value" for a Newton evaluation breakdown."""
    if not terms:
        return format_number(value, precision)
    parts = [format_number(terms[0][0], precision)]
    for coefficient, product in terms[1:]:
        parts.append(f"{format_number(coefficient, precision)}*{format_number(product, precision)}")
    return f"{' + '.join(parts)} = {format_number(value, precision)}"
