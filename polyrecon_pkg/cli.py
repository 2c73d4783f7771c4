from __future__ import annotations

import argparse
import json
import sys

from .config import VERSION
from .formatting import (
    format_newton_expansion,
    format_number,
    format_polynomial,
    format_row,
    format_table,
)
from .interpolation import newton_terms
from .logging_config import get_logger
from .types import ReconstructionResult, RootSpec

logger = get_logger("cli")

SEPARATOR = "=" * 50


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running polyrecon health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        from .radix import decode

        if decode("213", 4) == 39 and decode("111", 2) == 7:
            print("[OK] Radix decoding works")
            checks_passed += 1
        else:
            print("[FAIL] Radix decoding returned unexpected values")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Radix decoding check failed: {e}")
        checks_failed += 1

    try:
        from .interpolation import fit_newton, fit_vandermonde

        points = [(1, 4), (2, 7), (3, 12)]
        coefficients = fit_vandermonde(points).coefficients
        value = fit_newton(points).value
        if abs(coefficients[0] - 3) < 1e-9 and abs(value - 3) < 1e-9:
            print("[OK] Interpolation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Interpolation check failed: {coefficients}, {value}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Interpolation check failed: {e}")
        checks_failed += 1

    try:
        import numpy as np

        from .interpolation import fit_vandermonde

        xs = [-2, 1, 3, 5]
        ys = [int(np.polyval([2, 0, -1, 7], x)) for x in xs]
        expected = np.linalg.solve(np.vander(xs, increasing=True), ys)
        actual = fit_vandermonde(list(zip(xs, ys))).coefficients
        if np.allclose(actual, expected):
            print(f"[OK] Solver agrees with NumPy {np.__version__}")
            checks_passed += 1
        else:
            print(f"[FAIL] Solver disagrees with NumPy: {actual} vs {expected}")
            checks_failed += 1
    except ImportError:
        print("[SKIP] NumPy not installed, cross-check skipped")
    except Exception as e:
        print(f"[FAIL] NumPy cross-check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Health check: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def print_result_pretty(
    res: ReconstructionResult,
    roots: list[RootSpec] | None = None,
    output_format: str = "human",
) -> None:
    """Print result in specified format.

    Args:
        res: Reconstruction result
        roots: Encoded roots the points were decoded from (for the decoding section)
        output_format: "json" for JSON output, "human" for human-readable
    """
    from . import config as _config

    precision = _config.OUTPUT_PRECISION
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return

    if res.points and roots:
        print("\nDecoding roots:")
        by_x = {p.x: p.y for p in res.points}
        for root in sorted(roots, key=lambda r: r.x):
            print(
                f'x={root.x}, base={root.base}, value="{root.value}" -> y={by_x.get(root.x)}'
            )

    if not res.ok:
        print(f"Error: {res.error}")
        return

    print("\nUsing points: " + " ".join(f"({p.x},{p.y})" for p in res.selected))

    print("\n=== Vandermonde Matrix Method ===")
    print("Building system: [1 x x^2 ... x^(n-1)] * [a0 a1 a2 ... a(n-1)] = [y]")
    for i, row in enumerate(res.vandermonde.matrix):
        print(f"Row {i}: {format_row(row, precision)}")
    print("\nPolynomial coefficients:")
    for i, coefficient in enumerate(res.vandermonde.coefficients):
        print(f"a{i} = {format_number(coefficient, precision)}")

    print("\n=== Newton's Divided Differences Method ===")
    print("Divided Differences Table:")
    for line in format_table(res.newton.table, precision=_config.TABLE_PRECISION):
        print(line)
    terms = newton_terms(res.newton.table, [p.x for p in res.selected], res.newton.target_x)
    print(f"\nNewton form evaluation at x={format_number(res.newton.target_x, precision)}:")
    print(f"f({format_number(res.newton.target_x, precision)}) = "
          f"{format_newton_expansion(terms, res.newton.value, precision)}")

    print("\n=== Polynomial Verification ===")
    print(f"Polynomial: f(x) = {format_polynomial(res.vandermonde.coefficients, precision)}")
    print("\nVerifying points:")
    for record in res.verification:
        print(
            f"f({record.x}) = {format_number(record.computed, precision)}, "
            f"expected = {record.expected}, match = {'YES' if record.matched else 'NO'}"
        )

    print("\n" + SEPARATOR)
    print("RESULTS COMPARISON:")
    print(SEPARATOR)
    print(f"Vandermonde Matrix Method: {format_number(res.vandermonde.constant, precision)}")
    print(f"Newton's Method: {format_number(res.newton.value, precision)}")
    if res.constants_agree is not None:
        print(f"Methods agree: {'YES' if res.constants_agree else 'NO'}")
    print(f"Rounded constant: {res.rounded_constant}")


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the polyrecon CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="polyrecon",
        description="Recover a polynomial from radix-encoded samples and cross-check it.",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        help="JSON dataset file (default: built-in sample)",
    )
    parser.add_argument(
        "-k", type=int, help="Number of points used for the fit (overrides the dataset)"
    )
    parser.add_argument(
        "--target-x",
        type=float,
        help="Point at which the Newton form is evaluated (default: 0)",
    )
    parser.add_argument(
        "--strict-digits",
        action="store_true",
        help="Reject invalid digits instead of skipping them",
    )
    parser.add_argument(
        "--tolerance", type=float, help="Absolute verification tolerance (default: 1e-9)"
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    from . import config as _config

    if args.precision and args.precision > 0:
        _config.OUTPUT_PRECISION = int(args.precision)
    if args.strict_digits:
        _config.STRICT_DIGITS = True
    if args.tolerance is not None and args.tolerance > 0:
        _config.VERIFY_TOLERANCE = float(args.tolerance)
    if args.target_x is not None:
        _config.DEFAULT_TARGET_X = float(args.target_x)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    from .api import reconstruct
    from .dataset import SAMPLE_K, SAMPLE_ROOTS, load_roots
    from .types import ValidationError

    if args.input:
        try:
            roots, k = load_roots(args.input)
        except ValidationError as e:
            logger.error("Failed to load dataset: %s", e)
            if args.format == "json":
                print(json.dumps({"ok": False, "error": e.message, "error_code": e.code}))
            else:
                print(f"Error: {e.message}")
            return 1
    else:
        roots, k = list(SAMPLE_ROOTS), SAMPLE_K
    if args.k is not None:
        k = args.k

    if args.format == "human":
        print("Recovering polynomial constant term")
        print("=" * 35)

    res = reconstruct(
        roots,
        k,
        target_x=_config.DEFAULT_TARGET_X,
        strict=_config.STRICT_DIGITS,
        tolerance=_config.VERIFY_TOLERANCE,
    )
    print_result_pretty(res, roots=list(roots), output_format=args.format)
    return 0 if res.ok else 1


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m polyrecon_pkg.cli"""
    sys.exit(main_entry())
