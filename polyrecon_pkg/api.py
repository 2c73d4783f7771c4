"""Public API for polyrecon - returns structured objects without side effects."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .config import CONSTANT_AGREEMENT_TOLERANCE, DEFAULT_TARGET_X, VERIFY_TOLERANCE
from .dataset import decode_roots, select_points
from .interpolation import fit_newton, fit_vandermonde
from .logging_config import get_logger
from .radix import decode
from .types import (
    NewtonFit,
    Point,
    PolyreconError,
    ReconstructionResult,
    RootSpec,
    VandermondeFit,
    VerificationReport,
)
from .verifier import verify

logger = get_logger("api")

__all__ = [
    "decode",
    "fit_vandermonde",
    "fit_newton",
    "verify",
    "reconstruct",
    "reconstruct_points",
    "constants_agree",
    "round_constant",
]


def constants_agree(
    first: float, second: float, tolerance: float = CONSTANT_AGREEMENT_TOLERANCE
) -> bool:
    """True when two estimates of the same value agree to a relative tolerance."""
    return abs(first - second) <= tolerance * max(1.0, abs(first), abs(second))


def round_constant(value: float) -> int | None:
    """Round half away from zero; None for non-finite values."""
    if not math.isfinite(value):
        return None
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def reconstruct_points(
    points: Sequence[Point],
    k: int,
    target_x: float = DEFAULT_TARGET_X,
    tolerance: float = VERIFY_TOLERANCE,
) -> ReconstructionResult:
    """Fit the first k decoded points both ways and verify against all points.

    Args:
        points: Decoded points ordered by x-coordinate
        k: Number of points that determine the polynomial (degree k-1)
        target_x: Where the Newton form is evaluated
        tolerance: Absolute verification tolerance per point

    Returns:
        ReconstructionResult; ok=False with error and error_code on failure
    """
    points = list(points)
    try:
        selected = select_points(points, k)
        logger.debug("Using points: %s", ", ".join(f"({p.x},{p.y})" for p in selected))

        vandermonde: VandermondeFit = fit_vandermonde(selected)
        logger.debug("Vandermonde coefficients: %s", vandermonde.coefficients)

        newton: NewtonFit = fit_newton(selected, target_x=target_x)
        logger.debug("Newton value at x=%s: %s", target_x, newton.value)

        report: VerificationReport = verify(points, vandermonde.coefficients, tolerance)
    except PolyreconError as e:
        logger.info("Reconstruction failed [%s]: %s", e.code, e.message)
        return ReconstructionResult(ok=False, error=e.message, error_code=e.code, points=points)

    for record in report.mismatches:
        logger.warning(
            "Point x=%s does not lie on the recovered polynomial: expected %s, computed %s",
            record.x,
            record.expected,
            record.computed,
        )

    # The Newton value only estimates the constant term when evaluated at 0
    agree = None
    if target_x == 0:
        agree = constants_agree(vandermonde.constant, newton.value)
        if not agree:
            logger.warning(
                "Vandermonde constant %s and Newton value %s disagree",
                vandermonde.constant,
                newton.value,
            )

    return ReconstructionResult(
        ok=True,
        points=points,
        selected=selected,
        vandermonde=vandermonde,
        newton=newton,
        verification=report,
        constants_agree=agree,
        rounded_constant=round_constant(vandermonde.constant),
    )


def reconstruct(
    roots: Iterable[RootSpec],
    k: int,
    target_x: float = DEFAULT_TARGET_X,
    strict: bool | None = None,
    tolerance: float = VERIFY_TOLERANCE,
) -> ReconstructionResult:
    """Decode encoded roots, then run ``reconstruct_points`` on them.

    Example:
        >>> from polyrecon_pkg.dataset import SAMPLE_ROOTS
        >>> reconstruct(SAMPLE_ROOTS, k=3).rounded_constant
        3
    """
    try:
        points = decode_roots(roots, strict=strict)
    except PolyreconError as e:
        logger.info("Decoding failed [%s]: %s", e.code, e.message)
        return ReconstructionResult(ok=False, error=e.message, error_code=e.code)
    return reconstruct_points(points, k, target_x=target_x, tolerance=tolerance)
