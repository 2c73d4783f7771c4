"""Type definitions, result dataclasses and error classes for polyrecon."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(frozen=True)
class Point:
    """One known sample (x, y) of the hidden polynomial."""

    x: int
    y: int


@dataclass(frozen=True)
class RootSpec:
    """An encoded sample: the y value is still a digit string in some base."""

    x: int
    base: int
    value: str


@dataclass
class VandermondeFit:
    """Coefficients recovered from the Vandermonde system.

    ``matrix`` is the augmented system [A | b] exactly as built, before
    elimination. ``coefficients[i]`` is the coefficient of x**i.
    """

    coefficients: list[float]
    matrix: list[list[float]]

    @property
    def constant(self) -> float:
        return self.coefficients[0]

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def to_dict(self) -> dict[str, Any]:
        return {"coefficients": self.coefficients, "matrix": self.matrix}


@dataclass
class NewtonFit:
    """Value of the Newton interpolating polynomial at ``target_x``."""

    value: float
    table: list[list[float]]
    target_x: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "table": self.table, "target_x": self.target_x}


@dataclass(frozen=True)
class VerificationRecord:
    x: int
    expected: int
    computed: float
    matched: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "expected": self.expected,
            "computed": self.computed,
            "matched": self.matched,
        }


@dataclass
class VerificationReport:
    """Per-point agreement between a coefficient vector and known samples."""

    records: list[VerificationRecord] = field(default_factory=list)
    tolerance: float = 1e-9

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[VerificationRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> VerificationRecord:
        return self.records[index]

    @property
    def all_matched(self) -> bool:
        return all(record.matched for record in self.records)

    @property
    def mismatches(self) -> list[VerificationRecord]:
        return [record for record in self.records if not record.matched]

    def to_dict(self) -> dict[str, Any]:
        return {
            "tolerance": self.tolerance,
            "all_matched": self.all_matched,
            "records": [record.to_dict() for record in self.records],
        }


@dataclass
class ReconstructionResult:
    """Result of the full decode / fit / verify pipeline."""

    ok: bool
    error: str | None = None
    error_code: str | None = None
    points: list[Point] | None = None
    selected: list[Point] | None = None
    vandermonde: VandermondeFit | None = None
    newton: NewtonFit | None = None
    verification: VerificationReport | None = None
    constants_agree: bool | None = None
    rounded_constant: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        if self.points is not None:
            result_dict["points"] = [[p.x, p.y] for p in self.points]
        if self.selected is not None:
            result_dict["selected"] = [[p.x, p.y] for p in self.selected]
        if self.vandermonde is not None:
            result_dict["vandermonde"] = self.vandermonde.to_dict()
        if self.newton is not None:
            result_dict["newton"] = self.newton.to_dict()
        if self.verification is not None:
            result_dict["verification"] = self.verification.to_dict()
        if self.constants_agree is not None:
            result_dict["constants_agree"] = self.constants_agree
        if self.rounded_constant is not None:
            result_dict["rounded_constant"] = self.rounded_constant
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return (
                f"ReconstructionResult(ok=False, error_code={self.error_code!r}, "
                f"error={self.error!r})"
            )
        parts = [f"ok={self.ok}"]
        if self.rounded_constant is not None:
            parts.append(f"rounded_constant={self.rounded_constant!r}")
        if self.constants_agree is not None:
            parts.append(f"constants_agree={self.constants_agree!r}")
        if self.verification is not None:
            parts.append(f"all_matched={self.verification.all_matched!r}")
        return f"ReconstructionResult({', '.join(parts)})"


class PolyreconError(Exception):
    """Base class for all recoverable polyrecon failures."""

    def __init__(self, message: str, code: str = "POLYRECON_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(PolyreconError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code)


class InvalidDigitError(ValidationError):
    """Raised in strict mode when a character is not a digit of the base."""

    def __init__(self, message: str, char: str = "", position: int = -1):
        self.char = char
        self.position = position
        super().__init__(message, code="INVALID_DIGIT")


class SingularMatrixError(PolyreconError):
    """Raised on a (near-)zero pivot or a zero divided-difference denominator."""

    def __init__(self, message: str, location: tuple[int, ...] | None = None):
        self.location = location
        super().__init__(message, code="SINGULAR_MATRIX")


class DimensionMismatchError(PolyreconError):
    """Raised when the shape of the inputs does not fit the requested operation."""

    def __init__(self, message: str):
        super().__init__(message, code="DIMENSION_MISMATCH")
