"""Radix decoding of digit strings in bases 2 through 36.

Digits are '0'-'9' followed by 'A'-'Z' (case-insensitive), giving values
0-35. Decoding is lenient by default: a character that is not in the
alphabet, or whose value is not below the base, is skipped entirely and
does not take up a positional slot. ``decode("1x1", 2)`` is therefore 3,
the same as ``decode("11", 2)``.
"""

from __future__ import annotations

from . import config
from .config import DIGIT_ALPHABET, MAX_BASE, MIN_BASE
from .types import InvalidDigitError, ValidationError

_DIGIT_VALUES: dict[str, int] = {}
for _value, _char in enumerate(DIGIT_ALPHABET):
    _DIGIT_VALUES[_char] = _value
    _DIGIT_VALUES[_char.lower()] = _value


def digit_value(char: str) -> int | None:
    """Return the value of a single digit character, or None if it is not a digit."""
    return _DIGIT_VALUES.get(char)


def validate_base(base: int) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise ValidationError(f"Base must be an integer, got {base!r}", code="INVALID_BASE")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValidationError(
            f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}",
            code="INVALID_BASE",
        )
    return base


def decode(digits: str, base: int, strict: bool | None = None) -> int:
    """Convert a big-endian digit string in ``base`` to its integer value.

    Args:
        digits: Digit string, most significant digit first (e.g., "1A3F")
        base: Radix in [2, 36]
        strict: If True, raise InvalidDigitError instead of skipping characters
            that are not valid digits for the base (default: config.STRICT_DIGITS)

    Returns:
        Non-negative integer value

    Raises:
        ValidationError: If the base is outside [2, 36]
        InvalidDigitError: In strict mode, on an invalid character or empty input

    Example:
        >>> decode("213", 4)
        39
        >>> decode("1x1", 2)
        3
    """
    validate_base(base)
    if strict is None:
        strict = config.STRICT_DIGITS
    if not isinstance(digits, str):
        raise ValidationError(f"Digits must be a string, got {digits!r}", code="INVALID_INPUT")
    if strict and not digits:
        raise InvalidDigitError("Empty digit string")

    result = 0
    power = 1
    # Scan from the least significant end; skipped characters leave power untouched
    for position in range(len(digits) - 1, -1, -1):
        char = digits[position]
        value = _DIGIT_VALUES.get(char)
        if value is None or value >= base:
            if strict:
                raise InvalidDigitError(
                    f"Invalid digit {char!r} at position {position} for base {base}",
                    char=char,
                    position=position,
                )
            continue
        result += value * power
        power *= base
    return result
