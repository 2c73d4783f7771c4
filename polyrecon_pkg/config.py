"""Centralized configuration for polyrecon.

This module defines:
- Numeric tolerances for pivoting and verification
- Radix limits for digit-string decoding
- Output precision for human-readable reports
- The default evaluation point for Newton interpolation

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with POLYRECON_)
"""

import os
import string

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("polyrecon")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Radix limits
MIN_BASE = 2
MAX_BASE = 36
DIGIT_ALPHABET = string.digits + string.ascii_uppercase  # value = index

# Decoding policy
STRICT_DIGITS = os.getenv("POLYRECON_STRICT_DIGITS", "false").lower() == "true"

# Numeric tolerances
VERIFY_TOLERANCE = float(
    os.getenv("POLYRECON_VERIFY_TOLERANCE", "1e-9")
)  # absolute, per verified point
PIVOT_EPSILON = float(
    os.getenv("POLYRECON_PIVOT_EPSILON", "1e-12")
)  # relative to the largest coefficient in the system
CONSTANT_AGREEMENT_TOLERANCE = float(
    os.getenv("POLYRECON_CONSTANT_AGREEMENT_TOLERANCE", "1e-6")
)  # relative, Vandermonde constant vs Newton value

# Interpolation
DEFAULT_TARGET_X = float(os.getenv("POLYRECON_DEFAULT_TARGET_X", "0"))

# Output
OUTPUT_PRECISION = int(os.getenv("POLYRECON_OUTPUT_PRECISION", "6"))
TABLE_PRECISION = int(os.getenv("POLYRECON_TABLE_PRECISION", "2"))
TABLE_CELL_WIDTH = 10
