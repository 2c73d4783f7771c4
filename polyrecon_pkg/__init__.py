"""polyrecon package: radix decoding, polynomial interpolation, verification and CLI."""

__all__ = [
    "config",
    "types",
    "radix",
    "linalg",
    "interpolation",
    "verifier",
    "dataset",
    "formatting",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "decode",
    "fit_vandermonde",
    "fit_newton",
    "verify",
    "reconstruct",
]
