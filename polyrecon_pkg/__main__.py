"""Main entry point for running polyrecon_pkg as a module.

This allows running polyrecon with:
    python -m polyrecon_pkg
    python -m polyrecon_pkg --health-check
    python -m polyrecon_pkg --input roots.json --format json

This is equivalent to running:
    python -m polyrecon_pkg.cli
    python polyrecon.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
