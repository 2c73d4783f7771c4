#!/usr/bin/env python3
"""
polyrecon - Polynomial constant-term recovery

Main entry point for the polyrecon application.
This file serves as a thin wrapper that delegates all functionality
to the polyrecon_pkg package.

Usage:
    python polyrecon.py                          # Run the built-in sample
    python polyrecon.py --input roots.json       # Run a JSON dataset
    python polyrecon.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for polyrecon.

    Delegates all functionality to the polyrecon_pkg.cli module,
    which handles argument parsing, reconstruction, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from polyrecon_pkg.cli import main_entry
    except ImportError as e:
        print(f"Error: Failed to import polyrecon_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1
    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
