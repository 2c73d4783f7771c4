"""Encoded sample datasets: the built-in sample, JSON loading, decoding and selection.

A dataset maps each x-coordinate to a (base, digit string) pair. The JSON
form is::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

``n`` is the number of encoded roots and ``k`` how many of them (the
lowest x-coordinates first) determine the polynomial of degree k-1.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .logging_config import get_logger
from .radix import decode
from .types import Point, RootSpec, ValidationError

logger = get_logger("dataset")

SAMPLE_ROOTS: tuple[RootSpec, ...] = (
    RootSpec(x=1, base=10, value="4"),
    RootSpec(x=2, base=2, value="111"),
    RootSpec(x=3, base=10, value="12"),
    RootSpec(x=6, base=4, value="213"),
)
SAMPLE_K = 3


def _parse_int(raw: Any, what: str) -> int:
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid {what}: {raw!r}", code="INVALID_INPUT")
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {what}: {raw!r}", code="INVALID_INPUT") from None


def parse_roots(data: Mapping[str, Any]) -> tuple[list[RootSpec], int]:
    """Parse a decoded JSON document into root specs and the selection size k.

    Args:
        data: Mapping with a "keys" entry ({"n": ..., "k": ...}) and one entry
            per x-coordinate ({"base": ..., "value": ...})

    Returns:
        Tuple (roots ordered by x, k)

    Raises:
        ValidationError: If the document is malformed or n disagrees with the entries
    """
    if not isinstance(data, Mapping):
        raise ValidationError("Dataset must be a JSON object", code="INVALID_INPUT")
    keys = data.get("keys")
    if not isinstance(keys, Mapping) or "k" not in keys:
        raise ValidationError(
            "Dataset must contain a 'keys' object with 'k'", code="INVALID_INPUT"
        )
    k = _parse_int(keys["k"], "k")

    roots = []
    for name, entry in data.items():
        if name == "keys":
            continue
        x = _parse_int(name, "x-coordinate")
        if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
            raise ValidationError(
                f"Entry {name!r} must be an object with 'base' and 'value'",
                code="INVALID_INPUT",
            )
        value = entry["value"]
        if not isinstance(value, str):
            value = str(value)
        roots.append(RootSpec(x=x, base=_parse_int(entry["base"], "base"), value=value))

    if "n" in keys:
        n = _parse_int(keys["n"], "n")
        if n != len(roots):
            raise ValidationError(
                f"Dataset declares n={n} but contains {len(roots)} roots",
                code="INVALID_INPUT",
            )

    roots.sort(key=lambda root: root.x)
    return roots, k


def load_roots(path: str | Path) -> tuple[list[RootSpec], int]:
    """Read a JSON dataset file. See ``parse_roots`` for the format."""
    path = Path(path)
    logger.debug("Loading dataset from %s", path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as e:
        raise ValidationError(f"Cannot read dataset {path}: {e}", code="INVALID_INPUT") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}", code="INVALID_INPUT") from e
    return parse_roots(data)


def decode_roots(roots: Iterable[RootSpec], strict: bool | None = None) -> list[Point]:
    """Decode each root's digit string into a Point, ordered by x-coordinate."""
    points = []
    for root in sorted(roots, key=lambda r: r.x):
        y = decode(root.value, root.base, strict=strict)
        logger.debug("x=%s, base=%s, value=%r -> y=%s", root.x, root.base, root.value, y)
        points.append(Point(x=root.x, y=y))
    return points


def select_points(points: list[Point], k: int) -> list[Point]:
    """Return the first k points.

    Raises:
        ValidationError: If k is not in [1, len(points)]
    """
    if isinstance(k, bool) or not isinstance(k, int) or not 1 <= k <= len(points):
        raise ValidationError(
            f"k must be between 1 and {len(points)}, got {k!r}", code="INVALID_SELECTION"
        )
    return list(points[:k])
