"""Best-effort parsing of user supplied maze dimensions.

Raw width/height text comes straight from a UI text box. A value that does not
parse keeps the previous one instead of failing the regeneration. Values must
fit a signed 32-bit integer, like the text boxes they come from.
"""
from __future__ import annotations

import re
from typing import Any, Tuple

from .config import MIN_DIMENSION, clamp_dimension

_INT_RE = re.compile(r'^\s*[+-]?[0-9]+\s*$')

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

DEFAULT_DIMENSIONS = (MIN_DIMENSION, MIN_DIMENSION)


def parse_dimension(text: Any, fallback: int) -> int:
    """Return `text` as an int, or `fallback` when it is not a plain 32-bit decimal integer."""
    if isinstance(text, bool):
        return fallback
    if isinstance(text, int):
        value = text
    elif isinstance(text, str) and _INT_RE.match(text):
        try:
            value = int(text)
        except ValueError:
            # more digits than int() converts
            return fallback
    else:
        return fallback
    if not INT32_MIN <= value <= INT32_MAX:
        return fallback
    return value


def parse_regenerate_request(width_text: Any, height_text: Any,
                             previous: Tuple[int, int] = DEFAULT_DIMENSIONS) -> Tuple[int, int]:
    """Resolve (rows, columns) for a regeneration request.

    Height maps to rows and width to columns. Each axis falls back to its own
    previous value, then both are clamped to the minimum size.
    """
    prev_rows, prev_columns = previous
    rows = parse_dimension(height_text, prev_rows)
    columns = parse_dimension(width_text, prev_columns)
    return clamp_dimension(rows), clamp_dimension(columns)


__all__ = ["parse_dimension", "parse_regenerate_request", "DEFAULT_DIMENSIONS", "INT32_MIN", "INT32_MAX"]
