"""Plain-text view of a MazeResult for terminals and the text route."""
from __future__ import annotations

from typing import List

from .directions import DOWN, LEFT, RIGHT, UP
from .result import MazeResult

CORNER = "+"
H_WALL = "---"
H_OPEN = "   "
V_WALL = "|"
V_OPEN = " "
FLOOR = "   "


def render_ascii(result: MazeResult) -> str:
    """Draw the maze with two text lines per row plus a closing bottom line."""
    lines: List[str] = []
    for r in range(result.rows):
        top = [CORNER]
        mid = [V_OPEN if result.is_open(r, 0, LEFT) else V_WALL]
        for c in range(result.columns):
            top.append(H_OPEN if result.is_open(r, c, UP) else H_WALL)
            top.append(CORNER)
            mid.append(FLOOR)
            mid.append(V_OPEN if result.is_open(r, c, RIGHT) else V_WALL)
        lines.append("".join(top))
        lines.append("".join(mid))
    last = result.rows - 1
    bottom = [CORNER]
    for c in range(result.columns):
        bottom.append(H_OPEN if result.is_open(last, c, DOWN) else H_WALL)
        bottom.append(CORNER)
    lines.append("".join(bottom))
    return "\n".join(lines)


__all__ = ["render_ascii"]
