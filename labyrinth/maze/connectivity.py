"""Structural checks over a generated maze.

Used by the `check` CLI command and the `/api/maze/check` route.
All helpers work on a MazeResult only, never on generator internals.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Set, Tuple

from .cells import Position
from .directions import DOWN, LEFT, OFFSETS, OPPOSITE, RIGHT
from .result import MazeResult


def open_internal_wall_pairs(result: MazeResult) -> int:
    """Count open walls between adjacent cells (each shared edge counted once)."""
    count = 0
    for r in range(result.rows):
        for c in range(result.columns):
            if r + 1 < result.rows and result.is_open(r, c, DOWN):
                count += 1
            if c + 1 < result.columns and result.is_open(r, c, RIGHT):
                count += 1
    return count


def asymmetric_walls(result: MazeResult) -> List[Tuple[int, int, str]]:
    """Return (row, column, direction) for every internal wall whose mirror disagrees."""
    bad = []
    for r in range(result.rows):
        for c in range(result.columns):
            for d, (dr, dc) in OFFSETS.items():
                nr, nc = r + dr, c + dc
                if not (0 <= nr < result.rows and 0 <= nc < result.columns):
                    continue
                if result.is_open(r, c, d) != result.is_open(nr, nc, OPPOSITE[d]):
                    bad.append((r, c, d))
    return bad


def reachable_cells(result: MazeResult, start: Position = (0, 0)) -> Set[Position]:
    """BFS over open internal walls from `start`."""
    q = deque([start])
    vis = {start}
    while q:
        r, c = q.popleft()
        for d in result.open_directions(r, c):
            dr, dc = OFFSETS[d]
            nr, nc = r + dr, c + dc
            if 0 <= nr < result.rows and 0 <= nc < result.columns and (nr, nc) not in vis:
                vis.add((nr, nc))
                q.append((nr, nc))
    return vis


def analyze(result: MazeResult) -> Dict[str, object]:
    cells = result.rows * result.columns
    open_pairs = open_internal_wall_pairs(result)
    reachable = len(reachable_cells(result))
    asymmetric = len(asymmetric_walls(result))
    er, ec = result.entrance
    xr, xc = result.exit
    entrance_open = result.is_open(er, ec, LEFT)
    exit_open = result.is_open(xr, xc, RIGHT)
    ok = (
        open_pairs == cells - 1
        and reachable == cells
        and asymmetric == 0
        and entrance_open
        and exit_open
    )
    return {
        "rows": result.rows,
        "columns": result.columns,
        "seed": result.seed,
        "cells": cells,
        "open_pairs": open_pairs,
        "expected_pairs": cells - 1,
        "reachable": reachable,
        "asymmetric": asymmetric,
        "entrance_open": entrance_open,
        "exit_open": exit_open,
        "ok": ok,
    }


__all__ = ["open_internal_wall_pairs", "asymmetric_walls", "reachable_cells", "analyze"]
