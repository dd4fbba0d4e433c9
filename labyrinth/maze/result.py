from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .cells import Position, WallFlags
from .directions import DIRECTIONS


@dataclass(frozen=True)
class MazeResult:
    """Final wall configuration handed to renderers.

    `walls[row][column][direction]` is True when that wall is open.
    """
    rows: int
    columns: int
    walls: List[List[WallFlags]]
    seed: Optional[int] = None
    sampling: str = "retry"
    metrics: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def entrance(self) -> Position:
        return (0, 0)

    @property
    def exit(self) -> Position:
        return (self.rows - 1, self.columns - 1)

    def cell(self, row: int, column: int) -> WallFlags:
        return self.walls[row][column]

    def is_open(self, row: int, column: int, direction: str) -> bool:
        return self.walls[row][column][direction]

    def open_directions(self, row: int, column: int) -> List[str]:
        flags = self.walls[row][column]
        return [d for d in DIRECTIONS if flags[d]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": self.rows,
            "columns": self.columns,
            "seed": self.seed,
            "sampling": self.sampling,
            "entrance": list(self.entrance),
            "exit": list(self.exit),
            "cells": [[dict(flags) for flags in row] for row in self.walls],
            "metrics": dict(self.metrics),
        }
