"""Grid model: cell storage, wall flags and neighbor/visitation queries.

The grid is rebuilt for every generation run. Entrance (left wall of the top
left cell) and exit (right wall of the bottom right cell) are opened right
after allocation, before any carving happens.
"""
from __future__ import annotations

from typing import Iterator, List

from .cells import CellGrid, MazeCell, Position, WallFlags
from .config import clamp_dimension
from .directions import DIRECTIONS, LEFT, OFFSETS, OPPOSITE, RIGHT


class GridContractError(AssertionError):
    """Raised when a caller breaks a grid precondition (e.g. opening a wall into the void)."""


class Grid:
    __slots__ = ("rows", "columns", "cells")

    def __init__(self, rows: int, columns: int):
        self.rows = clamp_dimension(rows)
        self.columns = clamp_dimension(columns)
        self.cells: CellGrid = [[MazeCell(r, c) for c in range(self.columns)] for r in range(self.rows)]
        self.cells[0][0].walls[LEFT] = True
        self.cells[self.rows - 1][self.columns - 1].walls[RIGHT] = True

    @classmethod
    def create(cls, rows: int, columns: int) -> "Grid":
        return cls(rows, columns)

    @property
    def entrance(self) -> Position:
        return (0, 0)

    @property
    def exit(self) -> Position:
        return (self.rows - 1, self.columns - 1)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def cell(self, row: int, col: int) -> MazeCell:
        if not self.in_bounds(row, col):
            raise GridContractError(f"cell ({row},{col}) outside {self.rows}x{self.columns} grid")
        return self.cells[row][col]

    def neighbor_position(self, row: int, col: int, direction: str) -> Position:
        dr, dc = OFFSETS[direction]
        return row + dr, col + dc

    def neighbor_exists(self, row: int, col: int, direction: str) -> bool:
        nr, nc = self.neighbor_position(row, col, direction)
        return self.in_bounds(nr, nc)

    def is_visited(self, row: int, col: int) -> bool:
        return self.cell(row, col).visited

    def mark_visited(self, row: int, col: int) -> None:
        self.cell(row, col).visited = True

    def is_open(self, row: int, col: int, direction: str) -> bool:
        return self.cell(row, col).walls[direction]

    def open_wall(self, row: int, col: int, direction: str) -> Position:
        """Open the wall facing `direction` and its mirror on the neighbor.

        Returns the neighbor position. Opening from a cell outside the grid or
        toward a missing neighbor is a contract violation; callers check
        `neighbor_exists` first.
        """
        origin = self.cell(row, col)
        if not self.neighbor_exists(row, col, direction):
            raise GridContractError(f"no neighbor {direction} of ({row},{col})")
        nr, nc = self.neighbor_position(row, col, direction)
        origin.walls[direction] = True
        self.cells[nr][nc].walls[OPPOSITE[direction]] = True
        return nr, nc

    def _neighbor_visited(self, row: int, col: int, direction: str) -> bool:
        nr, nc = self.neighbor_position(row, col, direction)
        return self.cells[nr][nc].visited

    def has_unvisited_neighbor(self, row: int, col: int) -> bool:
        for d in DIRECTIONS:
            if self.neighbor_exists(row, col, d) and not self._neighbor_visited(row, col, d):
                return True
        return False

    def has_visited_neighbor(self, row: int, col: int) -> bool:
        for d in DIRECTIONS:
            if self.neighbor_exists(row, col, d) and self._neighbor_visited(row, col, d):
                return True
        return False

    def unvisited_directions(self, row: int, col: int) -> List[str]:
        return [d for d in DIRECTIONS if self.neighbor_exists(row, col, d) and not self._neighbor_visited(row, col, d)]

    def visited_directions(self, row: int, col: int) -> List[str]:
        return [d for d in DIRECTIONS if self.neighbor_exists(row, col, d) and self._neighbor_visited(row, col, d)]

    def iter_positions(self) -> Iterator[Position]:
        for r in range(self.rows):
            for c in range(self.columns):
                yield r, c

    def visited_count(self) -> int:
        return sum(1 for r, c in self.iter_positions() if self.cells[r][c].visited)

    def wall_flags(self) -> List[List[WallFlags]]:
        return [[cell.to_dict() for cell in row] for row in self.cells]


__all__ = ["Grid", "GridContractError"]
