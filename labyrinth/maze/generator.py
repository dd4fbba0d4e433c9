"""Hunt-and-kill carving: kill (random walk) and hunt (row-major scan) phases."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional

from .config import SAMPLING_FILTERED, SAMPLING_RETRY
from .directions import direction_from_index
from .grid import Grid

KILLING = "killing"
HUNTING = "hunting"
DONE = "done"


@dataclass
class GeneratorState:
    """Per-run cursor and phase. A fresh instance is created for every run."""
    row: int = 0
    column: int = 0
    phase: str = KILLING
    complete: bool = False


class GenerationOutputs(NamedTuple):
    grid: Grid
    state: GeneratorState


class HuntAndKill:
    def __init__(self, grid: Grid, rng: random.Random, sampling: str = SAMPLING_RETRY,
                 metrics: Optional[Dict] = None):
        self.grid = grid
        self.rng = rng
        self.sampling = sampling
        self.metrics = metrics if metrics is not None else {}

    def _count(self, key: str, n: int = 1):
        if key in self.metrics:
            self.metrics[key] += n

    def _draw(self, row: int, col: int, want_visited: bool) -> Optional[str]:
        """Draw one direction; None means the draw was rejected and must be repeated.

        `retry` samples over all four directions (0..3 -> up, down, left, right) and
        rejects draws whose neighbor is missing or in the wrong visited state.
        `filtered` samples only among directions that are already valid.
        """
        self._count('random_draws')
        if self.sampling == SAMPLING_FILTERED:
            if want_visited:
                options = self.grid.visited_directions(row, col)
            else:
                options = self.grid.unvisited_directions(row, col)
            return self.rng.choice(options)
        direction = direction_from_index(self.rng.randrange(4))
        if self.grid.neighbor_exists(row, col, direction):
            nr, nc = self.grid.neighbor_position(row, col, direction)
            if self.grid.is_visited(nr, nc) == want_visited:
                return direction
        self._count('rejected_draws')
        return None

    def kill(self, state: GeneratorState) -> None:
        state.phase = KILLING
        self._count('kill_phases')
        grid = self.grid
        while grid.has_unvisited_neighbor(state.row, state.column):
            direction = self._draw(state.row, state.column, want_visited=False)
            if direction is None:
                continue
            nr, nc = grid.open_wall(state.row, state.column, direction)
            grid.mark_visited(nr, nc)
            state.row, state.column = nr, nc
            self._count('kill_steps')
            self._count('walls_opened')

    def hunt(self, state: GeneratorState) -> None:
        state.phase = HUNTING
        self._count('hunt_scans')
        grid = self.grid
        for r, c in grid.iter_positions():
            if grid.is_visited(r, c) or not grid.has_visited_neighbor(r, c):
                continue
            grid.mark_visited(r, c)
            # At least one visited neighbor exists, so this terminates.
            direction = None
            while direction is None:
                direction = self._draw(r, c, want_visited=True)
            grid.open_wall(r, c, direction)
            state.row, state.column = r, c
            self._count('hunt_hits')
            self._count('walls_opened')
            return
        state.phase = DONE
        state.complete = True

    def run(self) -> GenerationOutputs:
        state = GeneratorState()
        self.grid.mark_visited(state.row, state.column)
        self._count('cells', self.grid.rows * self.grid.columns)
        while not state.complete:
            self.kill(state)
            self.hunt(state)
        return GenerationOutputs(self.grid, state)


__all__ = ["HuntAndKill", "GeneratorState", "GenerationOutputs", "KILLING", "HUNTING", "DONE"]
