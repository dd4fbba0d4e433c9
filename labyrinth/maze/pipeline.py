"""Pipeline orchestration for maze generation.

Provides the public Maze class and the `generate` entry point used by the web
layer and CLI. Each call builds a brand-new grid and generator state, so
regeneration never reuses anything from a previous run.
"""
from __future__ import annotations

import os
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from flask import current_app, has_app_context

from ..logging_utils import get_logger
from .config import MazeConfig, SAMPLING_POLICIES, SAMPLING_RETRY
from .generator import HuntAndKill
from .grid import Grid
from .metrics import init_metrics
from .result import MazeResult

log = get_logger("maze")

_FALSEY = {'0', 'false', 'no', 'off', ''}


def configured_sampling(cfg=None) -> str:
    """Sampling policy from Flask config, then env, then default.

    An unknown configured value logs a warning and falls back to the default;
    only an explicit `sampling` argument is rejected outright.
    """
    cfg = cfg if cfg is not None else {}
    value = cfg.get('MAZE_SAMPLING') or os.environ.get('MAZE_SAMPLING') or SAMPLING_RETRY
    if value not in SAMPLING_POLICIES:
        log.warn(event="invalid_sampling_setting", value=value, fallback=SAMPLING_RETRY)
        return SAMPLING_RETRY
    return value


@dataclass
class Maze:
    rows: int = 2
    columns: int = 2
    seed: Optional[int] = None
    sampling: Optional[str] = None
    enable_metrics: Optional[bool] = None
    rng: Optional[random.Random] = field(default=None, repr=False)

    def __post_init__(self):
        # 0 is a valid deterministic seed; None => random (unless an rng was injected)
        if self.seed is None and self.rng is None:
            self.seed = random.randint(1, 1_000_000)
        self._apply_overrides()
        self.config = MazeConfig(
            rows=self.rows,
            columns=self.columns,
            seed=self.seed,
            sampling=self.sampling,
            enable_metrics=self.enable_metrics,
        )
        self.rows, self.columns = self.config.rows, self.config.columns
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self._run_pipeline()

    def _apply_overrides(self):
        """Fill unset options from Flask config (inside an app context), then env, then defaults."""
        cfg = current_app.config if has_app_context() else {}
        if self.sampling is None:
            self.sampling = configured_sampling(cfg)
        if self.enable_metrics is None:
            if 'MAZE_ENABLE_GENERATION_METRICS' in cfg:
                self.enable_metrics = bool(cfg['MAZE_ENABLE_GENERATION_METRICS'])
            elif 'MAZE_ENABLE_GENERATION_METRICS' in os.environ:
                self.enable_metrics = os.environ['MAZE_ENABLE_GENERATION_METRICS'].lower() not in _FALSEY
            else:
                self.enable_metrics = True

    def _run_pipeline(self):
        """Run the generation phases, recording per-phase timings when metrics are on."""
        phase_times = {}

        def _phase(label, fn, *a, **k):
            if not self.enable_metrics:
                return fn(*a, **k)
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = round((time.perf_counter() - ps) * 1000, 3)
            return r

        start = time.perf_counter()
        rng = self.rng if self.rng is not None else random.Random(self.seed)
        self.grid = _phase('create_grid', Grid.create, self.rows, self.columns)
        gen = HuntAndKill(self.grid, rng, sampling=self.config.sampling, metrics=self.metrics)
        outputs = _phase('carve', gen.run)
        self.state = outputs.state
        if self.enable_metrics:
            self.metrics['runtime_ms'] = round((time.perf_counter() - start) * 1000, 3)
            self.metrics['phase_ms'] = phase_times
        log.debug(event="maze_generated", rows=self.rows, columns=self.columns, seed=self.seed,
                  sampling=self.config.sampling, runtime_ms=self.metrics.get('runtime_ms'))

    @property
    def result(self) -> MazeResult:
        return MazeResult(
            rows=self.rows,
            columns=self.columns,
            walls=self.grid.wall_flags(),
            seed=self.seed,
            sampling=self.config.sampling,
            metrics=dict(self.metrics),
        )


def generate(rows: int, columns: int, seed: Optional[int] = None, sampling: Optional[str] = None,
             rng: Optional[random.Random] = None) -> MazeResult:
    """Generate a perfect maze of at least 2x2 cells and return its wall flags."""
    return Maze(rows=rows, columns=columns, seed=seed, sampling=sampling, rng=rng).result
