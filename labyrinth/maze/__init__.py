"""Public maze package interface."""

from .config import (
    MIN_DIMENSION,
    SAMPLING_FILTERED,
    SAMPLING_POLICIES,
    SAMPLING_RETRY,
    MazeConfig,
    clamp_dimension,
)  # noqa: F401
from .connectivity import analyze  # noqa: F401
from .directions import DIRECTIONS, DOWN, LEFT, RIGHT, UP  # noqa: F401
from .grid import Grid, GridContractError  # noqa: F401
from .parsing import parse_dimension, parse_regenerate_request  # noqa: F401
from .pipeline import Maze, generate  # noqa: F401
from .render import render_ascii  # noqa: F401
from .result import MazeResult  # noqa: F401

__all__ = [
    "Maze",
    "MazeConfig",
    "MazeResult",
    "Grid",
    "GridContractError",
    "generate",
    "analyze",
    "render_ascii",
    "parse_dimension",
    "parse_regenerate_request",
    "clamp_dimension",
    "MIN_DIMENSION",
    "SAMPLING_RETRY",
    "SAMPLING_FILTERED",
    "SAMPLING_POLICIES",
    "DIRECTIONS",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
]
