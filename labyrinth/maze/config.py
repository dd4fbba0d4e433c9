from dataclasses import dataclass
from typing import Optional

MIN_DIMENSION = 2

SAMPLING_RETRY = "retry"
SAMPLING_FILTERED = "filtered"
SAMPLING_POLICIES = (SAMPLING_RETRY, SAMPLING_FILTERED)


def clamp_dimension(value: int) -> int:
    """Clamp a requested row/column count to the minimum maze size."""
    return value if value >= MIN_DIMENSION else MIN_DIMENSION


@dataclass
class MazeConfig:
    rows: int = MIN_DIMENSION
    columns: int = MIN_DIMENSION
    seed: Optional[int] = None
    sampling: str = SAMPLING_RETRY
    enable_metrics: bool = True

    def __post_init__(self):
        self.rows = clamp_dimension(self.rows)
        self.columns = clamp_dimension(self.columns)
        if self.sampling not in SAMPLING_POLICIES:
            raise ValueError(f"unknown sampling policy {self.sampling!r}")


__all__ = [
    "MazeConfig",
    "MIN_DIMENSION",
    "SAMPLING_RETRY",
    "SAMPLING_FILTERED",
    "SAMPLING_POLICIES",
    "clamp_dimension",
]
