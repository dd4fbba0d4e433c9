from typing import Dict, List, Tuple

from .directions import DIRECTIONS


class MazeCell:
    """Lightweight container for a maze grid cell.

    Walls are stored as open flags: False means the wall is standing.
    """
    __slots__ = ("row", "column", "visited", "walls")

    def __init__(self, row: int, column: int):
        self.row = row
        self.column = column
        self.visited = False
        self.walls: Dict[str, bool] = {d: False for d in DIRECTIONS}

    def to_dict(self):
        return dict(self.walls)

    def __repr__(self):
        opened = ",".join(d for d in DIRECTIONS if self.walls[d]) or "-"
        return f"MazeCell({self.row},{self.column} visited={self.visited} open={opened})"


CellGrid = List[List[MazeCell]]
Position = Tuple[int, int]
WallFlags = Dict[str, bool]
