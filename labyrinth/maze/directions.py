# Direction constants centralized for grid, generator and renderers.
# DIRECTIONS order is canonical: neighbor scans and random draws (0..3) both use it.
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# (row offset, column offset)
OFFSETS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}


def direction_from_index(index: int) -> str:
    return DIRECTIONS[index]


__all__ = ["UP", "DOWN", "LEFT", "RIGHT", "DIRECTIONS", "OFFSETS", "OPPOSITE", "direction_from_index"]
