import unittest

import pytest

from labyrinth.maze import DOWN, LEFT, RIGHT, UP, Grid, GridContractError


class TestGridCreation(unittest.TestCase):
    def setUp(self):
        self.g = Grid.create(3, 4)

    def test_dimensions(self):
        self.assertEqual((self.g.rows, self.g.columns), (3, 4))
        self.assertEqual(len(self.g.cells), 3)
        self.assertTrue(all(len(row) == 4 for row in self.g.cells))

    def test_all_unvisited(self):
        self.assertEqual(self.g.visited_count(), 0)

    def test_only_entrance_and_exit_open(self):
        for r, c in self.g.iter_positions():
            for d in (UP, DOWN, LEFT, RIGHT):
                expected = (r, c, d) in {(0, 0, LEFT), (2, 3, RIGHT)}
                self.assertEqual(self.g.is_open(r, c, d), expected, f"{(r, c, d)}")

    def test_entrance_exit_positions(self):
        self.assertEqual(self.g.entrance, (0, 0))
        self.assertEqual(self.g.exit, (2, 3))


@pytest.mark.parametrize(
    "rows,columns,expected",
    [(1, 1, (2, 2)), (0, 5, (2, 5)), (-3, -3, (2, 2)), (5, 1, (5, 2)), (2, 2, (2, 2))],
)
def test_create_clamps_each_axis(rows, columns, expected):
    g = Grid.create(rows, columns)
    assert (g.rows, g.columns) == expected


def test_neighbor_exists_at_boundaries():
    g = Grid.create(2, 3)
    assert not g.neighbor_exists(0, 0, UP)
    assert not g.neighbor_exists(0, 0, LEFT)
    assert g.neighbor_exists(0, 0, DOWN)
    assert g.neighbor_exists(0, 0, RIGHT)
    assert not g.neighbor_exists(1, 2, DOWN)
    assert not g.neighbor_exists(1, 2, RIGHT)
    assert g.neighbor_exists(1, 2, UP)
    assert g.neighbor_exists(1, 2, LEFT)


def test_mark_visited_idempotent():
    g = Grid.create(2, 2)
    assert not g.is_visited(1, 1)
    g.mark_visited(1, 1)
    g.mark_visited(1, 1)
    assert g.is_visited(1, 1)
    assert g.visited_count() == 1


def test_open_wall_is_mirrored():
    g = Grid.create(3, 3)
    assert g.open_wall(1, 1, UP) == (0, 1)
    assert g.is_open(1, 1, UP) and g.is_open(0, 1, DOWN)
    assert g.open_wall(1, 1, RIGHT) == (1, 2)
    assert g.is_open(1, 1, RIGHT) and g.is_open(1, 2, LEFT)
    # untouched walls stay closed
    assert not g.is_open(1, 1, DOWN)
    assert not g.is_open(1, 1, LEFT)


def test_open_wall_toward_void_is_contract_error():
    g = Grid.create(2, 2)
    with pytest.raises(GridContractError):
        g.open_wall(0, 0, UP)
    with pytest.raises(AssertionError):
        g.open_wall(1, 1, DOWN)
    # a failed call leaves the grid untouched
    assert not g.is_open(0, 0, UP)


def test_open_wall_from_outside_grid_is_contract_error():
    g = Grid.create(2, 2)
    before = g.wall_flags()
    with pytest.raises(GridContractError):
        g.open_wall(-1, 0, DOWN)
    with pytest.raises(GridContractError):
        g.open_wall(0, -1, RIGHT)
    with pytest.raises(GridContractError):
        g.open_wall(2, 1, UP)
    assert g.wall_flags() == before
    assert not g.is_open(0, 0, UP)
    assert not g.is_open(1, 0, DOWN)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_visitation_and_wall_accessors_check_bounds(row, col):
    g = Grid.create(2, 2)
    with pytest.raises(GridContractError):
        g.is_visited(row, col)
    with pytest.raises(GridContractError):
        g.mark_visited(row, col)
    with pytest.raises(GridContractError):
        g.is_open(row, col, LEFT)
    assert g.visited_count() == 0


def test_cell_out_of_bounds_is_contract_error():
    g = Grid.create(2, 2)
    with pytest.raises(GridContractError):
        g.cell(2, 0)


def test_neighbor_visitation_queries():
    g = Grid.create(2, 2)
    assert g.has_unvisited_neighbor(0, 0)
    assert not g.has_visited_neighbor(0, 0)
    g.mark_visited(0, 1)
    assert g.has_visited_neighbor(0, 0)
    assert g.visited_directions(0, 0) == [RIGHT]
    assert g.unvisited_directions(0, 0) == [DOWN]
    g.mark_visited(1, 0)
    assert not g.has_unvisited_neighbor(0, 0)


def test_direction_lists_follow_canonical_order():
    g = Grid.create(3, 3)
    assert g.unvisited_directions(1, 1) == [UP, DOWN, LEFT, RIGHT]
    for r, c in g.iter_positions():
        g.mark_visited(r, c)
    assert g.visited_directions(1, 1) == [UP, DOWN, LEFT, RIGHT]


def test_iter_positions_row_major():
    g = Grid.create(2, 3)
    assert list(g.iter_positions()) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_wall_flags_snapshot_is_detached():
    g = Grid.create(2, 2)
    flags = g.wall_flags()
    assert flags[0][0] == {UP: False, DOWN: False, LEFT: True, RIGHT: False}
    flags[0][0][UP] = True
    assert not g.is_open(0, 0, UP)


if __name__ == "__main__":
    unittest.main()
