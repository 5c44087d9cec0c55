import pytest

from lightbound.maze import EXIT, FLOOR, START, MazeConfig, generate
from lightbound.maze.features import find_dead_ends, mark_start, select_exit
from lightbound.maze.grid import init_grid


def _grid_with(width, height, cells):
    grid = init_grid(width, height)
    for x, y in cells:
        grid[x][y] = FLOOR
    return grid


def test_exit_prefers_largest_x_plus_y():
    cells = [(1, 1), (2, 1), (3, 1), (1, 2), (1, 3), (1, 4), (1, 5), (2, 5)]
    grid = _grid_with(7, 7, cells)
    mark_start(grid, (1, 1))
    assert set(find_dead_ends(grid, cells)) == {(3, 1), (2, 5)}
    assert select_exit(grid, cells) == (2, 5)
    assert grid[2][5] == EXIT
    assert grid[3][1] == FLOOR


def test_exit_tie_goes_to_first_in_registry():
    arm_x = [(2, 1), (3, 1), (4, 1), (5, 1)]
    arm_y = [(1, 2), (1, 3), (1, 4), (1, 5)]
    grid = _grid_with(7, 7, [(1, 1)] + arm_x + arm_y)
    mark_start(grid, (1, 1))
    assert select_exit(grid, [(1, 1)] + arm_y + arm_x) == (1, 5)
    grid = _grid_with(7, 7, [(1, 1)] + arm_x + arm_y)
    mark_start(grid, (1, 1))
    assert select_exit(grid, [(1, 1)] + arm_x + arm_y) == (5, 1)


def test_start_is_never_chosen_as_exit():
    # Start itself has one neighbour but is not a FLOOR cell
    cells = [(1, 1), (2, 1), (3, 1)]
    grid = _grid_with(5, 5, cells)
    mark_start(grid, (1, 1))
    assert select_exit(grid, cells) == (3, 1)
    assert grid[1][1] == START


def test_no_dead_end_means_no_exit():
    ring = [(x, y) for x in range(1, 4) for y in range(1, 4) if (x, y) != (2, 2)]
    grid = _grid_with(5, 5, ring)
    mark_start(grid, (1, 1))
    snapshot = [list(col) for col in grid]
    assert find_dead_ends(grid, ring) == []
    assert select_exit(grid, ring) is None
    assert grid == snapshot


@pytest.mark.parametrize("seed", range(10))
def test_generated_exit_is_a_dead_end(seed):
    maze = generate(MazeConfig(width=15, height=15, max_recursion=200, seed=seed))
    exits = [(x, y) for x in range(maze.width) for y in range(maze.height) if maze.grid[x][y] == EXIT]
    if maze.metrics["dead_ends"] == 0:
        assert exits == []
        return
    assert exits == [maze.exit]
    # Reconstruct the pre-selection grid and check the choice
    grid = [list(col) for col in maze.grid]
    ex, ey = maze.exit
    grid[ex][ey] = FLOOR
    dead_ends = find_dead_ends(grid, maze.floor_cells)
    assert maze.exit in dead_ends
    assert maze.exit == max(dead_ends, key=lambda c: c[0] + c[1])
