from collections import deque

from lightbound.maze import EXIT, FLOOR, PASSABLE, START, WALL, Maze

CHAR_TO_CELL = {"#": WALL, ".": FLOOR, "S": START, "E": EXIT}


def maze_from_ascii(lines, cell_size=1.0):
    """Build a Maze from text rows; the first line is the top (y == height - 1)."""
    height = len(lines)
    width = len(lines[0])
    grid = tuple(
        tuple(CHAR_TO_CELL[lines[height - 1 - y][x]] for y in range(height)) for x in range(width)
    )
    start = exit_cell = None
    floor = []
    for x in range(width):
        for y in range(height):
            if grid[x][y] == START:
                start = (x, y)
            elif grid[x][y] == EXIT:
                exit_cell = (x, y)
            if grid[x][y] in PASSABLE:
                floor.append((x, y))
    return Maze(
        grid=grid,
        width=width,
        height=height,
        start=start,
        exit=exit_cell,
        floor_cells=tuple(floor),
        cell_size=cell_size,
    )


def passable_cells(grid):
    return {(x, y) for x in range(len(grid)) for y in range(len(grid[0])) if grid[x][y] in PASSABLE}


def bfs_reachable(grid, start):
    """Return set of (x,y) passable cells reachable from start over 4-neighbour steps."""
    w = len(grid)
    h = len(grid[0])
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and (nx, ny) not in vis and grid[nx][ny] in PASSABLE:
                vis.add((nx, ny))
                q.append((nx, ny))
    return vis


def adjacency_edges(cells):
    """Count unordered 4-neighbour pairs inside ``cells``."""
    return sum(1 for x, y in cells for n in ((x + 1, y), (x, y + 1)) if n in cells)


def border_cells(width, height):
    for x in range(width):
        for y in range(height):
            if x in (0, width - 1) or y in (0, height - 1):
                yield x, y
