import logging

import pytest

from wizard_pathfinder.grid import Grid, ObstacleClassIndex
from wizard_pathfinder.models import Node


def build_grid(size_x, size_y, types=None, weight_fn=None, diagonal=False):
    """
    Fully populated grid, 4- (or 8-) connected.
    ``types`` maps (x, y) -> node type; ``weight_fn(a, b)`` gives edge times.
    """
    types = types or {}
    weight_fn = weight_fn or (lambda a, b: 1.0)
    grid = Grid(size_x, size_y)
    for x in range(size_x):
        for y in range(size_y):
            grid.add_node(Node(x, y, types.get((x, y), 0)))

    steps = [(1, 0), (0, 1)]
    if diagonal:
        steps += [(1, 1), (1, -1)]
    for x in range(size_x):
        for y in range(size_y):
            for dx, dy in steps:
                nx, ny = x + dx, y + dy
                if grid.in_bounds(nx, ny):
                    a, b = grid.node_at(x, y), grid.node_at(nx, ny)
                    grid.add_edge(a, b, weight_fn(a.coords, b.coords))
    return grid, ObstacleClassIndex.from_grid(grid)


@pytest.fixture
def grid_factory():
    return build_grid


@pytest.fixture
def corridor():
    # 0-0 . 1-0 . [2-0 class 2] . 3-0
    return build_grid(4, 1, types={(2, 0): 2})


def _wall_weights(a, b):
    return 1.0 if a[1] == 1 and b[1] == 1 else 2.0


WALL_TYPES = {(2, 0): 3, (2, 1): 2, (2, 2): 3, (4, 2): 1}


@pytest.fixture
def wall_grid():
    """5x3 grid, cheap middle row, a column of hidden obstacles at x=2."""
    return build_grid(5, 3, types=WALL_TYPES, weight_fn=_wall_weights)


@pytest.fixture
def wall_files(tmp_path):
    """The wall grid written out in the three input formats."""
    nodes = ["5 3"]
    for x in range(5):
        for y in range(3):
            nodes.append(f"{x} {y} {WALL_TYPES.get((x, y), 0)}")

    edges = []
    for x in range(5):
        for y in range(3):
            for dx, dy in ((1, 0), (0, 1)):
                nx, ny = x + dx, y + dy
                if nx < 5 and ny < 3:
                    w = _wall_weights((x, y), (nx, ny))
                    edges.append(f"{x}-{y},{nx}-{ny} {w}")

    objectives = ["1", "0 1", "1 1 3 2", "4 1"]

    paths = {}
    for name, lines in (("nodes", nodes), ("edges", edges), ("objectives", objectives)):
        p = tmp_path / f"{name}.txt"
        p.write_text("\n".join(lines) + "\n")
        paths[name] = str(p)
    paths["output"] = str(tmp_path / "output.txt")
    return paths


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
