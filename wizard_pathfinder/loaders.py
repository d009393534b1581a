# region Imports
import logging
import math
from typing import Iterator, List, Optional, Tuple

from wizard_pathfinder.errors import GridError, InputFormatError
from wizard_pathfinder.grid import Grid, ObstacleClassIndex
from wizard_pathfinder.models import Coord, Node
from wizard_pathfinder.simulation import Objective, Scenario
# endregion

logger = logging.getLogger(__name__)


# region Line Helpers
def _lines(path: str) -> Iterator[Tuple[int, List[str]]]:
    """(line number, tokens) for every non-blank line."""
    with open(path) as f:
        for line_no, line in enumerate(f, start=1):
            parts = line.split()
            if parts:
                yield line_no, parts


def _int(token: str, path: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(f"expected an integer, got {token!r}", path, line_no) from None


def _float(token: str, path: str, line_no: int) -> float:
    try:
        value = float(token)
    except ValueError:
        raise InputFormatError(f"expected a number, got {token!r}", path, line_no) from None
    if not math.isfinite(value):
        raise InputFormatError(f"expected a finite number, got {token!r}", path, line_no)
    return value


def _coord(token: str, path: str, line_no: int) -> Coord:
    """Parse ``x-y``."""
    xs, sep, ys = token.partition("-")
    if not sep:
        raise InputFormatError(f"expected a coordinate like 3-4, got {token!r}", path, line_no)
    return _int(xs, path, line_no), _int(ys, path, line_no)


def _node(grid: Grid, coords: Coord, path: str, line_no: int) -> Node:
    try:
        return grid.node_at(*coords)
    except GridError as e:
        raise InputFormatError(str(e), path, line_no) from None
# endregion


# region Nodes + Edges
def load_grid(nodes_path: str, edges_path: str) -> Tuple[Grid, ObstacleClassIndex]:
    grid: Optional[Grid] = None
    index = ObstacleClassIndex()

    for line_no, parts in _lines(nodes_path):
        if grid is None:
            if len(parts) != 2:
                raise InputFormatError("first line must be the grid size 'X Y'", nodes_path, line_no)
            size_x, size_y = _int(parts[0], nodes_path, line_no), _int(parts[1], nodes_path, line_no)
            try:
                grid = Grid(size_x, size_y)
            except ValueError as e:
                raise InputFormatError(str(e), nodes_path, line_no) from None
            continue
        if len(parts) != 3:
            raise InputFormatError(f"expected 'x y type', got {len(parts)} field(s)", nodes_path, line_no)
        x, y, node_type = (_int(p, nodes_path, line_no) for p in parts)
        if node_type < 0:
            raise InputFormatError(f"negative node type {node_type}", nodes_path, line_no)
        try:
            node = grid.add_node(Node(x, y, node_type))
        except GridError as e:
            raise InputFormatError(str(e), nodes_path, line_no) from None
        index.register(node)

    if grid is None:
        raise InputFormatError("file is empty", nodes_path)

    n_edges = 0
    for line_no, parts in _lines(edges_path):
        if len(parts) != 2:
            raise InputFormatError(f"expected 'x1-y1,x2-y2 time', got {len(parts)} field(s)", edges_path, line_no)
        ends = parts[0].split(",")
        if len(ends) != 2:
            raise InputFormatError(f"expected two endpoints, got {parts[0]!r}", edges_path, line_no)
        a = _node(grid, _coord(ends[0], edges_path, line_no), edges_path, line_no)
        b = _node(grid, _coord(ends[1], edges_path, line_no), edges_path, line_no)
        travel_time = _float(parts[1], edges_path, line_no)
        if travel_time < 0:
            raise InputFormatError(f"negative travel time {travel_time}", edges_path, line_no)
        grid.add_edge(a, b, travel_time)
        n_edges += 1

    logger.info(
        "loaded %dx%d grid: %d node(s), %d edge(s), %d hidden class(es)",
        grid.size_x, grid.size_y, len(grid), n_edges, len(index),
    )
    return grid, index
# endregion


# region Objectives
def load_objectives(objectives_path: str, grid: Grid) -> Tuple[float, Coord, List[Objective]]:
    """
    Radius, start and objectives. An offer written on an objective's line is
    made once that objective is reached, so it is attached to the next one.
    """
    lines = _lines(objectives_path)

    header = next(lines, None)
    if header is None:
        raise InputFormatError("missing discovery radius", objectives_path)
    line_no, parts = header
    if len(parts) != 1:
        raise InputFormatError("first line must be the discovery radius", objectives_path, line_no)
    radius = _float(parts[0], objectives_path, line_no)
    if radius < 0:
        raise InputFormatError(f"negative discovery radius {radius}", objectives_path, line_no)

    header = next(lines, None)
    if header is None:
        raise InputFormatError("missing start position", objectives_path)
    line_no, parts = header
    if len(parts) != 2:
        raise InputFormatError("second line must be the start position 'x y'", objectives_path, line_no)
    start = (_int(parts[0], objectives_path, line_no), _int(parts[1], objectives_path, line_no))
    _node(grid, start, objectives_path, line_no)

    objectives: List[Objective] = []
    pending: Optional[Tuple[int, ...]] = None
    for line_no, parts in lines:
        if len(parts) < 2:
            raise InputFormatError("expected 'x y [class ...]'", objectives_path, line_no)
        dest = (_int(parts[0], objectives_path, line_no), _int(parts[1], objectives_path, line_no))
        _node(grid, dest, objectives_path, line_no)
        objectives.append(Objective(dest, pending))
        options = tuple(_int(p, objectives_path, line_no) for p in parts[2:])
        pending = options or None

    if pending is not None:
        logger.warning("wizard offer %s after the last objective is ignored", list(pending))
    return radius, start, objectives


def load_scenario(nodes_path: str, edges_path: str, objectives_path: str) -> Scenario:
    grid, index = load_grid(nodes_path, edges_path)
    radius, start, objectives = load_objectives(objectives_path, grid)
    return Scenario(grid=grid, index=index, radius=radius, start=start, objectives=objectives)
# endregion
