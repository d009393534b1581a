# region Imports and Typing
import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from wizard_pathfinder.costs import EdgeCostFn, edge_cost_factory
from wizard_pathfinder.grid import Grid
from wizard_pathfinder.hash_table import ABSENT, HashTable
from wizard_pathfinder.min_heap import MinHeap
from wizard_pathfinder.models import Node, PathCandidate
# endregion

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    path: Optional[List[Node]]   # start -> goal, None if unreachable
    cost: float                  # inf if unreachable
    expansions: int


# region Path Reconstruction
def reconstruct(previous: HashTable, goal: Node) -> List[Node]:
    path = []
    v = goal
    while v is not ABSENT:
        path.append(v)
        v = previous.get(v)
    path.reverse()
    return path
# endregion


# region Dijkstra
def dijkstra(grid: Grid, start: Node, goal: Node, edge_cost_fn: EdgeCostFn) -> SearchResult:
    """
    Single-source Dijkstra that stops once ``goal`` is finalized.

    The heap has no decrease-key, so a node can sit in it several times with
    different distances. Only the first pop counts; later pops of a node that
    is already in ``finalized`` are stale and skipped.
    """
    if start == goal:
        return SearchResult([start], 0.0, 0)

    openh: MinHeap[PathCandidate] = MinHeap()
    dist: HashTable[Node, float] = HashTable()
    previous: HashTable[Node, Node] = HashTable()
    finalized: HashTable[Node, bool] = HashTable()
    expansions = 0

    dist.put(start, 0.0)
    openh.insert(PathCandidate(0.0, start))

    while not openh.is_empty():
        u = openh.extract_min().node
        if u in finalized:
            continue
        finalized.put(u, True)
        expansions += 1

        if u == goal:
            logger.debug("reached %s from %s after %d expansions", goal, start, expansions)
            return SearchResult(reconstruct(previous, u), dist[u], expansions)

        du = dist[u]
        # region Neighbor Loop
        for v, edge in grid.neighbors(u):
            if v in finalized:
                continue
            c = edge_cost_fn(edge, v)
            if c is None:
                continue
            alt = du + c
            if alt < dist.get_or_default(v, math.inf):
                dist.put(v, alt)
                previous.put(v, u)
                openh.insert(PathCandidate(alt, v))
        # endregion

    logger.debug("no path %s -> %s (%d expansions)", start, goal, expansions)
    return SearchResult(None, math.inf, expansions)
# endregion


# region Public Entry Points
def find_shortest_path(grid: Grid, start: Node, goal: Node) -> Optional[List[Node]]:
    """Route over what is currently known; undiscovered obstacles look open."""
    return dijkstra(grid, start, goal, edge_cost_factory("standard")).path


def wizard_distance(grid: Grid, start: Node, goal: Node, candidate: int) -> float:
    """Route length if class ``candidate`` were cleared; inf if still blocked."""
    return dijkstra(grid, start, goal, edge_cost_factory("wizard", candidate)).cost
# endregion
