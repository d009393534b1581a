# region Imports
import logging
import math
from typing import Iterator, List, Tuple

import numpy as np

from wizard_pathfinder.errors import GridError
from wizard_pathfinder.hash_table import HashTable
from wizard_pathfinder.models import Edge, Node
# endregion

logger = logging.getLogger(__name__)


# region Grid Arena
class Grid:
    """
    Owns every node, indexed by (x, y). Edges refer to their target by
    coordinate and are resolved through the grid, so nodes never hold each
    other directly.
    """

    def __init__(self, size_x: int, size_y: int):
        if size_x < 1 or size_y < 1:
            raise ValueError(f"grid dimensions must be positive, got {size_x}x{size_y}")
        self.size_x = size_x
        self.size_y = size_y
        self._cells = np.full((size_x, size_y), None, dtype=object)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.size_x, self.size_y)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size_x and 0 <= y < self.size_y

    # region Nodes
    def add_node(self, node: Node) -> Node:
        if not self.in_bounds(node.x, node.y):
            raise GridError(f"node {node} lies outside the {self.size_x}x{self.size_y} grid")
        if self._cells[node.x, node.y] is not None:
            raise GridError(f"duplicate node at {node}")
        self._cells[node.x, node.y] = node
        return node

    def get(self, x: int, y: int):
        """Node at (x, y), or None for an empty or out-of-range cell."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[x, y]

    def node_at(self, x: int, y: int) -> Node:
        node = self.get(x, y)
        if node is None:
            raise GridError(f"no node at {x}-{y}")
        return node

    def nodes(self) -> Iterator[Node]:
        for node in self._cells.flat:
            if node is not None:
                yield node

    def __contains__(self, coords) -> bool:
        x, y = coords
        return self.get(x, y) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())
    # endregion

    # region Edges
    def add_edge(self, a: Node, b: Node, travel_time: float) -> None:
        """Symmetric edge; infinite if either end is rock."""
        if math.isnan(travel_time) or travel_time < 0:
            raise ValueError(f"invalid travel time {travel_time} on {a},{b}")
        if a.is_impassable or b.is_impassable:
            travel_time = math.inf
        a.edges.append(Edge(b.coords, travel_time))
        b.edges.append(Edge(a.coords, travel_time))

    def neighbors(self, node: Node) -> Iterator[Tuple[Node, Edge]]:
        for edge in node.edges:
            yield self.node_at(*edge.target), edge
    # endregion

    # region Layers
    def type_layer(self) -> np.ndarray:
        """(size_y, size_x) int array of node types, -1 for empty cells."""
        layer = np.full((self.size_y, self.size_x), -1, dtype=np.int32)
        for node in self.nodes():
            layer[node.y, node.x] = node.node_type
        return layer

    def discovered_layer(self) -> np.ndarray:
        layer = np.zeros((self.size_y, self.size_x), dtype=bool)
        for node in self.nodes():
            layer[node.y, node.x] = node.discovered
        return layer
    # endregion
# endregion


# region Obstacle Class Index
class ObstacleClassIndex:
    """Hidden-obstacle class id -> nodes of that class, for bulk clearing."""

    def __init__(self):
        self._by_class: HashTable[int, List[Node]] = HashTable()

    @classmethod
    def from_grid(cls, grid: Grid) -> "ObstacleClassIndex":
        index = cls()
        for node in grid.nodes():
            index.register(node)
        return index

    def register(self, node: Node) -> None:
        if node.is_hidden_obstacle:
            self._by_class.get_or_insert(node.node_type, list).append(node)

    def nodes_of(self, class_id: int) -> List[Node]:
        return list(self._by_class.get_or_default(class_id, []))

    def pop_class(self, class_id: int) -> List[Node]:
        nodes = self._by_class.get_or_default(class_id, None)
        if nodes is None:
            logger.debug("class %s not indexed (never present or already cleared)", class_id)
            return []
        self._by_class.remove(class_id)
        return nodes

    def classes(self) -> List[int]:
        return sorted(self._by_class.keys())

    def __contains__(self, class_id) -> bool:
        return class_id in self._by_class

    def __len__(self) -> int:
        return len(self._by_class)
# endregion
