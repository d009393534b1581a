# models.py
from dataclasses import dataclass, field
from typing import List, Tuple

from wizard_pathfinder.config import FIRST_HIDDEN_CLASS, IMPASSABLE, PASSABLE

Coord = Tuple[int, int]


@dataclass
class Edge:
    target: Coord        # key into the grid arena
    travel_time: float   # inf when either endpoint is IMPASSABLE


@dataclass(eq=False)
class Node:
    x: int
    y: int
    node_type: int = PASSABLE
    discovered: bool = False
    edges: List[Edge] = field(default_factory=list, repr=False)

    @property
    def coords(self) -> Coord:
        return (self.x, self.y)

    @property
    def is_impassable(self) -> bool:
        return self.node_type == IMPASSABLE

    @property
    def is_hidden_obstacle(self) -> bool:
        return self.node_type >= FIRST_HIDDEN_CLASS

    def discover(self) -> None:
        self.discovered = True

    def clear(self) -> None:
        # Wizard clearing: the node becomes ordinary terrain for good
        self.node_type = PASSABLE
        self.discovered = False

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __str__(self):
        return f"{self.x}-{self.y}"


@dataclass(order=True)
class PathCandidate:
    distance: float
    node: Node = field(compare=False)
