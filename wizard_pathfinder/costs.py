# region Imports
import math
from typing import Callable, Optional

from wizard_pathfinder.models import Edge, Node
# endregion

EdgeCostFn = Callable[[Edge, Node], Optional[float]]


# region Edge Cost Factory
def edge_cost_factory(cost_mode: str = "standard", candidate: Optional[int] = None) -> EdgeCostFn:
    """
    ``standard``: discovered hidden obstacles are walls.
    ``wizard``: same, except nodes of class ``candidate`` count as open ground.
    Returned functions give None for an impassable step.
    """
    if cost_mode == "standard":
        return standard_edge_cost
    if cost_mode == "wizard":
        if candidate is None:
            raise ValueError("wizard cost mode needs a candidate obstacle class")
        return wizard_edge_cost_fn(candidate)
    raise ValueError(f"unknown cost mode {cost_mode!r}")
# endregion


# region Edge-cost Functions
def standard_edge_cost(edge: Edge, v: Node) -> Optional[float]:
    if math.isinf(edge.travel_time):
        return None
    if v.discovered and v.is_hidden_obstacle:
        return None
    return edge.travel_time


def wizard_edge_cost_fn(candidate: int) -> EdgeCostFn:
    def edge_cost(edge: Edge, v: Node) -> Optional[float]:
        if math.isinf(edge.travel_time):
            return None
        if v.discovered and v.is_hidden_obstacle and v.node_type != candidate:
            return None
        return edge.travel_time

    return edge_cost
# endregion
