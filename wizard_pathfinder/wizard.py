# region Imports
import logging
import math
from typing import Callable, List, Optional, Sequence

from wizard_pathfinder.dijkstra_core import wizard_distance
from wizard_pathfinder.events import Event, WizardChoice
from wizard_pathfinder.grid import Grid, ObstacleClassIndex
from wizard_pathfinder.models import Node
# endregion

logger = logging.getLogger(__name__)


# region Choice
def choose_obstacle_class(
    grid: Grid,
    candidates: Sequence[int],
    start: Node,
    destination: Node,
) -> Optional[int]:
    """
    Class whose clearing gives the shortest start -> destination route.
    Ties go to the class listed first. None if there are no candidates.
    """
    best_class = None
    best_dist = math.inf
    for class_id in candidates:
        d = wizard_distance(grid, start, destination, class_id)
        logger.debug("wizard candidate %s: distance %s", class_id, d)
        if best_class is None or d < best_dist:
            best_class, best_dist = class_id, d
    return best_class
# endregion


# region Clearing
def clear_obstacle_class(index: ObstacleClassIndex, class_id: int) -> List[Node]:
    nodes = index.pop_class(class_id)
    for node in nodes:
        node.clear()
    return nodes
# endregion


# region Consult
def consult_wizard(
    grid: Grid,
    index: ObstacleClassIndex,
    candidates: Sequence[int],
    start: Node,
    destination: Node,
    emit: Callable[[Event], None],
) -> Optional[int]:
    if not candidates:
        logger.warning("wizard offered no obstacle classes at %s; nothing to clear", start)
        return None

    choice = choose_obstacle_class(grid, candidates, start, destination)
    emit(WizardChoice(choice))
    cleared = clear_obstacle_class(index, choice)
    logger.info("wizard: class %s chosen from %s, %d node(s) cleared", choice, list(candidates), len(cleared))
    return choice
# endregion
