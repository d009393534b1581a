# region Imports
import enum
import logging
from typing import Callable, List, Optional

from wizard_pathfinder.dijkstra_core import find_shortest_path
from wizard_pathfinder.discovery import reveal_within_radius
from wizard_pathfinder.errors import UnreachableDestinationError
from wizard_pathfinder.events import Event, Moved, ObjectiveReached, PathBlocked
from wizard_pathfinder.grid import Grid
from wizard_pathfinder.models import Node
# endregion

logger = logging.getLogger(__name__)


class NavigationState(enum.Enum):
    PLANNING = "planning"
    ADVANCING = "advancing"
    BLOCKED = "blocked"
    OBJECTIVE_REACHED = "objective-reached"


# region Navigator
class Navigator:
    """
    Walks the agent to one destination at a time, replanning whenever
    discovery shows that the route it is on has become impassable.
    """

    def __init__(
        self,
        grid: Grid,
        radius: float,
        emit: Callable[[Event], None],
        on_step: Optional[Callable[[Node], None]] = None,
    ):
        self.grid = grid
        self.radius = radius
        self.emit = emit
        self.on_step = on_step
        self.state = NavigationState.PLANNING

    def _set_state(self, state: NavigationState) -> None:
        if state is not self.state:
            logger.debug("navigator %s -> %s", self.state.value, state.value)
        self.state = state

    # region Single Iteration
    def advance(self, current: Node, destination: Node, objective_number: int) -> Node:
        """
        Plan from ``current`` and walk until arrival or until the plan breaks.
        Returns the node the agent is standing on afterwards.
        """
        self._set_state(NavigationState.PLANNING)
        reveal_within_radius(self.grid, current, self.radius)

        # An objective on a revealed hidden obstacle can never be completed
        if destination.discovered and destination.is_hidden_obstacle:
            raise UnreachableDestinationError(current.coords, destination.coords, objective_number)

        if current == destination:
            self._set_state(NavigationState.OBJECTIVE_REACHED)
            self.emit(ObjectiveReached(objective_number))
            return current

        path = find_shortest_path(self.grid, current, destination)
        if path is None:
            raise UnreachableDestinationError(current.coords, destination.coords, objective_number)
        logger.debug("objective %d: planned %d steps from %s", objective_number, len(path) - 1, current)

        self._set_state(NavigationState.ADVANCING)
        for i in range(1, len(path)):
            node = path[i]
            self.emit(Moved(node.x, node.y))
            if self.on_step is not None:
                self.on_step(node)

            revealed = reveal_within_radius(self.grid, node, self.radius)
            if len(revealed) and self._blocks(revealed, path[i:]):
                self._set_state(NavigationState.BLOCKED)
                self.emit(PathBlocked())
                logger.info("objective %d: route blocked, replanning from %s", objective_number, node)
                return node

        self._set_state(NavigationState.OBJECTIVE_REACHED)
        self.emit(ObjectiveReached(objective_number))
        return destination

    @staticmethod
    def _blocks(revealed, remaining: List[Node]) -> bool:
        return any(node in revealed for node in remaining)
    # endregion

    # region Replanning Loop
    def reach(self, current: Node, destination: Node, objective_number: int) -> Node:
        # Every BLOCKED pass reveals at least one new obstacle; the grid is finite
        replans = 0
        node = self.advance(current, destination, objective_number)
        while self.state is NavigationState.BLOCKED:
            replans += 1
            node = self.advance(node, destination, objective_number)
        logger.info("objective %d reached at %s after %d replan(s)", objective_number, destination, replans)
        return node
    # endregion
# endregion
