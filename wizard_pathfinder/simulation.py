# region Imports
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from wizard_pathfinder.events import Event
from wizard_pathfinder.grid import Grid, ObstacleClassIndex
from wizard_pathfinder.models import Coord, Node
from wizard_pathfinder.navigation import Navigator
from wizard_pathfinder.wizard import consult_wizard
# endregion

logger = logging.getLogger(__name__)


# region Scenario Models
@dataclass
class Objective:
    destination: Coord
    # Set when the wizard makes an offer before this objective is pursued
    wizard_options: Optional[Tuple[int, ...]] = None


@dataclass
class Scenario:
    grid: Grid
    index: ObstacleClassIndex
    radius: float
    start: Coord
    objectives: List[Objective] = field(default_factory=list)
# endregion


# region Simulation
class Simulation:
    """Pursues a scenario's objectives in order and collects the event log."""

    def __init__(self, scenario: Scenario, emit: Optional[Callable[[Event], None]] = None):
        self.scenario = scenario
        self.events: List[Event] = []
        self.trail: List[Node] = []
        self._emit_hook = emit
        self.navigator = Navigator(scenario.grid, scenario.radius, self._emit, on_step=self.trail.append)

    def _emit(self, event: Event) -> None:
        self.events.append(event)
        if self._emit_hook is not None:
            self._emit_hook(event)

    def run(self) -> List[Event]:
        sc = self.scenario
        grid = sc.grid
        position = grid.node_at(*sc.start)
        self.trail.append(position)
        logger.info(
            "simulation: %dx%d grid, radius %s, start %s, %d objective(s)",
            grid.size_x, grid.size_y, sc.radius, position, len(sc.objectives),
        )

        for number, objective in enumerate(sc.objectives, start=1):
            destination = grid.node_at(*objective.destination)
            logger.info("objective %d: %s -> %s", number, position, destination)
            if objective.wizard_options is not None:
                consult_wizard(grid, sc.index, objective.wizard_options, position, destination, self._emit)
            position = self.navigator.reach(position, destination, number)

        return self.events
# endregion
