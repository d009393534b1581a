from wizard_pathfinder.grid import Grid, ObstacleClassIndex
from wizard_pathfinder.models import Edge, Node
from wizard_pathfinder.simulation import Objective, Scenario, Simulation

__all__ = ["Edge", "Grid", "Node", "ObstacleClassIndex", "Objective", "Scenario", "Simulation"]
