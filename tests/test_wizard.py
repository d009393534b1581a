import math

from wizard_pathfinder import wizard
from wizard_pathfinder.dijkstra_core import find_shortest_path
from wizard_pathfinder.discovery import reveal_within_radius
from wizard_pathfinder.events import WizardChoice
from wizard_pathfinder.navigation import Navigator
from wizard_pathfinder.wizard import choose_obstacle_class, clear_obstacle_class, consult_wizard


def test_lowest_distance_wins_and_first_seen_breaks_ties(monkeypatch, grid_factory):
    grid, _ = grid_factory(2, 1)
    distances = {2: 10.0, 3: 7.0, 4: 7.0}
    monkeypatch.setattr(wizard, "wizard_distance", lambda g, s, d, c: distances[c])
    a, b = grid.node_at(0, 0), grid.node_at(1, 0)
    assert choose_obstacle_class(grid, [2, 3, 4], a, b) == 3
    assert choose_obstacle_class(grid, [4, 3, 2], a, b) == 4


def test_choice_on_real_grid(wall_grid):
    grid, _ = wall_grid
    for n in (grid.node_at(2, 0), grid.node_at(2, 1), grid.node_at(2, 2)):
        n.discover()
    start, goal = grid.node_at(0, 1), grid.node_at(4, 1)
    assert wizard.wizard_distance(grid, start, goal, 2) == 4.0
    assert choose_obstacle_class(grid, [3, 2], start, goal) == 2
    # nothing of class 9 exists: still blocked, but it is the only candidate
    assert math.isinf(wizard.wizard_distance(grid, start, goal, 9))
    assert choose_obstacle_class(grid, [9], start, goal) == 9


def test_empty_candidates_is_a_silent_no_op(wall_grid, caplog):
    grid, index = wall_grid
    events = []
    start, goal = grid.node_at(0, 1), grid.node_at(4, 1)
    assert choose_obstacle_class(grid, [], start, goal) is None
    assert consult_wizard(grid, index, [], start, goal, events.append) is None
    assert events == []
    assert index.classes() == [2, 3]
    assert "no obstacle classes" in caplog.text


def test_clearing_turns_class_into_open_ground(wall_grid):
    grid, index = wall_grid
    for n in index.nodes_of(3):
        n.discover()
    cleared = clear_obstacle_class(index, 3)
    assert sorted(n.coords for n in cleared) == [(2, 0), (2, 2)]
    for n in cleared:
        assert n.node_type == 0 and not n.discovered
    assert 3 not in index
    # reusing a consumed id does nothing
    assert clear_obstacle_class(index, 3) == []
    # cleared nodes never come back through discovery
    assert len(reveal_within_radius(grid, grid.node_at(2, 1), 5)) == 1


def test_consult_emits_choice_and_clears(wall_grid):
    grid, index = wall_grid
    events = []
    choice = consult_wizard(grid, index, [3, 2], grid.node_at(1, 1), grid.node_at(4, 1), events.append)
    # nothing discovered yet, so both classes tie and the first listed wins
    assert choice == 3
    assert events == [WizardChoice(3)]
    assert events[0].render() == "Number 3 is chosen!"
    assert index.classes() == [2]


def test_same_request_before_and_after_clearing(corridor):
    grid, index = corridor
    start, goal = grid.node_at(0, 0), grid.node_at(3, 0)
    log = []
    nav = Navigator(grid, 1, emit=lambda e: log.append(e.render()))
    stopped = nav.advance(start, goal, 1)
    assert find_shortest_path(grid, stopped, goal) is None

    clear_obstacle_class(index, 2)
    log.clear()
    assert find_shortest_path(grid, stopped, goal) is not None
    nav.reach(stopped, goal, 1)
    assert log == ["Moving to 2-0", "Moving to 3-0", "Objective 1 reached!"]
