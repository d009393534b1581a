import pytest

from wizard_pathfinder.errors import UnreachableDestinationError
from wizard_pathfinder.navigation import NavigationState, Navigator


def _navigator(grid, radius):
    log = []
    nav = Navigator(grid, radius, emit=lambda e: log.append(e.render()))
    return nav, log


def test_open_grid_walks_straight_to_objective(grid_factory):
    grid, _ = grid_factory(3, 3, diagonal=True)
    nav, log = _navigator(grid, 1)
    end = nav.reach(grid.node_at(0, 0), grid.node_at(2, 2), 1)
    assert end == grid.node_at(2, 2)
    assert log == ["Moving to 1-1", "Moving to 2-2", "Objective 1 reached!"]
    assert nav.state is NavigationState.OBJECTIVE_REACHED


def test_hidden_obstacle_forces_replan(grid_factory):
    # Middle row is the only cheap route; (3, 1) hides a class-2 obstacle
    grid, _ = grid_factory(
        5, 3,
        types={(3, 1): 2},
        weight_fn=lambda a, b: 5.0 if 2 in (a[1], b[1]) else 1.0,
    )
    nav, log = _navigator(grid, 1)
    end = nav.reach(grid.node_at(0, 1), grid.node_at(4, 1), 1)
    assert end == grid.node_at(4, 1)
    assert log == [
        "Moving to 1-1",
        "Moving to 2-1",
        "Path is impassable!",
        "Moving to 2-0",
        "Moving to 3-0",
        "Moving to 4-0",
        "Moving to 4-1",
        "Objective 1 reached!",
    ]
    assert grid.node_at(3, 1).discovered


def test_single_advance_stops_where_blocked(corridor):
    grid, _ = corridor
    nav, log = _navigator(grid, 1)
    stopped = nav.advance(grid.node_at(0, 0), grid.node_at(3, 0), 1)
    assert stopped == grid.node_at(1, 0)
    assert nav.state is NavigationState.BLOCKED
    assert log == ["Moving to 1-0", "Path is impassable!"]


def test_unreachable_destination_is_reported(corridor):
    grid, _ = corridor
    nav, log = _navigator(grid, 1)
    with pytest.raises(UnreachableDestinationError) as excinfo:
        nav.reach(grid.node_at(0, 0), grid.node_at(3, 0), 4)
    err = excinfo.value
    assert err.start == (1, 0) and err.destination == (3, 0)
    assert err.objective_number == 4
    assert log == ["Moving to 1-0", "Path is impassable!"]


def test_obstacle_outside_route_does_not_interrupt(grid_factory):
    grid, _ = grid_factory(3, 2, types={(1, 1): 2})
    nav, log = _navigator(grid, 1)
    nav.reach(grid.node_at(0, 0), grid.node_at(2, 0), 1)
    assert "Path is impassable!" not in log
    assert grid.node_at(1, 1).discovered


def test_already_at_destination(grid_factory):
    grid, _ = grid_factory(2, 2)
    nav, log = _navigator(grid, 1)
    n = grid.node_at(1, 0)
    assert nav.reach(n, n, 3) == n
    assert log == ["Objective 3 reached!"]


def test_on_step_sees_every_move(grid_factory):
    grid, _ = grid_factory(4, 1)
    steps = []
    nav = Navigator(grid, 0, emit=lambda e: None, on_step=steps.append)
    nav.reach(grid.node_at(0, 0), grid.node_at(3, 0), 1)
    assert [n.coords for n in steps] == [(1, 0), (2, 0), (3, 0)]


@pytest.mark.parametrize(
    "radius, expected_log",
    [
        # revealed only once the agent stands on it
        (0, ["Moving to 1-0", "Moving to 2-0", "Path is impassable!"]),
        # revealed one step early
        (1, ["Moving to 1-0", "Path is impassable!"]),
    ],
)
def test_objective_on_hidden_obstacle_is_unreachable_for_any_radius(grid_factory, radius, expected_log):
    grid, _ = grid_factory(3, 1, types={(2, 0): 2})
    nav, log = _navigator(grid, radius)
    with pytest.raises(UnreachableDestinationError) as excinfo:
        nav.reach(grid.node_at(0, 0), grid.node_at(2, 0), 1)
    assert excinfo.value.destination == (2, 0)
    assert log == expected_log
    assert "Objective 1 reached!" not in log
