# app.py — command-line entry point: load the three input files, run, write the log
# deps: pip install numpy matplotlib

# region Imports
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from wizard_pathfinder.errors import InputFormatError, PathfinderError
from wizard_pathfinder.events import Event
from wizard_pathfinder.loaders import load_scenario
from wizard_pathfinder.logging_utils import setup_logging
from wizard_pathfinder.route_export import write_progress_log, write_trail_json
from wizard_pathfinder.simulation import Simulation
# endregion

logger = logging.getLogger("wizard_pathfinder")


# region Arguments
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wizard-pathfinder",
        description="Walk an agent across a grid with hidden obstacles and log its progress.",
    )
    p.add_argument("nodes", help="nodes file: 'X Y' header, then 'x y type' lines")
    p.add_argument("edges", help="edges file: 'x1-y1,x2-y2 travel_time' lines")
    p.add_argument("objectives", help="objectives file: radius, start, then 'x y [class ...]' lines")
    p.add_argument("output", help="progress log to write")
    p.add_argument("--trail-json", default=None, help="also export the walked cells as JSON")
    p.add_argument("--plot", action="store_true", help="show the run with matplotlib when done")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--log-file", default=None, help="also write diagnostics to this file")
    return p
# endregion


# region Main
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        scenario = load_scenario(args.nodes, args.edges, args.objectives)
    except (InputFormatError, OSError) as e:
        logger.error("could not load input: %s", e)
        return 2

    sim = Simulation(scenario)
    events: List[Event] = sim.events
    status = 0
    try:
        sim.run()
    except PathfinderError as e:
        logger.error("run aborted: %s", e)
        status = 1
    finally:
        # Partial logs are still written so the failure point is visible
        write_progress_log(events, args.output)

    if args.trail_json:
        write_trail_json(sim.trail, args.trail_json)

    if args.plot:
        from wizard_pathfinder.viz import show_run  # matplotlib only when asked

        grid = scenario.grid
        goals = [grid.node_at(*o.destination) for o in scenario.objectives]
        show_run(grid, sim.trail, grid.node_at(*scenario.start), goals, title="Agent run")

    return status


if __name__ == "__main__":
    sys.exit(main())
# endregion
