# region Imports
from __future__ import annotations
import json
import logging
from typing import Iterable, Sequence

from wizard_pathfinder.events import Event
from wizard_pathfinder.models import Node
# endregion

logger = logging.getLogger(__name__)


# region Progress Log
def write_progress_log(events: Iterable[Event], out_path: str) -> int:
    """One rendered event per line. Returns the number of lines written."""
    n = 0
    with open(out_path, "w") as f:
        for event in events:
            f.write(event.render() + "\n")
            n += 1
    logger.info("Wrote %d event(s) to %s", n, out_path)
    return n
# endregion


# region Trail JSON
def write_trail_json(trail: Sequence[Node], out_path: str) -> None:
    """Export the walked cells as ``{"positions": [{"x":..,"y":..}, ...]}``."""
    positions = [{"x": int(node.x), "y": int(node.y)} for node in trail]
    with open(out_path, "w") as f:
        json.dump({"positions": positions}, f, indent=2)
    logger.info("Wrote %d point(s) to %s", len(positions), out_path)
# endregion
