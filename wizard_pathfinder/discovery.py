# region Imports
import logging
import math

import numpy as np

from wizard_pathfinder.grid import Grid
from wizard_pathfinder.hash_table import HashTable
from wizard_pathfinder.models import Node
# endregion

logger = logging.getLogger(__name__)


# region Radius Reveal
def reveal_within_radius(grid: Grid, center: Node, radius: float) -> HashTable[Node, int]:
    """
    Discover every still-hidden obstacle within Euclidean ``radius`` of
    ``center``. Returns only the nodes revealed by this call, mapped to
    their class; already discovered or ordinary cells are left alone.
    """
    if not math.isfinite(radius) or radius < 0:
        raise ValueError(f"discovery radius must be finite and >= 0, got {radius}")

    revealed: HashTable[Node, int] = HashTable()
    cx, cy = center.x, center.y
    x0 = max(0, math.floor(cx - radius))
    x1 = min(grid.size_x - 1, math.ceil(cx + radius))
    y0 = max(0, math.floor(cy - radius))
    y1 = min(grid.size_y - 1, math.ceil(cy + radius))
    if x0 > x1 or y0 > y1:
        return revealed

    xx, yy = np.ogrid[x0:x1 + 1, y0:y1 + 1]
    within = (xx - cx) ** 2 + (yy - cy) ** 2 <= radius * radius

    for dx, dy in np.argwhere(within):
        node = grid.get(x0 + int(dx), y0 + int(dy))
        if node is None or not node.is_hidden_obstacle or node.discovered:
            continue
        node.discover()
        revealed.put(node, node.node_type)

    if len(revealed):
        logger.debug(
            "revealed around %s (r=%s): %s",
            center, radius, ", ".join(f"{n}[{t}]" for n, t in revealed.items()),
        )
    return revealed
# endregion
