# region Imports
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from wizard_pathfinder.grid import Grid
from wizard_pathfinder.models import Node
# endregion


# region Visualization Function
def show_run(
    grid: Grid,
    trail: Sequence[Node],
    start: Optional[Node] = None,
    goals: Sequence[Node] = (),
    title: str = "Agent run",
    show: bool = True,
):
    """
    Render the terrain as it stands after a run (cleared classes show as
    open ground) with the walked trail and start/goal markers on top.
    """
    # region Base Image
    types = grid.type_layer()
    base = np.zeros(types.shape, dtype=np.int32)      # 0 open
    base[types == 1] = 1                              # rock
    base[types >= 2] = 2                              # hidden obstacle
    base[types < 0] = 3                               # no node
    cmap = ListedColormap(["#e8dcc4", "#3b3b3b", "#b5523b", "white"])
    # endregion

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(base, origin="lower", cmap=cmap, vmin=0, vmax=3, interpolation="nearest")

    # region Discovered Overlay
    discovered = grid.discovered_layer()
    if discovered.any():
        ys, xs = np.nonzero(discovered)
        ax.scatter(xs, ys, marker="x", s=60, color="black", label="Discovered", zorder=2)
    # endregion

    # region Trail Overlay
    if trail:
        xs = [n.x for n in trail]
        ys = [n.y for n in trail]
        ax.plot(xs, ys, color="cyan", linewidth=2.5, label="Trail", zorder=3)
    if start is not None:
        ax.scatter(start.x, start.y, s=100, edgecolors="black", facecolors="white", label="Start", zorder=4)
    if goals:
        ax.scatter([g.x for g in goals], [g.y for g in goals], s=100,
                   edgecolors="black", facecolors="yellow", label="Objective", zorder=4)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Patch(facecolor="#e8dcc4", edgecolor="gray", label="Open"),
        Patch(facecolor="#3b3b3b", label="Rock"),
        Patch(facecolor="#b5523b", label="Hidden obstacle"),
        Line2D([0], [0], color="cyan", lw=2, label="Trail"),
        Line2D([0], [0], marker="o", color="w", label="Start",
               markerfacecolor="white", markeredgecolor="black", markersize=10),
        Line2D([0], [0], marker="o", color="w", label="Objective",
               markerfacecolor="yellow", markeredgecolor="black", markersize=10),
    ]
    ax.legend(handles=legend_elements, loc="upper right")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    fig.tight_layout()
    if show:
        plt.show()
    # endregion
    return fig
# endregion
