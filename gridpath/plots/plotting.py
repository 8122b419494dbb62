# gridpath/plots/plotting.py
# Matplotlib figures: one grid with the explored cells and the path, and bar charts comparing algorithm runs.
from __future__ import annotations
from typing import Iterable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from ..core.grid import GridGraph

# free, wall, closed, frontier, path
_CMAP = ListedColormap(["#ffffff", "#333333", "#9ecae1", "#fdae6b", "#31a354"])


def plot_search(graph: GridGraph, path: Optional[Sequence] = None, closed: Iterable = (), frontier: Iterable = (),
                title: str = "Search", ax=None):
    """Draw the occupancy grid with closed/frontier cells and the final path overlaid."""
    layer = graph.occupancy.astype(int)
    for x, y in closed:
        layer[y, x] = 2
    for x, y in frontier:
        layer[y, x] = 3
    for x, y in (path or []):
        layer[y, x] = 4

    if ax is None:
        fig, ax = plt.subplots(figsize=(max(3, graph.width * 0.5), max(3, graph.height * 0.5)))
    else:
        fig = ax.figure
    ax.imshow(layer, cmap=_CMAP, vmin=0, vmax=4)
    if path:
        xs, ys = zip(*path)
        ax.plot(xs, ys, color="black", linewidth=1)
        ax.scatter([xs[0], xs[-1]], [ys[0], ys[-1]], c=["tab:purple", "tab:red"], zorder=3)
    ax.set_xticks(np.arange(graph.width))
    ax.set_yticks(np.arange(graph.height))
    ax.set_title(title)
    return fig


def bar_compare(results, title="Search Comparison"):
    names = [r.algo for r in results]
    nodes = [r.nodes_expanded for r in results]
    costs = [r.cost if r.success else 0 for r in results]
    times = [r.time_s for r in results]
    mems  = [r.peak_kb or 0 for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, costs); axs[1].set_title("Path Cost (steps)"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, mems); axs[3].set_title("Peak Memory (KB)"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig
