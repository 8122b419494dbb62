# gridpath/problems/mazes.py
# Preset occupancy grids (0 = free, 1 = wall) used by the CLI, the benchmarks and the tests.
from __future__ import annotations
from typing import Dict, List, Tuple

from ..core.grid import GridGraph
from ..core.node import Coord

Grid = List[List[int]]


def simple_maze() -> Grid:
    # two horizontal bars; corner to corner is 8 steps
    return [
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 0, 0],
    ]


def complex_maze() -> Grid:
    return [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0, 1, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 1, 1, 1, 1, 1, 0],
        [0, 0, 0, 0, 0, 1, 0],
        [0, 1, 1, 1, 0, 1, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ]


def spiral_maze() -> Grid:
    # a single serpentine corridor, so every algorithm returns the same path
    return [
        [0, 0, 0, 0, 0, 0, 0],
        [1, 1, 1, 1, 1, 1, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 1, 1, 1, 1, 1, 1],
        [0, 0, 0, 0, 0, 0, 0],
        [1, 1, 1, 1, 1, 1, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ]


MAZES = {
    "simple": simple_maze,
    "complex": complex_maze,
    "spiral": spiral_maze,
}


def load_maze(name: str) -> GridGraph:
    try:
        return GridGraph(MAZES[name]())
    except KeyError:
        raise ValueError(f"Unknown maze {name!r}; expected one of {sorted(MAZES)}") from None


def corners(graph: GridGraph) -> Tuple[Coord, Coord]:
    """Default endpoints: top-left to bottom-right."""
    return (0, 0), (graph.width - 1, graph.height - 1)


def all_mazes() -> Dict[str, GridGraph]:
    return {name: GridGraph(make()) for name, make in MAZES.items()}
