# gridpath/algorithms/dijkstra.py
# Dijkstra / uniform-cost search: best-first on g alone. With unit steps its path length always equals BFS's.
from __future__ import annotations
from typing import Iterator, Optional

from loguru import logger

from ..core.events import SearchStep
from ..core.grid import GridGraph
from ..core.node import NodeTable
from .best_first import best_first_steps
from .runner import Observer, run_to_completion


def dijkstra_steps(graph: GridGraph, start, target, nodes: Optional[NodeTable] = None,
                   max_expansions: Optional[int] = None) -> Iterator[SearchStep]:
    return best_first_steps(graph, start, target, key=lambda n: n.g, h=None,
                            nodes=nodes, max_expansions=max_expansions, name="Dijkstra")


def dijkstra_search(graph: GridGraph, start, target, nodes: Optional[NodeTable] = None,
                    observer: Optional[Observer] = None, max_expansions: Optional[int] = None):
    path = run_to_completion(dijkstra_steps(graph, start, target, nodes, max_expansions), observer)
    logger.debug("Dijkstra: {} -> {}: {}", start, target, path)
    return path


uniform_cost_search = dijkstra_search
