# gridpath/algorithms/astar.py
from __future__ import annotations
from typing import Iterator, Optional

from loguru import logger

from ..core.events import SearchStep
from ..core.grid import GridGraph
from ..core.node import Heuristic, NodeTable
from .best_first import best_first_steps
from .runner import Observer, resolve_heuristic, run_to_completion


def a_star_steps(
    graph: GridGraph,
    start,
    target,
    heuristic=Heuristic.MANHATTAN,
    nodes: Optional[NodeTable] = None,
    max_expansions: Optional[int] = None,
) -> Iterator[SearchStep]:
    """Frontier ordered by f = g + h; optimal when h never overestimates."""
    h = resolve_heuristic(heuristic)
    return best_first_steps(graph, start, target, key=lambda n: n.f, h=h,
                            nodes=nodes, max_expansions=max_expansions, name="A*")


def a_star_search(graph: GridGraph, start, target, heuristic=Heuristic.MANHATTAN,
                  nodes: Optional[NodeTable] = None, observer: Optional[Observer] = None,
                  max_expansions: Optional[int] = None):
    path = run_to_completion(a_star_steps(graph, start, target, heuristic, nodes, max_expansions), observer)
    logger.debug("A*: {} -> {}: {}", start, target, path)
    return path
