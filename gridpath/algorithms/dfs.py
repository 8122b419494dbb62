# gridpath/algorithms/dfs.py
# Depth-First Search with a LIFO stack. Finds a path whenever one exists, but rarely the shortest.
from __future__ import annotations
from typing import Iterator, Optional

from loguru import logger

from ..core.events import SearchStep
from ..core.frontiers import LIFOStack
from ..core.grid import GridGraph
from ..core.node import NodeTable
from .bfs import visit_on_enqueue_steps
from .runner import Observer, run_to_completion


def dfs_steps(graph: GridGraph, start, target, nodes: Optional[NodeTable] = None,
              max_expansions: Optional[int] = None) -> Iterator[SearchStep]:
    return visit_on_enqueue_steps(graph, start, target, LIFOStack(), nodes, max_expansions, name="DFS")


def depth_first_search(graph: GridGraph, start, target, nodes: Optional[NodeTable] = None,
                       observer: Optional[Observer] = None, max_expansions: Optional[int] = None):
    path = run_to_completion(dfs_steps(graph, start, target, nodes, max_expansions), observer)
    logger.debug("DFS: {} -> {}: {}", start, target, path)
    return path
