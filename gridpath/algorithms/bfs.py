# gridpath/algorithms/bfs.py
# Breadth-First Search; cells are marked visited when enqueued so none is queued twice.
from __future__ import annotations
from typing import Iterator, Optional

from loguru import logger

from ..core.events import SearchStep
from ..core.frontiers import FIFOQueue
from ..core.grid import GridGraph
from ..core.node import NodeState, NodeTable, as_coord
from ..core.utils import reconstruct_path
from .runner import Observer, run_table, run_to_completion


def visit_on_enqueue_steps(
    graph: GridGraph,
    start,
    target,
    frontier,
    nodes: Optional[NodeTable] = None,
    max_expansions: Optional[int] = None,
    name: str = "BFS",
) -> Iterator[SearchStep]:
    """Shared loop for BFS (FIFO frontier) and DFS (LIFO frontier)."""
    table = run_table(graph, nodes)
    goal = as_coord(target)

    root = table[start]
    root.g = 0
    root.parent = None
    root.state = NodeState.OPEN
    frontier.push(root)
    visited = {root.coord}
    expanded = set()

    while frontier:
        if max_expansions is not None and len(expanded) >= max_expansions:
            logger.info("{}: expansion cap {} reached with {} cells still open", name, max_expansions, len(frontier))
            return

        current = frontier.pop()
        logger.debug("{}: exploring node {} at depth {}", name, current, current.g)

        if current.coord == goal:
            yield SearchStep(current.coord, frozenset(n.coord for n in frontier), frozenset(expanded),
                             reconstruct_path(current))
            return

        expanded.add(current.coord)
        current.state = NodeState.CLOSED

        for neighbor in graph.neighbors(current, table):
            if neighbor.coord not in visited:
                visited.add(neighbor.coord)
                neighbor.parent = current
                neighbor.g = current.g + 1
                neighbor.state = NodeState.OPEN
                frontier.push(neighbor)

        yield SearchStep(current.coord, frozenset(n.coord for n in frontier), frozenset(expanded))


def bfs_steps(graph: GridGraph, start, target, nodes: Optional[NodeTable] = None,
              max_expansions: Optional[int] = None) -> Iterator[SearchStep]:
    return visit_on_enqueue_steps(graph, start, target, FIFOQueue(), nodes, max_expansions, name="BFS")


def breadth_first_search(graph: GridGraph, start, target, nodes: Optional[NodeTable] = None,
                         observer: Optional[Observer] = None, max_expansions: Optional[int] = None):
    path = run_to_completion(bfs_steps(graph, start, target, nodes, max_expansions), observer)
    logger.debug("BFS: {} -> {}: {}", start, target, path)
    return path
