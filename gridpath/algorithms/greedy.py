# gridpath/algorithms/greedy.py
from __future__ import annotations
from typing import Iterator, Optional

from loguru import logger

from ..core.events import SearchStep
from ..core.frontiers import PriorityQueue
from ..core.grid import GridGraph
from ..core.node import Heuristic, NodeState, NodeTable, as_coord
from ..core.utils import reconstruct_path
from .runner import Observer, resolve_heuristic, run_table, run_to_completion


def greedy_steps(
    graph: GridGraph,
    start,
    target,
    heuristic=Heuristic.MANHATTAN,
    nodes: Optional[NodeTable] = None,
    max_expansions: Optional[int] = None,
) -> Iterator[SearchStep]:
    """
    Greedy Best-First: always pop the cell that looks closest to the target (lowest h).
    A cell's parent and h are fixed the first time it is seen, so the result
    is a valid path but not necessarily a short one.
    """
    h = resolve_heuristic(heuristic)
    table = run_table(graph, nodes)
    goal = as_coord(target)

    root = table[start]
    root.g = 0
    root.parent = None
    root.h = h(root, goal)
    root.state = NodeState.OPEN

    frontier = PriorityQueue(key=lambda n: n.h)
    frontier.push(root)
    open_set = {root.coord}
    closed = set()

    while frontier:
        if max_expansions is not None and len(closed) >= max_expansions:
            logger.info("Greedy: expansion cap {} reached with {} cells still open", max_expansions, len(open_set))
            return

        current = frontier.pop()
        open_set.discard(current.coord)
        logger.debug("Greedy: exploring node {} with h={}", current, current.h)

        if current.coord == goal:
            yield SearchStep(current.coord, frozenset(open_set), frozenset(closed), reconstruct_path(current))
            return

        closed.add(current.coord)
        current.state = NodeState.CLOSED

        for neighbor in graph.neighbors(current, table):
            if neighbor.coord in closed or neighbor.coord in open_set:
                continue
            neighbor.parent = current
            neighbor.g = current.g + 1
            neighbor.h = h(neighbor, goal)
            neighbor.state = NodeState.OPEN
            frontier.push(neighbor)
            open_set.add(neighbor.coord)

        yield SearchStep(current.coord, frozenset(open_set), frozenset(closed))


def greedy_best_first_search(graph: GridGraph, start, target, heuristic=Heuristic.MANHATTAN,
                             nodes: Optional[NodeTable] = None, observer: Optional[Observer] = None,
                             max_expansions: Optional[int] = None):
    path = run_to_completion(greedy_steps(graph, start, target, heuristic, nodes, max_expansions), observer)
    logger.debug("Greedy: {} -> {}: {}", start, target, path)
    return path
