# gridpath/algorithms/best_first.py
# Priority-ordered search with relaxation on strict improvement; A* and Dijkstra are both thin wrappers over it.
from __future__ import annotations
from typing import Callable, Iterator, Optional

from loguru import logger

from ..core.events import SearchStep
from ..core.frontiers import PriorityQueue
from ..core.grid import GridGraph
from ..core.node import Node, NodeState, NodeTable, as_coord
from ..core.utils import reconstruct_path
from .runner import run_table


def best_first_steps(
    graph: GridGraph,
    start,
    target,
    key: Callable[[Node], float],
    h: Optional[Callable] = None,
    nodes: Optional[NodeTable] = None,
    max_expansions: Optional[int] = None,
    name: str = "BestFirst",
) -> Iterator[SearchStep]:
    table = run_table(graph, nodes)
    goal = as_coord(target)

    root = table[start]
    root.g = 0
    root.parent = None
    root.h = h(root, goal) if h is not None else 0
    root.f = root.g + root.h
    root.state = NodeState.OPEN

    frontier = PriorityQueue(key=key)
    frontier.push(root)
    closed = set()

    def open_cells(current):
        return frozenset(n.coord for n in frontier if n.coord not in closed and n.coord != current.coord)

    while frontier:
        if max_expansions is not None and len(closed) >= max_expansions:
            logger.info("{}: expansion cap {} reached with {} entries still queued", name, max_expansions, len(frontier))
            return

        current = frontier.pop()
        if current.coord in closed:
            # superseded by a cheaper entry that was already finalized
            continue

        logger.debug("{}: exploring node {} with f={}, g={}, h={}", name, current, current.f, current.g, current.h)

        if current.coord == goal:
            yield SearchStep(current.coord, open_cells(current), frozenset(closed), reconstruct_path(current))
            return

        closed.add(current.coord)
        current.state = NodeState.CLOSED

        for neighbor in graph.neighbors(current, table):
            if neighbor.coord in closed:
                continue
            tentative_g = current.g + 1
            if tentative_g < neighbor.g:
                neighbor.parent = current
                neighbor.g = tentative_g
                if h is not None:
                    neighbor.h = h(neighbor, goal)
                neighbor.f = neighbor.g + neighbor.h
                neighbor.state = NodeState.OPEN
                frontier.push(neighbor)

        yield SearchStep(current.coord, open_cells(current), frozenset(closed))
