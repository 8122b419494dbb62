# gridpath/algorithms/strategy.py
# The five search strategies as one enumeration, plus a measured runner used by the CLI and benchmarks.
from __future__ import annotations
from enum import Enum
from typing import Iterator, Optional

from loguru import logger

from ..core.events import SearchStep
from ..core.grid import GridGraph
from ..core.metrics import MeasuredRun, SearchResult
from ..core.node import Heuristic
from ..core.utils import path_length
from .astar import a_star_steps
from .bfs import bfs_steps
from .dfs import dfs_steps
from .dijkstra import dijkstra_steps
from .greedy import greedy_steps
from .runner import Observer, run_to_completion

_ALIASES = {
    "astar": "astar", "a*": "astar", "a_star": "astar", "a-star": "astar",
    "bfs": "bfs", "breadth_first": "bfs", "breadth-first": "bfs",
    "dfs": "dfs", "depth_first": "dfs", "depth-first": "dfs",
    "dijkstra": "dijkstra", "ucs": "dijkstra", "uniform_cost": "dijkstra",
    "greedy": "greedy", "gbfs": "greedy", "greedy_best_first": "greedy",
}

_LABELS = {
    "astar": "A*",
    "bfs": "BFS",
    "dfs": "DFS",
    "dijkstra": "Dijkstra",
    "greedy": "Greedy",
}


class Algorithm(Enum):
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    GREEDY = "greedy"

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    @classmethod
    def parse(cls, name) -> "Algorithm":
        if isinstance(name, Algorithm):
            return name
        key = str(name).strip().lower().replace(" ", "_")
        if key not in _ALIASES:
            raise ValueError(f"Unknown algorithm {name!r}; expected one of {sorted(_ALIASES)}")
        return cls(_ALIASES[key])

    def steps(self, graph: GridGraph, start, target, heuristic=Heuristic.MANHATTAN,
              nodes=None, max_expansions: Optional[int] = None) -> Iterator[SearchStep]:
        """Lazy step events; the heuristic is ignored by BFS, DFS and Dijkstra."""
        if self is Algorithm.ASTAR:
            return a_star_steps(graph, start, target, heuristic, nodes, max_expansions)
        if self is Algorithm.GREEDY:
            return greedy_steps(graph, start, target, heuristic, nodes, max_expansions)
        if self is Algorithm.BFS:
            return bfs_steps(graph, start, target, nodes, max_expansions)
        if self is Algorithm.DFS:
            return dfs_steps(graph, start, target, nodes, max_expansions)
        return dijkstra_steps(graph, start, target, nodes, max_expansions)

    def search(self, graph: GridGraph, start, target, heuristic=Heuristic.MANHATTAN,
               nodes=None, observer: Optional[Observer] = None, max_expansions: Optional[int] = None):
        return run_to_completion(self.steps(graph, start, target, heuristic, nodes, max_expansions), observer)


def search(graph: GridGraph, start, target, algorithm=Algorithm.ASTAR, heuristic=Heuristic.MANHATTAN,
           nodes=None, observer: Optional[Observer] = None, max_expansions: Optional[int] = None):
    """Run one strategy to completion: a list of (x, y) from start to target, or NO_PATH."""
    return Algorithm.parse(algorithm).search(graph, start, target, heuristic, nodes, observer, max_expansions)


def run_search(algorithm, graph: GridGraph, start, target, heuristic=Heuristic.MANHATTAN,
               observer: Optional[Observer] = None, max_expansions: Optional[int] = None) -> SearchResult:
    """Like search(), but also records nodes expanded, wall time and peak memory."""
    algo = Algorithm.parse(algorithm)
    last = None
    with MeasuredRun() as meter:
        for step in algo.steps(graph, start, target, heuristic, max_expansions=max_expansions):
            last = step
            if observer is not None:
                observer(step)

    expanded = len(last.closed) if last is not None else 0
    if last is not None and last.found:
        path = last.path
        logger.debug("{}: found {} step path, {} nodes expanded", algo.label, path_length(path), expanded)
        return SearchResult(algo.label, True, path, float(path_length(path)), expanded, meter.elapsed, meter.peak_kb)

    # a step stream only stops with cells still open when the expansion cap cut it short
    if last is None or last.frontier:
        error = f"expansion cap {max_expansions} reached before the search finished"
        logger.info("{}: {}", algo.label, error)
        return SearchResult(algo.label, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb, error)

    logger.debug("{}: no path from {} to {} ({} nodes expanded)", algo.label, start, target, expanded)
    return SearchResult(algo.label, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb)
