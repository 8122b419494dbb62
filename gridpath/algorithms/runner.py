# gridpath/algorithms/runner.py
# Drives a step generator to completion for callers that only want the final path.
from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Union

from ..core.errors import NO_PATH, NoPathFound
from ..core.events import SearchStep
from ..core.grid import GridGraph
from ..core.node import Coord, Heuristic, NodeTable

Observer = Callable[[SearchStep], object]


def run_table(graph: GridGraph, nodes: Optional[NodeTable]) -> NodeTable:
    """Private per-run state unless the caller hands over a table (e.g. graph.nodes)."""
    return graph.new_table() if nodes is None else nodes


def resolve_heuristic(heuristic) -> Callable:
    if isinstance(heuristic, str):
        return Heuristic.parse(heuristic)
    if not callable(heuristic):
        raise TypeError(f"heuristic must be a name or a callable, got {heuristic!r}")
    return heuristic


def run_to_completion(steps: Iterable[SearchStep], observer: Optional[Observer] = None) -> Union[List[Coord], NoPathFound]:
    for step in steps:
        if observer is not None:
            observer(step)
        if step.found:
            return step.path
    return NO_PATH
