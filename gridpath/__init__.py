"""
gridpath: path search on 2D occupancy grids.

    from gridpath import GridGraph, Algorithm, search, NO_PATH

    graph = GridGraph([[0, 0, 0],
                       [1, 1, 0],
                       [0, 0, 0]])
    path = search(graph, (0, 0), (0, 2), Algorithm.BFS)
    if path is NO_PATH: ...

Every algorithm also has a lazy step generator (Algorithm.X.steps or
a_star_steps, bfs_steps, ...) yielding SearchStep events for renderers.
"""
from .core import (
    Coord, FREE, GridGraph, Heuristic, INFINITY, InvalidGrid, NO_PATH, Node, NodeState,
    NodeTable, NoPathFound, SearchStep, WALL, is_valid_path, path_length, reconstruct_path,
)
from .core.metrics import SearchResult
from .algorithms import (
    Algorithm, a_star_search, a_star_steps, bfs_steps, breadth_first_search,
    depth_first_search, dfs_steps, dijkstra_search, dijkstra_steps,
    greedy_best_first_search, greedy_steps, run_search, search, uniform_cost_search,
)

__version__ = "0.1.0"
