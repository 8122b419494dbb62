# gridpath/core/utils.py
# Turns the parent links left behind by a search into a start-to-target coordinate list.
from __future__ import annotations
from typing import List, Sequence, TYPE_CHECKING

from .node import Coord, Node, as_coord

if TYPE_CHECKING:
    from .grid import GridGraph


def reconstruct_path(node: Node) -> List[Coord]:
    path = []
    cur = node
    while cur is not None:
        path.append(cur.coord)
        cur = cur.parent
    path.reverse()
    return path


def path_length(path: Sequence[Coord]) -> int:
    """Number of steps, i.e. cells minus one."""
    return len(path) - 1


def is_valid_path(graph: "GridGraph", path, start, target) -> bool:
    """Endpoints match, every cell is walkable and consecutive cells are orthogonally adjacent."""
    if not path:
        return False
    if tuple(path[0]) != as_coord(start) or tuple(path[-1]) != as_coord(target):
        return False
    for (x, y) in path:
        if not graph.is_valid(x, y):
            return False
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        if abs(x0 - x1) + abs(y0 - y1) != 1:
            return False
    return True
