# gridpath/core/node.py
# A Node is one grid cell plus the transient search state (g, h, f, parent) that a run attaches to it.
from __future__ import annotations
import math
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

Coord = Tuple[int, int]
INFINITY = math.inf


class NodeState(Enum):
    """Visualization tag only; the algorithms never branch on it."""
    UNVISITED = "unvisited"
    OPEN = "open"
    CLOSED = "closed"


def as_coord(obj: Union["Node", Coord]) -> Coord:
    if isinstance(obj, Node):
        return obj.coord
    x, y = obj
    return (int(x), int(y))


class Node:
    """
    Grid cell identified by (x, y). Equality and hashing use the coordinate
    only, so a Node from any table matches any other Node at the same cell.

    - g: best known cost from start (INFINITY until reached)
    - h: heuristic estimate to target
    - f: g + h
    - parent: predecessor on the best path found so far
    """
    def __init__(self, x: int, y: int):
        self.x = int(x)
        self.y = int(y)
        self.reset()

    def reset(self) -> None:
        self.g = INFINITY
        self.h = 0
        self.f = 0
        self.parent: Optional[Node] = None
        self.state = NodeState.UNVISITED

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def heuristic_manhattan(self, target: Union["Node", Coord]) -> int:
        tx, ty = as_coord(target)
        return abs(self.x - tx) + abs(self.y - ty)

    def heuristic_euclidean(self, target: Union["Node", Coord]) -> int:
        tx, ty = as_coord(target)
        return int(math.sqrt((self.x - tx) ** 2 + (self.y - ty) ** 2))

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"({self.x},{self.y})"


class Heuristic(Enum):
    """Distance estimates usable by A* and Greedy; both are admissible on a 4-neighbour unit grid."""
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"

    def __call__(self, node: Node, target: Union[Node, Coord]) -> int:
        if self is Heuristic.EUCLIDEAN:
            return node.heuristic_euclidean(target)
        return node.heuristic_manhattan(target)

    @classmethod
    def parse(cls, value: Union[str, "Heuristic"]) -> "Heuristic":
        if isinstance(value, Heuristic):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown heuristic {value!r}; expected one of {[h.value for h in cls]}") from None


class NodeTable:
    """
    Dense width x height arena of Nodes indexed by (x, y).
    Each search run gets its own table so runs never share g/h/f/parent.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells: List[List[Node]] = [[Node(x, y) for x in range(width)] for y in range(height)]

    def __getitem__(self, coord: Union[Node, Coord]) -> Node:
        x, y = as_coord(coord)
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise KeyError(f"({x},{y}) is outside the {self.width}x{self.height} grid")
        return self._cells[y][x]

    def __contains__(self, coord) -> bool:
        x, y = as_coord(coord)
        return 0 <= x < self.width and 0 <= y < self.height

    def __iter__(self) -> Iterator[Node]:
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self.width * self.height

    def reset(self) -> None:
        for node in self:
            node.reset()
