# gridpath/core/grid.py
# Static occupancy grid: bounds/walkability checks and 4-neighbour adjacency for the search algorithms.
from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Sequence, Union

import numpy as np

from .errors import InvalidGrid
from .node import Coord, Node, NodeTable, as_coord

FREE = 0
WALL = 1

# right, down, left, up
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _validate(grid) -> np.ndarray:
    if grid is None:
        raise InvalidGrid("Grid cannot be None")
    if isinstance(grid, np.ndarray):
        arr = grid
    else:
        try:
            rows = list(grid)
        except TypeError:
            raise InvalidGrid(f"Grid must be a sequence of rows, got {type(grid).__name__}") from None
        if not rows:
            raise InvalidGrid("Grid cannot be empty")
        try:
            widths = {len(row) for row in rows}
        except TypeError:
            raise InvalidGrid("Grid rows must be sequences of cells") from None
        if len(widths) != 1:
            raise InvalidGrid(f"Grid must be rectangular; found row lengths {sorted(widths)}")
        arr = np.array(rows, dtype=object)

    if arr.ndim != 2:
        raise InvalidGrid(f"Grid must be two-dimensional, got {arr.ndim} dimension(s)")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InvalidGrid("Grid cannot be empty")

    # bools are ints in Python; only the literal markers 0 and 1 are accepted
    for value in arr.flat:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)) or value not in (FREE, WALL):
            raise InvalidGrid(f"Grid cells must be {FREE} or {WALL}, found {value!r}")

    occupancy = arr.astype(np.int8) == WALL
    occupancy.setflags(write=False)
    return occupancy


class GridGraph:
    """
    4-connected grid with unit step costs. Cells are addressed as (x, y),
    stored row-major as grid[y][x]; 0 is free and 1 is a wall.

    The occupancy array is read-only after construction. Search state lives
    in NodeTables: every algorithm run allocates a private one by default,
    while `graph.nodes` is a shared table kept for callers who want to
    inspect g/h/f/parent afterwards (they must call reset() between runs).
    """
    def __init__(self, grid: Union[Sequence[Sequence[int]], np.ndarray]):
        self._blocked = _validate(grid)
        self.height, self.width = self._blocked.shape
        self.nodes = NodeTable(self.width, self.height)

    @classmethod
    def from_text(cls, text: str, wall: str = "#", free: str = ".") -> "GridGraph":
        """Build a graph from an ASCII map, one row per line; blank lines are ignored."""
        rows: List[List[int]] = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            row = []
            for ch in line:
                if ch == wall:
                    row.append(WALL)
                elif ch == free:
                    row.append(FREE)
                else:
                    raise InvalidGrid(f"Unexpected character {ch!r} on line {lineno}")
            rows.append(row)
        return cls(rows)

    @property
    def shape(self):
        return (self.height, self.width)

    @property
    def occupancy(self) -> np.ndarray:
        """Read-only boolean array, True where blocked."""
        return self._blocked

    def to_list(self) -> List[List[int]]:
        return self._blocked.astype(int).tolist()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_valid(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and not self._blocked[y, x]

    def neighbor_coords(self, x: int, y: int) -> Iterator[Coord]:
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.is_valid(nx, ny):
                yield (nx, ny)

    def neighbors(self, node: Union[Node, Coord], nodes: Optional[NodeTable] = None) -> List[Node]:
        """Walkable orthogonal neighbours in the order right, down, left, up."""
        table = self.nodes if nodes is None else nodes
        x, y = as_coord(node)
        return [table[c] for c in self.neighbor_coords(x, y)]

    def node(self, x: int, y: int) -> Node:
        return self.nodes[(x, y)]

    def new_table(self) -> NodeTable:
        return NodeTable(self.width, self.height)

    def free_cells(self) -> Iterable[Coord]:
        ys, xs = np.nonzero(~self._blocked)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def reset(self) -> None:
        """Restore every shared node to g=inf, h=0, f=0, parent=None."""
        self.nodes.reset()

    def __repr__(self):
        return f"GridGraph({self.width}x{self.height})"

    def __str__(self):
        lines = [f"Grid {self.width}x{self.height}:"]
        lines.extend(" ".join(str(v) for v in row) for row in self.to_list())
        return "\n".join(lines)
