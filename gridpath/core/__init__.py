from .errors import InvalidGrid, NoPathFound, NO_PATH
from .node import Coord, Heuristic, INFINITY, Node, NodeState, NodeTable
from .grid import FREE, WALL, GridGraph
from .events import SearchStep
from .utils import reconstruct_path, path_length, is_valid_path
