import matplotlib

matplotlib.use("Agg")

import pytest

from gridpath import GridGraph
from gridpath.problems import complex_maze, simple_maze, spiral_maze


@pytest.fixture
def simple_graph():
    return GridGraph(simple_maze())


@pytest.fixture
def complex_graph():
    return GridGraph(complex_maze())


@pytest.fixture
def spiral_graph():
    return GridGraph(spiral_maze())


@pytest.fixture
def walled_start_graph():
    # (0,0) is boxed in by walls on its right and below
    return GridGraph([
        [0, 1, 0],
        [1, 0, 0],
        [0, 0, 0],
    ])
