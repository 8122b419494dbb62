import numpy as np
import pytest

from gridpath import (
    NO_PATH, Algorithm, GridGraph, Heuristic, NoPathFound, Node, a_star_search, breadth_first_search,
    depth_first_search, dijkstra_search, greedy_best_first_search, is_valid_path, path_length,
    run_search, search, uniform_cost_search,
)

ALL = list(Algorithm)
OPTIMAL = [Algorithm.BFS, Algorithm.DIJKSTRA, Algorithm.ASTAR]


def optimal_lengths(graph, start, target):
    lengths = {path_length(search(graph, start, target, algo)) for algo in OPTIMAL}
    for h in Heuristic:
        lengths.add(path_length(a_star_search(graph, start, target, heuristic=h)))
    return lengths


def test_two_bar_maze_shortest_path_is_eight_steps(simple_graph):
    assert optimal_lengths(simple_graph, (0, 0), (4, 4)) == {8}


def test_complex_maze_shortest_path(complex_graph):
    assert optimal_lengths(complex_graph, (0, 0), (6, 6)) == {12}


@pytest.mark.parametrize("algo", ALL)
def test_single_corridor_forces_the_same_path(spiral_graph, algo):
    path = search(spiral_graph, (0, 0), (6, 6), algo)
    assert path_length(path) == 24
    assert is_valid_path(spiral_graph, path, (0, 0), (6, 6))


@pytest.mark.parametrize("algo", ALL)
def test_every_path_is_adjacent_and_walkable(complex_graph, algo):
    path = search(complex_graph, (0, 0), (6, 6), algo)
    assert is_valid_path(complex_graph, path, (0, 0), (6, 6))
    assert path_length(path) >= 12


@pytest.mark.parametrize("algo", ALL)
def test_start_equals_target(simple_graph, algo):
    path = search(simple_graph, (2, 2), (2, 2), algo)
    assert path == [(2, 2)]
    assert path_length(path) == 0


@pytest.mark.parametrize("algo", ALL)
def test_walled_off_start_has_no_path(walled_start_graph, algo):
    result = search(walled_start_graph, (0, 0), (2, 2), algo)
    assert result is NO_PATH
    assert isinstance(result, NoPathFound)
    assert not result


@pytest.mark.parametrize("algo", ALL)
def test_unreachable_target(algo):
    graph = GridGraph([
        [0, 0, 1, 0],
        [0, 0, 1, 0],
    ])
    assert search(graph, (0, 0), (3, 1), algo) is NO_PATH


@pytest.mark.parametrize("algo", ALL)
def test_target_outside_grid_is_never_reached(simple_graph, algo):
    assert search(simple_graph, (0, 0), (9, 9), algo) is NO_PATH


def test_start_outside_grid_raises(simple_graph):
    with pytest.raises(KeyError):
        search(simple_graph, (-1, 0), (4, 4), Algorithm.BFS)


@pytest.mark.parametrize("algo", ALL)
def test_repeated_runs_on_one_graph(complex_graph, algo):
    first = search(complex_graph, (0, 0), (6, 6), algo)
    second = search(complex_graph, (0, 0), (6, 6), algo)
    assert path_length(first) == path_length(second)
    # private tables: the graph's own nodes are untouched
    assert all(node.parent is None for node in complex_graph.nodes)


def test_shared_nodes_need_a_reset(simple_graph):
    assert path_length(breadth_first_search(simple_graph, (0, 0), (4, 4), nodes=simple_graph.nodes)) == 8
    # stale g values from the BFS run block every relaxation out of the start
    assert dijkstra_search(simple_graph, (0, 0), (4, 4), nodes=simple_graph.nodes) is NO_PATH
    simple_graph.reset()
    assert path_length(dijkstra_search(simple_graph, (0, 0), (4, 4), nodes=simple_graph.nodes)) == 8


def test_dfs_can_be_longer_than_bfs():
    graph = GridGraph([[0] * 3 for _ in range(3)])
    # the LIFO frontier dives down the left column and around the far side
    dfs = depth_first_search(graph, (0, 0), (2, 0))
    bfs = breadth_first_search(graph, (0, 0), (2, 0))
    assert path_length(bfs) == 2
    assert is_valid_path(graph, dfs, (0, 0), (2, 0))
    assert path_length(dfs) == 6
    assert path_length(dfs) > path_length(bfs)


@pytest.mark.parametrize("algo", [Algorithm.BFS, Algorithm.DFS, Algorithm.GREEDY])
def test_reversed_run_on_shared_nodes_without_reset(algo):
    graph = GridGraph([[0] * 3 for _ in range(3)])
    assert path_length(search(graph, (0, 0), (2, 2), algo, nodes=graph.nodes)) >= 4
    # (2, 2) still carries a parent from the first run
    back = search(graph, (2, 2), (0, 0), algo, nodes=graph.nodes)
    assert is_valid_path(graph, back, (2, 2), (0, 0))


@pytest.mark.parametrize("algo", [Algorithm.ASTAR, Algorithm.DIJKSTRA])
def test_reversed_priority_run_on_shared_nodes_terminates(algo):
    graph = GridGraph([[0] * 3 for _ in range(3)])
    search(graph, (0, 0), (2, 2), algo, nodes=graph.nodes)
    back = search(graph, (2, 2), (0, 0), algo, nodes=graph.nodes)
    assert back is NO_PATH or is_valid_path(graph, back, (2, 2), (0, 0))


@pytest.mark.parametrize("seed", range(25))
def test_random_grids_agree(seed):
    rng = np.random.default_rng(seed)
    grid = (rng.random((8, 10)) < 0.3).astype(int)
    grid[0, 0] = 0
    grid[7, 9] = 0
    graph = GridGraph(grid)
    start, target = (0, 0), (9, 7)

    results = {algo: search(graph, start, target, algo) for algo in ALL}
    found = {algo: path is not NO_PATH for algo, path in results.items()}
    assert len(set(found.values())) == 1

    if found[Algorithm.BFS]:
        shortest = path_length(results[Algorithm.BFS])
        assert optimal_lengths(graph, start, target) == {shortest}
        for algo, path in results.items():
            assert is_valid_path(graph, path, start, target), algo
            assert path_length(path) >= shortest


def test_nodes_accepted_as_endpoints(simple_graph):
    assert path_length(a_star_search(simple_graph, Node(0, 0), Node(4, 4))) == 8


def test_named_wrappers_match_the_enum(complex_graph):
    start, target = (0, 0), (6, 6)
    assert path_length(a_star_search(complex_graph, start, target)) == 12
    assert path_length(breadth_first_search(complex_graph, start, target)) == 12
    assert path_length(dijkstra_search(complex_graph, start, target)) == 12
    assert path_length(uniform_cost_search(complex_graph, start, target)) == 12
    assert is_valid_path(complex_graph, greedy_best_first_search(complex_graph, start, target), start, target)
    assert is_valid_path(complex_graph, depth_first_search(complex_graph, start, target), start, target)


@pytest.mark.parametrize("name,expected", [
    ("astar", Algorithm.ASTAR), ("A*", Algorithm.ASTAR), ("bfs", Algorithm.BFS),
    ("DFS", Algorithm.DFS), ("ucs", Algorithm.DIJKSTRA), ("dijkstra", Algorithm.DIJKSTRA),
    ("greedy", Algorithm.GREEDY), (Algorithm.BFS, Algorithm.BFS),
])
def test_algorithm_parse(name, expected):
    assert Algorithm.parse(name) is expected


def test_algorithm_parse_unknown():
    with pytest.raises(ValueError):
        Algorithm.parse("bogosearch")


def test_search_accepts_names(simple_graph):
    assert path_length(search(simple_graph, (0, 0), (4, 4), "ucs")) == 8


@pytest.mark.parametrize("algo", [Algorithm.ASTAR, Algorithm.GREEDY])
def test_unknown_heuristic(simple_graph, algo):
    with pytest.raises(ValueError):
        search(simple_graph, (0, 0), (4, 4), algo, heuristic="chebyshev")


def test_custom_heuristic_callable(simple_graph):
    # h = 0 turns A* into Dijkstra
    path = a_star_search(simple_graph, (0, 0), (4, 4), heuristic=lambda node, target: 0)
    assert path_length(path) == 8


@pytest.mark.parametrize("algo", ALL)
def test_expansion_cap(simple_graph, algo):
    assert search(simple_graph, (0, 0), (4, 4), algo, max_expansions=1) is NO_PATH


@pytest.mark.parametrize("algo", ALL)
def test_expansion_cap_is_reported(simple_graph, algo):
    capped = run_search(algo, simple_graph, (0, 0), (4, 4), max_expansions=1)
    assert not capped.success
    assert "expansion cap 1" in capped.error
    assert capped.nodes_expanded == 1


def test_exhausted_frontier_is_not_an_error(walled_start_graph):
    result = run_search(Algorithm.BFS, walled_start_graph, (0, 0), (2, 2))
    assert not result.success
    assert result.error is None


@pytest.mark.parametrize("algo", ALL)
def test_observer_sees_every_step(simple_graph, algo):
    seen = []
    path = search(simple_graph, (0, 0), (4, 4), algo, observer=seen.append)
    assert seen
    assert seen[-1].path == path
    assert all(step.path is None for step in seen[:-1])


def test_run_search_records_metrics(simple_graph):
    result = run_search("astar", simple_graph, (0, 0), (4, 4))
    assert result.algo == "A*"
    assert result.success
    assert result.cost == 8.0
    assert result.path[0] == (0, 0) and result.path[-1] == (4, 4)
    assert result.nodes_expanded > 0
    assert result.time_s >= 0


def test_run_search_without_path(walled_start_graph):
    result = run_search(Algorithm.DFS, walled_start_graph, (0, 0), (2, 2))
    assert not result.success
    assert result.path == []
    assert result.cost == float("inf")
    assert result.to_dict()["cost"] is None
