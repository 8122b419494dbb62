import pytest

from gridpath import Algorithm, SearchStep, a_star_steps, bfs_steps, dfs_steps, dijkstra_steps, greedy_steps

ALL = list(Algorithm)


def test_steps_are_lazy(simple_graph):
    gen = bfs_steps(simple_graph, (0, 0), (4, 4))
    first = next(gen)
    assert isinstance(first, SearchStep)
    assert first.current == (0, 0)
    assert first.closed == {(0, 0)}
    assert first.frontier == {(1, 0), (0, 1)}
    assert first.path is None
    assert not first.found


def test_first_dfs_step_pushes_both_neighbours(simple_graph):
    first = next(dfs_steps(simple_graph, (0, 0), (4, 4)))
    assert first.frontier == {(1, 0), (0, 1)}


@pytest.mark.parametrize("make", [a_star_steps, dijkstra_steps, greedy_steps])
def test_first_informed_step(simple_graph, make):
    first = next(make(simple_graph, (0, 0), (4, 4)))
    assert first.current == (0, 0)
    assert first.closed == {(0, 0)}
    assert first.frontier == {(1, 0), (0, 1)}


@pytest.mark.parametrize("algo", ALL)
def test_each_cell_is_finalized_once(complex_graph, algo):
    steps = list(algo.steps(complex_graph, (0, 0), (6, 6)))
    currents = [s.current for s in steps]
    assert len(currents) == len(set(currents))


@pytest.mark.parametrize("algo", ALL)
def test_frontier_and_closed_stay_disjoint(complex_graph, algo):
    for step in algo.steps(complex_graph, (0, 0), (6, 6)):
        assert not (step.frontier & step.closed)
        assert step.current not in step.frontier
        for x, y in step.frontier | step.closed:
            assert complex_graph.is_valid(x, y)


@pytest.mark.parametrize("algo", ALL)
def test_closed_set_grows_by_one(complex_graph, algo):
    steps = list(algo.steps(complex_graph, (0, 0), (6, 6)))
    for before, after in zip(steps, steps[1:-1]):
        assert before.closed < after.closed
        assert len(after.closed) == len(before.closed) + 1


@pytest.mark.parametrize("algo", ALL)
def test_last_step_carries_the_path(complex_graph, algo):
    steps = list(algo.steps(complex_graph, (0, 0), (6, 6)))
    last = steps[-1]
    assert last.found
    assert last.current == (6, 6)
    assert last.path[0] == (0, 0)
    assert last.path[-1] == (6, 6)


@pytest.mark.parametrize("algo", ALL)
def test_exhausted_frontier_ends_the_stream(walled_start_graph, algo):
    steps = list(algo.steps(walled_start_graph, (0, 0), (2, 2)))
    assert len(steps) == 1
    assert steps[0].current == (0, 0)
    assert steps[0].frontier == frozenset()
    assert not steps[0].found


@pytest.mark.parametrize("algo", ALL)
def test_start_is_target_is_a_single_step(simple_graph, algo):
    steps = list(algo.steps(simple_graph, (3, 2), (3, 2)))
    assert len(steps) == 1
    assert steps[0].path == [(3, 2)]
    assert steps[0].closed == frozenset()


def test_a_star_expands_fewer_cells_than_dijkstra():
    from gridpath import GridGraph
    graph = GridGraph([[0] * 10 for _ in range(10)])
    astar = list(a_star_steps(graph, (0, 0), (9, 0)))
    dijkstra = list(dijkstra_steps(graph, (0, 0), (9, 0)))
    assert len(astar) < len(dijkstra)
