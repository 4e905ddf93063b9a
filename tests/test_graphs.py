import pytest

from leetcrust.solutions.graphs import (
    critical_connections,
    highest_peak,
    min_cost,
    min_reorder,
    nearest_exit,
    num_of_minutes,
    shortest_alternating_paths,
)


@pytest.mark.parametrize(
    "n, red, blue, expected",
    [
        (3, [[0, 1], [1, 2]], [], [0, 1, -1]),
        (3, [[0, 1]], [[2, 1]], [0, 1, -1]),
    ],
)
def test_shortest_alternating_paths(n, red, blue, expected):
    assert shortest_alternating_paths(n, red, blue) == expected


def test_shortest_alternating_paths_alternates():
    assert shortest_alternating_paths(3, [[0, 1]], [[1, 2]]) == [0, 1, 2]


@pytest.mark.parametrize(
    "n, connections, expected",
    [
        (4, [[0, 1], [1, 2], [2, 0], [1, 3]], [[1, 3]]),
        (2, [[0, 1]], [[0, 1]]),
    ],
)
def test_critical_connections(n, connections, expected):
    assert critical_connections(n, connections) == expected


def test_critical_connections_long_chain_all_bridges():
    n = 5000
    connections = [[i, i + 1] for i in range(n - 1)]
    bridges = critical_connections(n, connections)
    assert len(bridges) == n - 1
    assert sorted(tuple(sorted(b)) for b in bridges) == [(i, i + 1) for i in range(n - 1)]


def test_critical_connections_cycle_has_none():
    assert critical_connections(3, [[0, 1], [1, 2], [2, 0]]) == []


def test_num_of_minutes_single():
    assert num_of_minutes(1, 0, [-1], [0]) == 0


def test_num_of_minutes_star():
    assert num_of_minutes(6, 2, [2, 2, -1, 2, 2, 2], [0, 0, 1, 0, 0, 0]) == 1


@pytest.mark.parametrize(
    "n, connections, expected",
    [
        (6, [[0, 1], [1, 3], [2, 3], [4, 0], [4, 5]], 3),
        (5, [[1, 0], [1, 2], [3, 2], [3, 4]], 2),
        (3, [[1, 0], [2, 0]], 0),
    ],
)
def test_min_reorder(n, connections, expected):
    assert min_reorder(n, connections) == expected


@pytest.mark.parametrize(
    "grid, expected",
    [
        ([[1, 1, 1, 1], [2, 2, 2, 2], [1, 1, 1, 1], [2, 2, 2, 2]], 3),
        ([[1, 1, 3], [3, 2, 2], [1, 1, 4]], 0),
        ([[1, 2], [4, 3]], 1),
    ],
)
def test_min_cost(grid, expected):
    assert min_cost(grid) == expected


def test_min_cost_single_cell():
    assert min_cost([[4]]) == 0


@pytest.mark.parametrize(
    "is_water, expected",
    [
        ([[0, 1], [0, 0]], [[1, 0], [2, 1]]),
        ([[0, 0, 1], [1, 0, 0], [0, 0, 0]], [[1, 1, 0], [0, 1, 1], [1, 2, 2]]),
    ],
)
def test_highest_peak(is_water, expected):
    assert highest_peak(is_water) == expected


def test_highest_peak_leaves_input_untouched():
    grid = [[0, 1], [0, 0]]
    highest_peak(grid)
    assert grid == [[0, 1], [0, 0]]


@pytest.mark.parametrize(
    "maze, entrance, expected",
    [
        (
            [["+", "+", ".", "+"], [".", ".", ".", "+"], ["+", "+", "+", "."]],
            [1, 2],
            1,
        ),
        ([["+", "+", "+"], [".", ".", "."], ["+", "+", "+"]], [1, 0], 2),
        ([[".", "+"]], [0, 0], -1),
    ],
)
def test_nearest_exit(maze, entrance, expected):
    assert nearest_exit(maze, entrance) == expected