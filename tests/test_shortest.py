import random

import pytest

from graphkit.shortest import (
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    longest_shortest_path,
)
from graphkit.undirected import NO_EDGE


def _random_directed(seed, n):
    rng = random.Random(seed)
    matrix = [[NO_EDGE] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
        matrix[i][(i + 1) % n] = rng.randint(1, 20)
    for i in range(n):
        for j in range(n):
            if i != j and matrix[i][j] == NO_EDGE and rng.random() < 0.4:
                matrix[i][j] = rng.randint(1, 20)
    return matrix


def _weight(matrix, path):
    return sum(matrix[a - 1][b - 1] for a, b in zip(path, path[1:]))


UNREACHABLE = [
    [0, 3, NO_EDGE],
    [NO_EDGE, 0, NO_EDGE],
    [NO_EDGE, NO_EDGE, 0],
]


@pytest.mark.parametrize("seed", range(10))
def test_dijkstra_and_bellman_ford_agree(seed):
    matrix = _random_directed(seed, 6)
    for target in range(1, 7):
        route = dijkstra(matrix, 1, target)
        bf_route, distances = bellman_ford(matrix, 1, target)
        assert route[0] == bf_route[0] == distances[target - 1]


@pytest.mark.parametrize("seed", range(10))
def test_dijkstra_path_matches_distance(seed):
    matrix = _random_directed(seed, 6)
    source = seed % 6 + 1
    for target in range(1, 7):
        distance, path = dijkstra(matrix, source, target)
        assert path[0] == source
        assert path[-1] == target
        assert _weight(matrix, path) == distance
        assert len(set(path)) == len(path)


def test_unreachable_target():
    assert dijkstra(UNREACHABLE, 1, 3) is None
    route, distances = bellman_ford(UNREACHABLE, 1, 3)
    assert route is None
    assert distances[2] == NO_EDGE


def test_route_to_self_is_trivial():
    assert dijkstra(UNREACHABLE, 2, 2) == (0, [2])
    route, _ = bellman_ford(UNREACHABLE, 2, 2)
    assert route == (0, [2])


def test_bellman_ford_with_negative_arc():
    matrix = [
        [0, 4, 5],
        [NO_EDGE, 0, NO_EDGE],
        [NO_EDGE, -3, 0],
    ]
    route, distances = bellman_ford(matrix, 1, 2)
    assert route == (2, [1, 3, 2])
    assert distances[0] == 0
    assert distances[1] == route[0]


@pytest.mark.parametrize("seed", range(8))
def test_floyd_finds_farthest_pair(seed):
    matrix = _random_directed(seed, 5)
    all_pairs = [
        (s, t, dijkstra(matrix, s, t)[0])
        for s in range(1, 6)
        for t in range(1, 6)
    ]
    farthest = max(d for _, _, d in all_pairs)
    first = next(pair for pair in all_pairs if pair[2] == farthest)
    u, v, distance, path = longest_shortest_path(matrix)
    assert (u, v, distance) == first
    assert path[0] == u
    assert path[-1] == v
    assert _weight(matrix, path) == distance


def test_floyd_without_finite_distances_is_none():
    matrix = [[NO_EDGE] * 3 for _ in range(3)]
    assert longest_shortest_path(matrix) is None


@pytest.mark.parametrize("search", [dijkstra, bellman_ford])
def test_bad_vertex_raises(search):
    with pytest.raises(ValueError):
        search(UNREACHABLE, 1, 4)


def test_non_square_matrix_raises():
    with pytest.raises(ValueError):
        longest_shortest_path([[0, 1], [1]])