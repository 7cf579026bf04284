"""Shortest paths in graphs given as weighted adjacency matrices.

Vertices are labelled ``1..n``; entry ``[i][j]`` is the weight of the arc
from vertex ``i + 1`` to vertex ``j + 1``. :data:`~graphkit.undirected.NO_EDGE`
stands for a missing arc and doubles as infinity, as in the input format.
"""

from __future__ import annotations

from collections.abc import Sequence

from graphkit.undirected import NO_EDGE, _check_vertex, _order

Route = tuple[int, list[int]]


class NegativeCycleError(ValueError):
    """Distances kept shrinking: the graph has a negative cycle."""

    def __init__(self, distances: Sequence[int] = ()) -> None:
        super().__init__("graph contains a negative cycle")
        self.distances = list(distances)


def _trace(parent: Sequence[int], target: int) -> list[int]:
    path = []
    seen = set()
    vertex = target
    while vertex:
        if vertex in seen:
            raise NegativeCycleError()
        seen.add(vertex)
        path.append(vertex)
        vertex = parent[vertex - 1]
    path.reverse()
    return path


def _initial(matrix: Sequence[Sequence[int]], source: int) -> tuple[list[int], list[int]]:
    n = len(matrix)
    distances = list(matrix[source - 1])
    parent = [source] * n
    distances[source - 1] = 0
    parent[source - 1] = 0
    return distances, parent


def dijkstra(
    matrix: Sequence[Sequence[int]], source: int, target: int
) -> Route | None:
    """Distance and path from ``source`` to ``target`` by Dijkstra's method.

    Returns ``None`` when ``target`` cannot be reached.
    """
    n = _order(matrix)
    _check_vertex(source, n)
    _check_vertex(target, n)
    distances, parent = _initial(matrix, source)
    done = {source}
    while True:
        nearest = 0
        best = NO_EDGE
        for v in range(1, n + 1):
            if v not in done and distances[v - 1] < best:
                nearest, best = v, distances[v - 1]
        if not nearest:
            break
        done.add(nearest)
        row = matrix[nearest - 1]
        for v in range(1, n + 1):
            candidate = best + row[v - 1]
            if v not in done and distances[v - 1] > candidate:
                distances[v - 1] = candidate
                parent[v - 1] = nearest
    if distances[target - 1] == NO_EDGE:
        return None
    return distances[target - 1], _trace(parent, target)


def bellman_ford(
    matrix: Sequence[Sequence[int]], source: int, target: int
) -> tuple[Route | None, list[int]]:
    """Shortest route by the Bellman-Ford method, allowing negative weights.

    Returns the route to ``target`` (``None`` if unreachable) and the
    distance from ``source`` to every vertex. At most ``n - 1`` relaxation
    passes are made; if the last of them still changed a distance,
    :class:`NegativeCycleError` is raised carrying the distances reached.
    """
    n = _order(matrix)
    _check_vertex(source, n)
    _check_vertex(target, n)
    distances, parent = _initial(matrix, source)
    settled = False
    for _ in range(n - 1):
        settled = True
        for v in range(1, n + 1):
            for u in range(1, n + 1):
                candidate = distances[u - 1] + matrix[u - 1][v - 1]
                if distances[v - 1] > candidate:
                    distances[v - 1] = candidate
                    parent[v - 1] = u
                    settled = False
        if settled:
            break
    if not settled:
        raise NegativeCycleError(distances)
    if distances[target - 1] == NO_EDGE:
        return None, distances
    return (distances[target - 1], _trace(parent, target)), distances


def longest_shortest_path(
    matrix: Sequence[Sequence[int]],
) -> tuple[int, int, int, list[int]] | None:
    """The pair of vertices farthest apart, by Floyd's all-pairs method.

    Returns ``(u, v, distance, path)`` for the largest finite shortest
    distance, the first pair in row-major order winning ties; the diagonal
    counts too. Returns ``None`` when no distance is finite.
    """
    n = _order(matrix)
    dist = [list(row) for row in matrix]
    parent = [[i] * n for i in range(1, n + 1)]
    for k in range(n):
        via_k = dist[k]
        for u in range(n):
            to_k = dist[u][k]
            row = dist[u]
            for v in range(n):
                if row[v] > to_k + via_k[v]:
                    row[v] = to_k + via_k[v]
                    parent[u][v] = parent[k][v]

    best: tuple[int, int, int] | None = None
    for i in range(n):
        for j in range(n):
            d = dist[i][j]
            if d != NO_EDGE and (best is None or d > best[2]):
                best = (i + 1, j + 1, d)
    if best is None:
        return None

    u, v, distance = best
    links = parent[u - 1]
    path = [v]
    step = links[v - 1]
    while step != links[step - 1]:
        path.append(step)
        if len(path) > n:
            raise NegativeCycleError()
        step = links[step - 1]
    path.append(u)
    path.reverse()
    return u, v, distance, path