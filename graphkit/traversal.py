"""Searches over a graph given as a 0/1 adjacency matrix.

Vertices are labelled ``1..n``; row ``i`` of the matrix describes vertex
``i + 1``. Neighbours are always visited in ascending order.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from enum import IntEnum

from graphkit.undirected import _check_vertex, _order

Edge = tuple[int, int]


class Connectivity(IntEnum):
    """How well a directed graph is connected."""

    NONE = 0
    STRONG = 1
    WEAK = 2


def _successors(
    matrix: Sequence[Sequence[int]],
    vertex: int,
    removed_vertex: int | None = None,
    removed_edge: Edge | None = None,
) -> Iterator[int]:
    if vertex == removed_vertex:
        return
    for v, value in enumerate(matrix[vertex - 1], start=1):
        if not value or v == removed_vertex:
            continue
        if removed_edge is not None and (
            (vertex, v) == removed_edge or (v, vertex) == removed_edge
        ):
            continue
        yield v


def _reach_dfs(
    matrix: Sequence[Sequence[int]],
    start: int,
    visited: set[int],
    removed_vertex: int | None = None,
    removed_edge: Edge | None = None,
) -> list[int]:
    """Vertices first reached from ``start``, in depth-first preorder."""
    order = [start]
    visited.add(start)
    stack = [_successors(matrix, start, removed_vertex, removed_edge)]
    while stack:
        for v in stack[-1]:
            if v not in visited:
                visited.add(v)
                order.append(v)
                stack.append(_successors(matrix, v, removed_vertex, removed_edge))
                break
        else:
            stack.pop()
    return order


def _count_components(
    matrix: Sequence[Sequence[int]],
    removed_vertex: int | None = None,
    removed_edge: Edge | None = None,
) -> int:
    visited: set[int] = set()
    count = 0
    for start in range(1, len(matrix) + 1):
        if start == removed_vertex or start in visited:
            continue
        count += 1
        _reach_dfs(matrix, start, visited, removed_vertex, removed_edge)
    return count


def count_two_step_paths(
    matrix: Sequence[Sequence[int]], source: int, target: int
) -> int:
    """Number of vertices ``w`` with arcs ``source -> w`` and ``w -> target``."""
    n = _order(matrix)
    _check_vertex(source, n)
    _check_vertex(target, n)
    return sum(
        1
        for w in range(n)
        if matrix[source - 1][w] and matrix[w][target - 1]
    )


def find_path(
    matrix: Sequence[Sequence[int]], source: int, target: int
) -> list[int] | None:
    """The first path from ``source`` to ``target`` met by depth-first search.

    Returns ``None`` when ``target`` cannot be reached.
    """
    n = _order(matrix)
    _check_vertex(source, n)
    _check_vertex(target, n)
    if source == target:
        return [source]
    visited = {source}
    path = [source]
    stack = [_successors(matrix, source)]
    while stack:
        for v in stack[-1]:
            if v == target:
                return path + [v]
            if v not in visited:
                visited.add(v)
                path.append(v)
                stack.append(_successors(matrix, v))
                break
        else:
            stack.pop()
            path.pop()
    return None


def components(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Connected components found by depth-first search, each sorted."""
    n = _order(matrix)
    visited: set[int] = set()
    result = []
    for start in range(1, n + 1):
        if start not in visited:
            result.append(sorted(_reach_dfs(matrix, start, visited)))
    return result


def components_bfs(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Connected components found by breadth-first search, each sorted."""
    n = _order(matrix)
    visited: set[int] = set()
    result = []
    for start in range(1, n + 1):
        if start in visited:
            continue
        visited.add(start)
        queue = deque([start])
        found = []
        while queue:
            current = queue.popleft()
            found.append(current)
            for v in _successors(matrix, current):
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        result.append(sorted(found))
    return result


def connectivity(matrix: Sequence[Sequence[int]]) -> Connectivity:
    """Whether a directed graph is strongly, weakly or not connected."""
    n = _order(matrix)
    everything = set(range(1, n + 1))
    if all(
        set(_reach_dfs(matrix, start, set())) == everything
        for start in range(1, n + 1)
    ):
        return Connectivity.STRONG
    symmetric = [
        [int(bool(matrix[i][j] or matrix[j][i])) for j in range(n)]
        for i in range(n)
    ]
    if set(_reach_dfs(symmetric, 1, set())) == everything:
        return Connectivity.WEAK
    return Connectivity.NONE


def cut_vertices(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Vertices whose removal increases the number of components."""
    n = _order(matrix)
    original = _count_components(matrix)
    return [
        vertex
        for vertex in range(1, n + 1)
        if _count_components(matrix, removed_vertex=vertex) > original
    ]


def bridges(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Edges ``(u, v)``, ``u < v``, whose removal increases the component count."""
    n = _order(matrix)
    original = _count_components(matrix)
    candidates = [
        (i + 1, j + 1)
        for i in range(n)
        for j in range(i + 1, n)
        if matrix[i][j]
    ]
    return [
        edge
        for edge in candidates
        if _count_components(matrix, removed_edge=edge) > original
    ]