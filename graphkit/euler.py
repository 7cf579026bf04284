"""Euler cycles and paths in graphs given as 0/1 adjacency matrices.

Vertices are labelled ``1..n``; row ``i`` of the matrix describes vertex
``i + 1``. Walks always leave a vertex along the edge to its smallest
remaining neighbour.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from graphkit.traversal import _reach_dfs
from graphkit.undirected import _check_vertex, _order


class EulerKind(IntEnum):
    """Whether a graph has an Euler cycle, only an Euler path, or neither."""

    NONE = 0
    CYCLE = 1
    PATH = 2


def _nonempty_order(matrix: Sequence[Sequence[int]]) -> int:
    n = _order(matrix)
    if n == 0:
        raise ValueError("graph has no vertices")
    return n


def _successor_sets(matrix: Sequence[Sequence[int]]) -> list[set[int]]:
    return [
        {v for v, value in enumerate(row, start=1) if value} for row in matrix
    ]


def _walk(successors: list[set[int]], start: int, undirected: bool) -> list[int]:
    stack = [start]
    path = []
    while stack:
        top = stack[-1]
        remaining = successors[top - 1]
        if remaining:
            nxt = min(remaining)
            remaining.discard(nxt)
            if undirected:
                successors[nxt - 1].discard(top)
            stack.append(nxt)
        else:
            path.append(stack.pop())
    path.reverse()
    return path


def undirected_euler_kind(matrix: Sequence[Sequence[int]]) -> EulerKind:
    """Classify an undirected graph by the Euler walks it admits.

    Every vertex must be reachable from vertex 1; then no odd-degree vertex
    means a cycle and exactly two mean a path.
    """
    n = _nonempty_order(matrix)
    if len(_reach_dfs(matrix, 1, set())) < n:
        return EulerKind.NONE
    odd = sum(1 for row in matrix if sum(1 for value in row if value) % 2)
    if odd == 0:
        return EulerKind.CYCLE
    if odd == 2:
        return EulerKind.PATH
    return EulerKind.NONE


def directed_euler_kind(matrix: Sequence[Sequence[int]]) -> EulerKind:
    """Classify a directed graph by the Euler walks it admits.

    The graph must be weakly connected. Balanced in- and out-degrees give a
    cycle; one vertex with one extra outgoing arc and one with one extra
    incoming arc give a path.
    """
    n = _nonempty_order(matrix)
    symmetric = [
        [int(bool(matrix[i][j] or matrix[j][i])) for j in range(n)]
        for i in range(n)
    ]
    if len(_reach_dfs(symmetric, 1, set())) < n:
        return EulerKind.NONE
    extra_in = 0
    extra_out = 0
    for v in range(n):
        outgoing = sum(1 for value in matrix[v] if value)
        incoming = sum(1 for row in matrix if row[v])
        difference = outgoing - incoming
        if difference == 0:
            continue
        if difference == 1:
            extra_out += 1
        elif difference == -1:
            extra_in += 1
        else:
            return EulerKind.NONE
        if extra_out > 1 or extra_in > 1:
            return EulerKind.NONE
    if extra_in == 0 and extra_out == 0:
        return EulerKind.CYCLE
    return EulerKind.PATH


def undirected_euler_walk(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Walk from ``start`` that uses each undirected edge once, if it can."""
    n = _nonempty_order(matrix)
    _check_vertex(start, n)
    return _walk(_successor_sets(matrix), start, undirected=True)


def directed_euler_walk(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Walk from ``start`` that uses each arc once, if it can."""
    n = _nonempty_order(matrix)
    _check_vertex(start, n)
    return _walk(_successor_sets(matrix), start, undirected=False)