"""Conversions between representations of directed graphs.

Vertices are labelled ``1..n``. A matrix is a list of ``n`` rows; entry
``[i][j]`` describes the arc from vertex ``i + 1`` to vertex ``j + 1``. An
edge list holds ``(u, v)`` arcs, and a neighbour list holds, at position
``i``, the heads of the arcs leaving vertex ``i + 1``. Weighted matrices use
:data:`~graphkit.undirected.NO_EDGE` for a missing arc and ``0`` on the
diagonal.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

from graphkit.undirected import (
    NO_EDGE,
    _check_edges,
    _check_neighbors,
    _check_vertex,
    _is_weighted_edge,
    _order,
)

Matrix = list[list[int]]
Arc = tuple[int, int]
WeightedArc = tuple[int, int, int]


class Degree(NamedTuple):
    """In-degree and out-degree of one vertex."""

    incoming: int
    outgoing: int


def _degrees(n: int, arcs: Iterable[Sequence[int]]) -> list[Degree]:
    incoming = [0] * n
    outgoing = [0] * n
    for arc in arcs:
        u, v = arc[0], arc[1]
        outgoing[u - 1] += 1
        incoming[v - 1] += 1
    return [Degree(i, o) for i, o in zip(incoming, outgoing)]


def _incidence(n: int, arcs: Sequence[Arc]) -> Matrix:
    table = [[0] * len(arcs) for _ in range(n)]
    for column, (u, v) in enumerate(arcs):
        table[u - 1][column] = 1
        table[v - 1][column] = -1
    return table


def degrees_from_matrix(matrix: Sequence[Sequence[int]]) -> list[Degree]:
    """In- and out-degree of each vertex from a 0/1 adjacency matrix."""
    _order(matrix)
    return _degrees(len(matrix), edges_from_matrix(matrix))


def edges_from_matrix(matrix: Sequence[Sequence[int]]) -> list[Arc]:
    """Arcs ``(i, j)`` for every non-zero entry, in row-major order."""
    n = _order(matrix)
    return [
        (i + 1, j + 1)
        for i in range(n)
        for j in range(n)
        if matrix[i][j]
    ]


def neighbors_from_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Out-neighbour list of each vertex, in ascending order."""
    _order(matrix)
    return [[j for j, value in enumerate(row, start=1) if value] for row in matrix]


def incidence_from_matrix(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Vertex-by-arc incidence matrix: ``1`` at the tail, ``-1`` at the head."""
    return _incidence(_order(matrix), edges_from_matrix(matrix))


def degrees_from_edges(n: int, edges: Iterable[Sequence[int]]) -> list[Degree]:
    """In- and out-degree of each of ``n`` vertices from a list of arcs."""
    return _degrees(n, _check_edges(n, edges))


def matrix_from_edges(n: int, edges: Iterable[Sequence[int]]) -> Matrix:
    """0/1 adjacency matrix of ``n`` vertices with a 1 for every arc."""
    matrix = [[0] * n for _ in range(n)]
    for u, v in _check_edges(n, edges):
        matrix[u - 1][v - 1] = 1
    return matrix


def neighbors_from_edges(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Out-neighbour list, in the order the arcs are given."""
    neighbors: list[list[int]] = [[] for _ in range(n)]
    for u, v in _check_edges(n, edges):
        neighbors[u - 1].append(v)
    return neighbors


def incidence_from_edges(n: int, edges: Iterable[Sequence[int]]) -> Matrix:
    """Vertex-by-arc incidence matrix; one column per given arc."""
    return _incidence(n, _check_edges(n, edges))


def degrees_from_neighbors(neighbors: Sequence[Sequence[int]]) -> list[Degree]:
    """In- and out-degree of each vertex from an out-neighbour list."""
    n = _check_neighbors(neighbors)
    return _degrees(n, edges_from_neighbors(neighbors))


def matrix_from_neighbors(neighbors: Sequence[Sequence[int]]) -> Matrix:
    """0/1 adjacency matrix with a 1 for every listed out-neighbour."""
    n = _check_neighbors(neighbors)
    matrix = [[0] * n for _ in range(n)]
    for row, adjacent in zip(matrix, neighbors):
        for vertex in adjacent:
            row[vertex - 1] = 1
    return matrix


def edges_from_neighbors(neighbors: Sequence[Sequence[int]]) -> list[Arc]:
    """Arcs ``(i, u)`` for every out-neighbour ``u`` of every vertex ``i``."""
    _check_neighbors(neighbors)
    return [
        (i, u)
        for i, adjacent in enumerate(neighbors, start=1)
        for u in adjacent
    ]


def incidence_from_neighbors(neighbors: Sequence[Sequence[int]]) -> Matrix:
    """Vertex-by-arc incidence matrix built from an out-neighbour list."""
    return _incidence(len(neighbors), edges_from_neighbors(neighbors))


def weighted_degrees(matrix: Sequence[Sequence[int]]) -> list[Degree]:
    """Degrees in a weighted matrix; ``0`` and ``NO_EDGE`` mean no arc."""
    n = _order(matrix)
    return _degrees(n, weighted_edges_from_matrix(matrix))


def weighted_edges_from_matrix(matrix: Sequence[Sequence[int]]) -> list[WeightedArc]:
    """Arcs ``(i, j, w)`` read from a weighted matrix in row-major order."""
    n = _order(matrix)
    return [
        (i + 1, j + 1, matrix[i][j])
        for i in range(n)
        for j in range(n)
        if _is_weighted_edge(matrix[i][j])
    ]


def weighted_matrix_from_edges(n: int, edges: Iterable[Sequence[int]]) -> Matrix:
    """Weighted matrix from ``(u, v, w)`` arcs.

    Missing arcs hold ``NO_EDGE``; the diagonal entry of every vertex that
    ends an arc is set to ``0``.
    """
    matrix = [[NO_EDGE] * n for _ in range(n)]
    for edge in edges:
        u, v, w = edge[0], edge[1], edge[2]
        _check_vertex(u, n)
        _check_vertex(v, n)
        matrix[u - 1][v - 1] = w
        matrix[u - 1][u - 1] = 0
        matrix[v - 1][v - 1] = 0
    return matrix