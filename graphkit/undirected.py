"""Conversions between representations of undirected graphs.

Vertices are labelled ``1..n``. A matrix is a list of ``n`` rows, row ``i``
describing vertex ``i + 1``. An edge list holds ``(u, v)`` pairs, and a
neighbour list holds, at position ``i``, the neighbours of vertex ``i + 1``.
Weighted matrices use :data:`NO_EDGE` for a missing edge and ``0`` on the
diagonal.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

NO_EDGE = 10000

Matrix = list[list[int]]
Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


def _order(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    for row in matrix:
        if len(row) != n:
            raise ValueError("adjacency matrix must be square")
    return n


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} is outside 1..{n}")


def _check_edges(n: int, edges: Iterable[Sequence[int]]) -> list[Edge]:
    checked = []
    for edge in edges:
        u, v = edge[0], edge[1]
        _check_vertex(u, n)
        _check_vertex(v, n)
        checked.append((u, v))
    return checked


def _check_neighbors(neighbors: Sequence[Sequence[int]]) -> int:
    n = len(neighbors)
    for adjacent in neighbors:
        for vertex in adjacent:
            _check_vertex(vertex, n)
    return n


def _is_weighted_edge(weight: int) -> bool:
    return weight != 0 and weight != NO_EDGE


def _incidence(n: int, edges: Sequence[Edge]) -> Matrix:
    table = [[0] * len(edges) for _ in range(n)]
    for column, (u, v) in enumerate(edges):
        table[u - 1][column] = 1
        table[v - 1][column] = 1
    return table


def degrees_from_matrix(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Degree of each vertex: the number of non-zero entries in its row."""
    _order(matrix)
    return [sum(1 for value in row if value) for row in matrix]


def edges_from_matrix(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Edges ``(i, j)`` with ``i < j`` read from the upper triangle."""
    n = _order(matrix)
    return [
        (i + 1, j + 1)
        for i in range(n)
        for j in range(i + 1, n)
        if matrix[i][j]
    ]


def neighbors_from_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Neighbour list built from the upper triangle of the matrix."""
    n = _order(matrix)
    neighbors: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges_from_matrix(matrix):
        neighbors[u - 1].append(v)
        neighbors[v - 1].append(u)
    return neighbors


def incidence_from_matrix(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Vertex-by-edge incidence matrix; edges in upper-triangle order."""
    return _incidence(_order(matrix), edges_from_matrix(matrix))


def degrees_from_edges(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Degree of each of ``n`` vertices, counting both ends of every edge."""
    degrees = [0] * n
    for u, v in _check_edges(n, edges):
        degrees[u - 1] += 1
        degrees[v - 1] += 1
    return degrees


def matrix_from_edges(n: int, edges: Iterable[Sequence[int]]) -> Matrix:
    """Symmetric 0/1 adjacency matrix of ``n`` vertices."""
    matrix = [[0] * n for _ in range(n)]
    for u, v in _check_edges(n, edges):
        matrix[u - 1][v - 1] = 1
        matrix[v - 1][u - 1] = 1
    return matrix


def neighbors_from_edges(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Neighbour list, in the order the edges are given."""
    neighbors: list[list[int]] = [[] for _ in range(n)]
    for u, v in _check_edges(n, edges):
        neighbors[u - 1].append(v)
        neighbors[v - 1].append(u)
    return neighbors


def incidence_from_edges(n: int, edges: Iterable[Sequence[int]]) -> Matrix:
    """Vertex-by-edge incidence matrix; one column per given edge."""
    return _incidence(n, _check_edges(n, edges))


def degrees_from_neighbors(neighbors: Sequence[Sequence[int]]) -> list[int]:
    """Degree of each vertex: the length of its neighbour list."""
    _check_neighbors(neighbors)
    return [len(adjacent) for adjacent in neighbors]


def matrix_from_neighbors(neighbors: Sequence[Sequence[int]]) -> Matrix:
    """0/1 adjacency matrix with a 1 for every listed neighbour."""
    n = _check_neighbors(neighbors)
    matrix = [[0] * n for _ in range(n)]
    for row, adjacent in zip(matrix, neighbors):
        for vertex in adjacent:
            row[vertex - 1] = 1
    return matrix


def edges_from_neighbors(neighbors: Sequence[Sequence[int]]) -> list[Edge]:
    """Edges ``(i, u)`` for every neighbour ``u`` of ``i`` with ``u > i``."""
    _check_neighbors(neighbors)
    return [
        (i, u)
        for i, adjacent in enumerate(neighbors, start=1)
        for u in adjacent
        if u > i
    ]


def incidence_from_neighbors(neighbors: Sequence[Sequence[int]]) -> Matrix:
    """Vertex-by-edge incidence matrix built from a neighbour list."""
    return _incidence(len(neighbors), edges_from_neighbors(neighbors))


def weighted_degrees(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Degrees in a weighted matrix; ``0`` and :data:`NO_EDGE` mean no edge."""
    n = _order(matrix)
    degrees = [0] * n
    for u, v, _ in weighted_edges_from_matrix(matrix):
        degrees[u - 1] += 1
        degrees[v - 1] += 1
    return degrees


def weighted_edges_from_matrix(matrix: Sequence[Sequence[int]]) -> list[WeightedEdge]:
    """Edges ``(i, j, w)`` with ``i < j`` read from a weighted matrix."""
    n = _order(matrix)
    return [
        (i + 1, j + 1, matrix[i][j])
        for i in range(n)
        for j in range(i + 1, n)
        if _is_weighted_edge(matrix[i][j])
    ]


def weighted_matrix_from_edges(n: int, edges: Iterable[Sequence[int]]) -> Matrix:
    """Weighted matrix from ``(u, v, w)`` edges.

    Missing edges hold :data:`NO_EDGE`; the diagonal entry of every vertex
    that ends an edge is set to ``0``.
    """
    matrix = [[NO_EDGE] * n for _ in range(n)]
    for edge in edges:
        u, v, w = edge[0], edge[1], edge[2]
        _check_vertex(u, n)
        _check_vertex(v, n)
        matrix[u - 1][v - 1] = w
        matrix[v - 1][u - 1] = w
        matrix[u - 1][u - 1] = 0
        matrix[v - 1][v - 1] = 0
    return matrix