"""Spanning trees of graphs given as adjacency matrices.

Vertices are labelled ``1..n``; row ``i`` of the matrix describes vertex
``i + 1``. Neighbours are always examined in ascending order. In weighted
matrices ``0`` and :data:`~graphkit.undirected.NO_EDGE` mean no edge.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple

from graphkit.traversal import _successors
from graphkit.undirected import NO_EDGE, _check_vertex, _order

TreeEdge = tuple[int, int]


class Edge(NamedTuple):
    """A weighted edge between ``u`` and ``v``."""

    u: int
    v: int
    weight: int


def _spanning_or_none(n: int, tree: list[TreeEdge]) -> list[TreeEdge] | None:
    return tree if len(tree) == n - 1 else None


def dfs_spanning_tree(
    matrix: Sequence[Sequence[int]], root: int
) -> list[TreeEdge] | None:
    """Edges ``(parent, child)`` of the depth-first tree grown from ``root``.

    Returns ``None`` when the tree does not reach every vertex.
    """
    n = _order(matrix)
    _check_vertex(root, n)
    visited = {root}
    tree: list[TreeEdge] = []
    stack: list[tuple[int, Iterator[int]]] = [(root, _successors(matrix, root))]
    while stack:
        u, pending = stack[-1]
        for v in pending:
            if v not in visited:
                visited.add(v)
                tree.append((u, v))
                stack.append((v, _successors(matrix, v)))
                break
        else:
            stack.pop()
    return _spanning_or_none(n, tree)


def bfs_spanning_tree(
    matrix: Sequence[Sequence[int]], root: int
) -> list[TreeEdge] | None:
    """Edges ``(parent, child)`` of the breadth-first tree grown from ``root``.

    Returns ``None`` when the tree does not reach every vertex.
    """
    n = _order(matrix)
    _check_vertex(root, n)
    visited = {root}
    tree: list[TreeEdge] = []
    queue = deque([root])
    while queue:
        current = queue.popleft()
        for v in _successors(matrix, current):
            if v not in visited:
                visited.add(v)
                queue.append(v)
                tree.append((current, v))
    return _spanning_or_none(n, tree)


def prim(
    matrix: Sequence[Sequence[int]], root: int
) -> tuple[int, list[Edge]] | None:
    """Minimum spanning tree grown from ``root`` by Prim's method.

    Returns the total weight and the edges in the order they were added,
    each with ``u < v``. Among equally light edges the one met first when
    scanning tree vertices, then their neighbours, in ascending order wins.
    Returns ``None`` when the graph is not connected.
    """
    n = _order(matrix)
    _check_vertex(root, n)
    in_tree = {root}
    edges: list[Edge] = []
    total = 0
    for _ in range(n - 1):
        best: Edge | None = None
        best_weight = NO_EDGE
        for u in sorted(in_tree):
            for v, weight in enumerate(matrix[u - 1], start=1):
                if v not in in_tree and weight and weight < best_weight:
                    best = Edge(u, v, weight)
                    best_weight = weight
        if best is None:
            return None
        in_tree.add(best.v)
        total += best.weight
        edges.append(Edge(min(best.u, best.v), max(best.u, best.v), best.weight))
    return total, edges


def kruskal(
    n: int, edges: Iterable[Sequence[int]]
) -> tuple[int, list[Edge]] | None:
    """Minimum spanning tree of ``n`` vertices by Kruskal's method.

    Edges ``(u, v, w)`` are taken in order of weight, ties in the order
    given, and are reported as given. Returns the total weight and the tree
    edges, or ``None`` when the graph is not connected.
    """
    candidates = []
    for edge in edges:
        u, v, w = edge[0], edge[1], edge[2]
        _check_vertex(u, n)
        _check_vertex(v, n)
        candidates.append(Edge(u, v, w))
    candidates.sort(key=lambda e: e.weight)

    parent = list(range(n + 1))

    def find(vertex: int) -> int:
        root = vertex
        while parent[root] != root:
            root = parent[root]
        while parent[vertex] != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    tree: list[Edge] = []
    total = 0
    for edge in candidates:
        if len(tree) == n - 1:
            break
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            parent[root_v] = root_u
            tree.append(edge)
            total += edge.weight
    if len(tree) != n - 1:
        return None
    return total, tree