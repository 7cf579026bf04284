"""Hamilton cycles in graphs given as adjacency matrices.

Vertices are labelled ``1..n``; entry ``[i][j]`` describes the edge from
vertex ``i + 1`` to vertex ``j + 1``. Cycles are found by backtracking over
neighbours in ascending order, so they come out in lexicographic order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from graphkit.undirected import _check_vertex, _is_weighted_edge, _order


def _cycles(
    matrix: Sequence[Sequence[int]],
    start: int,
    is_edge: Callable[[int], bool],
) -> Iterator[list[int]]:
    n = _order(matrix)
    _check_vertex(start, n)
    path = [start]
    visited = {start}

    def extend() -> Iterator[list[int]]:
        row = matrix[path[-1] - 1]
        closing = len(path) == n
        for v, value in enumerate(row, start=1):
            if not is_edge(value):
                continue
            if closing:
                if v == start:
                    yield path + [v]
            elif v not in visited:
                visited.add(v)
                path.append(v)
                yield from extend()
                path.pop()
                visited.discard(v)

    return extend()


def hamilton_cycles(matrix: Sequence[Sequence[int]], start: int) -> list[list[int]]:
    """Every Hamilton cycle from ``start``, each closed by ``start`` again."""
    return list(_cycles(matrix, start, bool))


def cheapest_hamilton_cycle(
    matrix: Sequence[Sequence[int]], start: int
) -> tuple[int, list[int]] | None:
    """Cost and vertices of the cheapest Hamilton cycle from ``start``.

    The matrix holds weights; ``0`` and ``NO_EDGE`` mean no edge. Among
    cycles of equal cost the first found wins. Returns ``None`` when there
    is no Hamilton cycle.
    """
    best: tuple[int, list[int]] | None = None
    for cycle in _cycles(matrix, start, _is_weighted_edge):
        cost = sum(matrix[u - 1][v - 1] for u, v in zip(cycle, cycle[1:]))
        if best is None or cost < best[0]:
            best = (cost, cycle)
    return best