"""Command-line front end: read a graph problem as integers, print the answer.

Every command reads whitespace-separated integers from a file, or from
standard input when no file is named, and prints its answer one result per
line with values separated by single spaces.
"""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Sequence
from pathlib import Path

from graphkit.euler import undirected_euler_kind, undirected_euler_walk
from graphkit.shortest import (
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    longest_shortest_path,
)
from graphkit.spanning import bfs_spanning_tree, dfs_spanning_tree, kruskal, prim
from graphkit.traversal import components
from graphkit.undirected import matrix_from_edges


class InputError(ValueError):
    """The input text does not describe a problem of the expected shape."""


class _Tokens:
    """Integers read from the input, consumed front to back."""

    def __init__(self, text: str) -> None:
        try:
            self._values = deque(int(token) for token in text.split())
        except ValueError as exc:
            raise InputError(f"input holds a value that is not an integer: {exc}") from None

    def take(self) -> int:
        if not self._values:
            raise InputError("input ended early")
        return self._values.popleft()

    def take_many(self, count: int) -> list[int]:
        return [self.take() for _ in range(count)]

    def count(self) -> int:
        value = self.take()
        if value < 0:
            raise InputError(f"count {value} is negative")
        return value

    def matrix(self, n: int) -> list[list[int]]:
        return [self.take_many(n) for _ in range(n)]


def _line(*values: object) -> str:
    return " ".join(str(value) for value in values)


def _euler(tokens: _Tokens) -> list[str]:
    mode = tokens.take()
    n = tokens.count()
    m = tokens.count()
    start = None if mode == 1 else tokens.take()
    edges = [tuple(tokens.take_many(2)) for _ in range(m)]
    matrix = matrix_from_edges(n, edges)
    if start is None:
        return [str(int(undirected_euler_kind(matrix)))]
    return [_line(*undirected_euler_walk(matrix, start))]


def _components(tokens: _Tokens) -> list[str]:
    n = tokens.count()
    found = components(tokens.matrix(n))
    return [str(len(found))] + [_line(*component) for component in found]


def _spanning(tokens: _Tokens) -> list[str]:
    mode = tokens.take()
    builders = {1: dfs_spanning_tree, 2: bfs_spanning_tree}
    if mode not in builders:
        raise InputError(f"spanning tree mode must be 1 or 2, not {mode}")
    n = tokens.count()
    root = tokens.take()
    tree = builders[mode](tokens.matrix(n), root)
    if tree is None:
        return ["0"]
    return [str(len(tree))] + [_line(u, v) for u, v in tree]


def _weighted_tree(result) -> list[str]:
    if result is None:
        return ["0"]
    total, edges = result
    return [str(total)] + [_line(e.u, e.v, e.weight) for e in edges]


def _prim(tokens: _Tokens) -> list[str]:
    n = tokens.count()
    root = tokens.take()
    return _weighted_tree(prim(tokens.matrix(n), root))


def _kruskal(tokens: _Tokens) -> list[str]:
    n = tokens.count()
    m = tokens.count()
    edges = [tokens.take_many(3) for _ in range(m)]
    return _weighted_tree(kruskal(n, edges))


def _dijkstra(tokens: _Tokens) -> list[str]:
    n = tokens.count()
    source, target = tokens.take(), tokens.take()
    route = dijkstra(tokens.matrix(n), source, target)
    if route is None:
        return ["0"]
    distance, path = route
    return [str(distance), _line(*path)]


def _bellman_ford(tokens: _Tokens) -> list[str]:
    n = tokens.count()
    source, target = tokens.take(), tokens.take()
    try:
        route, distances = bellman_ford(tokens.matrix(n), source, target)
    except NegativeCycleError as exc:
        return ["-1", _line(*exc.distances)]
    if route is None:
        lines = ["0"]
    else:
        distance, path = route
        lines = [str(distance), _line(*path)]
    return lines + [_line(*distances)]


def _floyd(tokens: _Tokens) -> list[str]:
    n = tokens.count()
    result = longest_shortest_path(tokens.matrix(n))
    if result is None:
        return ["0"]
    u, v, distance, path = result
    return [_line(u, v, distance), _line(*path)]


_COMMANDS: dict[str, tuple[Callable[[_Tokens], list[str]], str]] = {
    "euler": (_euler, "classify (mode 1) or walk (mode 2) an Euler path from an edge list"),
    "components": (_components, "connected components of an adjacency matrix"),
    "spanning": (_spanning, "depth-first (mode 1) or breadth-first (mode 2) spanning tree"),
    "prim": (_prim, "minimum spanning tree by Prim's method"),
    "kruskal": (_kruskal, "minimum spanning tree by Kruskal's method"),
    "dijkstra": (_dijkstra, "shortest path by Dijkstra's method"),
    "bellman-ford": (_bellman_ford, "shortest path by the Bellman-Ford method"),
    "floyd": (_floyd, "farthest pair of vertices by Floyd's method"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graphkit", description="Solve graph problems.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        command = commands.add_parser(name, help=summary, description=summary)
        command.add_argument("input", nargs="?", type=Path, help="input file (default: stdin)")
        command.add_argument("-o", "--output", type=Path, help="output file (default: stdout)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; return the process exit status."""
    args = _parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        text = args.input.read_text() if args.input else sys.stdin.read()
        output = "\n".join(handler(_Tokens(text))) + "\n"
        if args.output:
            args.output.write_text(output)
        else:
            sys.stdout.write(output)
    except (OSError, ValueError) as exc:
        print(f"graphkit: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())