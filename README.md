# graphkit

Plain-Python graph algorithms for small graphs whose vertices are numbered
from 1. There are no dependencies beyond the standard library.

A graph is given as one of:

- an adjacency **matrix**: a list of `n` rows, row `i` describing vertex `i + 1`;
- an **edge list**: `(u, v)` pairs, or `(u, v, w)` triples when weighted;
- a **neighbour list**: at position `i`, the neighbours of vertex `i + 1`.

In weighted matrices `0` and `10000` (`graphkit.undirected.NO_EDGE`) mean
"no edge"; for shortest paths `10000` also stands for infinity. Vertex
numbers outside `1..n` and non-square matrices raise `ValueError`.

## Modules

- `graphkit.undirected` – conversions between matrix, edge list, neighbour
  list and incidence matrix for undirected graphs, and degree counts
  (`degrees_from_matrix`, `edges_from_matrix`, `neighbors_from_edges`,
  `incidence_from_neighbors`, `weighted_edges_from_matrix`,
  `weighted_matrix_from_edges`, …).
- `graphkit.directed` – the same set of functions for directed graphs. Degree
  functions return `Degree(incoming, outgoing)` named tuples, and incidence
  matrices hold `1` at an arc's tail and `-1` at its head.
- `graphkit.traversal` – `count_two_step_paths`, `find_path` (first path found
  by depth-first search, or `None`), `components` and `components_bfs`,
  `connectivity` (returns `Connectivity.STRONG`, `WEAK` or `NONE`),
  `cut_vertices` and `bridges`.
- `graphkit.euler` – `undirected_euler_kind` and `directed_euler_kind`
  (returning `EulerKind.CYCLE`, `PATH` or `NONE`), and
  `undirected_euler_walk` / `directed_euler_walk`, which always follow the
  smallest remaining neighbour.
- `graphkit.hamilton` – `hamilton_cycles` lists every Hamilton cycle from a
  start vertex in lexicographic order; `cheapest_hamilton_cycle` returns
  `(cost, cycle)` for a weighted matrix, or `None`.
- `graphkit.spanning` – `dfs_spanning_tree` and `bfs_spanning_tree` return
  `(parent, child)` edges or `None` if the graph is not connected; `prim` and
  `kruskal` return `(total_weight, [Edge(u, v, weight), ...])` or `None`.
- `graphkit.shortest` – `dijkstra` returns `(distance, path)` or `None`;
  `bellman_ford` returns the route (or `None`) together with the distances to
  every vertex, and raises `NegativeCycleError` (which carries `.distances`)
  when distances are still shrinking after `n - 1` passes;
  `longest_shortest_path` returns `(u, v, distance, path)` for the farthest
  pair found by Floyd's method, or `None`.

## Using the library

```python
from graphkit import undirected, traversal, euler, spanning, shortest

matrix = [
    [0, 1, 1, 0],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [0, 0, 1, 0],
]

undirected.degrees_from_matrix(matrix)   # [2, 2, 3, 1]
undirected.edges_from_matrix(matrix)     # [(1, 2), (1, 3), (2, 3), (3, 4)]
traversal.components(matrix)             # [[1, 2, 3, 4]]
traversal.cut_vertices(matrix)           # [3]
traversal.bridges(matrix)                # [(3, 4)]
euler.undirected_euler_kind(matrix)      # EulerKind.PATH
spanning.dfs_spanning_tree(matrix, 1)

costs = [
    [0, 4, 10000],
    [4, 0, 2],
    [10000, 2, 0],
]

spanning.prim(costs, 1)
shortest.dijkstra(costs, 1, 3)           # (6, [1, 2, 3])
shortest.bellman_ford(costs, 1, 3)
shortest.longest_shortest_path(costs)
```

## Command line

Installing the package provides a `graphkit` command with one sub-command per
problem. Each reads whitespace-separated integers from the named file, or
from standard input when no file is given, and prints the answer to standard
output or to the file given with `-o/--output`:

```
graphkit dijkstra problem.txt
graphkit kruskal -o answer.txt < problem.txt
```

| Command        | Input                                              | Output |
|----------------|----------------------------------------------------|--------|
| `euler`        | `mode n m` (then `start` if mode is not 1), `m` edges `u v` | mode 1: `0`, `1` (cycle) or `2` (path); otherwise the walk from `start` |
| `components`   | `n`, then an `n × n` matrix                        | number of components, then one sorted component per line |
| `spanning`     | `mode n root`, then the matrix (mode 1 DFS, 2 BFS) | edge count and `parent child` lines, or `0` |
| `prim`         | `n root`, then a weighted matrix                   | total weight and `u v w` lines, or `0` |
| `kruskal`      | `n m`, then `m` lines `u v w`                      | total weight and `u v w` lines, or `0` |
| `dijkstra`     | `n s t`, then a weighted matrix                    | distance and path, or `0` |
| `bellman-ford` | `n s t`, then a weighted matrix                    | distance and path (or `0`), then all distances; `-1` and the distances on a negative cycle |
| `floyd`        | `n`, then a weighted matrix                        | `u v distance` and the path, or `0` |

Malformed input or an unreadable file prints an error to standard error and
exits with status 1.

## What the command line does not cover

Representation conversions, connectivity tests, cut vertices, bridges,
directed Euler walks and Hamilton cycles are available only from Python;
there are no sub-commands for them.

## Running the tests

```
pip install ".[test]"
pytest
```