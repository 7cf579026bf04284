import io
from collections import Counter

import pytest

from graphkit.cli import main
from graphkit.euler import EulerKind, undirected_euler_kind
from graphkit.shortest import bellman_ford, dijkstra, longest_shortest_path
from graphkit.spanning import bfs_spanning_tree, dfs_spanning_tree, kruskal, prim
from graphkit.traversal import components
from graphkit.undirected import NO_EDGE, matrix_from_edges

NO = NO_EDGE

WEIGHTED = [
    [0, 4, 1, NO],
    [4, 0, 2, 5],
    [1, 2, 0, 8],
    [NO, 5, 8, 0],
]

TREE_MATRIX = [
    [0, 1, 1, 0, 0],
    [1, 0, 0, 1, 0],
    [1, 0, 0, 1, 1],
    [0, 1, 1, 0, 0],
    [0, 0, 1, 0, 0],
]


def _text(*header, matrix=(), rows=()):
    lines = [" ".join(map(str, header))]
    lines += [" ".join(map(str, row)) for row in matrix]
    lines += [" ".join(map(str, row)) for row in rows]
    return "\n".join(lines) + "\n"


def run(capsys, tmp_path, command, text):
    path = tmp_path / "graph.inp"
    path.write_text(text)
    status = main([command, str(path)])
    out = capsys.readouterr().out
    return status, [[int(tok) for tok in line.split()] for line in out.splitlines()]


def test_components_match_library(capsys, tmp_path):
    matrix = [[0, 1, 0, 0], [1, 0, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]]
    status, lines = run(capsys, tmp_path, "components", _text(4, matrix=matrix))
    expected = components(matrix)
    assert status == 0
    assert lines[0] == [len(expected)]
    assert lines[1:] == expected


def test_euler_check_reports_cycle(capsys, tmp_path):
    edges = [(1, 2), (2, 3), (3, 1)]
    status, lines = run(capsys, tmp_path, "euler", _text(1, 3, 3, rows=edges))
    assert status == 0
    assert lines == [[int(EulerKind.CYCLE)]]
    assert lines[0][0] == undirected_euler_kind(matrix_from_edges(3, edges))


def test_euler_walk_uses_every_edge_once(capsys, tmp_path):
    edges = [(1, 2), (2, 3), (3, 1), (3, 4)]
    status, lines = run(capsys, tmp_path, "euler", _text(2, 4, 4, 4, rows=edges))
    walk = lines[0]
    assert status == 0
    assert walk[0] == 4
    assert len(walk) == len(edges) + 1
    used = Counter(frozenset(pair) for pair in zip(walk, walk[1:]))
    assert used == Counter(frozenset(edge) for edge in edges)


@pytest.mark.parametrize("mode, builder", [(1, dfs_spanning_tree), (2, bfs_spanning_tree)])
def test_spanning_tree_matches_library(capsys, tmp_path, mode, builder):
    status, lines = run(capsys, tmp_path, "spanning", _text(mode, 5, 1, matrix=TREE_MATRIX))
    tree = builder(TREE_MATRIX, 1)
    assert status == 0
    assert lines[0] == [len(TREE_MATRIX) - 1]
    assert [tuple(edge) for edge in lines[1:]] == tree
    assert all(TREE_MATRIX[u - 1][v - 1] for u, v in tree)


def test_spanning_tree_of_disconnected_graph_prints_zero(capsys, tmp_path):
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    status, lines = run(capsys, tmp_path, "spanning", _text(1, 3, 1, matrix=matrix))
    assert status == 0
    assert lines == [[0]]


def test_spanning_rejects_unknown_mode(capsys, tmp_path):
    status, _ = run(capsys, tmp_path, "spanning", _text(3, 5, 1, matrix=TREE_MATRIX))
    assert status == 1


def test_prim_total_is_sum_of_edges(capsys, tmp_path):
    status, lines = run(capsys, tmp_path, "prim", _text(4, 1, matrix=WEIGHTED))
    total, edges = prim(WEIGHTED, 1)
    assert status == 0
    assert lines[0] == [total]
    assert [tuple(edge) for edge in lines[1:]] == [tuple(e) for e in edges]
    assert sum(edge[2] for edge in lines[1:]) == lines[0][0]


def test_kruskal_matches_library(capsys, tmp_path):
    edges = [(1, 2, 4), (1, 3, 1), (2, 3, 2), (2, 4, 5), (3, 4, 8)]
    status, lines = run(capsys, tmp_path, "kruskal", _text(4, 5, rows=edges))
    total, tree = kruskal(4, edges)
    assert status == 0
    assert lines[0] == [total]
    assert [tuple(edge) for edge in lines[1:]] == [tuple(e) for e in tree]
    assert sum(edge[2] for edge in lines[1:]) == lines[0][0]


def test_kruskal_disconnected_prints_zero(capsys, tmp_path):
    status, lines = run(capsys, tmp_path, "kruskal", _text(3, 1, rows=[(1, 2, 5)]))
    assert status == 0
    assert lines == [[0]]


def test_dijkstra_matches_library(capsys, tmp_path):
    status, lines = run(capsys, tmp_path, "dijkstra", _text(4, 1, 4, matrix=WEIGHTED))
    distance, path = dijkstra(WEIGHTED, 1, 4)
    assert status == 0
    assert lines == [[distance], path]
    assert path[0] == 1 and path[-1] == 4


def test_dijkstra_unreachable_prints_zero(capsys, tmp_path):
    matrix = [[0, NO], [NO, 0]]
    status, lines = run(capsys, tmp_path, "dijkstra", _text(2, 1, 2, matrix=matrix))
    assert status == 0
    assert lines == [[0]]


def test_bellman_ford_reports_route_and_distances(capsys, tmp_path):
    status, lines = run(capsys, tmp_path, "bellman-ford", _text(4, 1, 4, matrix=WEIGHTED))
    (distance, path), distances = bellman_ford(WEIGHTED, 1, 4)
    assert status == 0
    assert lines == [[distance], path, distances]


def test_bellman_ford_negative_cycle_prints_minus_one(capsys, tmp_path):
    matrix = [[0, 1, NO], [NO, 0, -3], [1, NO, 0]]
    status, lines = run(capsys, tmp_path, "bellman-ford", _text(3, 1, 3, matrix=matrix))
    assert status == 0
    assert lines[0] == [-1]
    assert len(lines[1]) == 3


def test_floyd_matches_library(capsys, tmp_path):
    status, lines = run(capsys, tmp_path, "floyd", _text(4, matrix=WEIGHTED))
    u, v, distance, path = longest_shortest_path(WEIGHTED)
    assert status == 0
    assert lines == [[u, v, distance], path]
    assert path[0] == u and path[-1] == v


def test_output_option_writes_file(capsys, tmp_path):
    source = tmp_path / "graph.inp"
    source.write_text(_text(4, 1, 4, matrix=WEIGHTED))
    target = tmp_path / "graph.out"
    assert main(["dijkstra", str(source), "-o", str(target)]) == 0
    assert capsys.readouterr().out == ""
    distance, path = dijkstra(WEIGHTED, 1, 4)
    assert target.read_text().split("\n")[:2] == [str(distance), " ".join(map(str, path))]


def test_reads_standard_input(capsys, monkeypatch):
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    monkeypatch.setattr("sys.stdin", io.StringIO(_text(3, matrix=matrix)))
    assert main(["components"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == str(len(components(matrix)))


def test_truncated_input_is_an_error(capsys, tmp_path):
    status, lines = run(capsys, tmp_path, "floyd", "3\n0 1\n")
    assert status == 1
    assert lines == []


def test_non_integer_input_is_an_error(capsys, tmp_path):
    path = tmp_path / "graph.inp"
    path.write_text("2\n0 x\n1 0\n")
    assert main(["components", str(path)]) == 1
    assert "error" in capsys.readouterr().err


def test_missing_file_is_an_error(capsys, tmp_path):
    assert main(["components", str(tmp_path / "absent.inp")]) == 1
    assert "error" in capsys.readouterr().err