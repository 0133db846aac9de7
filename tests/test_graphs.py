import io
import itertools

import pytest

from algokit.graphs import (
    DisjointSet,
    Edge,
    kruskal_mst_cost,
    main,
    prim_mst,
    topological_sort,
)

KRUSKAL_EDGES = [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]

PRIM_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _matrix_edges(matrix):
    n = len(matrix)
    return [
        (u, v, matrix[u][v])
        for u, v in itertools.combinations(range(n), 2)
        if matrix[u][v]
    ]


def test_disjoint_set_starts_as_singletons():
    forest = DisjointSet(4)
    assert [forest.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert len(forest) == 4


def test_disjoint_set_union():
    forest = DisjointSet(5)
    assert forest.union(0, 1) is True
    assert forest.union(1, 0) is False
    assert forest.find(0) == forest.find(1)
    assert forest.find(2) != forest.find(0)


def test_disjoint_set_chain_compresses_to_one_root():
    forest = DisjointSet(6)
    for a, b in itertools.pairwise(range(6)):
        forest.union(a, b)
    assert len({forest.find(i) for i in range(6)}) == 1


def test_disjoint_set_errors():
    with pytest.raises(ValueError):
        DisjointSet(-1)
    with pytest.raises(IndexError):
        DisjointSet(3).find(3)


def test_kruskal_worked_example():
    assert kruskal_mst_cost(4, KRUSKAL_EDGES) == 19


def test_kruskal_accepts_edge_objects():
    edges = [Edge(*e) for e in KRUSKAL_EDGES]
    assert kruskal_mst_cost(4, edges) == kruskal_mst_cost(4, KRUSKAL_EDGES)


def test_kruskal_no_edges():
    assert kruskal_mst_cost(3, []) == 0


def test_kruskal_forest_sums_components():
    edges = [(0, 1, 3), (2, 3, 4)]
    assert kruskal_mst_cost(4, edges) == 3 + 4


def test_kruskal_ignores_heavier_parallel_edge():
    assert kruskal_mst_cost(2, [(0, 1, 9), (0, 1, 2)]) == 2


def test_kruskal_rejects_missing_vertex():
    with pytest.raises(IndexError):
        kruskal_mst_cost(2, [(0, 5, 1)])


def test_prim_worked_example():
    assert prim_mst(PRIM_GRAPH) == [
        Edge(0, 1, 2),
        Edge(1, 2, 3),
        Edge(0, 3, 6),
        Edge(1, 4, 5),
    ]


def test_prim_and_kruskal_agree():
    total = sum(edge.weight for edge in prim_mst(PRIM_GRAPH))
    assert total == kruskal_mst_cost(len(PRIM_GRAPH), _matrix_edges(PRIM_GRAPH))


def test_prim_tree_spans_every_vertex():
    tree = prim_mst(PRIM_GRAPH)
    forest = DisjointSet(len(PRIM_GRAPH))
    assert all(forest.union(edge.u, edge.v) for edge in tree)
    assert len({forest.find(v) for v in range(len(PRIM_GRAPH))}) == 1


def test_prim_trivial_graphs():
    assert prim_mst([]) == []
    assert prim_mst([[0]]) == []


def test_prim_rejects_non_square():
    with pytest.raises(ValueError):
        prim_mst([[0, 1], [1]])


def test_prim_rejects_disconnected():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_topological_sort_pinned_order():
    assert topological_sort(3, [(0, 1), (0, 2)]) == [0, 1, 2]


def test_topological_sort_respects_edges():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    order = topological_sort(6, edges)
    assert sorted(order) == list(range(6))
    position = {vertex: index for index, vertex in enumerate(order)}
    assert all(position[u] < position[v] for u, v in edges)


def test_topological_sort_without_edges_is_permutation():
    assert sorted(topological_sort(4, [])) == [0, 1, 2, 3]


def test_topological_sort_rejects_missing_vertex():
    with pytest.raises(ValueError):
        topological_sort(2, [(0, 2)])


def test_main_kruskal(capsys, monkeypatch):
    text = "4 5\n" + "\n".join(" ".join(map(str, e)) for e in KRUSKAL_EDGES)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(["kruskal"]) == 0
    expected = f"Minimum Cost: {kruskal_mst_cost(4, KRUSKAL_EDGES)}"
    assert capsys.readouterr().out.strip() == expected


def test_main_prim(capsys, monkeypatch):
    rows = "\n".join(" ".join(map(str, row)) for row in PRIM_GRAPH)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"5\n{rows}\n"))
    assert main(["prim"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Edge \tWeight"
    assert len(lines) == len(PRIM_GRAPH)


def test_main_topo(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n0 2\n"))
    assert main(["topo"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == "Topological Sort (using DFS): " + " ".join(
        map(str, topological_sort(3, [(0, 1), (0, 2)]))
    )


def test_main_reports_short_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n"))
    assert main(["topo"]) == 1
    assert "not enough input" in capsys.readouterr().err