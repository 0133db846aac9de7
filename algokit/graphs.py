"""Minimum spanning trees and topological ordering."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from operator import attrgetter

__all__ = [
    "Edge",
    "DisjointSet",
    "kruskal_mst_cost",
    "prim_mst",
    "topological_sort",
    "main",
]


@dataclass(frozen=True)
class Edge:
    """A weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: int


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"element {item} out of range")

    def find(self, item: int) -> int:
        """Return the representative of ``item``'s set, compressing the path."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1
        return True


def _as_edge(edge: Edge | Sequence[int]) -> Edge:
    return edge if isinstance(edge, Edge) else Edge(*edge)


def kruskal_mst_cost(vertex_count: int, edges: Iterable[Edge | Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest, by Kruskal's algorithm."""
    forest = DisjointSet(vertex_count)
    cost = 0
    for edge in sorted((_as_edge(e) for e in edges), key=attrgetter("weight")):
        if forest.union(edge.u, edge.v):
            cost += edge.weight
    return cost


def prim_mst(graph: Sequence[Sequence[int]]) -> list[Edge]:
    """Minimum spanning tree of an adjacency matrix, by Prim's algorithm.

    A zero entry means there is no edge. One edge is returned per vertex
    other than vertex 0, ordered by that vertex, as ``Edge(parent, vertex, weight)``.
    """
    rows = [list(row) for row in graph]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("adjacency matrix must be square")
    if n == 0:
        return []

    key: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[0] = 0

    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    tree = []
    for v in range(1, n):
        p = parent[v]
        if p is None:
            raise ValueError("graph is not connected")
        tree.append(Edge(p, v, rows[p][v]))
    return tree


def topological_sort(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Order vertices by reverse depth-first finishing time.

    Neighbours are explored most recently added first. Cycles are not
    detected; every vertex still appears exactly once.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) refers to a missing vertex")
        adjacency[u].append(v)

    visited = [False] * vertex_count
    finished: list[int] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        stack: list[tuple[int, Iterator[int]]] = [(start, reversed(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for following in neighbours:
                if not visited[following]:
                    visited[following] = True
                    stack.append((following, reversed(adjacency[following])))
                    break
            else:
                stack.pop()
                finished.append(node)
    return finished[::-1]


class _Tokens:
    def __init__(self, text: str) -> None:
        self._values = iter([int(token) for token in text.split()])

    def take(self, count: int = 1) -> list[int]:
        taken = [next(self._values, None) for _ in range(count)]
        if None in taken:
            raise ValueError("not enough input")
        return taken  # type: ignore[return-value]

    def one(self) -> int:
        return self.take()[0]


def _run_kruskal(tokens: _Tokens) -> None:
    vertices, edge_count = tokens.take(2)
    edges = [Edge(*tokens.take(3)) for _ in range(edge_count)]
    print(f"Minimum Cost: {kruskal_mst_cost(vertices, edges)}")


def _run_prim(tokens: _Tokens) -> None:
    n = tokens.one()
    matrix = [tokens.take(n) for _ in range(n)]
    print("Edge \tWeight")
    for edge in prim_mst(matrix):
        print(f"{edge.u} - {edge.v} \t{edge.weight} ")


def _run_topo(tokens: _Tokens) -> None:
    vertices, edge_count = tokens.take(2)
    edges = [tokens.take(2) for _ in range(edge_count)]
    order = topological_sort(vertices, edges)
    print("Topological Sort (using DFS): " + " ".join(map(str, order)))


_COMMANDS = {"kruskal": _run_kruskal, "prim": _run_prim, "topo": _run_topo}


def main(argv: list[str] | None = None) -> int:
    """Run a graph algorithm on integers read from standard input."""
    parser = argparse.ArgumentParser(
        prog="algokit-graph",
        description=(
            "kruskal: V E then E lines 'u v w'; "
            "prim: N then an N x N matrix; "
            "topo: V E then E lines 'u v'."
        ),
    )
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    try:
        _COMMANDS[args.command](_Tokens(sys.stdin.read()))
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0