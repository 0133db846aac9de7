# algokit

A small collection of classic algorithms in plain Python with no third-party
dependencies. It covers:

- **Graphs**: minimum spanning trees (Kruskal and Prim), a union-find
  structure, and topological ordering of a directed graph.
- **Search problems**: finding a pattern inside a sequence, the N-queens
  puzzle, and the length of the shortest travelling-salesman tour.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

### Graphs

`algokit.graphs` provides:

- `Edge(u, v, weight)`: a frozen dataclass for a weighted edge.
- `DisjointSet(size)`: union-find over `0 .. size - 1`, with union by rank
  and path compression. `find(item)` returns the representative of an
  element's set; `union(a, b)` merges two sets and returns `False` if they
  were already joined. Elements out of range raise `IndexError`.
- `kruskal_mst_cost(vertex_count, edges)`: the total weight of a minimum
  spanning forest. Edges may be `Edge` objects or `(u, v, weight)` triples.
- `prim_mst(graph)`: the edges of a minimum spanning tree of a graph given
  as a square adjacency matrix, where 0 means "no edge". One `Edge(parent,
  vertex, weight)` is returned for each vertex other than 0, in vertex order.
  A matrix that is not square, or a graph that is not connected, raises
  `ValueError`.
- `topological_sort(vertex_count, edges)`: vertices in reverse depth-first
  finishing order, exploring the most recently added neighbour first. Cycles
  are not detected; every vertex still appears exactly once. Edges naming a
  missing vertex raise `ValueError`.

```python
from algokit.graphs import Edge, kruskal_mst_cost, prim_mst

kruskal_mst_cost(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])  # 19

prim_mst([
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
])
# [Edge(u=0, v=1, weight=2), Edge(u=1, v=2, weight=3),
#  Edge(u=0, v=3, weight=6), Edge(u=1, v=4, weight=5)]
```

### Search problems

`algokit.problems` provides:

- `find_pattern(sequence, pattern)`: the zero-based index where the pattern
  first occurs as a contiguous run inside the sequence, or `None`.
- `solve_n_queens(n)`: the first placement of `n` non-attacking queens found
  by backtracking, as a list giving each row's queen column, or `None` if
  there is none. A negative `n` raises `ValueError`.
- `format_board(board)`: draws a placement with `Q ` for queens and `. ` for
  empty squares, one line per row.
- `shortest_tour_length(distances)`: the length of the shortest round trip
  that starts at city 0, visits every city once and comes back, computed by
  dynamic programming over subsets of cities. Up to `MAX_CITIES` (16) cities
  are supported; an empty, non-square or larger matrix raises `ValueError`.

```python
from algokit.problems import find_pattern, shortest_tour_length, solve_n_queens

find_pattern([1, 2, 3, 4], [3, 4])  # 2
solve_n_queens(4)                   # [1, 3, 0, 2]
shortest_tour_length([
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
])  # 80
```

## Command-line tools

Installing the package provides two commands. Both print `error: ...` to
standard error and exit with status 1 on bad input.

### `algokit-graphs`

Takes one of `kruskal`, `prim` or `topo` and reads whitespace-separated
integers from standard input:

- `kruskal`: `V E`, then `E` triples `u v w`; prints `Minimum Cost: <cost>`.
- `prim`: `N`, then an `N x N` adjacency matrix; prints a table of tree
  edges headed `Edge` and `Weight`.
- `topo`: `V E`, then `E` pairs `u v`; prints
  `Topological Sort (using DFS): ` followed by the order.

```
echo "4 5  0 1 10  0 2 6  0 3 5  1 3 15  2 3 4" | algokit-graphs kruskal
```

### `algokit-problems`

- `algokit-problems queens N`: draws a placement of `N` queens, or prints
  `Solution does not exist.`
- `algokit-problems match --sequence 1 2 3 4 --pattern 3 4`: prints
  `pattern matched` and the one-based `index :<i>`, or `pattern not matched`.
- `algokit-problems tsp`: reads `N` and an `N x N` distance matrix from
  standard input and prints `The shortest path length is: <length>`.

Run either command with `--help` to see what it accepts.

## What algokit does not include

algokit has no sorting routines and no command for sorting numbers; use
Python's built-in `sorted` for that.