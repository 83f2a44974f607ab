# graphalgos

A small graph toolkit: a weighted graph kept as adjacency lists, and the
classic traversal, shortest-path and spanning-tree algorithms built on top of
it. Every algorithm returns a new `Graph` holding the tree it found, and
writes a trace of its steps to a stream of your choice (standard output by
default).

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Graphs

`graphalgos.graph.Graph(vertices)` is a graph on the vertices
`0 .. vertices - 1` with non-negative integer weights.

```python
from graphalgos.graph import Graph

g = Graph(4)
g.add_edge(0, 1, 5)           # undirected, weight 5
g.add_edge(1, 2)              # weight defaults to 1
g.add_directed_edge(2, 3, 2)  # from 2 to 3 only

g.vertices                    # 4
g.edge_exists(1, 0)           # True
g.edge_weight(0, 1)           # 5
g.neighbors(1)                # [2, 0] - most recently added first
g.remove_edge(0, 1)           # removes the entries in both directions
print(g.format())             # "vertex 0:\nvertex 1: -> (2, 1)\n..."
g.print_graph()               # same text, to standard output or file=...
```

- A negative weight raises `ValueError`.
- A vertex outside `0 .. vertices - 1` raises `IndexError`.
- `edge_weight` on a missing edge raises `graphalgos.graph.EdgeNotFoundError`
  (a `LookupError`).
- Adding the same edge twice stores it twice; `remove_edge` on an edge that
  is not there does nothing.

## Algorithms

All functions live in `graphalgos.algorithms` and take an optional `out`
stream for their trace.

```python
import io
from graphalgos import algorithms

trace = io.StringIO()
tree = algorithms.dijkstra(g, 0, out=trace)
tree.print_graph()
```

- `bfs(graph, start_vertex, out)` – breadth-first tree; each tree edge keeps
  the weight of the matching edge in `graph`. The trace ends with the hop
  distance of every vertex, or `unreachable`.
- `dfs(graph, start_vertex, out)` – depth-first tree built with an explicit
  stack; tree edges have weight 1.
- `dijkstra(graph, start_vertex, out)` – shortest-path tree; the trace ends
  with each vertex's distance and parent.
- `prim(graph, out)` – minimum spanning tree grown from vertex 0; only the
  component holding vertex 0 is spanned. An empty graph raises `ValueError`.
- `kruskal(graph, out)` – minimum spanning forest from edges sorted by weight
  and a union-find structure; meant for undirected graphs.

`bfs`, `dfs` and `dijkstra` raise `IndexError` for a start vertex outside the
graph. Trees are returned as directed graphs, edges pointing from parent to
child.

## Building blocks

- `graphalgos.minheap.MinHeap(capacity)` – a binary min-heap of
  `HeapNode(vertex, distance)` over vertices `0 .. capacity - 1`, with
  `insert`, `extract_min`, `decrease_key`, `is_empty`, `len()` and `in`.
  Inserting into a full heap raises `OverflowError`, extracting from an empty
  one raises `IndexError`, and `decrease_key` on a vertex not in the heap
  raises `KeyError`.
- `graphalgos.unionfind.UnionFind(n)` – disjoint sets over `0 .. n - 1` with
  `find`, `unite` and `connected`, using union by rank and path compression.

## Demo

```
graphalgos-demo
```

builds a fixed ten-vertex sample graph, prints it, then runs every algorithm
on it from vertex 0, printing each trace and each resulting tree. The same is
available as `graphalgos.cli.main()`, and the sample graph itself as
`graphalgos.cli.build_demo_graph()`.

## What it does not do

There is no file format for graphs: graphs are built in code, and the demo
command takes no options beyond `--help` and always runs on its built-in
sample graph. Weights are integers, and negative weights are refused.