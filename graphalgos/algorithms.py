"""Traversals, shortest paths and minimum spanning trees over a :class:`Graph`.

Every algorithm returns its result as a new graph on the same vertices and
writes a trace of its steps to ``out`` (standard output by default).
"""

from __future__ import annotations

import math
import sys
from collections import deque
from dataclasses import dataclass
from typing import TextIO

from graphalgos.graph import Graph
from graphalgos.minheap import MinHeap
from graphalgos.unionfind import UnionFind


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    src: int
    dest: int
    weight: int


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _check_start(graph: Graph, start_vertex: int) -> None:
    if not 0 <= start_vertex < graph.vertices:
        raise IndexError("Invalid start vertex")


def bfs(graph: Graph, start_vertex: int, out: TextIO | None = None) -> Graph:
    """Breadth-first search from ``start_vertex``; returns the BFS tree.

    Tree edges point from parent to child and carry the weight of the
    corresponding edge in ``graph``.
    """
    out = _stream(out)
    print(f"\nBFS starting from vertex {start_vertex}", file=out)
    _check_start(graph, start_vertex)

    count = graph.vertices
    tree = Graph(count)
    parent: list[int | None] = [None] * count
    distance: list[int | None] = [None] * count
    distance[start_vertex] = 0

    queue = deque([start_vertex])
    while queue:
        current = queue.popleft()
        print(f"Visited: {current}", file=out)
        for neighbor in graph.neighbors(current):
            if distance[neighbor] is None:
                parent[neighbor] = current
                distance[neighbor] = distance[current] + 1
                queue.append(neighbor)
                print(
                    f"Discovered: {neighbor} from {current}, "
                    f"distance: {distance[neighbor]}",
                    file=out,
                )

    for vertex, origin in enumerate(parent):
        if origin is not None:
            tree.add_directed_edge(origin, vertex, graph.edge_weight(origin, vertex))
            print(f"Adding edge to BFS tree: {origin} -> {vertex}", file=out)

    print(f"\nDistance from start vertex {start_vertex}:", file=out)
    for vertex, dist in enumerate(distance):
        shown = "unreachable" if dist is None else dist
        print(f"Vertex {vertex}: {shown}", file=out)

    print("BFS completed.", file=out)
    return tree


def dfs(graph: Graph, start_vertex: int, out: TextIO | None = None) -> Graph:
    """Iterative depth-first search from ``start_vertex``; returns the DFS tree.

    A vertex joins the tree when it is first pushed; tree edges have weight 1.
    """
    out = _stream(out)
    print(f"\nDFS starting from vertex {start_vertex}", file=out)
    _check_start(graph, start_vertex)

    tree = Graph(graph.vertices)
    visited = [False] * graph.vertices
    visited[start_vertex] = True
    stack = [start_vertex]

    while stack:
        current = stack.pop()
        print(f"Visited: {current}", file=out)
        for neighbor in graph.neighbors(current):
            if not visited[neighbor]:
                tree.add_directed_edge(current, neighbor)
                stack.append(neighbor)
                visited[neighbor] = True

    print("DFS completed.", file=out)
    return tree


def dijkstra(graph: Graph, start_vertex: int, out: TextIO | None = None) -> Graph:
    """Dijkstra's algorithm from ``start_vertex``; returns the shortest-path tree."""
    out = _stream(out)
    print(f"\nDijkstra's algorithm starting from vertex {start_vertex}:\n", file=out)
    _check_start(graph, start_vertex)

    count = graph.vertices
    dist: list[float] = [math.inf] * count
    visited = [False] * count
    parent: list[int | None] = [None] * count
    tree = Graph(count)
    heap = MinHeap(count)

    dist[start_vertex] = 0
    heap.insert(start_vertex, 0)

    while not heap.is_empty():
        u = heap.extract_min().vertex
        print(f"Processing vertex: {u} with distance: {dist[u]}", file=out)
        if visited[u]:
            continue
        visited[u] = True

        for v in graph.neighbors(u):
            if visited[v]:
                continue
            weight = graph.edge_weight(u, v)
            candidate = dist[u] + weight
            if candidate < dist[v]:
                if parent[v] is not None:
                    tree.remove_edge(parent[v], v)
                    print(
                        f"Removing edge from shortest path tree: {parent[v]} -> {v}",
                        file=out,
                    )
                dist[v] = candidate
                parent[v] = u
                print(f"Updating distance of vertex {v} to {candidate}", file=out)
                heap.insert(v, candidate)
                tree.add_directed_edge(u, v, weight)
                print(f"Adding edge to shortest path tree: {u} -> {v}", file=out)

    print("\nAll shortest paths results: ", file=out)
    for vertex in range(count):
        if math.isinf(dist[vertex]):
            print(f"Vertex {vertex}: No path from {start_vertex}", file=out)
        else:
            shown_parent = -1 if parent[vertex] is None else parent[vertex]
            print(
                f"Vertex {vertex}: Distance = {dist[vertex]}, Parent = {shown_parent}",
                file=out,
            )
    return tree


def prim(graph: Graph, out: TextIO | None = None) -> Graph:
    """Prim's algorithm from vertex 0; returns the minimum spanning tree.

    Only the component holding vertex 0 is spanned.
    """
    out = _stream(out)
    print("\nPrim's algorithm starting\n", file=out)

    count = graph.vertices
    if count == 0:
        raise ValueError("Graph is empty")

    start_vertex = 0
    in_mst = [False] * count
    key: list[float] = [math.inf] * count
    parent: list[int | None] = [None] * count
    mst = Graph(count)
    heap = MinHeap(count)

    key[start_vertex] = 0
    heap.insert(start_vertex, 0)

    while not heap.is_empty():
        u = heap.extract_min().vertex
        in_mst[u] = True

        for v in graph.neighbors(u):
            if in_mst[v]:
                continue
            weight = graph.edge_weight(u, v)
            if weight < key[v]:
                key[v] = weight
                parent[v] = u
                if v in heap:
                    heap.decrease_key(v, weight)
                else:
                    heap.insert(v, weight)

        if u != start_vertex:
            mst.add_directed_edge(parent[u], u, key[u])
            print(
                f"Adding edge to MST: {parent[u]} -> {u} with weight {key[u]}",
                file=out,
            )

    return mst


def kruskal(graph: Graph, out: TextIO | None = None) -> Graph:
    """Kruskal's algorithm over an undirected graph; returns the minimum spanning forest."""
    out = _stream(out)
    print("\nKruskal's algorithm starting\n", file=out)

    count = graph.vertices
    mst = Graph(count)

    edges: list[Edge] = []
    for vertex in range(count):
        for neighbor in graph.neighbors(vertex):
            if vertex < neighbor:
                weight = graph.edge_weight(vertex, neighbor)
                edges.append(Edge(vertex, neighbor, weight))
                print(
                    f"Found edge: {vertex} - {neighbor} with weight {weight}",
                    file=out,
                )

    edges.sort(key=lambda edge: edge.weight)
    print(f"Sorted {len(edges)} edges by weight\n", file=out)

    sets = UnionFind(count)
    added = 0
    for edge in edges:
        if added >= count - 1:
            break
        if sets.connected(edge.src, edge.dest):
            print(
                f"Skipping edge {edge.src} - {edge.dest} (would create cycle)",
                file=out,
            )
            continue
        mst.add_directed_edge(edge.src, edge.dest, edge.weight)
        sets.unite(edge.src, edge.dest)
        added += 1
        print(
            f"Adding edge to MST: {edge.src} - {edge.dest} with weight {edge.weight}",
            file=out,
        )

    print(
        f"Kruskal's algorithm completed. Added {added} edges to MST.",
        file=out,
    )
    return mst