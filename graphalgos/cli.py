"""Command that runs every algorithm on a fixed demonstration graph."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from graphalgos.algorithms import bfs, dfs, dijkstra, kruskal, prim
from graphalgos.graph import Graph


def build_demo_graph() -> Graph:
    """Return the ten-vertex graph the demonstration runs on."""
    g = Graph(10)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 2)
    g.add_edge(1, 3, 3)
    g.add_edge(2, 5, 2)
    g.add_edge(2, 4)
    g.add_edge(2, 6, 6)
    g.add_edge(3, 5, 2)
    g.add_edge(3, 6, 1)
    g.add_edge(5, 7, 4)
    g.add_edge(6, 9, 1)
    g.add_edge(9, 8, 6)
    return g


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration graph and the result of each algorithm."""
    parser = argparse.ArgumentParser(
        description="Run BFS, DFS, Dijkstra, Prim and Kruskal on a sample graph."
    )
    parser.parse_args(argv)

    g = build_demo_graph()
    print("The graph after the edges adding:")
    g.print_graph()

    bfs(g, 0).print_graph()
    dfs(g, 0).print_graph()

    dijkstra_tree = dijkstra(g, 0)
    print("\nDijkstra's algorithm tree:")
    dijkstra_tree.print_graph()

    prim_tree = prim(g)
    print("\nPrim's algorithm tree:")
    prim_tree.print_graph()

    kruskal_tree = kruskal(g)
    print("\nKruskal's algorithm tree:")
    kruskal_tree.print_graph()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())