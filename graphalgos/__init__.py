"""Weighted adjacency-list graphs with BFS, DFS, Dijkstra, Prim and Kruskal."""

__version__ = "0.1.0"
__all__ = ["algorithms", "cli", "graph", "minheap", "unionfind"]