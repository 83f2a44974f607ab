"""Weighted graph kept as adjacency lists, newest neighbour first."""

from __future__ import annotations

import sys
from typing import TextIO


class EdgeNotFoundError(LookupError):
    """Raised when a requested edge is not in the graph."""


class Graph:
    """A graph on the vertices ``0 .. vertices - 1`` with non-negative integer weights.

    Each vertex keeps its outgoing edges in a list.  A new edge goes to the
    front of that list, so neighbours come back newest first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices cannot be negative")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        """Number of vertices in the graph."""
        return len(self._adjacency)

    def _check_vertices(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._adjacency):
                raise IndexError("invalid vertex")

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge, stored as one entry in each endpoint's list."""
        if weight < 0:
            raise ValueError("weight cannot be negative")
        self._check_vertices(src, dest)
        self._adjacency[src].insert(0, (dest, weight))
        self._adjacency[dest].insert(0, (src, weight))

    def add_directed_edge(self, src: int, dest: int, weight: int = 1) -> None:
        """Add an edge from ``src`` to ``dest`` only."""
        if weight < 0:
            raise ValueError("weight cannot be negative")
        self._check_vertices(src, dest)
        self._adjacency[src].insert(0, (dest, weight))

    def _unlink(self, src: int, dest: int) -> bool:
        entries = self._adjacency[src]
        for index, (vertex, _) in enumerate(entries):
            if vertex == dest:
                del entries[index]
                return True
        return False

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove the edge between ``src`` and ``dest``.

        Entries are removed alternately from each direction until one
        direction has no entry left, so a missing edge is not an error.
        """
        self._check_vertices(src, dest)
        first, second = src, dest
        while self._unlink(first, second):
            first, second = second, first

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in list order."""
        self._check_vertices(vertex)
        return [neighbor for neighbor, _ in self._adjacency[vertex]]

    def edge_exists(self, src: int, dest: int) -> bool:
        """Tell whether there is an edge from ``src`` to ``dest``."""
        self._check_vertices(src, dest)
        return any(vertex == dest for vertex, _ in self._adjacency[src])

    def edge_weight(self, src: int, dest: int) -> int:
        """Return the weight of the first edge from ``src`` to ``dest``."""
        self._check_vertices(src, dest)
        for vertex, weight in self._adjacency[src]:
            if vertex == dest:
                return weight
        raise EdgeNotFoundError("Edge does not exist")

    def format(self) -> str:
        """Render the adjacency lists, one line per vertex."""
        return "".join(
            f"vertex {index}:"
            + "".join(f" -> ({vertex}, {weight})" for vertex, weight in entries)
            + "\n"
            for index, entries in enumerate(self._adjacency)
        )

    def print_graph(self, file: TextIO | None = None) -> None:
        """Write the adjacency lists to ``file`` (standard output by default)."""
        stream = sys.stdout if file is None else file
        stream.write(self.format())