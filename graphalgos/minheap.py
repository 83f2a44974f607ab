"""Binary min-heap of vertices keyed by distance, with position tracking."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HeapNode:
    """A vertex and its current distance."""

    vertex: int
    distance: int


class MinHeap:
    """Fixed-capacity min-heap over vertices ``0 .. capacity - 1``."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self._capacity = capacity
        self._nodes: list[HeapNode] = []
        self._positions: list[int] = [-1] * capacity

    def __len__(self) -> int:
        return len(self._nodes)

    def is_empty(self) -> bool:
        """Tell whether the heap holds no nodes."""
        return not self._nodes

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._capacity:
            raise IndexError("invalid vertex")

    def _swap(self, i: int, j: int) -> None:
        nodes = self._nodes
        nodes[i], nodes[j] = nodes[j], nodes[i]
        self._positions[nodes[i].vertex] = i
        self._positions[nodes[j].vertex] = j

    def _sift_up(self, index: int) -> None:
        nodes = self._nodes
        while index > 0:
            parent = (index - 1) // 2
            if nodes[index].distance >= nodes[parent].distance:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        nodes = self._nodes
        size = len(nodes)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and nodes[child].distance < nodes[smallest].distance:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, vertex: int, distance: int) -> None:
        """Add ``vertex`` with ``distance``; the heap holds at most ``capacity`` nodes."""
        self._check_vertex(vertex)
        if len(self._nodes) == self._capacity:
            raise OverflowError("Heap is full")
        self._nodes.append(HeapNode(vertex, distance))
        self._positions[vertex] = len(self._nodes) - 1
        self._sift_up(len(self._nodes) - 1)

    def extract_min(self) -> HeapNode:
        """Remove and return the node with the smallest distance."""
        if not self._nodes:
            raise IndexError("Heap is empty")
        root = self._nodes[0]
        last = self._nodes.pop()
        if self._positions[root.vertex] == 0:
            self._positions[root.vertex] = -1
        if self._nodes:
            self._nodes[0] = last
            self._positions[last.vertex] = 0
            self._sift_down(0)
        return root

    def decrease_key(self, vertex: int, new_distance: int) -> None:
        """Set the distance of ``vertex`` and restore order upwards."""
        if vertex not in self:
            raise KeyError(vertex)
        index = self._positions[vertex]
        self._nodes[index] = HeapNode(vertex, new_distance)
        self._sift_up(index)

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, int) or not 0 <= vertex < self._capacity:
            return False
        index = self._positions[vertex]
        return 0 <= index < len(self._nodes) and self._nodes[index].vertex == vertex