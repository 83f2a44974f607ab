import random

import pytest

from graphalgos.minheap import HeapNode, MinHeap


def test_extracts_in_distance_order():
    heap = MinHeap(10)
    heap.insert(0, 5)
    heap.insert(1, 3)
    heap.insert(2, 8)
    assert heap.extract_min().vertex == 1
    assert heap.extract_min().vertex == 0
    assert heap.extract_min().vertex == 2


def test_extract_returns_node_with_distance():
    heap = MinHeap(4)
    heap.insert(2, 7)
    assert heap.extract_min() == HeapNode(2, 7)


def test_empty_after_extracting_everything():
    heap = MinHeap(3)
    heap.insert(0, 5)
    heap.insert(1, 3)
    assert heap.extract_min().vertex == 1
    assert heap.extract_min().vertex == 0
    assert heap.is_empty() is True
    assert len(heap) == 0
    with pytest.raises(IndexError):
        heap.extract_min()


def test_decrease_key_missing_vertex():
    heap = MinHeap(3)
    heap.insert(0, 5)
    heap.insert(1, 3)
    with pytest.raises(KeyError):
        heap.decrease_key(2, 1)


def test_decrease_key_moves_to_front():
    heap = MinHeap(5)
    heap.insert(0, 5)
    heap.insert(1, 3)
    heap.insert(2, 8)
    heap.decrease_key(2, 1)
    assert heap.extract_min() == HeapNode(2, 1)
    assert heap.extract_min().vertex == 1


def test_overflow_when_full():
    heap = MinHeap(2)
    heap.insert(0, 1)
    heap.insert(1, 2)
    with pytest.raises(OverflowError):
        heap.insert(0, 3)
    assert len(heap) == 2


def test_insert_invalid_vertex():
    heap = MinHeap(2)
    with pytest.raises(IndexError):
        heap.insert(2, 1)


def test_contains_tracks_membership():
    heap = MinHeap(4)
    heap.insert(0, 4)
    heap.insert(3, 2)
    assert 0 in heap
    assert 3 in heap
    assert 1 not in heap
    assert 9 not in heap
    heap.extract_min()
    assert 3 not in heap
    assert 0 in heap


def test_random_inserts_come_out_sorted():
    rng = random.Random(1234)
    heap = MinHeap(50)
    distances = {vertex: rng.randrange(1000) for vertex in range(50)}
    for vertex, distance in distances.items():
        heap.insert(vertex, distance)
    out = [heap.extract_min() for _ in range(50)]
    assert [node.distance for node in out] == sorted(distances.values())
    assert {node.vertex for node in out} == set(distances)
    assert all(distances[node.vertex] == node.distance for node in out)


def test_random_decreases_keep_order():
    rng = random.Random(99)
    heap = MinHeap(30)
    current = {}
    for vertex in range(30):
        current[vertex] = rng.randrange(500, 1000)
        heap.insert(vertex, current[vertex])
    for vertex in rng.sample(range(30), 15):
        current[vertex] = rng.randrange(500)
        heap.decrease_key(vertex, current[vertex])
    out = [heap.extract_min().distance for _ in range(30)]
    assert out == sorted(current.values())