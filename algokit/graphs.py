"""Graph transposition and minimum spanning tree weight."""

from __future__ import annotations

import heapq
from typing import Iterable, Sequence


def transpose_graph(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the adjacency lists of the graph with every edge reversed.

    Vertices are ``0 .. len(adjacency) - 1``; edges are visited in source
    order, so each reversed list keeps that order. Raises ValueError on an
    edge to a vertex outside that range.
    """
    vertex_count = len(adjacency)
    transpose: list[list[int]] = [[] for _ in range(vertex_count)]
    for source, targets in enumerate(adjacency):
        for target in targets:
            if not 0 <= target < vertex_count:
                raise ValueError(f"edge {source}->{target} leaves the graph")
            transpose[target].append(source)
    return transpose


class _DisjointSets:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, node: int) -> int:
        root = node
        while root != self._parent[root]:
            root = self._parent[root]
        while node != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, first: int, second: int) -> bool:
        a, b = self.find(first), self.find(second)
        if a == b:
            return False
        if self._size[a] < self._size[b] or (self._size[a] == self._size[b] and a < b):
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


def kruskal_mst_weight(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the total weight of a minimum spanning forest.

    ``edges`` holds ``(u, v, weight)`` triples with vertices numbered
    ``0 .. vertex_count``. Raises ValueError on a vertex outside that range.
    """
    queue = []
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 0 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        queue.append((weight, u, v))
    heapq.heapify(queue)
    forest = _DisjointSets(vertex_count + 1)
    total = 0
    while queue:
        weight, u, v = heapq.heappop(queue)
        if forest.union(u, v):
            total += weight
    return total