"""Solutions to problems over piles and undirected graphs."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence

MODULUS = 1_000_000_009


def coin_stacks(counts: Sequence[int]) -> list[tuple[int, int]] | None:
    """Empty the stacks by taking one coin from two different stacks at a time.

    Stacks are numbered from 1. Each move takes from the two fullest stacks;
    among equally full stacks the one with the higher number goes first.
    Return the moves as pairs of stack numbers, or None if the stacks cannot
    all be emptied.
    """
    heap = [(-count, -number) for number, count in enumerate(counts, start=1) if count]
    heapq.heapify(heap)
    moves: list[tuple[int, int]] = []
    while len(heap) >= 2:
        first_count, first_number = heapq.heappop(heap)
        second_count, second_number = heapq.heappop(heap)
        moves.append((-first_number, -second_number))
        for count, number in ((first_count, first_number), (second_count, second_number)):
            if -count > 1:
                heapq.heappush(heap, (count + 1, number))
    if heap:
        return None
    return moves


class _DisjointSets:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> None:
        first_root, second_root = self.find(first), self.find(second)
        if first_root != second_root:
            self._parent[second_root] = first_root


def even_land(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count the edge subsets that give every node even degree, modulo 1000000009.

    Nodes are numbered from 1. Each connected component with ``v`` nodes and
    ``e`` edges contributes a factor of ``2 ** (e - v + 1)``.
    """
    sets = _DisjointSets(node_count)
    edge_list = []
    for first, second in edges:
        for node in (first, second):
            if not 1 <= node <= node_count:
                raise ValueError(f"node {node} is outside 1..{node_count}")
        edge_list.append((first - 1, second - 1))
        sets.union(first - 1, second - 1)

    nodes_per_component = Counter(sets.find(node) for node in range(node_count))
    edges_per_component = Counter(sets.find(first) for first, _ in edge_list)

    answer = 1
    for root, nodes in nodes_per_component.items():
        cycles = edges_per_component[root] - nodes + 1
        answer = answer * pow(2, cycles, MODULUS) % MODULUS
    return answer