"""
Min-heap frontier for the relaxation search.
"""

from __future__ import annotations

import heapq


class Frontier:
    """
    Priority queue of node ids keyed by accumulated cost.

    Entries with equal cost come out in the order they were pushed.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int]] = []
        self._counter = 0  # tie-breaker for stability

    def push(self, node_id: int, cost: int) -> None:
        self._counter += 1
        heapq.heappush(self._heap, (cost, self._counter, node_id))

    def pop(self) -> tuple[int, int]:
        """Remove and return (node_id, cost) with the lowest cost."""
        cost, _, node_id = heapq.heappop(self._heap)
        return node_id, cost

    def __len__(self) -> int:
        return len(self._heap)
