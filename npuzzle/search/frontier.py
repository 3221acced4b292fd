from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
import heapq
import itertools

from npuzzle.config import TIE_BREAKS

@dataclass
class SearchNode:
    f: int
    g: int
    state: Any
    h: int = 0

class PriorityFrontier:
    """Binary min-heap of SearchNodes ordered by f.

    No decrease-key: a better path is pushed as a fresh node and the stale one is
    skipped by the caller when it is popped (lazy deletion).
    """
    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}")
        self.tie_break = tie_break
        self._heap: List[Tuple[Tuple[int, int, int], int, SearchNode]] = []
        self._counter = itertools.count()

    def _priority(self, node: SearchNode, ctr: int) -> Tuple[int, int, int]:
        tb = self.tie_break
        if tb == "h":    return (node.f, node.h, ctr)
        if tb == "g":    return (node.f, -node.g, ctr)
        if tb == "fifo": return (node.f, 0, ctr)
        return (node.f, 0, -ctr)

    def insert(self, node: SearchNode) -> None:
        ctr = next(self._counter)
        heapq.heappush(self._heap, (self._priority(node, ctr), ctr, node))

    def extract_min(self) -> Optional[SearchNode]:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
