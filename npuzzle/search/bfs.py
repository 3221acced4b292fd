from __future__ import annotations
from collections import deque
from time import perf_counter
from typing import Callable, Dict, Hashable, List, Optional, Tuple

State = Tuple[int, ...]

def bfs(start: State, goal: State,
        neighbors_fn: Callable[[State], List[Tuple[State, int]]],
        key_fn: Optional[Callable[[State], Hashable]] = None,
        max_expansions: Optional[int] = None):
    """Uninformed breadth-first search; optimal in moves, memory-hungry beyond 3x3."""
    key = key_fn or (lambda s: s)
    t0 = perf_counter()
    goal_key = key(goal)
    q = deque([start])
    parent: Dict[Hashable, Optional[State]] = {key(start): None}
    expanded = generated = 0
    while q:
        if max_expansions is not None and expanded >= max_expansions:
            return {"path": None, "g": None, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "budget_exceeded"}
        s = q.popleft()
        if key(s) == goal_key:
            path = []
            while s is not None:
                path.append(s); s = parent[key(s)]
            path.reverse()
            return {"path": path, "g": len(path)-1, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for s2, _ in neighbors_fn(s):
            generated += 1
            k2 = key(s2)
            if k2 in parent: continue
            parent[k2] = s; q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}

def distances_from(root: State,
                   neighbors_fn: Callable[[State], List[Tuple[State, int]]]) -> Dict[State, int]:
    """Exact move distance from root to every reachable state (moves are reversible)."""
    dist: Dict[State, int] = {root: 0}
    q = deque([root])
    while q:
        s = q.popleft()
        d = dist[s] + 1
        for s2, _ in neighbors_fn(s):
            if s2 not in dist:
                dist[s2] = d
                q.append(s2)
    return dist
