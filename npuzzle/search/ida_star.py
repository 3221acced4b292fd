from __future__ import annotations
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional, Set, Tuple
from time import perf_counter
import math

from npuzzle.log import get_logger
from npuzzle.search.budget import CancelToken

State = Tuple[int, ...]
ProgressFn = Callable[[int, int, int], None]

logger = get_logger(__name__)

FOUND = -1

def ida_star(
    start: State,
    goal: State,
    hfun: Callable[[State], int],
    neighbors_fn: Callable[[State], List[Tuple[State, int]]],
    key_fn: Optional[Callable[[State], Hashable]] = None,
    max_expansions: int = 500_000,
    progress_every: int = 100,
    progress: Optional[ProgressFn] = None,
    cancel: Optional[CancelToken] = None,
    return_path: bool = True,
) -> Dict[str, Any]:
    """
    IDA* with an explicit DFS stack (no recursion), per-path cycle avoidance and an
    expansion cap shared across all threshold rounds.
    progress receives (expansions, current path depth, current bound).
    """
    key = key_fn or (lambda s: s)
    t0 = perf_counter()
    BUDGET = object()
    CANCELLED = object()

    goal_key = key(goal)
    expanded = 0
    generated = 0
    duplicates = 0
    peak_depth = 0
    rounds = 0
    path: List[State] = [start]

    def result(termination: str, bound, ok: bool = False):
        return {
            "path": list(path) if ok and return_path else None,
            "g": len(path) - 1 if ok else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "iterations": rounds,
            "peak_recursion": peak_depth,
            "bound_final": bound,
            "time": perf_counter() - t0,
            "algorithm": "IDA*",
            "termination": termination,
        }

    def tick(bound: int):
        """Count one expansion; returns a sentinel when the search must stop."""
        nonlocal expanded
        if expanded >= max_expansions:
            return BUDGET
        expanded += 1
        if expanded % progress_every == 0:
            if progress is not None:
                progress(expanded, len(path), bound)
            if cancel is not None and cancel.is_set():
                return CANCELLED
        return None

    def bounded_dfs(bound: int):
        """
        One threshold round. Returns FOUND (path holds the solution), the smallest
        f that exceeded bound, math.inf if nothing exceeded it, or a sentinel.
        """
        nonlocal generated, duplicates, peak_depth
        path[:] = [start]
        start_key = key(start)
        stop = tick(bound)
        if stop is not None:
            return stop
        on_path: Set[Hashable] = {start_key}
        # frame: (g, key, iterator over children)
        stack: List[Tuple[int, Hashable, Iterator[Tuple[State, int]]]] = [
            (0, start_key, iter(neighbors_fn(start)))
        ]
        min_next = math.inf

        while stack:
            g, k, it = stack[-1]
            nxt = next(it, None)
            if nxt is None:
                stack.pop()
                on_path.discard(k)
                path.pop()
                continue

            s2, c = nxt
            k2 = key(s2)
            if k2 in on_path:
                duplicates += 1
                continue
            generated += 1
            g2 = g + c
            f2 = g2 + hfun(s2)
            if f2 > bound:
                if f2 < min_next:
                    min_next = f2
                continue

            path.append(s2)
            if k2 == goal_key:
                return FOUND

            stop = tick(bound)
            if stop is not None:
                return stop
            on_path.add(k2)
            stack.append((g2, k2, iter(neighbors_fn(s2))))
            peak_depth = max(peak_depth, len(stack) - 1)

        return min_next

    if key(start) == goal_key:
        return result("ok", 0, ok=True)

    bound = hfun(start)
    while True:
        rounds += 1
        t = bounded_dfs(bound)
        if t is BUDGET:
            logger.warning("IDA* hit expansion cap %d at bound %d", max_expansions, bound)
            path[:] = [start]
            return result("budget_exceeded", bound)
        if t is CANCELLED:
            logger.info("IDA* cancelled at bound %d after %d expansions", bound, expanded)
            path[:] = [start]
            return result("cancelled", bound)
        if t == FOUND:
            return result("ok", bound, ok=True)
        if t == math.inf:
            return result("exhausted", bound)
        logger.debug("IDA* raising bound %d -> %d (expanded=%d)", bound, t, expanded)
        bound = int(t)
