from __future__ import annotations
from typing import Any, Callable, Dict, Hashable, List, Optional, Set, Tuple
from time import perf_counter

from npuzzle.log import get_logger
from npuzzle.search.budget import CancelToken
from npuzzle.search.frontier import PriorityFrontier, SearchNode

State = Tuple[int, ...]
ProgressFn = Callable[[int, int, int], None]

logger = get_logger(__name__)

def reconstruct_path(
    predecessors: Dict[Hashable, State],
    start: State,
    goal: State,
    key_fn: Callable[[State], Hashable],
) -> List[State]:
    """Walk the predecessor map back from goal; start is prepended if the walk stops short."""
    start_key = key_fn(start)
    path: List[State] = [goal]
    s = goal
    k = key_fn(s)
    while k != start_key and k in predecessors:
        s = predecessors[k]
        path.append(s)
        k = key_fn(s)
    path.reverse()
    if key_fn(path[0]) != start_key:
        path.insert(0, start)
    return path

def a_star(
    start: State,
    goal: State,
    hfun: Callable[[State], int],
    neighbors_fn: Callable[[State], List[Tuple[State, int]]],
    key_fn: Optional[Callable[[State], Hashable]] = None,
    tie_break: str = "h",
    max_iterations: int = 500_000,
    progress_every: int = 100,
    progress: Optional[ProgressFn] = None,
    cancel: Optional[CancelToken] = None,
    return_path: bool = True,
) -> Dict[str, Any]:
    """
    A* with lazy deletion, an iteration cap and instrumentation.
    neighbors_fn: callable(state) -> [(next_state, cost)].
    key_fn: canonical key used for the visited/closed/predecessor maps (identity by default).
    termination is one of "ok", "exhausted", "budget_exceeded", "cancelled".
    """
    key = key_fn or (lambda s: s)
    t0 = perf_counter()
    goal_key = key(goal)
    start_key = key(start)

    expanded = 0
    generated = 0
    duplicates = 0
    iterations = 0
    peak_open = 1
    closed: Set[Hashable] = set()

    def result(termination: str, path: Optional[List[State]] = None, g: Optional[int] = None):
        return {
            "path": path if return_path else None,
            "g": g,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "iterations": iterations,
            "peak_open": peak_open,
            "peak_closed": len(closed),
            "time": perf_counter() - t0,
            "algorithm": "A*",
            "tie_break": tie_break,
            "termination": termination,
        }

    if start_key == goal_key:
        return result("ok", [start], 0)

    frontier = PriorityFrontier(tie_break)
    h0 = hfun(start)
    frontier.insert(SearchNode(f=h0, g=0, state=start, h=h0))
    best_g: Dict[Hashable, int] = {start_key: 0}
    predecessors: Dict[Hashable, State] = {}

    while not frontier.is_empty():
        if iterations >= max_iterations:
            logger.warning("A* hit iteration cap %d (closed=%d, open=%d)",
                           max_iterations, len(closed), len(frontier))
            return result("budget_exceeded")
        iterations += 1
        if iterations % progress_every == 0:
            if progress is not None:
                progress(iterations, len(closed), len(frontier))
            if cancel is not None and cancel.is_set():
                logger.info("A* cancelled after %d iterations", iterations)
                return result("cancelled")
        peak_open = max(peak_open, len(frontier))
        node = frontier.extract_min()
        k = key(node.state)
        if k in closed:
            continue
        closed.add(k)

        if k == goal_key:
            return result("ok", reconstruct_path(predecessors, start, node.state, key), node.g)

        expanded += 1
        for s2, c in neighbors_fn(node.state):
            k2 = key(s2)
            if k2 in closed:
                continue
            generated += 1
            g2 = node.g + c
            old = best_g.get(k2)
            if old is not None:
                duplicates += 1
            if old is None or g2 < old:
                best_g[k2] = g2
                predecessors[k2] = node.state
                h2 = hfun(s2)
                frontier.insert(SearchNode(f=g2 + h2, g=g2, state=s2, h=h2))

    # Open exhausted without finding goal
    return result("exhausted")
