from __future__ import annotations
from bisect import bisect_left
from typing import List, Tuple

State = Tuple[int, ...]

def _tiles_to_remove(goal_order: List[int]) -> int:
    """Fewest tiles that must leave the line so the rest sit in goal order.

    goal_order lists the goal positions of the line's tiles in their current order;
    the answer is its length minus the longest increasing subsequence. With two
    tiles this is just the pair inversion count.
    """
    if len(goal_order) < 2:
        return 0
    tails: List[int] = []
    for g in goal_order:
        i = bisect_left(tails, g)
        if i == len(tails):
            tails.append(g)
        else:
            tails[i] = g
    return len(goal_order) - len(tails)

def linear_conflict(s: State, n: int) -> int:
    """Linear-conflict correction: 2 extra moves per tile that must vacate its goal line.

    Only the correction is returned; add it to ``manhattan`` for the full estimate.
    """
    extra = 0
    # Row conflicts
    for r in range(n):
        cols = []
        for t in s[r * n:(r + 1) * n]:
            if t != 0 and (t - 1) // n == r:
                cols.append((t - 1) % n)
        extra += _tiles_to_remove(cols)
    # Column conflicts
    for c in range(n):
        rows = []
        for r in range(n):
            t = s[c + r * n]
            if t != 0 and (t - 1) % n == c:
                rows.append((t - 1) // n)
        extra += _tiles_to_remove(rows)
    return 2 * extra
