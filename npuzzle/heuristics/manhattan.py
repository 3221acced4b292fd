from typing import Tuple

State = Tuple[int, ...]

def manhattan(s: State, n: int) -> int:
    """Sum of Manhattan distances of every tile to its goal cell (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(tile - 1, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
