from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import random

from npuzzle.errors import IllegalMoveError, MalformedStateError
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]
Grid = List[List[int]]

def goal(n: int) -> State:
    """Row-major 1..n²-1 followed by the blank."""
    return tuple(list(range(1, n * n)) + [0])

class NPuzzle:
    """Generic N×N sliding-tile puzzle (0 is the blank).

    States are flat row-major tuples; grids (lists of rows) only appear at the
    ``from_grid``/``to_grid`` boundary.
    """
    def __init__(self, n: int):
        if not isinstance(n, int) or n < 2:
            raise ValueError(f"puzzle size must be an int >= 2, got {n!r}")
        self.N = n
        self.size = n * n
        self.GOAL: State = goal(n)
        # bits per cell for the packed canonical key (4 for the 15-puzzle)
        self._bits = max(1, (self.size - 1).bit_length())
        # Precompute neighbors for blank moves: up, down, left, right
        self._nei: Dict[int, Tuple[int, ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, n)
            moves = []
            if r > 0:       moves.append(i - n)
            if r < n - 1:   moves.append(i + n)
            if c > 0:       moves.append(i - 1)
            if c < n - 1:   moves.append(i + 1)
            self._nei[i] = tuple(moves)
        self.goal_key = self.key(self.GOAL)

    # ---------- Representation ----------
    def key(self, s: State) -> int:
        """Canonical packed-integer key; injective over valid states of this size."""
        k = 0
        b = self._bits
        for v in s:
            k = (k << b) | v
        return k

    def locate_blank(self, s: State) -> Tuple[int, int]:
        try:
            return divmod(s.index(0), self.N)
        except ValueError:
            raise MalformedStateError("No blank (0) found in state") from None

    def validate(self, s: Sequence[int]) -> None:
        if len(s) != self.size:
            raise MalformedStateError(f"Expected {self.size} cells, got {len(s)}")
        for v in s:
            if isinstance(v, bool) or not isinstance(v, int):
                raise MalformedStateError(f"Cell values must be integers, got {v!r}")
            if not 0 <= v < self.size:
                raise MalformedStateError(f"Value {v} out of range 0..{self.size - 1}")
        blanks = sum(1 for v in s if v == 0)
        if blanks != 1:
            raise MalformedStateError("Puzzle must have exactly one blank space (0).")
        if len(set(s)) != self.size:
            raise MalformedStateError(
                f"Puzzle contains duplicate values. Each number 1-{self.size - 1} must appear exactly once.")

    def from_grid(self, grid: Sequence[Sequence[int]]) -> State:
        """Copy an N×N grid into a validated state."""
        try:
            rows = [list(row) for row in grid]
        except TypeError:
            raise MalformedStateError("Grid must be a sequence of rows") from None
        if len(rows) != self.N or any(len(row) != self.N for row in rows):
            raise MalformedStateError(f"Grid must be {self.N}x{self.N}")
        s = tuple(v for row in rows for v in row)
        self.validate(s)
        return s

    def to_grid(self, s: State) -> Grid:
        n = self.N
        return [list(s[r * n:(r + 1) * n]) for r in range(n)]

    # ---------- Core dynamics ----------
    def neighbors(self, s: State) -> List[Tuple[State, int]]:
        """Return list of (next_state, cost). Unit edge costs."""
        z = s.index(0)
        out: List[Tuple[State, int]] = []
        for j in self._nei[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            out.append((tuple(lst), 1))
        return out

    def apply_move(self, s: State, tile: int) -> State:
        """Slide ``tile`` into the blank."""
        z = s.index(0)
        try:
            j = s.index(tile)
        except ValueError:
            raise IllegalMoveError(f"Tile {tile} is not on the board") from None
        if tile == 0 or j not in self._nei[z]:
            raise IllegalMoveError(f"Tile {tile} is not adjacent to the blank")
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        return tuple(lst)

    def apply_moves(self, s: State, tiles: Iterable[int]) -> List[State]:
        """Replay a move list; returns every visited state including ``s``."""
        out = [s]
        for t in tiles:
            s = self.apply_move(s, t)
            out.append(s)
        return out

    # ---------- Instance generation ----------
    def scramble(self, depth: int, seed: int) -> State:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = list(self._nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            s = tuple(lst)
        return s

    def random_solvable(self, seed: Optional[int] = None) -> State:
        """Uniform shuffle; if it lands in the wrong parity class, swap the first two tiles."""
        rng = random.Random(seed)
        lst = list(range(self.size))
        rng.shuffle(lst)
        s = tuple(lst)
        if not self.is_solvable(s):
            i, j = [k for k, v in enumerate(lst) if v != 0][:2]
            lst[i], lst[j] = lst[j], lst[i]
            s = tuple(lst)
        return s

    # ---------- Solvability ----------
    def is_solvable(self, s: State) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: blank_row_from_bottom and inversions must differ in parity
             (row count is 1-based from the bottom)
        """
        arr = [x for x in s if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.N % 2 == 1:
            return (inv % 2) == 0
        blank_row, _ = self.locate_blank(s)
        blank_row_from_bottom = self.N - blank_row
        return (blank_row_from_bottom % 2) != (inv % 2)

    # ---------- Heuristics ----------
    def manhattan(self, s: State) -> int:
        return manhattan(s, self.N)

    def linear_conflict(self, s: State) -> int:
        """Correction term only (0 when no two same-line tiles are reversed)."""
        return linear_conflict(s, self.N)

    def heuristic(self, s: State) -> int:
        """Manhattan + linear conflict; admissible and consistent."""
        return manhattan(s, self.N) + linear_conflict(s, self.N)
