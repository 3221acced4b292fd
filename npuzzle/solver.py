from __future__ import annotations
from typing import Callable, List, Optional, Sequence

from npuzzle.config import SolverConfig
from npuzzle.domains.puzzlen import Grid, NPuzzle
from npuzzle.errors import MalformedStateError, UnsolvableStateError
from npuzzle.log import get_logger
from npuzzle.search.a_star import a_star
from npuzzle.search.budget import CancelToken
from npuzzle.search.ida_star import ida_star

ProgressFn = Callable[[int, int, int], None]

logger = get_logger(__name__)

class PuzzleSolver:
    """Entry point for hosts: validate, check parity, search, extract moves.

    The instance keeps only the board size, goal and config, so one solver can
    serve any number of ``solve`` calls. Grids going in and out are copied.
    """
    def __init__(self, size: int = 4, config: Optional[SolverConfig] = None):
        self.puzzle = NPuzzle(size)
        self.size = size
        self.config = config or SolverConfig()

    @property
    def goal(self) -> Grid:
        return self.puzzle.to_grid(self.puzzle.GOAL)

    def is_solvable(self, grid: Sequence[Sequence[int]]) -> bool:
        return self.puzzle.is_solvable(self.puzzle.from_grid(grid))

    def heuristic(self, grid: Sequence[Sequence[int]]) -> int:
        return self.puzzle.heuristic(self.puzzle.from_grid(grid))

    def random_puzzle(self, seed: Optional[int] = None) -> Grid:
        return self.puzzle.to_grid(self.puzzle.random_solvable(seed))

    def solve(
        self,
        grid: Sequence[Sequence[int]],
        progress_callback: Optional[ProgressFn] = None,
        cancel: Optional[CancelToken] = None,
    ) -> Optional[List[Grid]]:
        """Return the list of grids from ``grid`` to the goal, or None if the budget ran out.

        Raises MalformedStateError for invalid grids and UnsolvableStateError for
        configurations in the wrong parity class; neither reaches the search.
        """
        p = self.puzzle
        cfg = self.config
        start = p.from_grid(grid)
        if not p.is_solvable(start):
            raise UnsolvableStateError("This puzzle configuration is not solvable.")
        if p.key(start) == p.goal_key:
            return [p.to_grid(start)]

        h0 = p.heuristic(start)
        res = None
        if cfg.use_ida and h0 > cfg.ida_threshold:
            logger.info("heuristic %d > %d, trying IDA*", h0, cfg.ida_threshold)
            res = ida_star(start, p.GOAL, p.heuristic, p.neighbors, key_fn=p.key,
                           max_expansions=cfg.ida_max_expansions,
                           progress_every=cfg.progress_interval,
                           progress=progress_callback, cancel=cancel)
            if res["termination"] == "cancelled":
                return None
            if res["path"] is None:
                logger.warning("IDA* gave up (%s after %d expansions), falling back to A*",
                               res["termination"], res["expanded"])
                res = None

        if res is None:
            logger.info("running A* from heuristic %d", h0)
            res = a_star(start, p.GOAL, p.heuristic, p.neighbors, key_fn=p.key,
                         tie_break=cfg.tie_break,
                         max_iterations=cfg.max_iterations,
                         progress_every=cfg.progress_interval,
                         progress=progress_callback, cancel=cancel)

        if res["path"] is None:
            logger.warning("no solution found within budget (%s)", res["termination"])
            return None
        logger.info("%s found %d-move solution in %.3fs (expanded=%d)",
                    res["algorithm"], res["g"], res["time"], res["expanded"])
        return [p.to_grid(s) for s in res["path"]]

    def get_moves(self, path: Sequence[Sequence[Sequence[int]]]) -> List[int]:
        """Tile values in slide order: the tile that moves into each step's blank."""
        p = self.puzzle
        states = [p.from_grid(g) for g in path]
        moves: List[int] = []
        for cur, nxt in zip(states, states[1:]):
            z = cur.index(0)
            tile = nxt[z]
            if p.apply_move(cur, tile) != nxt:
                raise MalformedStateError(f"Path states are not one slide apart at tile {tile}")
            moves.append(tile)
        return moves

    def apply_moves(self, grid: Sequence[Sequence[int]], moves: Sequence[int]) -> List[Grid]:
        """Replay ``moves`` from ``grid``; returns every intermediate grid."""
        p = self.puzzle
        return [p.to_grid(s) for s in p.apply_moves(p.from_grid(grid), moves)]
