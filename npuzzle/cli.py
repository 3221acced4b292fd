#!/usr/bin/env python3
"""Command-line host for the solver.

    npuzzle solve "1 2 3 4/5 6 7 8/9 10 11 0/13 14 15 12"
    npuzzle check -        # rows read from stdin
    npuzzle random --n 4 --seed 7
"""
from __future__ import annotations
import argparse
import logging
import re
import sys
from typing import List, Optional

from npuzzle.config import TIE_BREAKS, SolverConfig
from npuzzle.errors import MalformedStateError, SolverError
from npuzzle.log import get_logger, setup_logging
from npuzzle.search.budget import Deadline
from npuzzle.solver import PuzzleSolver

logger = get_logger(__name__)

EXIT_OK, EXIT_NO_SOLUTION, EXIT_BAD_INPUT = 0, 1, 2

def parse_grid(text: str) -> List[List[int]]:
    """Rows split by '/', ';' or newlines; cells by spaces or commas."""
    rows = [r for r in re.split(r"[/;\n]", text.strip()) if r.strip()]
    grid = []
    for r in rows:
        try:
            grid.append([int(v) for v in re.split(r"[,\s]+", r.strip())])
        except ValueError:
            raise MalformedStateError(f"Non-integer cell in row {r.strip()!r}") from None
    if not grid:
        raise MalformedStateError("Empty grid")
    return grid

def format_grid(grid: List[List[int]]) -> str:
    width = len(str(len(grid) ** 2 - 1))
    return "\n".join(" ".join(str(v).rjust(width) for v in row) for row in grid)

def _read_grid(arg: str) -> List[List[int]]:
    return parse_grid(sys.stdin.read() if arg == "-" else arg)

def _cmd_check(args, solver_for) -> int:
    grid = _read_grid(args.grid)
    solver = solver_for(len(grid))
    if solver.is_solvable(grid):
        print(f"solvable (heuristic {solver.heuristic(grid)})")
        return EXIT_OK
    print("not solvable")
    return EXIT_BAD_INPUT

def _cmd_solve(args, solver_for) -> int:
    grid = _read_grid(args.grid)
    solver = solver_for(len(grid))

    def progress(iterations, closed, frontier):
        logger.debug("progress: iterations=%d closed=%d frontier=%d", iterations, closed, frontier)

    path = solver.solve(grid, progress_callback=progress, cancel=Deadline(args.timeout_sec))
    if path is None:
        print("Unable to find a solution within the search budget.")
        return EXIT_NO_SOLUTION
    moves = solver.get_moves(path)
    print(f"{len(moves)} moves")
    print(" ".join(str(m) for m in moves))
    if args.show_steps:
        for i, g in enumerate(path):
            print(f"\nstep {i}:")
            print(format_grid(g))
    return EXIT_OK

def _cmd_random(args, solver_for) -> int:
    solver = solver_for(args.n)
    grid = solver.random_puzzle(args.seed)
    print(" / ".join(" ".join(str(v) for v in row) for row in grid))
    return EXIT_OK

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="npuzzle", description="N×N sliding-tile puzzle solver (A*/IDA*)")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    ap.add_argument("--log-file", default=None)
    ap.add_argument("--max-iterations", dest="max_iterations", type=int, default=None)
    ap.add_argument("--ida-max-expansions", dest="ida_max_expansions", type=int, default=None)
    ap.add_argument("--progress-interval", dest="progress_interval", type=int, default=None)
    ap.add_argument("--ida-threshold", dest="ida_threshold", type=int, default=None,
                    help="Use IDA* first when the initial heuristic exceeds this (default 40)")
    ap.add_argument("--no-ida", dest="no_ida", action="store_true", help="Always use A*")
    ap.add_argument("--tie-break", dest="tie_break", choices=TIE_BREAKS, default=None)
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("solve", help="Solve a grid and print the tiles to slide")
    p.add_argument("grid", help="Rows separated by '/' (cells by spaces/commas), or '-' for stdin")
    p.add_argument("--timeout-sec", dest="timeout_sec", type=float, default=None,
                   help="Wall-clock ceiling; checked at the progress cadence")
    p.add_argument("--show-steps", action="store_true")
    p.set_defaults(func=_cmd_solve)

    p = sub.add_parser("check", help="Validate a grid and report solvability")
    p.add_argument("grid")
    p.set_defaults(func=_cmd_check)

    p = sub.add_parser("random", help="Print a random solvable grid")
    p.add_argument("--n", type=int, default=4)
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=_cmd_random)
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING if args.verbose == 0 else (logging.INFO if args.verbose == 1 else logging.DEBUG)
    setup_logging(level, args.log_file)
    try:
        config = SolverConfig.from_args(args)
    except ValueError as e:
        logger.error("invalid configuration: %s", e)
        return EXIT_BAD_INPUT

    def solver_for(n: int) -> PuzzleSolver:
        return PuzzleSolver(n, config)

    try:
        return args.func(args, solver_for)
    except (SolverError, ValueError) as e:  # ValueError: board size < 2
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

if __name__ == "__main__":
    sys.exit(main())
