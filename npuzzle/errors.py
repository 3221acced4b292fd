"""Exceptions raised by the puzzle core.

Running out of search budget is not an error: the search functions report it
through their result dict and ``PuzzleSolver.solve`` returns ``None``.
"""


class SolverError(Exception):
    """Base class for caller contract violations."""


class MalformedStateError(SolverError, ValueError):
    """Grid has the wrong shape, no blank, duplicates or out-of-range values."""


class UnsolvableStateError(SolverError):
    """Configuration is in the wrong parity class to reach the goal."""


class IllegalMoveError(SolverError, ValueError):
    """Tile cannot slide because it is not next to the blank."""
