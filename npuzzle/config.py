from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any

TIE_BREAKS = ("h", "g", "fifo", "lifo")


@dataclass(frozen=True)
class SolverConfig:
    """Tuning knobs for ``PuzzleSolver``.

    ida_threshold is empirical: IDA* is tried first when the initial heuristic
    exceeds it, because A* memory grows with the number of visited states.
    """
    max_iterations: int = 500_000
    ida_max_expansions: int = 500_000
    progress_interval: int = 100
    ida_threshold: int = 40
    use_ida: bool = True
    tie_break: str = "h"

    def __post_init__(self):
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.ida_max_expansions <= 0:
            raise ValueError(f"ida_max_expansions must be positive, got {self.ida_max_expansions}")
        if self.progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {self.progress_interval}")
        if self.ida_threshold < 0:
            raise ValueError(f"ida_threshold must be >= 0, got {self.ida_threshold}")
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {self.tie_break!r}")

    @classmethod
    def from_args(cls, args: Any, base: "SolverConfig | None" = None) -> "SolverConfig":
        """Build a config from an argparse namespace; missing/None attributes keep defaults."""
        cfg = base or cls()
        overrides = {}
        for field in ("max_iterations", "ida_max_expansions", "progress_interval",
                      "ida_threshold", "tie_break"):
            v = getattr(args, field, None)
            if v is not None:
                overrides[field] = v
        if getattr(args, "no_ida", False):
            overrides["use_ida"] = False
        return replace(cfg, **overrides)
