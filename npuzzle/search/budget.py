"""Cancellation tokens checked by the searches at their progress cadence.

Any object with an ``is_set()`` method works, ``threading.Event`` included.
"""
from __future__ import annotations
from time import perf_counter
from typing import Optional, Protocol


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


class Deadline:
    """Token that trips once ``seconds`` of wall time have passed since creation."""
    def __init__(self, seconds: Optional[float]):
        self.seconds = seconds
        self.t0 = perf_counter()

    def elapsed(self) -> float:
        return perf_counter() - self.t0

    def is_set(self) -> bool:
        return self.seconds is not None and self.elapsed() > self.seconds
