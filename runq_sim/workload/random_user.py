"""Randomized user workload."""

from __future__ import annotations

import random

from runq_sim.workload.workload_base import TaskWorkload


class RandomUserWorkload(TaskWorkload):
    """User work of a uniformly random size.

    Each call draws an independent quantity from ``[low, high)`` using the
    random source supplied by the CPU.

    Args:
        low: Smallest quantity of work (inclusive, >= 1).
        high: Upper bound of the quantity (exclusive).
    """

    name = "randomuser"

    def __init__(self, low: int = 1, high: int = 1000) -> None:
        if low < 1:
            raise ValueError(f"low must be at least 1, got {low}")
        if high <= low:
            raise ValueError(f"high must be greater than low ({low}), got {high}")
        self.low: int = low
        self.high: int = high

    def do_work(self, rng: random.Random) -> int:
        return rng.randrange(self.low, self.high)

    def __repr__(self) -> str:
        return f"RandomUserWorkload(low={self.low}, high={self.high})"
