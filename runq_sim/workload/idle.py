"""Idle workload run by a CPU with an empty run queue."""

from __future__ import annotations

import random

from runq_sim.workload.workload_base import TaskWorkload

IDLE_QUANTUM = 1


class IdleWorkload(TaskWorkload):
    """Placeholder work that always consumes a single clock unit.

    An idle CPU still advances its clock each step and never goes fully
    quiescent.
    """

    name = "idle"

    def do_work(self, rng: random.Random) -> int:
        return IDLE_QUANTUM
