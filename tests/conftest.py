from __future__ import annotations

import random
from typing import List

import pytest

from runq_sim.simulator.task import TaskState
from runq_sim.workload.workload_base import TaskWorkload


class ScriptedWorkload(TaskWorkload):
    """Returns a fixed sequence of work quantities, then repeats the last one."""

    name = "scripted"

    def __init__(self, quantities: List[int], state: TaskState = TaskState.RUNNABLE) -> None:
        self.quantities = list(quantities)
        self.state = state
        self.calls = 0

    def do_work(self, rng: random.Random) -> int:
        index = min(self.calls, len(self.quantities) - 1)
        self.calls += 1
        return self.quantities[index]

    def next_state(self) -> TaskState:
        return self.state


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
