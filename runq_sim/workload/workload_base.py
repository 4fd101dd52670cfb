"""Abstract base class for all task workloads."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from runq_sim.simulator.task import TaskState


class TaskWorkload(ABC):
    """Interface that every task workload must implement.

    A CPU interacts with the work a task performs exclusively through
    these methods, keeping what the work looks like decoupled from how
    it is scheduled.

    Subclasses *must* provide ``name`` and ``do_work``.  ``next_state``
    has a safe default so workloads that never block need not override
    it.
    """

    name: str = "workload"

    @abstractmethod
    def do_work(self, rng: random.Random) -> int:
        """Perform one unit of work.

        Args:
            rng: The simulation's random source.

        Returns:
            Simulated clock time consumed (>= 0).
        """

    def next_state(self) -> TaskState:
        """State the task should enter after the work just done.

        Default behaviour asks to be requeued.  A workload that can
        block would return ``TaskState.WAIT`` here.
        """
        from runq_sim.simulator.task import TaskState

        return TaskState.RUNNABLE

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
