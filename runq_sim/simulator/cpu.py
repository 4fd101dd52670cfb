"""CPU model for the run-queue scheduling simulator."""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import List

from runq_sim.simulator.task import SchedulerContractError, Task, TaskState
from runq_sim.workload.idle import IdleWorkload

logger = logging.getLogger(__name__)

IDLE_TASK_ID = 0


class Cpu:
    """A single virtual CPU with its own FIFO run queue.

    Each dispatch step requeues the task that ran last, pops the head of
    the run queue (or falls back to the CPU's idle task) and runs it for
    one unit of work.  The idle task never enters the run queue.

    Args:
        cpu_id: Unique identifier for this CPU.
        rng: Random source passed to every workload this CPU runs.
    """

    __slots__ = (
        "cpu_id",
        "clock",
        "runq",
        "running_task",
        "idle_task",
        "_rng",
    )

    def __init__(self, cpu_id: int, rng: random.Random) -> None:
        self.cpu_id: int = cpu_id
        self.clock: int = 0
        self.runq: deque[Task] = deque()
        self.idle_task: Task = Task(IDLE_TASK_ID, IdleWorkload())
        self.idle_task.cpu_id = cpu_id
        self.running_task: Task = self.idle_task
        self._rng: random.Random = rng

    def add_task(self, task: Task) -> None:
        """Append a task to the tail of the run queue.

        Raises:
            ValueError: If *task* is this CPU's idle task.
        """
        if task is self.idle_task:
            raise ValueError(f"CPU {self.cpu_id} idle task cannot be queued.")
        self.runq.append(task)

    def next_task(self) -> None:
        """Run one dispatch step.

        Raises:
            SchedulerContractError: If the task reports RUNNING as its
                next state.
        """
        old_task = self.running_task
        if old_task is not self.idle_task:
            self.runq.append(old_task)

        if self.runq:
            self.running_task = self.runq.popleft()
        else:
            logger.debug("cpu %d: run queue empty, running idle task", self.cpu_id)
            self.running_task = self.idle_task
        self.running_task.state = TaskState.RUNNING

        output = self.running_task.run(self, self._rng)
        self.clock += output.clock_consumed

        if output.next_state is TaskState.RUNNING:
            raise SchedulerContractError(
                f"Task {self.running_task.task_id} on cpu {self.cpu_id} "
                f"returned RUNNING as its next state; expected RUNNABLE or WAIT."
            )
        self.running_task.state = output.next_state

    def is_idle(self) -> bool:
        """Return True if the idle task is the current runner."""
        return self.running_task is self.idle_task

    def queued_task_ids(self) -> List[int]:
        """Return the ids of queued tasks, head first."""
        return [task.task_id for task in self.runq]

    def __repr__(self) -> str:
        return (
            f"Cpu(id={self.cpu_id}, clock={self.clock}, "
            f"running={self.running_task.task_id}, queued={len(self.runq)})"
        )
