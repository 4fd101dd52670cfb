"""Task model for the run-queue scheduling simulator."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from runq_sim.workload.workload_base import TaskWorkload

if TYPE_CHECKING:
    from runq_sim.simulator.cpu import Cpu


class TaskState(Enum):
    """Lifecycle state of a task."""

    RUNNABLE = auto()
    RUNNING = auto()
    WAIT = auto()


class SchedulerContractError(RuntimeError):
    """A dispatch step reported RUNNING as the task's next state.

    This signals a broken workload, not bad input, and is never caught.
    """


@dataclass(frozen=True)
class TaskSliceOutput:
    """Outcome of one dispatch of a task."""

    next_state: TaskState
    clock_consumed: int


class Task:
    """A scheduling entity wrapping a pluggable workload.

    The same Task object sits in a CPU's run queue and in its
    ``running_task`` slot; only the owning CPU mutates it.
    """

    __slots__ = (
        "task_id",
        "state",
        "total_runtime",
        "workload",
        "cpu_id",
    )

    def __init__(self, task_id: int, workload: TaskWorkload) -> None:
        self.task_id: int = task_id
        self.state: TaskState = TaskState.RUNNABLE
        self.total_runtime: int = 0
        self.workload: TaskWorkload = workload
        self.cpu_id: Optional[int] = None

    @property
    def name(self) -> str:
        return self.workload.name

    def run(self, cpu: Cpu, rng: random.Random) -> TaskSliceOutput:
        """Execute one unit of work on *cpu*.

        Prints the dispatch line, invokes the workload and charges the
        consumed time to this task.

        Args:
            cpu: The CPU running the task. Only its id is read.
            rng: Random source handed through to the workload.

        Returns:
            TaskSliceOutput with the time consumed and the next state.

        Raises:
            RuntimeError: If the task is not in RUNNING state.
            ValueError: If the workload reports negative work.
        """
        if self.state is not TaskState.RUNNING:
            raise RuntimeError(
                f"Task {self.task_id} is {self.state.name}; "
                f"cannot run on cpu {cpu.cpu_id}."
            )

        print(
            f"task {self.task_id} ({self.workload.name}) running on cpu "
            f"{cpu.cpu_id}, total runtime {self.total_runtime}"
        )
        work_quantity = self.workload.do_work(rng)
        if work_quantity < 0:
            raise ValueError(
                f"Workload {self.workload.name!r} returned negative work {work_quantity}"
            )
        self.total_runtime += work_quantity

        return TaskSliceOutput(
            next_state=self.workload.next_state(),
            clock_consumed=work_quantity,
        )

    def __repr__(self) -> str:
        return (
            f"Task(id={self.task_id}, workload={self.workload.name}, "
            f"state={self.state.name}, runtime={self.total_runtime})"
        )
