"""Multi-CPU scheduler driving the run-queue simulation.

This module owns the CPU pool, the static task-to-CPU assignment and the
global tick loop. All per-step policy lives in ``Cpu.next_task``.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from runq_sim.config import DEFAULT_TICKS
from runq_sim.simulator.cpu import Cpu
from runq_sim.simulator.task import Task
from runq_sim.workload.generator import FIRST_TASK_ID, generate_tasks

logger = logging.getLogger(__name__)


class Scheduler:
    """Fixed pool of CPUs stepped in round-robin order.

    Tasks are assigned once, to ``cpus[task_id % len(cpus)]``, and never
    rebalanced.

    Args:
        seed: Seed for the random source shared by every CPU.  None
              leaves it unseeded.
        first_task_id: Id given to the first task created by add_tasks.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        first_task_id: int = FIRST_TASK_ID,
    ) -> None:
        self.cpus: List[Cpu] = []
        self.all_tasks: List[Task] = []
        self._rng: random.Random = random.Random(seed)
        self._next_task_id: int = first_task_id
        self.current_tick: int = 0

    def add_cpus(self, cpu_count: int) -> None:
        """Create CPUs ``0..cpu_count-1``.

        Raises:
            ValueError: If cpu_count is not positive.
            RuntimeError: If CPUs were already added.
        """
        if cpu_count <= 0:
            raise ValueError(f"cpu_count must be positive, got {cpu_count}")
        if self.cpus:
            raise RuntimeError(
                f"Scheduler already has {len(self.cpus)} CPUs; the pool is fixed."
            )
        self.cpus = [Cpu(cpu_id, self._rng) for cpu_id in range(cpu_count)]
        logger.debug("created %d cpus", cpu_count)

    def add_tasks(self, task_count: int) -> List[Task]:
        """Create RandomUser tasks and assign each to its CPU.

        Returns:
            The newly created tasks.

        Raises:
            RuntimeError: If no CPUs have been added yet.
        """
        if not self.cpus:
            raise RuntimeError("Cannot add tasks before any CPUs exist.")

        tasks = generate_tasks(task_count, first_task_id=self._next_task_id)
        cpu_count = len(self.cpus)
        for task in tasks:
            cpu_id = task.task_id % cpu_count
            task.cpu_id = cpu_id
            self.cpus[cpu_id].add_task(task)
            logger.debug("task %d assigned to cpu %d", task.task_id, cpu_id)

        self._next_task_id += task_count
        self.all_tasks.extend(tasks)
        return tasks

    def run_forever(self, ticks: int = DEFAULT_TICKS) -> None:
        """Run a bounded number of global ticks.

        Each tick advances exactly one CPU by one dispatch step, cycling
        through CPUs in id order.  Despite the name the loop stops after
        *ticks* steps.
        """
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")
        if not self.cpus:
            raise RuntimeError("Cannot run a scheduler with no CPUs.")

        cpu_count = len(self.cpus)
        for _ in range(ticks):
            self.cpus[self.current_tick % cpu_count].next_task()
            self.current_tick += 1

        logger.debug("ran %d ticks across %d cpus", ticks, cpu_count)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def print_runqueue(self, cpu_id: int) -> None:
        """Print the queued task ids of one CPU, head first."""
        print(f"cpu{cpu_id} tasks:")
        for task_id in self.cpus[cpu_id].queued_task_ids():
            print(f"task id {task_id}")

    def print_cpu_clocks(self) -> None:
        for cpu in self.cpus:
            print(f"cpu {cpu.cpu_id} has clock {cpu.clock}")
            print(f"  idle time {cpu.idle_task.total_runtime}")

    def print_task_runtime(self) -> None:
        """Print runtimes of tasks still sitting in a run queue.

        A CPU's current runner is not in its queue and is not reported.
        """
        for cpu in self.cpus:
            for task in cpu.runq:
                print(f"task {task.task_id} has total runtime {task.total_runtime}")

    def __repr__(self) -> str:
        return f"Scheduler(cpus={len(self.cpus)}, tasks={len(self.all_tasks)})"
