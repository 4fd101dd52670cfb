"""Task population generation for the run-queue simulator."""

from __future__ import annotations

from typing import List

from runq_sim.simulator.task import Task
from runq_sim.workload.random_user import RandomUserWorkload

FIRST_TASK_ID = 1000


def generate_tasks(
    num_tasks: int,
    first_task_id: int = FIRST_TASK_ID,
    work_range: tuple[int, int] = (1, 1000),
) -> List[Task]:
    """Create a population of RandomUser tasks with consecutive ids.

    The tasks carry no randomness of their own; work sizes are drawn at
    dispatch time from the random source the CPU hands to the workload.

    Args:
        num_tasks: Number of tasks to create.
        first_task_id: Id of the first task; later ids increment by one.
        work_range: Half-open (low, high) range of work per dispatch.

    Returns:
        A list of RUNNABLE Task objects in id order.
    """
    if num_tasks < 0:
        raise ValueError(f"num_tasks must be non-negative, got {num_tasks}")

    low, high = work_range
    return [
        Task(task_id=task_id, workload=RandomUserWorkload(low=low, high=high))
        for task_id in range(first_task_id, first_task_id + num_tasks)
    ]
