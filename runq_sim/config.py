"""Simulation configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from runq_sim.workload.generator import FIRST_TASK_ID

DEFAULT_CPUS = 8
DEFAULT_TASKS = 64
DEFAULT_TICKS = 1000


@dataclass(frozen=True)
class SimulationConfig:
    """Fixed parameters of one simulation run.

    Defaults reproduce the reference setup: 8 CPUs, 64 tasks, 1000 ticks.
    A ``seed`` of None leaves the random source unseeded.
    """

    cpus: int = DEFAULT_CPUS
    tasks: int = DEFAULT_TASKS
    ticks: int = DEFAULT_TICKS
    first_task_id: int = FIRST_TASK_ID
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.cpus <= 0:
            raise ValueError(f"cpus must be positive, got {self.cpus}")
        if self.tasks < 0:
            raise ValueError(f"tasks must be non-negative, got {self.tasks}")
        if self.ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {self.ticks}")
