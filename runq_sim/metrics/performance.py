"""Runtime and fairness metrics for a finished simulation.

All user tasks are included, whether they ended in a run queue or as a
CPU's current runner.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

import numpy as np

if TYPE_CHECKING:
    from runq_sim.simulator.scheduler import Scheduler


def jain_fairness(values: np.ndarray) -> float:
    """Jain's fairness index, 1.0 when every value is equal."""
    total_sq = float(np.sum(values**2))
    if values.size == 0 or total_sq == 0.0:
        return 1.0
    return float(np.sum(values)) ** 2 / (values.size * total_sq)


def compute_metrics(scheduler: Scheduler) -> Dict[str, float]:
    clocks = np.array([cpu.clock for cpu in scheduler.cpus], dtype=np.float64)
    idle = np.array(
        [cpu.idle_task.total_runtime for cpu in scheduler.cpus], dtype=np.float64
    )
    total_clock = float(np.sum(clocks))
    idle_fraction = float(np.sum(idle)) / total_clock if total_clock > 0 else 0.0

    if not scheduler.all_tasks:
        return {
            "avg_runtime": 0.0,
            "min_runtime": 0.0,
            "max_runtime": 0.0,
            "p99_runtime": 0.0,
            "jain_fairness": 1.0,
            "total_clock": total_clock,
            "idle_fraction": idle_fraction,
        }

    runtimes = np.array(
        [t.total_runtime for t in scheduler.all_tasks], dtype=np.float64
    )

    return {
        "avg_runtime": float(np.mean(runtimes)),
        "min_runtime": float(np.min(runtimes)),
        "max_runtime": float(np.max(runtimes)),
        "p99_runtime": float(np.percentile(runtimes, 99)),
        "jain_fairness": jain_fairness(runtimes),
        "total_clock": total_clock,
        "idle_fraction": idle_fraction,
    }
