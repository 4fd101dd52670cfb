"""Unit tests for runtime metrics."""

import numpy as np
import pytest

from runq_sim.metrics.performance import compute_metrics, jain_fairness
from runq_sim.simulator.scheduler import Scheduler


class TestJainFairness:
    def test_equal_values(self):
        assert jain_fairness(np.array([4.0, 4.0, 4.0])) == pytest.approx(1.0)

    def test_single_consumer(self):
        assert jain_fairness(np.array([10.0, 0.0])) == pytest.approx(0.5)

    def test_empty_and_zero(self):
        assert jain_fairness(np.array([])) == 1.0
        assert jain_fairness(np.array([0.0, 0.0])) == 1.0


class TestComputeMetrics:
    def test_no_tasks(self, capsys):
        scheduler = Scheduler()
        scheduler.add_cpus(2)
        scheduler.run_forever(4)
        metrics = compute_metrics(scheduler)
        assert metrics["avg_runtime"] == 0.0
        assert metrics["jain_fairness"] == 1.0
        assert metrics["total_clock"] == 4.0
        assert metrics["idle_fraction"] == 1.0

    def test_before_running(self):
        scheduler = Scheduler()
        scheduler.add_cpus(2)
        scheduler.add_tasks(4)
        metrics = compute_metrics(scheduler)
        assert metrics["total_clock"] == 0.0
        assert metrics["idle_fraction"] == 0.0
        assert metrics["max_runtime"] == 0.0

    def test_includes_running_tasks(self, capsys):
        scheduler = Scheduler(seed=11)
        scheduler.add_cpus(2)
        scheduler.add_tasks(6)
        scheduler.run_forever(50)

        runtimes = [t.total_runtime for t in scheduler.all_tasks]
        metrics = compute_metrics(scheduler)

        assert metrics["avg_runtime"] == pytest.approx(sum(runtimes) / len(runtimes))
        assert metrics["min_runtime"] == min(runtimes)
        assert metrics["max_runtime"] == max(runtimes)
        assert metrics["min_runtime"] <= metrics["p99_runtime"] <= metrics["max_runtime"]
        assert metrics["total_clock"] == sum(runtimes)
        assert metrics["idle_fraction"] == 0.0
        assert 0.0 < metrics["jain_fairness"] <= 1.0
