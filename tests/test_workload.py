"""Unit tests for workloads and task generation."""

import random

import pytest

from runq_sim.simulator.task import TaskState
from runq_sim.workload.generator import FIRST_TASK_ID, generate_tasks
from runq_sim.workload.idle import IdleWorkload
from runq_sim.workload.random_user import RandomUserWorkload


class TestIdleWorkload:
    def test_name(self):
        assert IdleWorkload().name == "idle"

    def test_always_one(self, rng):
        workload = IdleWorkload()
        assert [workload.do_work(rng) for _ in range(5)] == [1] * 5

    def test_requeues(self):
        assert IdleWorkload().next_state() is TaskState.RUNNABLE


class TestRandomUserWorkload:
    def test_name(self):
        assert RandomUserWorkload().name == "randomuser"

    def test_quantities_in_half_open_range(self, rng):
        workload = RandomUserWorkload()
        values = [workload.do_work(rng) for _ in range(2000)]
        assert min(values) >= 1
        assert max(values) <= 999

    def test_draws_from_supplied_rng(self):
        workload = RandomUserWorkload()
        expected = random.Random(99)
        actual = random.Random(99)
        for _ in range(10):
            assert workload.do_work(actual) == expected.randrange(1, 1000)

    def test_custom_bounds(self, rng):
        workload = RandomUserWorkload(low=5, high=6)
        assert workload.do_work(rng) == 5

    @pytest.mark.parametrize("low, high", [(0, 10), (5, 5), (10, 3)])
    def test_invalid_bounds(self, low, high):
        with pytest.raises(ValueError):
            RandomUserWorkload(low=low, high=high)


class TestGenerateTasks:
    def test_ids_start_at_base(self):
        tasks = generate_tasks(4)
        assert [t.task_id for t in tasks] == [1000, 1001, 1002, 1003]
        assert FIRST_TASK_ID == 1000

    def test_tasks_are_runnable_random_user(self):
        for task in generate_tasks(3, first_task_id=50):
            assert task.state is TaskState.RUNNABLE
            assert isinstance(task.workload, RandomUserWorkload)

    def test_each_task_owns_its_workload(self):
        a, b = generate_tasks(2)
        assert a.workload is not b.workload

    def test_zero_tasks(self):
        assert generate_tasks(0) == []

    def test_negative_count(self):
        with pytest.raises(ValueError, match="num_tasks must be non-negative"):
            generate_tasks(-1)
