"""Unit tests for SimulationConfig."""

import dataclasses

import pytest

from runq_sim.config import SimulationConfig


def test_defaults():
    config = SimulationConfig()
    assert (config.cpus, config.tasks, config.ticks, config.first_task_id) == (8, 64, 1000, 1000)
    assert config.seed is None


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SimulationConfig().cpus = 2


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"cpus": 0}, "cpus must be positive"),
        ({"tasks": -1}, "tasks must be non-negative"),
        ({"ticks": -1}, "ticks must be non-negative"),
    ],
)
def test_validation(kwargs, message):
    with pytest.raises(ValueError, match=message):
        SimulationConfig(**kwargs)
