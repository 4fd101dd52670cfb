"""CLI entry point for the multi-CPU run-queue simulator."""

from __future__ import annotations

import argparse
import logging
from typing import Dict

from runq_sim.config import DEFAULT_CPUS, DEFAULT_TASKS, DEFAULT_TICKS, SimulationConfig
from runq_sim.metrics.performance import compute_metrics
from runq_sim.simulator.scheduler import Scheduler

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Multi-CPU Run Queue Scheduler Simulator",
    )
    parser.add_argument(
        "--cpus",
        type=int,
        default=DEFAULT_CPUS,
        help=f"Number of CPUs (default: {DEFAULT_CPUS})",
    )
    parser.add_argument(
        "--tasks",
        type=int,
        default=DEFAULT_TASKS,
        help=f"Number of user tasks (default: {DEFAULT_TASKS})",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=DEFAULT_TICKS,
        help=f"Global dispatch steps to run (default: {DEFAULT_TICKS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for work sizes (default: unseeded)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print runtime and fairness statistics after the report",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Diagnostic log level on stderr (default: WARNING)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        cpus=args.cpus,
        tasks=args.tasks,
        ticks=args.ticks,
        seed=args.seed,
    )


def build_scheduler(config: SimulationConfig) -> Scheduler:
    """Create a scheduler populated according to *config*."""
    scheduler = Scheduler(seed=config.seed, first_task_id=config.first_task_id)
    scheduler.add_cpus(config.cpus)
    scheduler.add_tasks(config.tasks)
    return scheduler


def print_stats(metrics: Dict[str, float]) -> None:
    """Print summary statistics to stdout."""
    print("\n=== Runtime Statistics ===")
    print(f"  Avg Runtime:    {metrics['avg_runtime']:.2f}")
    print(f"  Min Runtime:    {metrics['min_runtime']:.0f}")
    print(f"  Max Runtime:    {metrics['max_runtime']:.0f}")
    print(f"  P99 Runtime:    {metrics['p99_runtime']:.2f}")
    print(f"  Jain Fairness:  {metrics['jain_fairness']:.4f}")
    print(f"  Total Clock:    {metrics['total_clock']:.0f}")
    print(f"  Idle Fraction:  {metrics['idle_fraction']:.4f}")


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run simulation, print results."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    scheduler = build_scheduler(config)

    scheduler.print_runqueue(0)
    scheduler.run_forever(config.ticks)
    print("###")
    scheduler.print_cpu_clocks()
    scheduler.print_task_runtime()

    if args.stats:
        print_stats(compute_metrics(scheduler))


if __name__ == "__main__":
    main()
