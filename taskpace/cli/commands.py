from __future__ import annotations

import argparse
import asyncio
import functools
import sys

from taskpace.bench import BenchmarkHarness, BenchmarkResult, run_benchmark, run_benchmarks
from taskpace.config import ConfigError, ScenarioConfig, SuiteConfig, default_suite, load_suite
from taskpace.report import NullReporter, PrintReporter, Reporter
from taskpace.strategy import StrategyError, get_strategy
from taskpace.timer import Clock, SystemClock, TaskError, VirtualClock

from .args import build_parser


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)

        match args.command:
            case "run":
                return cmd_run(args)
            case "bench":
                return cmd_bench(args)
            case "list":
                return cmd_list(args)
            case _:
                return 2

    except (ConfigError, TaskError, StrategyError, KeyError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_run(args: argparse.Namespace) -> int:
    scenarios = _select(_load(args), args.names)
    results = asyncio.run(_run_scenarios(scenarios, _clock(args), PrintReporter()))
    return 0 if all(result.ok for result in results) else 1


def cmd_bench(args: argparse.Namespace) -> int:
    scenarios = _select(_load(args), args.names)
    results = asyncio.run(
        _bench_scenarios(scenarios, _clock(args), PrintReporter(), overlap=not args.serial)
    )
    return 0 if all(result.ok for result in results) else 1


def cmd_list(args: argparse.Namespace) -> int:
    for scenario in _load(args):
        delays = " ".join(str(task.delay_ms) for task in scenario.batch)
        print(f"{scenario.name}: {scenario.strategy} {delays}".rstrip())
    return 0


async def _run_scenarios(
    scenarios: list[ScenarioConfig], clock: Clock, reporter: Reporter
) -> list[BenchmarkResult]:
    harness = BenchmarkHarness(clock)
    results = []

    for scenario in scenarios:
        orchestrator = get_strategy(scenario.strategy)(reporter, clock)
        op = functools.partial(orchestrator.run, scenario.batch)
        result = await run_benchmark(harness, scenario.name, op, reporter)
        results.append(result)

    return results


async def _bench_scenarios(
    scenarios: list[ScenarioConfig], clock: Clock, reporter: Reporter, *, overlap: bool
) -> list[BenchmarkResult]:
    harness = BenchmarkHarness(clock)
    entries = []

    for scenario in scenarios:
        # progress is silenced so every run emits exactly one line
        orchestrator = get_strategy(scenario.strategy)(NullReporter(), clock)
        entries.append((scenario.name, functools.partial(orchestrator.run, scenario.batch)))

    return await run_benchmarks(harness, entries, reporter, overlap=overlap)


def _load(args: argparse.Namespace) -> SuiteConfig:
    if args.config is None:
        return default_suite()
    return load_suite(args.config)


def _select(suite: SuiteConfig, names: list[str]) -> list[ScenarioConfig]:
    if len(names) == 0:
        return list(suite)
    return [suite.get_scenario(name) for name in names]


def _clock(args: argparse.Namespace) -> Clock:
    return VirtualClock() if args.virtual else SystemClock()
