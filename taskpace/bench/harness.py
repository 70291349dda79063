from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Sequence

from taskpace.report import Reporter
from taskpace.timer import Clock, SystemClock

from .types import BenchmarkResult, HarnessStateError, Outcome, RunState

Operation = Callable[[], Awaitable[object]]

FAILURE_NOTICE = "Something went wrong"

_TRANSITIONS: dict[RunState, tuple[RunState, ...]] = {
    RunState.NOT_STARTED: (RunState.RUNNING,),
    RunState.RUNNING: (RunState.COMPLETED, RunState.FAILED),
    RunState.COMPLETED: (),
    RunState.FAILED: (),
}


class BenchmarkRun:
    def __init__(self, label: str, clock: Clock):
        self.label = label
        self.clock = clock
        self.state = RunState.NOT_STARTED
        self.started_at: float | None = None
        self.result: BenchmarkResult | None = None

    def start(self) -> None:
        self._transition(RunState.RUNNING)
        self.started_at = self.clock.monotonic()

    def complete(self) -> BenchmarkResult:
        return self._settle(RunState.COMPLETED, Outcome.SUCCESS, None)

    def fail(self, error: BaseException) -> BenchmarkResult:
        return self._settle(RunState.FAILED, Outcome.FAILURE, error)

    def _settle(
        self, state: RunState, outcome: Outcome, error: BaseException | None
    ) -> BenchmarkResult:
        self._transition(state)
        if self.started_at is None:
            raise AssertionError("Unreachable")
        self.result = BenchmarkResult(
            self.label, self.started_at, self.clock.monotonic(), outcome, error
        )
        return self.result

    def _transition(self, target: RunState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise HarnessStateError(self.label, self.state, target)
        self.state = target


class BenchmarkHarness:
    def __init__(self, clock: Clock | None = None):
        self.clock = clock or SystemClock()

    async def measure(self, label: str, operation: Operation) -> BenchmarkResult:
        run = BenchmarkRun(label, self.clock)
        run.start()
        try:
            await operation()
        except Exception as exc:
            return run.fail(exc)
        return run.complete()


def format_result(result: BenchmarkResult) -> str:
    if result.ok:
        return f"OK {result.label}, {result.elapsed_ms:.0f}ms"
    return f"FAIL {result.label}: {FAILURE_NOTICE}"


async def run_benchmark(
    harness: BenchmarkHarness, label: str, operation: Operation, reporter: Reporter
) -> BenchmarkResult:
    result = await harness.measure(label, operation)
    reporter.report(format_result(result))
    return result


async def run_benchmarks(
    harness: BenchmarkHarness,
    entries: Sequence[tuple[str, Operation]],
    reporter: Reporter,
    *,
    overlap: bool = True,
) -> list[BenchmarkResult]:
    if overlap:
        # All runs share the loop, so their timers overlap in wall-clock time
        results = await asyncio.gather(
            *(run_benchmark(harness, label, op, reporter) for label, op in entries)
        )
        return list(results)

    out: list[BenchmarkResult] = []
    for label, op in entries:
        out.append(await run_benchmark(harness, label, op, reporter))
    return out
