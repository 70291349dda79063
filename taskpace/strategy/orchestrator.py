from __future__ import annotations

import asyncio

from taskpace.report import NullReporter, Reporter
from taskpace.timer import Clock, Completion, DelayedTask, SystemClock, TaskBatch, start_task

from .types import UnknownStrategyError


class Orchestrator:
    name = "base"

    def __init__(self, reporter: Reporter | None = None, clock: Clock | None = None):
        self.reporter = reporter or NullReporter()
        self.clock = clock or SystemClock()

    async def run(self, batch: TaskBatch) -> list[Completion]:
        raise NotImplementedError


class SequentialOrchestrator(Orchestrator):
    """Awaits each task before starting the next; total time is the sum of delays."""

    name = "sequential"

    async def run(self, batch: TaskBatch) -> list[Completion]:
        results: list[Completion] = []

        # A failing task would propagate from here and skip the rest of the batch
        for task in batch:
            self.reporter.report(f"Started {task.label}")
            completion = await start_task(task, self.clock)
            self.reporter.report(f"Finished {task.label}")
            results.append(completion)

        return results


class ConcurrentOrchestrator(Orchestrator):
    """Starts every task up front, then waits for all of them together.

    Total time is the longest delay in the batch. Results come back in batch
    order whatever order the tasks finished in.
    """

    name = "concurrent"

    def dispatch(self, batch: TaskBatch) -> list[asyncio.Task[Completion]]:
        handles: list[asyncio.Task[Completion]] = []
        for task in batch:
            handles.append(asyncio.create_task(self._run_one(task), name=task.label))
            self.reporter.report(f"Started {task.label}")
        return handles

    async def join(self, handles: list[asyncio.Task[Completion]]) -> list[Completion]:
        if not handles:
            return []
        # gather keeps argument order; on failure the other handles are left running
        return list(await asyncio.gather(*handles))

    async def run(self, batch: TaskBatch) -> list[Completion]:
        return await self.join(self.dispatch(batch))

    async def _run_one(self, task: DelayedTask) -> Completion:
        completion = await start_task(task, self.clock)
        self.reporter.report(f"Finished {task.label}")
        return completion


class DetachedOrchestrator(ConcurrentOrchestrator):
    """Fire-and-forget dispatch: the caller carries on before joining the tasks."""

    name = "detached"

    async def run(self, batch: TaskBatch) -> list[Completion]:
        handles = self.dispatch(batch)
        self.reporter.report(f"Dispatched {len(handles)} tasks")
        return await self.join(handles)


STRATEGIES: dict[str, type[Orchestrator]] = {
    cls.name: cls
    for cls in (SequentialOrchestrator, ConcurrentOrchestrator, DetachedOrchestrator)
}


def get_strategy(name: str) -> type[Orchestrator]:
    if name not in STRATEGIES:
        raise UnknownStrategyError(name, sorted(STRATEGIES))
    return STRATEGIES[name]
