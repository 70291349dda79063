from __future__ import annotations

from .clock import Clock, SystemClock
from .types import Completion, DelayedTask


async def start_task(task: DelayedTask, clock: Clock | None = None) -> Completion:
    clock = clock or SystemClock()
    started_at = clock.monotonic()
    deadline = started_at + task.delay_s

    await clock.sleep(task.delay_s)
    # Loop timers may fire up to one clock resolution early
    while clock.monotonic() < deadline:
        await clock.sleep(deadline - clock.monotonic())

    return Completion(task.label, task.delay_ms, started_at, clock.monotonic())
