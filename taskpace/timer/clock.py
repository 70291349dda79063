"""Time sources the orchestration code runs against.

Everything above the timer primitive reads time and suspends through a
``Clock`` so a run can be driven either by the real event loop clock or by a
``VirtualClock`` whose time only moves when sleepers wake up.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import time
from typing import Protocol


class Clock(Protocol):
    def monotonic(self) -> float: ...

    async def sleep(self, seconds: float) -> None: ...


class SystemClock:
    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(max(seconds, 0.0))


class VirtualClock:
    """Discrete-event clock sharing the running asyncio loop.

    Only the sleeper holding the earliest pending deadline polls the loop;
    every other sleeper parks on a future until it reaches the head. The head
    wakes once it has stayed there for ``settle_turns`` loop turns with no
    other sleeper waking, and waking moves virtual time forward to its
    deadline. The quiet window lets freshly created tasks reach their first
    sleep, and lets woken tasks finish reporting, before time moves again.
    """

    def __init__(self, start: float = 0.0, *, settle_turns: int = 16) -> None:
        self._now = start
        self._settle_turns = settle_turns
        self._pending: list[tuple[float, int]] = []
        self._parked: dict[tuple[float, int], asyncio.Future[None]] = {}
        self._seq = itertools.count()
        self._wakes = 0

    def monotonic(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def sleep(self, seconds: float) -> None:
        entry = (self._now + max(seconds, 0.0), next(self._seq))
        heapq.heappush(self._pending, entry)
        try:
            while True:
                if self._pending[0] != entry:
                    await self._park(entry)
                    continue

                wakes = self._wakes
                for _ in range(self._settle_turns):
                    await asyncio.sleep(0)
                if self._pending[0] == entry and self._wakes == wakes:
                    break
        finally:
            self._pending.remove(entry)
            heapq.heapify(self._pending)
            self._unpark_head()

        self._wakes += 1
        self._now = max(self._now, entry[0])

    async def _park(self, entry: tuple[float, int]) -> None:
        waiter = asyncio.get_running_loop().create_future()
        self._parked[entry] = waiter
        try:
            await waiter
        finally:
            self._parked.pop(entry, None)

    def _unpark_head(self) -> None:
        if not self._pending:
            return
        waiter = self._parked.get(self._pending[0])
        if waiter is not None and not waiter.done():
            waiter.set_result(None)
