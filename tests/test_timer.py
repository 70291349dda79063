from __future__ import annotations

import asyncio

import pytest

from taskpace.timer import (
    Completion,
    DelayedTask,
    InvalidDelayError,
    SystemClock,
    TaskBatch,
    VirtualClock,
    start_task,
)


@pytest.mark.parametrize("delay", [-1, -1500, 1.5, "100", None, True])
def test_invalid_delay_is_rejected_at_creation(delay: object) -> None:
    with pytest.raises(InvalidDelayError):
        DelayedTask(delay, "bad")  # type: ignore[arg-type]


def test_zero_delay_is_allowed() -> None:
    task = DelayedTask(0, "zero")
    assert task.delay_s == 0


def test_uniform_batch_labels_keep_insertion_order() -> None:
    batch = TaskBatch.uniform(3, 1500, "job")
    assert batch.labels() == ["job-0", "job-1", "job-2"]
    assert len(batch) == 3
    assert batch.total_delay_ms == 4500
    assert batch.max_delay_ms == 1500


def test_from_delays_and_empty_batch() -> None:
    batch = TaskBatch.from_delays([300, 100, 200])
    assert [t.delay_ms for t in batch] == [300, 100, 200]
    assert batch[1].label == "task-1"

    empty = TaskBatch.of([])
    assert len(empty) == 0
    assert empty.total_delay_ms == 0
    assert empty.max_delay_ms == 0


def test_uniform_negative_count_raises() -> None:
    with pytest.raises(ValueError):
        TaskBatch.uniform(-1, 10)


def test_start_task_on_virtual_clock_is_exact() -> None:
    clock = VirtualClock()
    done = asyncio.run(start_task(DelayedTask(1500, "a"), clock))

    assert done == Completion("a", 1500, 0.0, 1.5)
    assert done.elapsed_ms == 1500
    assert clock.monotonic() == 1.5
    assert clock.pending == 0


def test_start_task_zero_delay_on_virtual_clock() -> None:
    clock = VirtualClock(start=10.0)
    done = asyncio.run(start_task(DelayedTask(0, "z"), clock))

    assert done.started_at == done.finished_at == 10.0


def test_start_task_never_resolves_early_on_system_clock() -> None:
    done = asyncio.run(start_task(DelayedTask(20, "real"), SystemClock()))

    assert done.finished_at - done.started_at >= 0.02


def test_virtual_clock_wakes_sleepers_in_deadline_order() -> None:
    clock = VirtualClock()
    woke: list[tuple[float, float]] = []

    async def sleeper(seconds: float) -> None:
        await clock.sleep(seconds)
        woke.append((seconds, clock.monotonic()))

    async def main() -> None:
        await asyncio.gather(sleeper(0.3), sleeper(0.1), sleeper(0.2))

    asyncio.run(main())

    assert woke == [(0.1, 0.1), (0.2, 0.2), (0.3, 0.3)]


def test_virtual_clock_time_accumulates_across_sequential_sleeps() -> None:
    clock = VirtualClock()

    async def main() -> None:
        for _ in range(3):
            await clock.sleep(1.5)

    asyncio.run(main())

    assert clock.monotonic() == 4.5
