from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


class TaskError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class InvalidDelayError(TaskError):
    def __init__(self, label: str, delay_ms: object):
        super().__init__(
            f"{label}: delay must be a non-negative integer of milliseconds, got {delay_ms!r}"
        )
        self.label = label
        self.delay_ms = delay_ms


class TaskFailure(TaskError):
    """A delayed task that did not resolve. The timer primitive never raises it."""

    def __init__(self, label: str, *args: object) -> None:
        super().__init__(f"{label}: task failed", *args)
        self.label = label


@dataclass(frozen=True)
class DelayedTask:
    delay_ms: int
    label: str

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful delay
        if isinstance(self.delay_ms, bool) or not isinstance(self.delay_ms, int):
            raise InvalidDelayError(self.label, self.delay_ms)
        if self.delay_ms < 0:
            raise InvalidDelayError(self.label, self.delay_ms)

    @property
    def delay_s(self) -> float:
        return self.delay_ms / 1000


@dataclass(frozen=True)
class TaskBatch:
    tasks: tuple[DelayedTask, ...]

    @classmethod
    def of(cls, tasks: Iterable[DelayedTask]) -> TaskBatch:
        return cls(tuple(tasks))

    @classmethod
    def from_delays(cls, delays: Iterable[int], prefix: str = "task") -> TaskBatch:
        return cls(
            tuple(DelayedTask(delay, f"{prefix}-{idx}") for idx, delay in enumerate(delays))
        )

    @classmethod
    def uniform(cls, count: int, delay_ms: int, prefix: str = "task") -> TaskBatch:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return cls.from_delays([delay_ms] * count, prefix)

    def __iter__(self) -> Iterator[DelayedTask]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __getitem__(self, idx: int) -> DelayedTask:
        return self.tasks[idx]

    def labels(self) -> list[str]:
        return [task.label for task in self.tasks]

    @property
    def total_delay_ms(self) -> int:
        return sum(task.delay_ms for task in self.tasks)

    @property
    def max_delay_ms(self) -> int:
        return max((task.delay_ms for task in self.tasks), default=0)


@dataclass(frozen=True)
class Completion:
    label: str
    delay_ms: int
    started_at: float
    finished_at: float

    @property
    def elapsed_ms(self) -> float:
        return (self.finished_at - self.started_at) * 1000
