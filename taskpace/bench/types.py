from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class HarnessError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class HarnessStateError(HarnessError):
    def __init__(self, label: str, current: RunState, target: RunState):
        super().__init__(f"{label}: cannot move from {current.name} to {target.name}")
        self.current = current
        self.target = target


class RunState(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    COMPLETED = auto()
    FAILED = auto()


class Outcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class BenchmarkResult:
    label: str
    started_at: float
    finished_at: float
    outcome: Outcome
    # Kept for callers that want it, never part of the printed report
    error: BaseException | None = None

    @property
    def elapsed_ms(self) -> float:
        return max(self.finished_at - self.started_at, 0.0) * 1000

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS
