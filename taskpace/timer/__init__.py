from .clock import Clock, SystemClock, VirtualClock
from .delay import start_task
from .types import (
    Completion,
    DelayedTask,
    InvalidDelayError,
    TaskBatch,
    TaskError,
    TaskFailure,
)

__all__ = [
    "Clock",
    "SystemClock",
    "VirtualClock",
    "start_task",
    "Completion",
    "DelayedTask",
    "TaskBatch",
    "TaskError",
    "TaskFailure",
    "InvalidDelayError",
]
