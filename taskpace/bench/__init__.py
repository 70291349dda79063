from .harness import (
    FAILURE_NOTICE,
    BenchmarkHarness,
    BenchmarkRun,
    Operation,
    format_result,
    run_benchmark,
    run_benchmarks,
)
from .types import BenchmarkResult, HarnessError, HarnessStateError, Outcome, RunState

__all__ = [
    "BenchmarkHarness",
    "BenchmarkRun",
    "BenchmarkResult",
    "Operation",
    "Outcome",
    "RunState",
    "HarnessError",
    "HarnessStateError",
    "FAILURE_NOTICE",
    "format_result",
    "run_benchmark",
    "run_benchmarks",
]
