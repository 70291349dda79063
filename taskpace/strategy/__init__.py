from .orchestrator import (
    STRATEGIES,
    ConcurrentOrchestrator,
    DetachedOrchestrator,
    Orchestrator,
    SequentialOrchestrator,
    get_strategy,
)
from .types import StrategyError, UnknownStrategyError

__all__ = [
    "Orchestrator",
    "SequentialOrchestrator",
    "ConcurrentOrchestrator",
    "DetachedOrchestrator",
    "STRATEGIES",
    "get_strategy",
    "StrategyError",
    "UnknownStrategyError",
]
