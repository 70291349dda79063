from taskpace.timer import TaskBatch

from .types import ScenarioConfig, SuiteConfig


def default_suite() -> SuiteConfig:
    scenarios = [
        ScenarioConfig("blocking", "sequential", TaskBatch.uniform(3, 1500, "blocking")),
        ScenarioConfig(
            "non-blocking", "concurrent", TaskBatch.uniform(3, 1500, "non-blocking")
        ),
        ScenarioConfig("detached", "detached", TaskBatch.uniform(3, 1500, "detached")),
        ScenarioConfig("slow", "sequential", TaskBatch.uniform(3, 3000, "slow")),
        ScenarioConfig("fast", "concurrent", TaskBatch.uniform(3, 3000, "fast")),
    ]
    return SuiteConfig({scenario.name: scenario for scenario in scenarios})
