from dataclasses import dataclass

from taskpace.timer import TaskBatch


@dataclass
class ScenarioConfig:
    name: str
    strategy: str
    batch: TaskBatch


@dataclass
class SuiteConfig:
    scenarios: dict[str, ScenarioConfig]

    def __iter__(self):
        for name in sorted(self.scenarios):
            yield self.scenarios[name]

    def __len__(self):
        return len(self.scenarios)

    def has_scenario(self, name: str) -> bool:
        return name in self.scenarios

    def get_scenario(self, name: str) -> ScenarioConfig:
        if not self.has_scenario(name):
            raise KeyError(name)

        return self.scenarios[name]

    def scenario_names(self) -> list[str]:
        return sorted(self.scenarios.keys())


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
