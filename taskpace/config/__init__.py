from .defaults import default_suite
from .loader import load_suite
from .types import ConfigError, ScenarioConfig, SuiteConfig, UnsupportedConfigFormatError

__all__ = [
    "load_suite",
    "default_suite",
    "SuiteConfig",
    "ScenarioConfig",
    "ConfigError",
    "UnsupportedConfigFormatError",
]
