import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from taskpace.strategy import STRATEGIES
from taskpace.timer import DelayedTask, TaskBatch

from .types import ConfigError, ScenarioConfig, SuiteConfig, UnsupportedConfigFormatError


def load_suite(path: str | Path) -> SuiteConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_suite_config(raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
        match fmt:
            case "yaml":
                raw_file = yaml.safe_load(text)
            case "toml":
                raw_file = tomllib.loads(text)
            case "json":
                raw_file = json.loads(text)
            case _:
                raise AssertionError("Unreachable")
    except (
        OSError,
        UnicodeDecodeError,
        yaml.YAMLError,
        tomllib.TOMLDecodeError,
        json.JSONDecodeError,
    ) as exc:
        raise ConfigError(f"{path}: invalid {fmt.upper()}") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt.upper()} parsed but the top-level value is not an object: "
            f"{type(raw_file)}"
        )

    return raw_file


def _build_suite_config(raw: Mapping[str, Any]) -> SuiteConfig:
    scenarios = {}

    if "scenarios" not in raw:
        raise ConfigError("Missing 'scenarios' field")

    if not isinstance(raw["scenarios"], Mapping):
        raise ConfigError(f"'scenarios' must be a mapping, got {type(raw['scenarios'])}")

    if len(raw["scenarios"]) < 1:
        raise ConfigError("There must be at least one scenario in the config file")

    for name, fields in raw["scenarios"].items():
        if not isinstance(name, str):
            raise ConfigError(f"Scenario name must be a string, got {type(name)}")

        if not isinstance(fields, Mapping):
            raise ConfigError(f"{name} must be a mapping")

        name_norm = name.strip()

        if len(name_norm) < 1:
            raise ConfigError("A scenario name can't be empty")

        if name_norm in scenarios:
            raise ConfigError(f"Duplicate scenario name after normalization: {name_norm}")

        scenarios[name_norm] = _build_scenario_config(name_norm, fields)

    return SuiteConfig(scenarios=scenarios)


def _build_scenario_config(name: str, fields: Mapping[str, Any]) -> ScenarioConfig:
    keys = {"strategy", "tasks", "count", "delay_ms", "label_prefix"}

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"{name}: Can't process: {field}")

    if "strategy" not in fields:
        raise ConfigError(f"{name}: missing 'strategy'")

    if not isinstance(fields["strategy"], str):
        raise ConfigError(f"{name}: The strategy should be a string")

    strategy = fields["strategy"].strip()

    if strategy not in STRATEGIES:
        raise ConfigError(
            f"{name}: unknown strategy '{strategy}', "
            f"expected one of: {', '.join(sorted(STRATEGIES))}"
        )

    prefix = name
    if "label_prefix" in fields:
        if not isinstance(fields["label_prefix"], str) or not fields["label_prefix"].strip():
            raise ConfigError(f"{name}: label_prefix should be a non-empty string")
        prefix = fields["label_prefix"].strip()

    has_tasks = "tasks" in fields
    has_uniform = "count" in fields or "delay_ms" in fields

    if has_tasks and has_uniform:
        raise ConfigError(f"{name}: use either 'tasks' or 'count' + 'delay_ms', not both")

    if has_tasks:
        batch = _build_batch(name, prefix, fields["tasks"])
    elif has_uniform:
        if "count" not in fields or "delay_ms" not in fields:
            raise ConfigError(f"{name}: 'count' and 'delay_ms' must be given together")
        count = _require_int(name, "count", fields["count"])
        delay_ms = _require_int(name, "delay_ms", fields["delay_ms"])
        batch = TaskBatch.from_delays([delay_ms] * count, prefix)
    else:
        raise ConfigError(f"{name}: missing 'tasks' or 'count' + 'delay_ms'")

    return ScenarioConfig(name, strategy, batch)


def _build_batch(name: str, prefix: str, items: Any) -> TaskBatch:
    if not isinstance(items, list):
        raise ConfigError(f"{name}: Tasks should be in a list.")

    tasks = []
    seen = set()

    for idx, item in enumerate(items):
        label = f"{prefix}-{idx}"

        if isinstance(item, Mapping):
            for field in item.keys():
                if field not in {"label", "delay_ms"}:
                    raise ConfigError(f"{name}: task {idx}: Can't process: {field}")

            if "delay_ms" not in item:
                raise ConfigError(f"{name}: task {idx}: missing 'delay_ms'")

            if "label" in item:
                if not isinstance(item["label"], str) or not item["label"].strip():
                    raise ConfigError(f"{name}: task {idx}: label should be a non-empty string")
                label = item["label"].strip()

            delay_ms = _require_int(name, "delay_ms", item["delay_ms"])
        else:
            delay_ms = _require_int(name, "delay_ms", item)

        if label in seen:
            raise ConfigError(f"{name}: duplicate task label '{label}'")
        seen.add(label)

        tasks.append(DelayedTask(delay_ms, label))

    return TaskBatch.of(tasks)


def _require_int(name: str, field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name}: {field} should be an integer, got {value!r}")

    if value < 0:
        raise ConfigError(f"{name}: {field} can't be negative, got {value}")

    return value
