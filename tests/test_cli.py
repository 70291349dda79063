# tests/test_cli.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from taskpace.cli import run_cli


def _write_json_config(path: Path, scenarios: dict) -> None:
    path.write_text(json.dumps({"scenarios": scenarios}), encoding="utf-8")


def test_list_prints_default_scenarios(capsys: pytest.CaptureFixture[str]) -> None:
    code = run_cli(["list"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == [
        "blocking: sequential 1500 1500 1500",
        "detached: detached 1500 1500 1500",
        "fast: concurrent 3000 3000 3000",
        "non-blocking: concurrent 1500 1500 1500",
        "slow: sequential 3000 3000 3000",
    ]


def test_run_prints_progress_then_timing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "suite.json"
    _write_json_config(cfg, {"seq": {"strategy": "sequential", "tasks": [100, 200]}})

    code = run_cli(["--config", str(cfg), "--virtual", "run"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == [
        "Started seq-0",
        "Finished seq-0",
        "Started seq-1",
        "Finished seq-1",
        "OK seq, 300ms",
    ]


def test_run_detached_ends_dispatch_before_completions(
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = run_cli(["--virtual", "run", "detached"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out[:4] == [
        "Started detached-0",
        "Started detached-1",
        "Started detached-2",
        "Dispatched 3 tasks",
    ]
    assert out[-1] == "OK detached, 1500ms"


def test_bench_default_suite_overlaps_runs(capsys: pytest.CaptureFixture[str]) -> None:
    code = run_cli(["--virtual", "bench"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert sorted(out) == [
        "OK blocking, 4500ms",
        "OK detached, 1500ms",
        "OK fast, 3000ms",
        "OK non-blocking, 1500ms",
        "OK slow, 9000ms",
    ]
    assert out[-1] == "OK slow, 9000ms"


def test_bench_serial_keeps_requested_order(capsys: pytest.CaptureFixture[str]) -> None:
    code = run_cli(["--virtual", "bench", "--serial", "slow", "fast"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == ["OK slow, 9000ms", "OK fast, 3000ms"]


def test_bench_on_system_clock(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "suite.yaml"
    cfg.write_text(
        "scenarios:\n  quick:\n    strategy: concurrent\n    count: 3\n    delay_ms: 20\n",
        encoding="utf-8",
    )

    code = run_cli(["--config", str(cfg), "bench"])
    out = capsys.readouterr().out.strip()

    assert code == 0
    assert out.startswith("OK quick, ")
    assert int(out.removeprefix("OK quick, ").removesuffix("ms")) >= 20


def test_invalid_config_path_returns_2(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing.json"

    code = run_cli(["--config", str(missing), "list"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.err != ""


def test_unknown_scenario_returns_2(capsys: pytest.CaptureFixture[str]) -> None:
    code = run_cli(["--virtual", "run", "nope"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.err != ""


def test_undecodable_config_returns_2(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "suite.yaml"
    cfg.write_bytes(b"scenarios:\n  a\xff:\n    strategy: sequential\n    tasks: [1]\n")

    code = run_cli(["--config", str(cfg), "list"])
    captured = capsys.readouterr()

    assert code == 2
    assert "invalid YAML" in captured.err
