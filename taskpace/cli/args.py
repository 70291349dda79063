from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskpace")

    parser.add_argument(
        "--config",
        default=None,
        help="Path to scenario file (built-in demo scenarios when omitted)",
    )
    parser.add_argument(
        "--virtual",
        action="store_true",
        help="Run on a virtual clock: no real waiting, exact timings",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # run
    run = subparsers.add_parser("run", help="Run scenarios one by one with progress output")
    run.add_argument(
        "names",
        nargs="*",
        help="Scenario names",
    )

    # bench
    bench = subparsers.add_parser("bench", help="Time scenarios and report elapsed time")
    bench.add_argument(
        "names",
        nargs="*",
        help="Scenario names",
    )
    bench.add_argument(
        "--serial",
        action="store_true",
        help="Wait for each benchmark before starting the next",
    )

    # list
    subparsers.add_parser("list", help="List scenarios")

    return parser
