from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Reporter(Protocol):
    def report(self, message: str) -> None: ...


class PrintReporter:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def report(self, message: str) -> None:
        # sys.stdout is looked up on every call, not bound at construction
        print(message, file=self.stream or sys.stdout, flush=True)


class RecordingReporter:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)


class NullReporter:
    def report(self, message: str) -> None:
        pass
