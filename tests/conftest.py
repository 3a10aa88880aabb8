"""Shared fixtures for the quizcalc test suite."""

import io
import threading

import pytest
from rich.console import Console

from quizcalc.models import QuizRecord


@pytest.fixture
def console():
    """A Rich console that writes into a StringIO instead of the terminal."""
    return Console(file=io.StringIO(), width=200, highlight=False, color_system=None)


@pytest.fixture
def output(console):
    """Return everything printed to the `console` fixture so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def records():
    return [
        QuizRecord(question="2+2", answer="4"),
        QuizRecord(question="Capital of France", answer="paris"),
    ]


class StalledStream:
    """Serves the given lines, then blocks every further readline() until released.

    A line given as a `(seconds, text)` tuple is served after that delay.
    """

    def __init__(self, *lines):
        self._lines = list(lines)
        self._release = threading.Event()
        self.reads = 0

    def readline(self) -> str:
        self.reads += 1
        if self._lines:
            line = self._lines.pop(0)
            if isinstance(line, tuple):
                delay, line = line
                self._release.wait(timeout=delay)
            return line
        self._release.wait(timeout=10)
        return ""

    def release(self) -> None:
        self._release.set()


@pytest.fixture
def stalled_stream():
    """Factory for StalledStream; every stream is released at teardown."""
    streams = []

    def _make(*lines) -> StalledStream:
        s = StalledStream(*lines)
        streams.append(s)
        return s

    yield _make
    for s in streams:
        s.release()
