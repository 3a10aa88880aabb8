"""Overall quiz countdown and the timed line read that races it.

The deadline is one absolute point on the monotonic clock, fixed when the
quiz starts and never reset per question. Each read runs in its own daemon
thread and hands its line over through a one-slot queue. When the deadline
wins, the reader is left blocked on input and its line is never collected.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Deadline:
    """Absolute expiry time on the time.monotonic() clock."""

    expires_at: float

    @classmethod
    def start(cls, limit_s: float) -> Deadline:
        return cls(expires_at=time.monotonic() + limit_s)

    def remaining(self) -> float:
        """Seconds left, never negative."""
        return max(0.0, self.expires_at - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0


def _read_one_line(stream: TextIO, handoff: queue.Queue) -> None:
    """Reader thread body: read one line and hand it over.

    End of input hands over an empty string, like an empty answer.
    """
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        logger.debug("Input read failed: %s", e)
        line = ""
    handoff.put(line)


def read_line_before(deadline: Deadline, stream: TextIO) -> Optional[str]:
    """Read one line from `stream` unless the deadline fires first.

    Returns the raw line (trailing newline included, "" at end of input), or
    None when the deadline expired before a line arrived.
    """
    if deadline.expired:
        return None

    handoff: queue.Queue = queue.Queue(maxsize=1)
    reader = threading.Thread(
        target=_read_one_line,
        args=(stream, handoff),
        name="quizcalc-answer-reader",
        daemon=True,
    )
    reader.start()

    try:
        return handoff.get(timeout=deadline.remaining())
    except queue.Empty:
        logger.debug("Deadline fired; abandoning reader %s", reader.name)
        return None
