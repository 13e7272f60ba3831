# =========  timing.py  =========
"""
Timers used to pace playback.

A timer is anything with ``sleep(duration)``; durations are in ticks
(``config.TICKS_PER_SECOND`` per second).  Real timers block, the
simulated ones only record what they were asked to do.
"""

from __future__ import annotations

import logging
import time
from typing import List, Protocol

import pygame

import config

log = logging.getLogger(__name__)


class Timer(Protocol):
    def sleep(self, duration: float) -> None: ...


def _check(duration: float) -> float:
    if duration < 0:
        raise ValueError(f"Cannot sleep a negative duration ({duration}).")
    return duration


def ticks_to_seconds(duration: float) -> float:
    return duration / config.TICKS_PER_SECOND


# ── Simulated timers ───────────────────────────────────────────────────────
class RecordingTimer:
    """Never blocks; keeps every requested duration in ``sleeps``."""

    def __init__(self) -> None:
        self.sleeps: List[float] = []

    def sleep(self, duration: float) -> None:
        self.sleeps.append(_check(duration))

    @property
    def elapsed(self) -> float:
        """Total simulated time, in ticks."""
        return sum(self.sleeps)


class LogTimer(RecordingTimer):
    """
    Prints each sleep onto a sink instead of waiting, indented so the
    pauses stand apart from rendered frames:

        Frame: 0: -
                                      sleep 20
        Frame: 20: --
    """

    def __init__(self, sink, indent: int = config.SLEEP_LOG_INDENT) -> None:
        super().__init__()
        self.sink   = sink
        self.indent = indent

    def sleep(self, duration: float) -> None:
        super().sleep(duration)
        self.sink.write_line(" " * self.indent + f"sleep {duration}")


# ── Blocking timers ────────────────────────────────────────────────────────
class WallClockTimer:
    """Blocks the calling thread with ``time.sleep``."""

    def sleep(self, duration: float) -> None:
        time.sleep(ticks_to_seconds(_check(duration)))


class PygameTimer:
    """
    Blocks with ``pygame.time.delay`` and keeps the window responsive by
    pumping the event queue after every wait.  Delay resolution is 1 ms.
    """

    def sleep(self, duration: float) -> None:
        ms = int(round(ticks_to_seconds(_check(duration)) * 1000))
        pygame.time.delay(ms)
        if pygame.display.get_init():
            pygame.event.pump()
        log.debug("delayed %d ms", ms)
