"""
player.py – drives timed playback of a TimeSource

Construction prepares every unit once (each one sees its previous and
next neighbour plus the shared timer); ``play()`` then walks the
timestamps in order, sleeping for each gap and rendering the unit that
governs it.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import config
from frames import PreparationContext, Time, Unit
from renderer import LineSink
from time_source import TimeSource
from timing import Timer

log = logging.getLogger(__name__)


# ── helpers ────────────────────────────────────────────────────────────────
def _neighbours(units: Sequence[Unit]) -> Iterator[Tuple[Optional[Unit], Unit, Optional[Unit]]]:
    """Yield (previous, current, next) for each unit; ends padded with None."""
    padded = [None, *units, None]
    return zip(padded, padded[1:], padded[2:])


def preparation_pass(units: Iterable[Unit], timer: Timer) -> None:
    """Prepare *units* (already in time order) one after another."""
    for prv, cur, nxt in _neighbours(list(units)):
        log.debug("preparing %r", cur)
        cur.prepare(PreparationContext(timer=timer, previous_unit=prv, next_unit=nxt))


# ── player ─────────────────────────────────────────────────────────────────
class Player:
    def __init__(self, source: TimeSource, sink: LineSink, timer: Timer) -> None:
        self.source = source
        self.sink   = sink
        self.timer  = timer

        preparation_pass(self.source.units, self.timer)
        log.debug("prepared %d units", len(self.source))

    @property
    def timestamps(self) -> Tuple[Time, ...]:
        return self.source.timestamps

    def __getitem__(self, when: Time) -> Unit:
        return self.source.unit_at(when)

    # ── playback -------------------------------------------------------
    def play(self) -> None:
        self.sink.write_line(config.PLAY_MARKER)

        stamps = self.timestamps
        if stamps:
            self._render_at(stamps[0])
        for prev, curr in zip(stamps, stamps[1:]):
            self.timer.sleep(curr - prev)
            self._render_at(curr)

        self.sink.write_line(config.END_MARKER)

    def _render_at(self, when: Time) -> None:
        unit = self.source.unit_at(when)
        log.debug("t=%s rendering %r", when, unit)
        unit.render(self.sink)
