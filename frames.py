"""
frames.py

Playable units for the frame player.

Every unit has a ``time`` (None until a TimeSource assigns one), is
prepared exactly once with its temporal neighbours, and then renders
itself as text lines on a sink.

Public API
----------
Unit                 – common base (time / prepare / render)
Frame                – static content at an instant
TypingStrategy       – content typed out one character at a time
PreparationContext   – timer + neighbours handed to ``prepare``
PreparationError     – an unmet preparation precondition
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

import config

if TYPE_CHECKING:
    from renderer import LineSink
    from timing import Timer

Time = Union[int, float]


class PreparationError(RuntimeError):
    """A unit could not be prepared from the neighbours it was given."""


@dataclass(frozen=True)
class PreparationContext:
    timer: "Timer"
    previous_unit: Optional["Unit"] = None
    next_unit: Optional["Unit"] = None


# ── Base ───────────────────────────────────────────────────────────────────
class Unit:
    """
    Anything the player can schedule.

    Subclasses override ``_prepare`` (optional) and ``render``.  The
    unprepared → prepared transition happens once; ``prepare`` raises on
    a second call.
    """

    time: Optional[Time] = None
    _prepared: bool = False

    @property
    def prepared(self) -> bool:
        return self._prepared

    def prepare(self, ctx: PreparationContext) -> None:
        if self._prepared:
            raise PreparationError(f"{self!r} was already prepared.")
        self._prepare(ctx)
        self._prepared = True

    def _prepare(self, ctx: PreparationContext) -> None:
        pass

    def render(self, sink: "LineSink") -> None:
        raise NotImplementedError

    def _require_prepared(self) -> None:
        if not self._prepared:
            raise PreparationError(f"{self!r} must be prepared before rendering.")


# ── Frame ──────────────────────────────────────────────────────────────────
@dataclass
class Frame(Unit):
    content: str
    time: Optional[Time] = None

    def render(self, sink: "LineSink") -> None:
        sink.write_line(f"Frame: {self.time}: {self.content}")


# ── Typing ─────────────────────────────────────────────────────────────────
@dataclass
class TypingStrategy(Unit):
    """
    Types ``content`` out as growing prefixes, sleeping ``step`` after each.

    Between two neighbours the whole text takes exactly the neighbour gap
    (``next.time - previous.time``); otherwise it takes ``duration``.
    """

    content: str
    time: Optional[Time] = None
    duration: Time = config.DEFAULT_TYPING_DURATION

    # Filled in by prepare()
    step: Optional[float] = field(default=None, init=False)
    timer: Any = field(default=None, init=False, repr=False, compare=False)

    def _prepare(self, ctx: PreparationContext) -> None:
        if self.time is None:
            raise PreparationError(f"Time was not set for {self!r}.")
        if not self.content:
            raise PreparationError(f"{self!r} has no content to type.")

        self.timer = ctx.timer
        prv, nxt = ctx.previous_unit, ctx.next_unit
        if prv is not None and nxt is not None:
            self.duration = nxt.time - prv.time
        self.step = self.duration / len(self.content)

    def render(self, sink: "LineSink") -> None:
        self._require_prepared()
        for i in range(1, len(self.content) + 1):
            sink.write_line(self.content[:i])
            self.timer.sleep(self.step)
