# transitions.py
"""
Transition units: a synthetic entry describing the change between the
frame before it and the frame after it.  A transition has no content of
its own; everything it prints is captured from its neighbours during
preparation.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import config
from frames import Frame, PreparationContext, PreparationError, Time, Unit

if TYPE_CHECKING:
    from renderer import LineSink


@dataclass
class Transition(Unit):
    time: Optional[Time] = None

    # Filled in by prepare()
    duration: Optional[Time] = field(default=None, init=False)
    from_content: Optional[str] = field(default=None, init=False)
    to_content: Optional[str] = field(default=None, init=False)

    def _prepare(self, ctx: PreparationContext) -> None:
        prv, nxt = ctx.previous_unit, ctx.next_unit
        if not isinstance(nxt, Frame):
            raise PreparationError(f"Next unit of {self!r} must be a Frame, got {nxt!r}.")
        if not isinstance(prv, Frame):
            raise PreparationError(f"Previous unit of {self!r} must be a Frame, got {prv!r}.")

        self.duration     = nxt.time - prv.time
        self.from_content = prv.content
        self.to_content   = nxt.content

    def render(self, sink: "LineSink") -> None:
        self._require_prepared()
        sink.write_line(self.describe())

    def describe(self) -> str:
        raise NotImplementedError


@dataclass
class VerboseTransition(Transition):
    """Duration, both contents and a random decoration code, e.g.
    ``Transition 155ms : '---' ==(270)==> '***'``."""

    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    def describe(self) -> str:
        lo, hi = config.DECORATION_RANGE
        code   = (self.rng or random).randint(lo, hi)
        return (f"Transition {self.duration}{config.TIME_UNIT} : "
                f"{self.from_content!r} ==({code})==> {self.to_content!r}")


@dataclass
class TerseTransition(Transition):
    def describe(self) -> str:
        return f"{self.from_content!r}==>{self.to_content!r}"
