#!/usr/bin/env python3
"""
main.py – play the demo scene

    python main.py                      # sleeps printed inline, nothing waits
    python main.py --timer wall         # real pauses on stdout
    python main.py --display            # pygame window, real pauses
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List

import pygame

import config
from frames import Frame, PreparationError, Time, TypingStrategy, Unit
from player import Player
from renderer import PygameSink, StreamSink, TeeSink
from time_source import SourceError, TimeSource
from timing import LogTimer, PygameTimer, RecordingTimer, WallClockTimer
from transitions import TerseTransition, VerboseTransition

log = logging.getLogger("main")


# ── demo scene ─────────────────────────────────────────────────────────────
def demo_units() -> List[Unit]:
    """Units carrying their own time (for ``TimeSource.from_units``)."""
    return [
        Frame(time=0, content="-"),
        Frame(time=20, content="--"),
        TerseTransition(time=25),
        Frame(time=45, content="---"),
        VerboseTransition(time=50),
        Frame(time=200, content="***"),
        TypingStrategy(time=210, content="Federico", duration=30),
    ]


def demo_mapping() -> Dict[Time, Unit]:
    """The same scene keyed by time (for ``TimeSource.from_mapping``)."""
    return {
        0:   Frame(content="-"),
        20:  Frame(content="--"),
        25:  TerseTransition(),
        45:  Frame(content="---"),
        50:  VerboseTransition(),
        200: Frame(content="***"),
        210: TypingStrategy(content="Federico", duration=30),
    }


def build_source(kind: str) -> TimeSource:
    if kind == "mapping":
        return TimeSource.from_mapping(demo_mapping())
    return TimeSource.from_units(demo_units())


# ── wiring ─────────────────────────────────────────────────────────────────
def _open_window() -> pygame.Surface:
    pygame.init()
    pygame.display.set_caption("frame player")
    return pygame.display.set_mode(
        (0, 0) if config.FULLSCREEN else config.WINDOWED_SIZE,
        pygame.FULLSCREEN if config.FULLSCREEN else 0,
    )


def run(args: argparse.Namespace) -> int:
    sink = StreamSink()
    if args.display:
        sink = TeeSink(sink, PygameSink(_open_window()))

    # a window needs real pauses and a pumped event queue
    kind = "pygame" if args.display else args.timer
    if kind == "log":
        timer = LogTimer(sink)
    elif kind == "record":
        timer = RecordingTimer()
    elif kind == "pygame":
        timer = PygameTimer()
    else:
        timer = WallClockTimer()

    try:
        player = Player(source=build_source(args.source), sink=sink, timer=timer)
    except (SourceError, PreparationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    log.info("timestamps %s", list(player.timestamps))
    for _ in range(args.repeat):
        player.play()

    if isinstance(timer, RecordingTimer):
        log.info("simulated %s %s of sleep", timer.elapsed, config.TIME_UNIT)
    if args.display:
        pygame.quit()
    return 0


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Play the demo frame scene")
    ap.add_argument("--timer", choices=("log", "record", "wall", "pygame"), default="log",
                    help="how pauses are handled (default: log them inline)")
    ap.add_argument("--source", choices=("list", "mapping"), default="list",
                    help="build the scene from self-timed units or a time→unit map")
    ap.add_argument("--display", action="store_true",
                    help="also draw output in a pygame window (implies a blocking timer)")
    ap.add_argument("--repeat", type=int, default=1, help="number of play() calls")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
