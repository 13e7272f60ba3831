"""
renderer.py

Output sinks.  The player only ever calls ``write_line(text)``; these
classes decide where the text goes.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Protocol, TextIO

import pygame

import config


class LineSink(Protocol):
    def write_line(self, text: str) -> None: ...


class StreamSink:
    """Writes each line to a text stream (stdout unless told otherwise)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write_line(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


class BufferSink:
    """Keeps every line in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)


class TeeSink:
    """Fans each line out to several sinks, in order."""

    def __init__(self, *sinks: LineSink) -> None:
        self.sinks = sinks

    def write_line(self, text: str) -> None:
        for sink in self.sinks:
            sink.write_line(text)


class PygameSink:
    """
    Terminal-style scroll-back drawn onto a pygame surface: the newest
    ``max_lines`` lines, green monospace on black, oldest at the top.
    """

    def __init__(self, surface: pygame.Surface,
                 font_size: int = config.FONT_SIZE,
                 max_lines: int = config.SCREEN_LINES) -> None:
        if max_lines < 1:
            raise ValueError("max_lines must be at least 1")
        pygame.font.init()
        self.surface  = surface
        self.font      = pygame.font.Font(None, font_size)
        self.max_lines = max_lines
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)
        del self.lines[:-self.max_lines]
        self._draw()

    def _draw(self) -> None:
        self.surface.fill(config.BG_COLOUR)
        y = 10
        for ln in self.lines:
            txt = self.font.render(ln, True, config.TEXT_COLOUR)
            self.surface.blit(txt, (10, y))
            y += self.font.get_linesize()

        # only the window surface needs presenting
        if pygame.display.get_init() and self.surface is pygame.display.get_surface():
            pygame.display.flip()
