import os

# Headless pygame; must be set before pygame is first imported.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from renderer import BufferSink
from timing import LogTimer


@pytest.fixture
def sink():
    return BufferSink()


@pytest.fixture
def log_timer(sink):
    """Timer that writes its sleeps into the same sink as the frames."""
    return LogTimer(sink)
