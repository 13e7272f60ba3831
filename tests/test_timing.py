"""Tests for timers."""

import time

import pytest
import pygame

import timing
from renderer import BufferSink
from timing import LogTimer, PygameTimer, RecordingTimer, WallClockTimer


def test_recording_timer_keeps_durations():
    timer = RecordingTimer()
    timer.sleep(20)
    timer.sleep(3.75)
    assert timer.sleeps == [20, 3.75]
    assert timer.elapsed == 23.75


def test_log_timer_writes_indented_line():
    sink = BufferSink()
    timer = LogTimer(sink)
    timer.sleep(150)
    timer.sleep(3.75)
    assert sink.lines == [" " * 30 + "sleep 150", " " * 30 + "sleep 3.75"]
    assert timer.sleeps == [150, 3.75]


def test_log_timer_custom_indent():
    sink = BufferSink()
    LogTimer(sink, indent=2).sleep(5)
    assert sink.lines == ["  sleep 5"]


@pytest.mark.parametrize("timer", [RecordingTimer(), WallClockTimer(), PygameTimer()])
def test_negative_duration_rejected(timer):
    with pytest.raises(ValueError):
        timer.sleep(-1)


def test_wall_clock_converts_ticks_to_seconds(monkeypatch):
    calls = []
    monkeypatch.setattr(timing.time, "sleep", calls.append)
    WallClockTimer().sleep(250)
    assert calls == [0.25]


def test_pygame_timer_delays_in_milliseconds(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.time, "delay", calls.append)
    timer = PygameTimer()
    timer.sleep(20)
    timer.sleep(3.75)
    assert calls == [20, 4]


def test_pygame_timer_really_waits():
    start = time.perf_counter()
    PygameTimer().sleep(5)
    assert time.perf_counter() - start >= 0.004
