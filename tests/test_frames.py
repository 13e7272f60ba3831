"""Tests for Frame and TypingStrategy units."""

import pytest

import config
from frames import Frame, PreparationContext, PreparationError, TypingStrategy
from timing import RecordingTimer


def _ctx(timer=None, prev=None, nxt=None):
    return PreparationContext(timer=timer or RecordingTimer(), previous_unit=prev, next_unit=nxt)


class TestFrame:
    def test_render_single_line(self, sink):
        frame = Frame(time=20, content="--")
        frame.prepare(_ctx())
        frame.render(sink)
        assert sink.lines == ["Frame: 20: --"]

    def test_prepare_once(self):
        frame = Frame(time=0, content="-")
        assert not frame.prepared
        frame.prepare(_ctx())
        assert frame.prepared
        with pytest.raises(PreparationError, match="already prepared"):
            frame.prepare(_ctx())


class TestTypingStrategy:
    def test_duration_taken_from_neighbours(self):
        typing = TypingStrategy(time=10, content="abcd", duration=99)
        typing.prepare(_ctx(prev=Frame(time=0, content="x"), nxt=Frame(time=40, content="y")))
        assert typing.duration == 40
        assert typing.step == 10

    def test_fixed_duration_without_both_neighbours(self):
        typing = TypingStrategy(time=210, content="Federico", duration=30)
        typing.prepare(_ctx(prev=Frame(time=200, content="***")))
        assert typing.duration == 30
        assert typing.step == 3.75

    def test_default_duration(self):
        typing = TypingStrategy(time=0, content="abcde")
        typing.prepare(_ctx())
        assert typing.duration == config.DEFAULT_TYPING_DURATION
        assert typing.step == config.DEFAULT_TYPING_DURATION / 5

    def test_render_types_prefixes_and_sleeps_step(self, sink):
        timer = RecordingTimer()
        typing = TypingStrategy(time=5, content="abc", duration=6)
        typing.prepare(_ctx(timer=timer))
        typing.render(sink)

        assert sink.lines == ["a", "ab", "abc"]
        assert timer.sleeps == [2.0, 2.0, 2.0]

    def test_each_line_followed_by_its_sleep(self, sink, log_timer):
        typing = TypingStrategy(time=5, content="ab", duration=4)
        typing.prepare(_ctx(timer=log_timer))
        typing.render(sink)
        pause = " " * 30 + "sleep 2.0"
        assert sink.lines == ["a", pause, "ab", pause]

    def test_requires_time(self):
        typing = TypingStrategy(content="abc")
        with pytest.raises(PreparationError, match="Time was not set"):
            typing.prepare(_ctx())
        assert not typing.prepared

    def test_requires_content(self):
        with pytest.raises(PreparationError, match="no content"):
            TypingStrategy(time=0, content="").prepare(_ctx())

    def test_render_before_prepare(self, sink):
        with pytest.raises(PreparationError, match="must be prepared"):
            TypingStrategy(time=0, content="abc").render(sink)
        assert sink.lines == []
