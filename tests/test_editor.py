import pytest

from editor import TermStackEditor
from models.config import AppConfig
from models.events import ENTER, ESCAPE, KeyEvent, KeyKind
from models.state import Mode


class FakeScreen:
    """Scripted display: ``None`` entries in ``events`` are idle ticks."""

    def __init__(self, events, fail_on_draw=None):
        self.events = list(events)
        self.fail_on_draw = fail_on_draw
        self.frames = []
        self.timeouts = []
        self.resized = 0
        self.closed = False

    def poll(self, timeout_ms):
        self.timeouts.append(timeout_ms)
        if not self.events:
            raise AssertionError("polled after script ended")
        return self.events.pop(0)

    def draw(self, lines, status=""):
        if self.fail_on_draw is not None and len(self.frames) == self.fail_on_draw:
            raise RuntimeError("display failed")
        self.frames.append((list(lines), status))

    def resize(self):
        self.resized += 1

    def close(self):
        self.closed = True


def keys(text):
    return [KeyEvent.of_char(char) for char in text]


def test_initial_render_and_quit():
    screen = FakeScreen([ESCAPE, *keys("q")])
    state = TermStackEditor(screen).run()
    assert state.mode == Mode.TERMINATED
    assert screen.frames[0] == (["", "INSERT"], "")
    assert screen.frames[-1] == (["", "EXIT"], "")
    assert len(screen.frames) == 3
    assert screen.closed


def test_stops_polling_after_terminate():
    screen = FakeScreen([ESCAPE, *keys("q"), *keys("i")])
    TermStackEditor(screen).run()
    assert screen.events == keys("i")


def test_idle_ticks_do_not_repaint():
    screen = FakeScreen([None, None, ESCAPE, None, *keys("q")])
    TermStackEditor(screen).run()
    assert len(screen.frames) == 3
    assert screen.frames[1] == (["", "NORMAL"], "")


def test_poll_uses_configured_interval():
    screen = FakeScreen([None, ESCAPE, *keys("q")])
    TermStackEditor(screen, AppConfig(poll_interval_ms=20)).run()
    assert screen.timeouts == [20, 20, 20]


def test_start_in_navigation_mode():
    screen = FakeScreen(keys("q"))
    state = TermStackEditor(screen, AppConfig(initial_mode="normal")).run()
    assert state.mode == Mode.TERMINATED
    assert screen.frames[0][0][-1] == "NORMAL"


def test_events_processed_in_order():
    events = [*keys("x"), ENTER, *keys("y"), ENTER, ESCAPE, *keys("aq")]
    screen = FakeScreen(events)
    state = TermStackEditor(screen).run()
    assert [e.to_display_text() for e in state.stack] == ["(y x)"]
    assert screen.frames[2][0] == ["x", "", "INSERT"]
    assert screen.frames[-2][0] == ["(y x)", "", "NORMAL"]


def test_parse_error_shown_once():
    screen = FakeScreen([*keys("("), ENTER, *keys("f"), ESCAPE, *keys("q")])
    TermStackEditor(screen).run()
    lines, status = screen.frames[2]
    assert lines == ["(", "INSERT"]
    assert status.startswith("parse error")
    assert screen.frames[3] == (["(f", "INSERT"], "")


def test_resize_relayouts_screen():
    screen = FakeScreen([KeyEvent(KeyKind.RESIZE), ESCAPE, *keys("q")])
    TermStackEditor(screen).run()
    assert screen.resized == 1
    assert screen.frames[1] == screen.frames[0]


def test_screen_closed_when_draw_fails():
    screen = FakeScreen([ESCAPE, *keys("q")], fail_on_draw=1)
    with pytest.raises(RuntimeError):
        TermStackEditor(screen).run()
    assert screen.closed


def test_custom_parser():
    from lang.parser import ParseError
    from lang.term import Var

    def parse(text):
        if not text.isdigit():
            raise ParseError("digits only", 0)
        return Var("n" + text)

    screen = FakeScreen([*keys("7"), ENTER, *keys("x"), ENTER, ESCAPE, *keys("q")])
    state = TermStackEditor(screen, parse=parse).run()
    assert [e.to_display_text() for e in state.stack] == ["n7"]
    assert state.input_buffer == "x"
