from lang.term import App, Var
from models.stack import TermEntry
from models.state import EditorState, Mode
from ui.render import render


def test_empty_state():
    assert render(EditorState()) == ["", "INSERT"]


def test_stack_oldest_first(x, y, rule):
    state = EditorState(mode=Mode.NAVIGATION, input_buffer="(g", stack=(x, rule, y))
    assert render(state) == ["x", "(Id a) = a", "y", "(g", "NORMAL"]


def test_applications_display_nested():
    term = App(App(Var("f"), Var("a")), Var("b"))
    state = EditorState(stack=(TermEntry(term),))
    assert render(state)[0] == "((f a) b)"


def test_status_not_rendered():
    state = EditorState(mode=Mode.TERMINATED, status="parse error: x")
    assert render(state) == ["", "EXIT"]
