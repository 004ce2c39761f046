"""Editor state machine.

``reduce`` maps the current state and one input event to the next state.
It never raises: unrecognized events leave the state as it was (apart from
clearing the one-event status message).
"""

from typing import Callable

from lang.parser import ParseError, read_term
from lang.term import App, Term
from logging_config import get_logger
from models.events import KeyEvent, KeyKind
from models.stack import RuleEntry, StackEntry, TermEntry
from models.state import EditorState, Mode

logger = get_logger("reducer")

Parse = Callable[[str], Term]

COMBINE_FAILED = "combine needs two terms on the stack"


def combine(stack: tuple[StackEntry, ...]) -> tuple[StackEntry, ...]:
    """Replace the top two terms with their application.

    The top entry becomes the function and the entry below it the argument.
    If there are fewer than two entries, or either of them is a rule, the
    original stack is returned unchanged.
    """
    if len(stack) < 2:
        return stack
    first, second = stack[-1], stack[-2]
    if isinstance(first, TermEntry) and isinstance(second, TermEntry):
        applied = TermEntry(App(func=first.term, argm=second.term))
        return stack[:-2] + (applied,)
    if isinstance(first, (TermEntry, RuleEntry)) and isinstance(second, (TermEntry, RuleEntry)):
        return stack
    raise TypeError(f"Unknown stack entry: {first!r} / {second!r}")


def _navigation_update(state: EditorState, event: KeyEvent) -> EditorState:
    """Handle command keys in navigation mode."""
    if event.kind != KeyKind.CHAR:
        return state

    if event.char == "i":
        return state.evolve(mode=Mode.INSERTION)
    elif event.char == "q":
        return state.evolve(mode=Mode.TERMINATED)
    elif event.char == "a":
        stack = combine(state.stack)
        if stack is state.stack:
            logger.debug(f"Combine rejected, stack size {len(stack)}")
            return state.evolve(status=COMBINE_FAILED)
        logger.info(f"Combined top of stack: {stack[-1].to_display_text()}")
        return state.evolve(stack=stack)
    return state


def _insertion_update(
    state: EditorState,
    event: KeyEvent,
    parse: Parse,
) -> EditorState:
    """Handle buffer editing and commit in insertion mode."""
    if event.kind == KeyKind.CHAR:
        if not event.char.isprintable():
            return state
        return state.evolve(input_buffer=state.input_buffer + event.char)
    elif event.kind == KeyKind.BACKSPACE:
        return state.evolve(input_buffer=state.input_buffer[:-1])
    elif event.kind == KeyKind.ENTER:
        return _commit(state, parse)
    return state


def _commit(state: EditorState, parse: Parse) -> EditorState:
    """Parse the input buffer and push the result."""
    try:
        term = parse(state.input_buffer)
    except ParseError as e:
        logger.debug(f"Rejected input {state.input_buffer!r}: {e}")
        return state.evolve(status=f"parse error: {e}")

    entry = TermEntry(term)
    logger.info(f"Pushed term: {entry.to_display_text()}")
    return state.evolve(input_buffer="", stack=state.stack + (entry,))


def reduce(
    state: EditorState,
    event: KeyEvent,
    parse: Parse = read_term,
) -> EditorState:
    """Compute the state that follows ``event``.

    Args:
        state: Current editor state.
        event: Input event to apply.
        parse: Text-to-term parser; must raise ParseError on bad input.

    Returns:
        The next editor state.
    """
    state = state.evolve(status="") if state.status else state

    # ESC works from every mode
    if event.kind == KeyKind.ESCAPE:
        return state.evolve(mode=Mode.NAVIGATION)

    if state.mode == Mode.NAVIGATION:
        return _navigation_update(state, event)
    elif state.mode == Mode.INSERTION:
        return _insertion_update(state, event, parse)
    return state
