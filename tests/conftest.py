import os
import sys

import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lang.term import Var, Ctr, Rule  # noqa: E402
from models.stack import TermEntry, RuleEntry  # noqa: E402
from models.state import EditorState, Mode  # noqa: E402


@pytest.fixture
def x():
    return TermEntry(Var("x"))


@pytest.fixture
def y():
    return TermEntry(Var("y"))


@pytest.fixture
def rule():
    return RuleEntry(Rule(Ctr("Id", (Var("a"),)), Var("a")))


@pytest.fixture
def normal_state():
    return EditorState(mode=Mode.NAVIGATION)


@pytest.fixture
def insert_state():
    return EditorState(mode=Mode.INSERTION)
