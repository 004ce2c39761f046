"""Data models for the term stack editor."""

from models.stack import TermEntry, RuleEntry, StackEntry
from models.state import EditorState, Mode
from models.events import KeyEvent, KeyKind
from models.config import AppConfig

__all__ = [
    "TermEntry",
    "RuleEntry",
    "StackEntry",
    "EditorState",
    "Mode",
    "KeyEvent",
    "KeyKind",
    "AppConfig",
]
