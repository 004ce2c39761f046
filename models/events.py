"""Structured key events fed to the reducer."""

from dataclasses import dataclass
from enum import Enum, auto


class KeyKind(Enum):
    """Categories of input events."""

    CHAR = auto()
    BACKSPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    MOUSE = auto()
    RESIZE = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single input event; ``char`` is set only for ``CHAR`` events."""

    kind: KeyKind
    char: str = ""

    @classmethod
    def of_char(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, char)


BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
ENTER = KeyEvent(KeyKind.ENTER)
ESCAPE = KeyEvent(KeyKind.ESCAPE)
