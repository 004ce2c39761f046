"""Editor mode and state value."""

from dataclasses import dataclass, replace
from enum import Enum, auto

from models.stack import StackEntry


class Mode(Enum):
    """Editor operating modes."""

    NAVIGATION = auto()  # Command keys act on the stack
    INSERTION = auto()   # Keystrokes edit the input buffer
    TERMINATED = auto()  # Run loop exits

    @property
    def label(self) -> str:
        """Name shown on the mode line."""
        return _MODE_LABELS[self]

    @classmethod
    def from_name(cls, name: str) -> "Mode":
        """Look up a mode by config name (``normal`` or ``insert``).

        Raises:
            ValueError: If the name does not select a startable mode.
        """
        try:
            return _MODE_NAMES[name.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown mode: {name!r}") from None


_MODE_LABELS = {
    Mode.NAVIGATION: "NORMAL",
    Mode.INSERTION: "INSERT",
    Mode.TERMINATED: "EXIT",
}

_MODE_NAMES = {
    "normal": Mode.NAVIGATION,
    "navigation": Mode.NAVIGATION,
    "insert": Mode.INSERTION,
    "insertion": Mode.INSERTION,
}


@dataclass(frozen=True)
class EditorState:
    """Immutable editor state.

    The stack is a tuple with the newest entry last. A new state is built
    for every event; ``status`` carries a one-event message for the footer.
    """

    mode: Mode = Mode.INSERTION
    input_buffer: str = ""
    stack: tuple[StackEntry, ...] = ()
    status: str = ""

    def evolve(self, **changes) -> "EditorState":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)
