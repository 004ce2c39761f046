"""Debug panel for displaying scrolling log output."""

import curses
import logging
import time
from collections import deque
from typing import Optional

from ui.base import ColorPair, draw_box, safe_addstr, wrap_text


class DebugPanel:
    """Panel for displaying recent log messages.

    Shows the newest lines at the bottom; older lines scroll off the top.
    """

    def __init__(
        self,
        window: Optional["curses.window"],
        max_lines: int = 1000,
    ) -> None:
        """Initialize the debug panel.

        Args:
            window: Curses window to render into, or None until laid out.
            max_lines: Maximum number of display lines to retain.
        """
        self.window = window
        self.lines: deque[tuple[str, str]] = deque(maxlen=max_lines)

    def content_width(self) -> int:
        if self.window is None:
            return 40
        _, width = self.window.getmaxyx()
        return max(10, width - 4)

    def add_line(self, text: str, level: str = "") -> None:
        """Add a line to the debug output.

        Args:
            text: Text to add (will be split on newlines and wrapped).
            level: Log level for coloring.
        """
        for i, wrapped_line in enumerate(wrap_text(text, self.content_width())):
            # Only first line of wrapped text gets the level coloring
            self.lines.append((wrapped_line, level if i == 0 else ""))

    def draw(self) -> None:
        """Render the debug panel."""
        if self.window is None:
            return
        self.window.erase()
        height, width = self.window.getmaxyx()

        draw_box(self.window, ColorPair.BORDER_DIM)
        safe_addstr(self.window, 0, 2, " Debug Log ")

        content_height = height - 2
        content_width = width - 4
        visible = list(self.lines)[-content_height:] if content_height > 0 else []

        for i, (line_text, level) in enumerate(visible):
            attr = self._get_line_attr(level)
            safe_addstr(self.window, i + 1, 2, line_text[:content_width], attr)

        self.window.noutrefresh()

    def _get_line_attr(self, level: str) -> int:
        """Get display attributes based on log level."""
        level_upper = level.upper()
        if level_upper in ("ERROR", "CRITICAL"):
            return curses.color_pair(ColorPair.ERROR)
        elif level_upper == "WARNING":
            return curses.color_pair(ColorPair.WARNING)
        elif level_upper == "DEBUG":
            return curses.color_pair(ColorPair.DEBUG)
        return curses.A_NORMAL


class DebugPanelHandler(logging.Handler):
    """Logging handler that writes to a DebugPanel.

    Uses a compact format suited to a narrow side panel.
    """

    LEVEL_SHORT = {
        "DEBUG": "D",
        "INFO": "I",
        "WARNING": "W",
        "ERROR": "E",
        "CRITICAL": "C",
    }

    def __init__(self, panel: DebugPanel) -> None:
        super().__init__()
        self.panel = panel

    def format_record(self, record: logging.LogRecord) -> str:
        """Format a record as ``HH:MM:SS L [name] message``."""
        time_str = time.strftime("%H:%M:%S", time.localtime(record.created))
        level_char = self.LEVEL_SHORT.get(record.levelname, "?")
        short_name = record.name.split(".")[-1]
        return f"{time_str} {level_char} [{short_name}] {record.getMessage()}"

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to the debug panel."""
        try:
            self.panel.add_line(self.format_record(record), record.levelname)
        except Exception:
            # Writing to stderr would corrupt the curses screen
            pass
