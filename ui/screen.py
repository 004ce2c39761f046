"""Curses display and key input for the editor."""

import curses
from typing import Optional, Union

from logging_config import get_logger
from models.events import BACKSPACE, ENTER, ESCAPE, KeyEvent, KeyKind
from ui.base import ColorPair, safe_addstr, setup_colors, truncate
from ui.debug_panel import DebugPanel

HELP_TEXT = "ESC:Normal | i:Insert | a:Apply | q:Quit | Enter:Push"

# Milliseconds curses waits after ESC for the rest of an escape sequence
ESC_DELAY_MS = 25


def translate_key(key: Union[int, str]) -> KeyEvent:
    """Convert a curses ``get_wch`` result into a KeyEvent.

    Args:
        key: Character string or special key code.

    Returns:
        The matching KeyEvent; unknown keys map to ``KeyKind.OTHER``.
    """
    if isinstance(key, str):
        if key == "\x1b":
            return ESCAPE
        elif key in ("\n", "\r"):
            return ENTER
        elif key in ("\x7f", "\x08"):
            return BACKSPACE
        elif len(key) == 1 and key.isprintable():
            return KeyEvent.of_char(key)
        return KeyEvent(KeyKind.OTHER)

    if key == 27:
        return ESCAPE
    elif key in (curses.KEY_ENTER, 10, 13):
        return ENTER
    elif key in (curses.KEY_BACKSPACE, 127, 8):
        return BACKSPACE
    elif key == curses.KEY_MOUSE:
        return KeyEvent(KeyKind.MOUSE)
    elif key == curses.KEY_RESIZE:
        return KeyEvent(KeyKind.RESIZE)
    return KeyEvent(KeyKind.OTHER)


class Screen:
    """Full-screen line display backed by a curses window.

    The terminal itself is acquired and released by ``curses.wrapper``;
    this class configures input on top of it and restores what it changed
    in ``close``.
    """

    def __init__(
        self,
        stdscr: "curses.window",
        show_footer: bool = True,
        debug: bool = False,
    ) -> None:
        """Initialize the screen.

        Args:
            stdscr: Main curses screen.
            show_footer: Draw the status/help line at the bottom.
            debug: Reserve a side panel for live log output.
        """
        self.stdscr = stdscr
        self.show_footer = show_footer
        self.logger = get_logger("screen")
        self.debug_panel: Optional[DebugPanel] = DebugPanel(None) if debug else None
        self.main_width = 0

        curses.raw()
        curses.set_escdelay(ESC_DELAY_MS)
        try:
            curses.curs_set(1)
        except curses.error:
            pass  # Terminal cannot change cursor visibility
        setup_colors()
        self.stdscr.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS)

        self._create_windows()

    def _create_windows(self) -> None:
        """Lay out the main area and the optional debug panel."""
        height, width = self.stdscr.getmaxyx()
        if self.debug_panel is None:
            self.main_width = width
            return

        # Split: 60% main content, 40% debug panel
        self.main_width = max(20, int(width * 0.6))
        debug_width = width - self.main_width
        if debug_width > 10 and height > 2:
            try:
                self.debug_panel.window = curses.newwin(
                    height, debug_width, 0, self.main_width
                )
            except curses.error:
                self.debug_panel.window = None
        else:
            self.debug_panel.window = None

    def resize(self) -> None:
        """Re-layout after a terminal resize."""
        curses.update_lines_cols()
        self.stdscr.clear()
        self._create_windows()
        self.logger.debug(f"Resized to {curses.LINES}x{curses.COLS}")

    def poll(self, timeout_ms: int) -> Optional[KeyEvent]:
        """Wait up to ``timeout_ms`` for the next input event.

        Returns:
            The event, or None if nothing arrived in time.
        """
        self.stdscr.timeout(timeout_ms)
        try:
            key = self.stdscr.get_wch()
        except curses.error:
            return None

        event = translate_key(key)
        if event.kind == KeyKind.MOUSE:
            try:
                curses.getmouse()
            except curses.error:
                pass  # Nothing queued
        return event

    def draw(self, lines: list[str], status: str = "") -> None:
        """Paint ``lines`` from the top of the screen.

        When there are more lines than rows, the oldest lines are dropped so
        the input buffer and mode line stay visible. The cursor is left at
        the end of the input buffer line.

        Args:
            lines: Display lines, input buffer second to last.
            status: Optional message shown in the footer instead of help.
        """
        self.stdscr.erase()
        height, _ = self.stdscr.getmaxyx()
        rows = height - 1 if self.show_footer else height
        visible = lines[-rows:] if rows > 0 else []

        for y, line in enumerate(visible):
            attr = curses.A_BOLD if y == len(visible) - 1 else curses.A_NORMAL
            safe_addstr(self.stdscr, y, 0, line[:self.main_width], attr)

        if self.show_footer and height > 1:
            self._draw_footer(height - 1, status)

        self._place_cursor(visible)
        self.stdscr.noutrefresh()
        if self.debug_panel:
            self.debug_panel.draw()
        curses.doupdate()

    def _draw_footer(self, y: int, status: str) -> None:
        text = status or HELP_TEXT
        pair = ColorPair.ERROR if status else ColorPair.FOOTER
        footer = truncate(f"─ {text} ", max(0, self.main_width - 1))
        try:
            attr = curses.color_pair(pair)
        except curses.error:
            attr = curses.A_NORMAL
        safe_addstr(self.stdscr, y, 0, footer, attr)

    def _place_cursor(self, visible: list[str]) -> None:
        if len(visible) < 2:
            return
        y = len(visible) - 2
        x = min(len(visible[y]), max(0, self.main_width - 2))
        try:
            self.stdscr.move(y, x)
        except curses.error:
            pass

    def close(self) -> None:
        """Undo input settings made in ``__init__``."""
        try:
            curses.mousemask(0)
            curses.noraw()
            curses.curs_set(1)
        except curses.error:
            pass
