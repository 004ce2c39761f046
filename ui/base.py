"""Base UI utilities and color definitions."""

import curses
from enum import IntEnum


class ColorPair(IntEnum):
    """Color pair indices for the UI.

    Designed for dark terminal backgrounds.
    """

    FOOTER = 1        # White on default (status text)
    BORDER_DIM = 2    # White/dim on default (panel borders)
    ERROR = 3         # Red on default (error log lines, failed input)
    WARNING = 4       # Yellow on default (warning log lines)
    DEBUG = 5         # Magenta on default (debug log lines)


def setup_colors() -> None:
    """Initialize curses color pairs for dark terminal backgrounds."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()

    curses.init_pair(ColorPair.FOOTER, curses.COLOR_WHITE, -1)
    curses.init_pair(ColorPair.BORDER_DIM, curses.COLOR_WHITE, -1)
    curses.init_pair(ColorPair.ERROR, curses.COLOR_RED, -1)
    curses.init_pair(ColorPair.WARNING, curses.COLOR_YELLOW, -1)
    curses.init_pair(ColorPair.DEBUG, curses.COLOR_MAGENTA, -1)


def wrap_text(text: str, width: int) -> list[str]:
    """Hard-wrap text to fit within width.

    Args:
        text: Text to wrap.
        width: Maximum line width.

    Returns:
        List of wrapped lines.
    """
    if width <= 0:
        return []

    wrapped: list[str] = []
    for line in text.split("\n"):
        while len(line) > width:
            wrapped.append(line[:width])
            line = line[width:]
        wrapped.append(line)
    return wrapped


def truncate(text: str, width: int, ellipsis: str = "...") -> str:
    """Truncate text to width with ellipsis.

    Args:
        text: Text to truncate.
        width: Maximum width including ellipsis.
        ellipsis: Ellipsis string to append.

    Returns:
        Truncated string.
    """
    if len(text) <= width:
        return text
    if width <= len(ellipsis):
        return ellipsis[:width]
    return text[:width - len(ellipsis)] + ellipsis


def safe_addstr(
    window: "curses.window",
    y: int,
    x: int,
    text: str,
    attr: int = 0,
) -> None:
    """Safely add string to window, handling boundary errors.

    Args:
        window: Curses window to write to.
        y: Row position.
        x: Column position.
        text: Text to write.
        attr: Optional attributes.
    """
    try:
        height, width = window.getmaxyx()
        if y < 0 or y >= height or x < 0:
            return
        # Truncate text to fit
        max_len = width - x - 1
        if max_len <= 0:
            return
        window.addstr(y, x, text[:max_len], attr)
    except curses.error:
        pass


def draw_box(
    window: "curses.window",
    color_pair: int = ColorPair.BORDER_DIM,
) -> None:
    """Draw a box border around a window."""
    try:
        window.attron(curses.color_pair(color_pair))
        window.border()
        window.attroff(curses.color_pair(color_pair))
    except curses.error:
        pass
