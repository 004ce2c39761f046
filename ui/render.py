"""Project editor state onto display lines."""

from models.state import EditorState


def render(state: EditorState) -> list[str]:
    """Build the lines shown for ``state``.

    One line per stack entry (oldest first), then the input buffer, then
    the mode name.
    """
    lines = [entry.to_display_text() for entry in state.stack]
    lines.append(state.input_buffer)
    lines.append(state.mode.label)
    return lines
