"""Main loop tying input, state machine and display together."""

from typing import Optional, Protocol

from lang.parser import read_term
from logging_config import get_logger
from models.config import AppConfig
from models.events import KeyEvent, KeyKind
from models.state import EditorState, Mode
from reducer import Parse, reduce
from ui.render import render


class Display(Protocol):
    """What the run loop needs from a screen."""

    def poll(self, timeout_ms: int) -> Optional[KeyEvent]: ...

    def draw(self, lines: list[str], status: str = "") -> None: ...

    def resize(self) -> None: ...

    def close(self) -> None: ...


class TermStackEditor:
    """Interactive stack editor.

    Polls the display for key events, runs each through the reducer and
    repaints, until the state reaches ``Mode.TERMINATED``.
    """

    def __init__(
        self,
        screen: Display,
        config: Optional[AppConfig] = None,
        parse: Parse = read_term,
    ) -> None:
        """Initialize the editor.

        Args:
            screen: Display to poll and paint.
            config: Application configuration; defaults when None.
            parse: Text-to-term parser used on commit.
        """
        self.screen = screen
        self.config = config or AppConfig()
        self.parse = parse
        self.logger = get_logger("editor")
        self.state = EditorState(mode=self.config.start_mode)

    def _paint(self) -> None:
        self.screen.draw(render(self.state), self.state.status)

    def step(self, event: KeyEvent) -> EditorState:
        """Apply one event and repaint.

        Returns:
            The new state.
        """
        if event.kind == KeyKind.RESIZE:
            self.screen.resize()

        previous = self.state
        self.state = reduce(self.state, event, self.parse)
        if self.state.mode != previous.mode:
            self.logger.debug(
                f"Mode {previous.mode.label} -> {self.state.mode.label}"
            )
        self._paint()
        return self.state

    def run(self) -> EditorState:
        """Main application loop.

        Returns:
            The final state.
        """
        self.logger.info("Starting main loop")
        try:
            self._paint()
            while self.state.mode != Mode.TERMINATED:
                event = self.screen.poll(self.config.poll_interval_ms)
                if event is None:
                    continue
                self.step(event)
        finally:
            self.screen.close()
            self.logger.info(
                f"Main loop finished with {len(self.state.stack)} stack entries"
            )
        return self.state
