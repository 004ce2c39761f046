"""Configuration model for the term stack editor."""

from dataclasses import dataclass
from pathlib import Path
import json
import os

from models.state import Mode


# Environment variable names for fallback configuration
ENV_POLL_MS = "TSE_POLL_MS"
ENV_INITIAL_MODE = "TSE_INITIAL_MODE"
ENV_LOG_PATH = "TSE_LOG_PATH"

DEFAULT_POLL_MS = 50
DEFAULT_INITIAL_MODE = "insert"
DEFAULT_LOG_PATH = "logs/term_stack.log"


def _positive_int(value, default: int) -> int:
    """Coerce ``value`` to a positive int, or return ``default``."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _mode_name(value, default: str) -> str:
    """Return ``value`` if it names a startable mode, else ``default``."""
    if not isinstance(value, str):
        return default
    try:
        Mode.from_name(value)
    except ValueError:
        return default
    return value.strip().lower()


def _flag(value, default: bool) -> bool:
    """Return ``value`` if it is a JSON boolean, else ``default``."""
    return value if isinstance(value, bool) else default


@dataclass
class AppConfig:
    """Application-level configuration."""

    poll_interval_ms: int = DEFAULT_POLL_MS
    initial_mode: str = DEFAULT_INITIAL_MODE
    log_path: str = DEFAULT_LOG_PATH
    show_footer: bool = True

    @property
    def start_mode(self) -> Mode:
        """The mode the editor starts in."""
        return Mode.from_name(self.initial_mode)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "poll_interval_ms": self.poll_interval_ms,
            "initial_mode": self.initial_mode,
            "log_path": self.log_path,
            "show_footer": self.show_footer,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Deserialize from dictionary.

        Environment variables take precedence over config.json when set:
        - TSE_POLL_MS overrides poll_interval_ms
        - TSE_INITIAL_MODE overrides initial_mode
        - TSE_LOG_PATH overrides log_path
        """
        poll = os.environ.get(ENV_POLL_MS) or data.get("poll_interval_ms")
        mode = os.environ.get(ENV_INITIAL_MODE) or data.get("initial_mode")
        log_path = os.environ.get(ENV_LOG_PATH) or data.get("log_path")

        return cls(
            poll_interval_ms=_positive_int(poll, DEFAULT_POLL_MS),
            initial_mode=_mode_name(mode, DEFAULT_INITIAL_MODE),
            log_path=log_path or DEFAULT_LOG_PATH,
            show_footer=_flag(data.get("show_footer"), True),
        )

    @classmethod
    def load(cls, config_path: Path) -> "AppConfig":
        """Load configuration from config.json.

        Args:
            config_path: Path to config.json file.

        Returns:
            AppConfig instance, using defaults for missing values.
        """
        data = {}
        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError):
                pass  # Use defaults on error
        if not isinstance(data, dict):
            data = {}
        return cls.from_dict(data)

    def save(self, config_path: Path) -> bool:
        """Save configuration to file.

        Args:
            config_path: Path to save config.json.

        Returns:
            True if save succeeded.
        """
        try:
            with open(config_path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError:
            return False
