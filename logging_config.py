"""JSON-lines logging for the term stack editor.

Records go to a rotating file, never to the terminal, since curses owns
the screen while the editor runs.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "term_stack"

# Output key -> LogRecord attribute
RECORD_FIELDS = {
    "level": "levelname",
    "logger": "name",
    "module": "module",
    "function": "funcName",
    "line": "lineno",
}


class JsonFormatter(logging.Formatter):
    """Formats each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc
            ).isoformat(),
            "message": record.getMessage(),
        }
        for key, attr in RECORD_FIELDS.items():
            entry[key] = getattr(record, attr)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(
    log_path: Union[str, Path],
    level: int = logging.DEBUG,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Send editor logs to a rotating JSON-lines file.

    Calling this again with a different path moves logging to the new
    file; the same path is a no-op.

    Args:
        log_path: Log file location; parent directories are created.
        level: Minimum level recorded.
        max_bytes: Size at which the file is rotated.
        backup_count: Rotated files kept.

    Returns:
        The editor's base logger.
    """
    log_path = Path(log_path)
    logger = get_logger()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if not isinstance(handler, RotatingFileHandler):
            continue
        if handler.baseFilename == os.path.abspath(log_path):
            return logger
        logger.removeHandler(handler)
        handler.close()

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the base editor logger, or its child ``name``."""
    base_logger = logging.getLogger(LOGGER_NAME)
    return base_logger.getChild(name) if name else base_logger
