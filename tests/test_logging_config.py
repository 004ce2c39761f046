import json
import logging

import pytest

from logging_config import JsonFormatter, get_logger, setup_logging


def test_json_formatter_fields():
    record = logging.LogRecord(
        "term_stack.editor", logging.INFO, __file__, 10, "pushed %s", ("x",), None
    )
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "INFO"
    assert data["logger"] == "term_stack.editor"
    assert data["message"] == "pushed x"
    assert data["line"] == 10


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        import sys
        record = logging.LogRecord(
            "term_stack", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )
    data = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in data["exception"]


def test_get_logger_children():
    assert get_logger().name == "term_stack"
    assert get_logger("reducer").name == "term_stack.reducer"


@pytest.fixture
def base_logger():
    logger = get_logger()
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


def test_setup_logging_writes_json_lines(tmp_path, base_logger):
    log_path = tmp_path / "logs" / "editor.log"
    setup_logging(log_path)
    get_logger("reducer").info("pushed x")
    for handler in base_logger.handlers:
        handler.flush()

    data = json.loads(log_path.read_text(encoding="utf-8").splitlines()[-1])
    assert data["message"] == "pushed x"
    assert data["logger"] == "term_stack.reducer"


def test_setup_logging_same_path_once(tmp_path, base_logger):
    setup_logging(tmp_path / "a.log")
    setup_logging(tmp_path / "a.log")
    assert len(base_logger.handlers) == 1


def test_setup_logging_moves_to_new_path(tmp_path, base_logger):
    setup_logging(tmp_path / "a.log")
    setup_logging(tmp_path / "b.log")
    [handler] = base_logger.handlers
    assert handler.baseFilename.endswith("b.log")
