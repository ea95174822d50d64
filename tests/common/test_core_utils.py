import logging
import sys

import pytest

from common.core_utils import (
    LOG_FORMAT,
    SymbolFormatter,
    build_log_format,
    setup_logging,
)


@pytest.fixture
def root_logger():
    """Yield the real root logger and restore its handlers and level afterwards."""
    logger = logging.getLogger()
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=level, pathname="", lineno=0, msg=msg, args=(), exc_info=None
    )


def test_setup_logging_console_only(root_logger):
    setup_logging()

    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stdout
    assert isinstance(handler.formatter, SymbolFormatter)
    assert root_logger.level == logging.INFO


def test_setup_logging_with_file(root_logger, tmp_path):
    """The file's parent directory is created and records reach the file."""
    log_file = tmp_path / "logs" / "lamp-setup.log"

    setup_logging(log_level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("lamp.test").info("hello file")
    for handler in root_logger.handlers:
        handler.flush()

    file_handlers = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert len(root_logger.handlers) == 2
    assert root_logger.level == logging.DEBUG
    assert "ℹ️ lamp.test - hello file" in log_file.read_text(encoding="utf-8")


def test_setup_logging_replaces_existing_handlers(root_logger):
    stale = logging.NullHandler()
    root_logger.addHandler(stale)

    setup_logging()

    assert stale not in root_logger.handlers


def test_setup_logging_prefix_and_symbols(root_logger):
    setup_logging(log_prefix="[LAMP-SETUP]", symbols={"info": "i"})

    formatter = root_logger.handlers[0].formatter
    assert formatter._fmt == f"[LAMP-SETUP] {LOG_FORMAT}"
    assert formatter.symbols == {"info": "i"}


def test_setup_logging_warning_on_file_handler_failure(capsys, mocker, root_logger, tmp_path):
    mocker.patch(
        "common.core_utils.logging.FileHandler", side_effect=PermissionError("denied")
    )

    setup_logging(log_file=str(tmp_path / "lamp.log"))
    captured = capsys.readouterr()

    assert "Warning: Could not create file handler for log file" in captured.err
    assert len(root_logger.handlers) == 1


@pytest.mark.parametrize(
    "prefix,expected",
    [
        (None, LOG_FORMAT),
        ("   ", LOG_FORMAT),
        (" [SITE] ", f"[SITE] {LOG_FORMAT}"),
    ],
)
def test_build_log_format(prefix, expected):
    assert build_log_format(prefix) == expected


def test_symbol_formatter_uses_level_symbols():
    formatter = SymbolFormatter(fmt="%(symbol)s %(message)s")

    assert formatter.format(_record(logging.DEBUG, "d")) == "🐛 d"
    assert formatter.format(_record(logging.INFO, "i")) == "ℹ️ i"
    assert formatter.format(_record(logging.WARNING, "w")) == "⚠️ w"
    assert formatter.format(_record(logging.ERROR, "e")) == "❌ e"
    assert formatter.format(_record(logging.CRITICAL, "c")) == "🔥 c"
    assert formatter.format(_record(25, "custom")) == " custom"


def test_symbol_formatter_custom_symbols():
    formatter = SymbolFormatter(fmt="%(symbol)s %(message)s", symbols={"error": "ERR"})

    assert formatter.format(_record(logging.ERROR, "boom")) == "ERR boom"
    # Levels missing from the custom mapping fall back to the built-in symbol.
    assert formatter.format(_record(logging.INFO, "ok")) == "ℹ️ ok"
