#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging setup shared by every entry point.

Records always go to stdout and, when a log file is given, are appended to
that file too. Each record carries a level symbol and, optionally, a run
prefix such as "[LAMP-SETUP]".
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from setup.config_models import SYMBOLS_DEFAULT

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(symbol)s %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVEL_SYMBOL_KEYS = {
    logging.DEBUG: ("debug", "🐛"),
    logging.INFO: ("info", "ℹ️"),
    logging.WARNING: ("warning", "⚠️"),
    logging.ERROR: ("error", "❌"),
    logging.CRITICAL: ("critical", "🔥"),
}


class SymbolFormatter(logging.Formatter):
    """
    A formatter that exposes a per-level symbol as %(symbol)s.
    """

    def __init__(
        self,
        fmt=None,
        datefmt=None,
        style="%",
        validate=True,
        symbols: Optional[Dict[str, str]] = None,
    ):
        super().__init__(fmt, datefmt, style, validate)
        self.symbols = symbols or SYMBOLS_DEFAULT

    def format(self, record):
        key, fallback = _LEVEL_SYMBOL_KEYS.get(record.levelno, ("", ""))
        record.symbol = self.symbols.get(key, fallback) if key else ""
        return super().format(record)


def build_log_format(log_prefix: Optional[str] = None) -> str:
    """Return LOG_FORMAT, preceded by the stripped prefix when one is set."""
    if log_prefix and log_prefix.strip():
        return f"{log_prefix.strip()} {LOG_FORMAT}"
    return LOG_FORMAT


def setup_logging(
    log_level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_prefix: Optional[str] = None,
    symbols: Optional[Dict[str, str]] = None,
) -> None:
    """
    Replace the root logger's handlers with a stdout handler and, if
    `log_file` is given, a file handler.

    Parameters:
    log_level: int
        Level of the root logger.
    log_file: Optional[str]
        File to append records to. Its parent directory is created. A file
        that cannot be opened is reported on stderr and skipped.
    log_prefix: Optional[str]
        String placed at the start of every record.
    symbols: Optional[Dict[str, str]]
        Level symbols, usually AppSettings.symbols.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        try:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file_path, mode="a"))
        except OSError as e:
            print(
                f"Warning: Could not create file handler for log file {log_file}: {e}",
                file=sys.stderr,
            )

    log_format = build_log_format(log_prefix)
    formatter = SymbolFormatter(
        fmt=log_format, datefmt=LOG_DATE_FORMAT, symbols=symbols
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        f"Logging configured. Level: {logging.getLevelName(log_level)}. Format: '{log_format}'"
    )
