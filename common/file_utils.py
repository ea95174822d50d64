# common/file_utils.py
# -*- coding: utf-8 -*-
"""
File system utility functions for paths owned by root, such as Apache
site definitions and document roots.

Every helper runs the underlying coreutils command through
run_elevated_command and lets CalledProcessError propagate.
"""

import logging
from typing import Optional

from setup.config_models import AppSettings

from .command_utils import get_symbols, log_provisioner, run_elevated_command

module_logger = logging.getLogger(__name__)


def make_directory(
    directory_path: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """Create a directory and its parents (`mkdir -p`)."""
    run_elevated_command(
        ["mkdir", "-p", directory_path],
        app_settings,
        current_logger=current_logger or module_logger,
    )


def write_file_elevated(
    file_path: str,
    content: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Write `content` to `file_path` as root, replacing any existing file.

    The content is piped through `tee` so the file can live in a directory
    the current user cannot write to.

    Parameters:
        file_path (str): Destination path.
        content (str): Full file content, written verbatim.
        app_settings (Optional[AppSettings]): Settings providing log symbols.
        current_logger (Optional[logging.Logger]): Logger to use.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    run_elevated_command(
        ["tee", file_path],
        app_settings,
        capture_output=True,
        cmd_input=content,
        current_logger=logger_to_use,
    )
    log_provisioner(
        f"{symbols.get('success', '✅')} Wrote {file_path}",
        "success",
        logger_to_use,
        app_settings,
    )


def chown_recursive(
    path: str,
    owner: str,
    group: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """Set owner and group of `path` and everything below it."""
    run_elevated_command(
        ["chown", "-R", f"{owner}:{group}", path],
        app_settings,
        current_logger=current_logger or module_logger,
    )


def move_file_elevated(
    source: str,
    destination: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> None:
    run_elevated_command(
        ["mv", source, destination],
        app_settings,
        current_logger=current_logger or module_logger,
    )


def make_executable(
    path: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> None:
    run_elevated_command(
        ["chmod", "+x", path],
        app_settings,
        current_logger=current_logger or module_logger,
    )
