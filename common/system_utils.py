# common/system_utils.py
# -*- coding: utf-8 -*-
"""
System-level utility functions for the LAMP host setup script.

This module includes functions for detecting the host's primary IP address
and driving systemd services.
"""

import logging
import socket
import subprocess
from typing import Optional

from common.command_utils import (
    get_symbols,
    log_provisioner,
    run_command,
    run_elevated_command,
)
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def _probe_primary_ip_via_socket() -> Optional[str]:
    # UDP connect() does not send packets; it only selects the outbound interface.
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        return str(s.getsockname()[0])
    finally:
        s.close()


def get_primary_ip_address(
    app_settings: Optional[AppSettings] = None,
    current_logger: Optional[logging.Logger] = None,
) -> Optional[str]:
    """
    Get the primary IP address of the machine.

    The first address reported by `hostname -I` is used. When that command
    is unavailable or reports nothing, the address of the interface that
    routes to the internet is used instead.

    Args:
        app_settings: Optional application settings for logging symbols.
        current_logger: Optional logger instance.

    Returns:
        The primary IP address as a string, or None if it cannot be determined.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    try:
        result = run_command(
            ["hostname", "-I"],
            app_settings,
            check=True,
            capture_output=True,
            current_logger=logger_to_use,
        )
        addresses = result.stdout.split()
        if addresses:
            return addresses[0]
        log_provisioner(
            f"{symbols.get('warning', '!')} 'hostname -I' reported no addresses.",
            "warning",
            logger_to_use,
            app_settings,
        )
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        log_provisioner(
            f"{symbols.get('warning', '!')} Could not read addresses from 'hostname -I': {e}",
            "warning",
            logger_to_use,
            app_settings,
        )

    try:
        return _probe_primary_ip_via_socket()
    except OSError as e:
        log_provisioner(
            f"{symbols.get('warning', '!')} Could not determine primary IP address: {e}",
            "warning",
            logger_to_use,
            app_settings,
        )
        return None


def systemctl(
    action: str,
    service_name: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Run `systemctl <action> <service_name>` with elevated privileges.

    Raises:
        subprocess.CalledProcessError: If systemctl exits non-zero.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_settings.symbols
    log_provisioner(
        f"{symbols.get('gear', '⚙️')} systemctl {action} {service_name}...",
        "info",
        logger_to_use,
        app_settings,
    )
    run_elevated_command(
        ["systemctl", action, service_name],
        app_settings,
        current_logger=logger_to_use,
    )
