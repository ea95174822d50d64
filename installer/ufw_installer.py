# installer/ufw_installer.py
# -*- coding: utf-8 -*-
"""
Opens the firewall for installed services through UFW application profiles.
"""

import logging
from typing import Optional

from common.command_utils import log_provisioner, run_elevated_command
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def allow_ufw_application(
    profile: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Allows traffic for a UFW application profile, e.g. 'Apache Full'.

    The rule is added whether or not UFW is active; an inactive firewall
    keeps it until it is enabled.

    Raises:
        subprocess.CalledProcessError: If ufw rejects the rule.
        FileNotFoundError: If ufw is not installed.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_settings.symbols

    log_provisioner(
        f"{symbols.get('gear', '⚙️')} Allowing UFW profile '{profile}'...",
        "info",
        logger_to_use,
        app_settings,
    )
    run_elevated_command(
        ["ufw", "allow", profile],
        app_settings,
        current_logger=logger_to_use,
    )
    log_provisioner(
        f"{symbols.get('success', '✅')} UFW now allows '{profile}'.",
        "success",
        logger_to_use,
        app_settings,
    )
