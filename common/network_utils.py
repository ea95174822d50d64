# common/network_utils.py
# -*- coding: utf-8 -*-
"""
Network-related utility functions: domain validation and DNS lookups.
"""
import logging
import re
import subprocess
from typing import Optional

from setup import config as static_config
from setup.config_models import AppSettings
from .command_utils import get_symbols, log_provisioner, run_command

module_logger = logging.getLogger(__name__)


def validate_domain(
        domain: str,
        app_settings: Optional[AppSettings] = None,
        current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Return True if `domain` is non-empty and made only of ASCII letters,
    digits, dots and hyphens.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    if not isinstance(domain, str):
        log_provisioner(
            f"{symbols.get('error', '❌')} Invalid input for domain validation: not a string.",
            "error",
            logger_to_use,
            app_settings,
        )
        return False

    if not re.fullmatch(static_config.DOMAIN_PATTERN, domain):
        log_provisioner(
            f"{symbols.get('warning', '!')} Domain '{domain}' contains characters outside [a-zA-Z0-9.-] or is empty.",
            "warning",
            logger_to_use,
            app_settings,
        )
        return False
    return True


def resolve_a_record(
        domain: str,
        app_settings: Optional[AppSettings] = None,
        current_logger: Optional[logging.Logger] = None,
) -> Optional[str]:
    """
    Look up the first A record of `domain` with `dig +short`.

    Returns:
        The first line of dig's answer, or None when there is no answer or
        dig cannot be run. For a CNAME chain dig prints the alias first,
        which then never equals an IP address.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    try:
        result = run_command(
            ["dig", "+short", domain, "A"],
            app_settings,
            check=True,
            capture_output=True,
            current_logger=logger_to_use,
        )
    except FileNotFoundError:
        log_provisioner(
            f"{symbols.get('warning', '!')} 'dig' is not installed; cannot resolve '{domain}'.",
            "warning",
            logger_to_use,
            app_settings,
        )
        return None
    except subprocess.CalledProcessError as e:
        log_provisioner(
            f"{symbols.get('warning', '!')} DNS lookup for '{domain}' failed (rc {e.returncode}).",
            "warning",
            logger_to_use,
            app_settings,
        )
        return None

    lines = [line.strip() for line in result.stdout.splitlines() if line.strip()]
    return lines[0] if lines else None
