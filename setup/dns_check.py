# setup/dns_check.py
# -*- coding: utf-8 -*-
"""
Advisory check that a domain's A record points at this host.
"""

import logging
from typing import Optional

from common.command_utils import log_provisioner
from common.network_utils import resolve_a_record
from common.system_utils import get_primary_ip_address
from setup.cli_handler import cli_prompt_yes_no
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def check_dns(
    domain: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Compare the domain's A record with the host's primary IP address.

    On a mismatch (including an unresolvable domain or an unknown host
    address) the operator is warned and asked whether to continue.

    Returns:
        True to proceed with the installation, False if the operator
        declined.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_settings.symbols

    server_ip = get_primary_ip_address(app_settings, logger_to_use)
    dns_ip = resolve_a_record(domain, app_settings, logger_to_use)

    if dns_ip is not None and dns_ip == server_ip:
        log_provisioner(
            f"{symbols.get('success', '✅')} '{domain}' resolves to this server ({server_ip}).",
            "success",
            logger_to_use,
            app_settings,
        )
        return True

    log_provisioner(
        f"{symbols.get('error', '❌')} The domain '{domain}' does not point to this server's IP "
        f"({server_ip or 'unknown'}); DNS answered {dns_ip or 'nothing'}.",
        "error",
        logger_to_use,
        app_settings,
    )
    log_provisioner(
        f"{symbols.get('info', 'ℹ️')} Please update the DNS A record for '{domain}' to point to this server's IP.",
        "info",
        logger_to_use,
        app_settings,
    )
    if cli_prompt_yes_no(
        "Do you want to continue with the installation? (y/n): ",
        app_settings,
        default=False,
        current_logger_instance=logger_to_use,
    ):
        return True

    log_provisioner(
        f"{symbols.get('info', 'ℹ️')} Exiting installation.",
        "info",
        logger_to_use,
        app_settings,
    )
    return False
