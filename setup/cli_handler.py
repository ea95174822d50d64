# setup/cli_handler.py
# -*- coding: utf-8 -*-
"""
Handles Command Line Interface (CLI) interactions for the LAMP host setup.
"""

import datetime
import logging
from typing import Optional

from common.command_utils import log_provisioner
from common.network_utils import validate_domain
from setup import config as static_config
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def cli_prompt_yes_no(
    prompt_message: str,
    app_settings: AppSettings,
    default: bool = False,
    current_logger_instance: Optional[logging.Logger] = None,
) -> bool:
    """
    Ask a yes/no question on the terminal.

    Parameters:
    prompt_message : str
        The full prompt shown to the operator, including any "(y/n)" hint.
    app_settings : AppSettings
        The application settings object providing symbols.
    default : bool
        Answer used for empty input and on end-of-file.
    current_logger_instance : Optional[logging.Logger]
        Logger used to report an EOF.

    Returns:
    bool
        True for "y" or "Y", `default` for an empty answer, False for
        anything else.
    """
    logger_to_use = (
        current_logger_instance if current_logger_instance else module_logger
    )
    symbols = app_settings.symbols
    try:
        user_input = input(prompt_message).strip()
    except EOFError:
        log_provisioner(
            f"{symbols.get('warning', '!')} No user input (EOF), defaulting to '{'y' if default else 'n'}' for prompt: '{prompt_message.strip()}'",
            "warning",
            logger_to_use,
            app_settings,
        )
        return default
    if not user_input:
        return default
    return user_input in ("y", "Y")


def prompt_for_domain(
    app_settings: AppSettings,
    current_logger_instance: Optional[logging.Logger] = None,
) -> Optional[str]:
    """
    Prompt until a valid domain is entered.

    An empty answer selects `app_settings.domain_default`. Invalid answers
    are rejected with a hint and the question is asked again, without limit
    unless `app_settings.max_domain_attempts` is set.

    Returns:
        The accepted domain, or None if stdin is closed or the attempt
        limit is reached.
    """
    logger_to_use = (
        current_logger_instance if current_logger_instance else module_logger
    )
    symbols = app_settings.symbols
    default_domain = app_settings.domain_default
    attempts = 0

    while True:
        try:
            answer = input(
                f"Enter your domain name (default: {default_domain}): "
            ).strip()
        except EOFError:
            log_provisioner(
                f"{symbols.get('error', '❌')} No domain entered (EOF). Cancelling.",
                "error",
                logger_to_use,
                app_settings,
            )
            return None

        domain = answer or default_domain
        if validate_domain(domain, app_settings, logger_to_use):
            return domain

        print(
            f"Invalid domain name. Please enter a valid domain (e.g., {default_domain})."
        )
        attempts += 1
        if (
            app_settings.max_domain_attempts is not None
            and attempts >= app_settings.max_domain_attempts
        ):
            log_provisioner(
                f"{symbols.get('error', '❌')} Giving up after {attempts} invalid domain entries.",
                "error",
                logger_to_use,
                app_settings,
            )
            return None


def view_configuration(
    app_config: AppSettings, current_logger: Optional[logging.Logger] = None
) -> None:
    """
    Logs the effective configuration values (CLI > YAML > ENV > defaults).
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_config.symbols

    config_text = f"{symbols.get('info', 'ℹ️')} Current effective configuration values (CLI > YAML > ENV > Defaults):\n\n"
    config_text += f"  Default Domain:                {app_config.domain_default}\n"
    config_text += f"  Max Domain Attempts:           {app_config.max_domain_attempts or 'unlimited'}\n"
    config_text += f"  Web Root:                      {app_config.web_root}\n"
    config_text += f"  Web Owner:                     {app_config.web_user}:{app_config.web_group}\n"
    config_text += f"  Log Prefix (installer):        {app_config.log_prefix}\n\n"

    config_text += "  Apache Settings (apache.*):\n"
    config_text += f"    Service:                     {app_config.apache.service_name}\n"
    config_text += f"    Sites Available:             {app_config.apache.sites_available_dir}\n"
    config_text += f"    UFW Profile:                 {app_config.apache.ufw_profile}\n\n"

    config_text += "  PHP Settings (php.*):\n"
    config_text += f"    Version:                     {app_config.php.version}\n"
    config_text += f"    Repository:                  {app_config.php.ppa}\n"
    config_text += f"    Packages:                    {' '.join(app_config.php.packages)}\n\n"

    config_text += "  MySQL Settings (mysql.*):\n"
    config_text += f"    Packages:                    {' '.join(app_config.mysql.packages)}\n\n"

    config_text += "  Composer Settings (composer.*):\n"
    config_text += f"    Installer URL:               {app_config.composer.installer_url}\n"
    config_text += f"    Signature URL:               {app_config.composer.signature_url}\n"
    config_text += f"    Install Path:                {app_config.composer.install_path}\n"
    config_text += f"    Work Dir:                    {app_config.composer.work_dir or '[current directory]'}\n\n"

    config_text += f"  Script Version (static):       {static_config.SCRIPT_VERSION}\n"
    config_text += f"  Timestamp (current view):      {datetime.datetime.now().strftime('%Y-%m-%d-%H%M%S')}\n"

    log_provisioner(
        "Displaying current configuration:", "info", logger_to_use, app_config
    )
    log_provisioner(f"\n{config_text}\n", "info", logger_to_use, app_config)
