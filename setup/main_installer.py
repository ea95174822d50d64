# setup/main_installer.py
# -*- coding: utf-8 -*-
"""
Main entry point and orchestrator for the LAMP host setup script.

Handles argument parsing, logging setup, the interactive questions and the
ordered sequence of setup steps. The run stops at the first failing step.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from pydantic import BaseModel

from common.command_utils import log_provisioner
from common.core_utils import setup_logging
from common.debian.apt_manager import AptManager
from common.network_utils import validate_domain
from installer.apache_installer import install_apache, is_apache_installed
from installer.composer_installer import install_composer
from installer.mysql_installer import SECURE_INSTALLATION_REMINDER, install_mysql
from installer.php_installer import install_php
from installer.vhost_provisioner import provision_virtual_host
from setup import config
from setup.cli_handler import cli_prompt_yes_no, prompt_for_domain, view_configuration
from setup.config_loader import load_app_settings
from setup.config_models import LOG_PREFIX_DEFAULT, AppSettings
from setup.dns_check import check_dns
from setup.step_executor import StepFunction, execute_step

logger = logging.getLogger(__name__)


class ProvisioningChoices(BaseModel):
    """Answers given by the operator for one run."""

    domain: str
    new_server: bool = False
    install_apache: bool = False
    install_php: bool = False
    install_mysql: bool = False
    install_composer: bool = True


def refresh_packages(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
    upgrade: bool = False,
) -> None:
    """Refresh the apt index and, for a new server, upgrade installed packages."""
    logger_to_use = current_logger if current_logger else logger
    apt = AptManager(logger=logger_to_use)
    apt.update(app_settings)
    if upgrade:
        apt.upgrade(app_settings)


def collect_package_choices(
    choices: ProvisioningChoices, app_settings: AppSettings
) -> ProvisioningChoices:
    """
    Ask for new-server mode and, when it is declined, for each package.
    """
    choices.new_server = cli_prompt_yes_no(
        "Is this a new server setup? (y/n): ", app_settings, current_logger_instance=logger
    )
    if choices.new_server:
        choices.install_apache = True
        choices.install_php = True
        choices.install_mysql = True
        return choices

    choices.install_apache = cli_prompt_yes_no(
        "Do you want to install Apache? (y/n): ", app_settings, current_logger_instance=logger
    )
    choices.install_php = cli_prompt_yes_no(
        "Do you want to install PHP and its extensions? (y/n): ", app_settings, current_logger_instance=logger
    )
    choices.install_mysql = cli_prompt_yes_no(
        "Do you want to install MySQL server? (y/n): ", app_settings, current_logger_instance=logger
    )
    return choices


def build_stack_steps(choices: ProvisioningChoices) -> List[Tuple[str, str, StepFunction]]:
    """
    Return the (tag, description, function) package steps for the chosen
    mode, in execution order.
    """
    steps: List[Tuple[str, str, StepFunction]] = []
    if choices.new_server:
        steps.append(("PACKAGES_REFRESH", "Update and upgrade packages",
                      lambda s, log: refresh_packages(s, log, upgrade=True)))
    elif choices.install_apache or choices.install_php or choices.install_mysql:
        steps.append(("PACKAGES_REFRESH", "Update package lists",
                      lambda s, log: refresh_packages(s, log, upgrade=False)))

    if choices.install_apache:
        steps.append(("APACHE_INSTALL", "Install Apache", install_apache))
    if choices.install_php:
        steps.append(("PHP_INSTALL", "Install PHP and extensions", install_php))
    if choices.install_mysql:
        steps.append(("MYSQL_INSTALL", "Install MySQL server", install_mysql))
    return steps


def run_provisioning(
    app_settings: AppSettings,
    domain: Optional[str] = None,
) -> int:
    """
    Run the whole interactive provisioning flow.

    Args:
        app_settings: Effective configuration.
        domain: Domain given on the command line. Used when valid; otherwise
            the operator is prompted.

    Returns:
        Process exit code: 0 on success, 1 when the operator aborted or a
        step failed.
    """
    symbols = app_settings.symbols

    if not (domain and validate_domain(domain, app_settings, logger)):
        domain = prompt_for_domain(app_settings, logger)
        if domain is None:
            return 1
    choices = ProvisioningChoices(domain=domain)

    if not check_dns(choices.domain, app_settings, logger):
        return 1

    collect_package_choices(choices, app_settings)

    for tag, desc, func in build_stack_steps(choices):
        if not execute_step(tag, desc, func, app_settings, logger):
            log_provisioner(f"{symbols.get('critical', '')} Aborting: '{desc}' failed.", "critical", logger, app_settings)
            return 1

    if is_apache_installed(app_settings, logger):
        if not execute_step(
            "VHOST_SETUP",
            f"Provision virtual host for {choices.domain}",
            lambda s, log: provision_virtual_host(choices.domain, s, log),
            app_settings,
            logger,
        ):
            log_provisioner(f"{symbols.get('critical', '')} Aborting: virtual host provisioning failed.", "critical", logger,
                            app_settings)
            return 1
    else:
        log_provisioner(
            f"{symbols.get('warning', '')} Apache is not installed; skipping virtual host provisioning for {choices.domain}.",
            "warning",
            logger,
            app_settings,
        )

    choices.install_composer = cli_prompt_yes_no(
        "Do you want to install Composer? (y/n, default: y): ",
        app_settings,
        default=True,
        current_logger_instance=logger,
    )
    if choices.install_composer:
        if not execute_step("COMPOSER_INSTALL", "Install Composer", install_composer, app_settings, logger):
            log_provisioner(f"{symbols.get('critical', '')} Aborting: Composer installation failed.", "critical", logger,
                            app_settings)
            return 1

    log_provisioner(
        f"{symbols.get('sparkles', '')} Setup complete! {SECURE_INSTALLATION_REMINDER}",
        "success",
        logger,
        app_settings,
    )
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LAMP host setup. Installs Apache, PHP and MySQL, creates a virtual host and installs Composer.",
        epilog="Example: sudo lamp-provisioner --domain app.example.com",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-d", "--domain", default=None,
                        help="Domain to provision. Prompted for when missing or invalid.")
    parser.add_argument("-c", "--config-file", default="config.yaml", help="YAML configuration file.")
    parser.add_argument("--view-config", action="store_true", help="View current configuration settings and exit.")
    parser.add_argument("--log-file", default=None, help="Also append log records to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    config_group = parser.add_argument_group("Configuration Overrides")
    config_group.add_argument("--web-root", default=None, help="Parent directory of document roots.")
    config_group.add_argument("--php-version", default=None, help="PHP version to enable in Apache, e.g. 8.3.")
    config_group.add_argument("--max-domain-attempts", type=int, default=None,
                              help="Give up after this many invalid domain entries.")
    config_group.add_argument("--composer-work-dir", default=None,
                              help="Directory the Composer installer is downloaded into.")
    config_group.add_argument("-l", "--log-prefix", default=None, help="Prefix for log messages from this script.")
    return parser


def main(args: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    level_str = os.environ.get("LOGLEVEL", "DEBUG" if parsed_args.verbose else "INFO").upper()
    log_level = getattr(logging, level_str, logging.INFO)
    if not isinstance(log_level, int):
        print(f"Warning: Invalid LOGLEVEL string '{level_str}'. Defaulting to INFO.", file=sys.stderr)
        log_level = logging.INFO

    setup_logging(log_level=log_level, log_file=parsed_args.log_file, log_prefix=LOG_PREFIX_DEFAULT)
    app_settings = load_app_settings(parsed_args, parsed_args.config_file, logger)
    setup_logging(
        log_level=log_level,
        log_file=parsed_args.log_file,
        log_prefix=app_settings.log_prefix,
        symbols=app_settings.symbols,
    )

    if parsed_args.view_config:
        view_configuration(app_settings, logger)
        return 0

    log_provisioner(
        f"{app_settings.symbols.get('rocket', '')}====== LAMP host setup v{config.SCRIPT_VERSION} ======",
        "info",
        logger,
        app_settings,
    )
    try:
        return run_provisioning(app_settings, parsed_args.domain)
    except KeyboardInterrupt:
        log_provisioner(f"{app_settings.symbols.get('warning', '')} Interrupted by operator.", "warning", logger,
                        app_settings)
        return 130


if __name__ == "__main__":
    sys.exit(main())
