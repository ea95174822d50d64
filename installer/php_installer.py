# installer/php_installer.py
# -*- coding: utf-8 -*-
"""
This module handles the installation of PHP, its extensions and its Apache
integration.
"""

import logging
from typing import Optional

from common.debian.apt_manager import AptManager
from installer.apache_installer import (
    check_apache_configuration,
    enable_apache_conf,
    enable_apache_module,
    restart_apache,
)
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def install_php(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Registers the PHP repository, installs PHP with its extensions, enables
    the versioned Apache module and FPM configuration, checks the Apache
    configuration and restarts Apache.

    Args:
        app_settings (AppSettings): Settings providing the PPA, version and packages.
        current_logger (Optional[logging.Logger]): A logger instance for logging messages.
    """
    logger_to_use = current_logger or module_logger
    symbols = app_settings.symbols
    php = app_settings.php

    logger_to_use.info(f"{symbols.get('gear', '⚙️')} Adding PHP repository {php.ppa}...")
    apt = AptManager(logger=logger_to_use)
    apt.add_ppa(php.ppa, app_settings)

    logger_to_use.info(f"{symbols.get('package', '📦')} Installing PHP and extensions...")
    apt.install(php.packages, app_settings)

    logger_to_use.info(f"{symbols.get('gear', '⚙️')} Enabling PHP {php.version} module and configuration...")
    enable_apache_module(f"php{php.version}", app_settings, logger_to_use)
    enable_apache_conf(f"php{php.version}-fpm", app_settings, logger_to_use)

    check_apache_configuration(app_settings, logger_to_use)
    restart_apache(app_settings, logger_to_use)

    logger_to_use.info(
        f"{symbols.get('success', '✅')} PHP {php.version} installed and enabled in Apache."
    )
