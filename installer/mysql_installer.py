# installer/mysql_installer.py
# -*- coding: utf-8 -*-
"""
Installs the MySQL server package. Hardening is left to the operator.
"""

import logging
from typing import Optional

from common.debian.apt_manager import AptManager
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)

SECURE_INSTALLATION_REMINDER = (
    "Please run 'mysql_secure_installation' manually to secure your MySQL installation."
)


def install_mysql(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    logger_to_use = current_logger or module_logger
    symbols = app_settings.symbols

    logger_to_use.info(f"{symbols.get('package', '📦')} Installing MySQL server...")
    apt = AptManager(logger=logger_to_use)
    apt.install(app_settings.mysql.packages, app_settings)

    logger_to_use.warning(f"{symbols.get('warning', '⚠️')} {SECURE_INSTALLATION_REMINDER}")
