# installer/apache_installer.py
# -*- coding: utf-8 -*-
"""
Installs the Apache web server and wraps the Debian a2en* helpers used to
enable modules, configuration snippets and sites.
"""

import logging
from typing import Optional

from common.command_utils import (
    check_package_installed,
    log_provisioner,
    run_elevated_command,
)
from common.debian.apt_manager import AptManager
from common.system_utils import systemctl
from installer.ufw_installer import allow_ufw_application
from setup import config as static_config
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def install_apache(
    app_settings: AppSettings, current_logger: Optional[logging.Logger] = None
) -> None:
    """
    Installs Apache, starts and enables its service and opens the firewall
    for HTTP and HTTPS.

    Parameters
    ----------
    app_settings : AppSettings
        Settings providing the service name and the UFW profile.
    current_logger : Optional[logging.Logger], default=None
        Logger to use. Falls back to the module logger.

    Raises
    ------
    subprocess.CalledProcessError
        If any of apt-get, systemctl or ufw fails.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_settings.symbols
    service = app_settings.apache.service_name

    log_provisioner(
        f"{symbols.get('package', '📦')} Installing Apache...",
        "info",
        logger_to_use,
        app_settings,
    )
    apt = AptManager(logger=logger_to_use)
    apt.install(static_config.APACHE_PACKAGES, app_settings)

    systemctl("start", service, app_settings, logger_to_use)
    systemctl("enable", service, app_settings, logger_to_use)
    allow_ufw_application(
        app_settings.apache.ufw_profile, app_settings, logger_to_use
    )

    log_provisioner(
        f"{symbols.get('success', '✅')} Apache installed and running.",
        "success",
        logger_to_use,
        app_settings,
    )


def is_apache_installed(
    app_settings: AppSettings, current_logger: Optional[logging.Logger] = None
) -> bool:
    """True when every Apache package is reported installed by dpkg."""
    logger_to_use = current_logger if current_logger else module_logger
    return all(
        check_package_installed(pkg, app_settings, logger_to_use)
        for pkg in static_config.APACHE_PACKAGES
    )


def enable_apache_module(
    module_name: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    run_elevated_command(
        ["a2enmod", module_name],
        app_settings,
        current_logger=current_logger or module_logger,
    )


def enable_apache_conf(
    conf_name: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    run_elevated_command(
        ["a2enconf", conf_name],
        app_settings,
        current_logger=current_logger or module_logger,
    )


def enable_apache_site(
    site_file_name: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    run_elevated_command(
        ["a2ensite", site_file_name],
        app_settings,
        current_logger=current_logger or module_logger,
    )


def check_apache_configuration(
    app_settings: AppSettings, current_logger: Optional[logging.Logger] = None
) -> None:
    """
    Runs `apache2ctl configtest`; raises CalledProcessError on a syntax error.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_settings.symbols
    log_provisioner(
        f"{symbols.get('info', 'ℹ️')} Checking Apache configuration...",
        "info",
        logger_to_use,
        app_settings,
    )
    run_elevated_command(
        ["apache2ctl", "configtest"],
        app_settings,
        current_logger=logger_to_use,
    )


def restart_apache(
    app_settings: AppSettings, current_logger: Optional[logging.Logger] = None
) -> None:
    systemctl(
        "restart",
        app_settings.apache.service_name,
        app_settings,
        current_logger or module_logger,
    )
