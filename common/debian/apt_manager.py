# common/debian/apt_manager.py
# -*- coding: utf-8 -*-
import logging
import subprocess
from typing import List, Optional, Union

from common.command_utils import (
    command_exists,
    run_command,
    run_elevated_command,
)
from setup.config_models import AppSettings

# dpkg's ${db:Status-Status} for a fully configured package. Other states
# (half-installed, unpacked, half-configured, config-files, ...) still need
# apt-get to finish or repair them.
DPKG_INSTALLED_STATUS = "installed"


class AptManager:
    """
    A manager for Debian apt packages driven through apt-get and dpkg-query.

    Every operation logs the failure and re-raises it, so a provisioning run
    stops at the first broken package step.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initializes the AptManager.
        Args:
            logger: An optional logging object.
        """
        self.logger = logger or logging.getLogger(__name__)
        if not command_exists("apt-get"):
            self.logger.critical(
                "'apt-get' command not found. This manager cannot function."
            )
            raise FileNotFoundError(
                "'apt-get' not found. Is this a Debian-based system?"
            )

    def _run_apt(self, command: List[str], app_settings: AppSettings, failure: str) -> None:
        try:
            run_elevated_command(
                command, app_settings, current_logger=self.logger
            )
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            self.logger.error(f"{failure}: {e}")
            raise

    def update(self, app_settings: AppSettings) -> None:
        """Refreshes the package lists with 'apt-get update'."""
        self.logger.info("Updating apt package lists via 'apt-get update'...")
        self._run_apt(
            ["apt-get", "update", "-yq"], app_settings, "Failed to update apt cache"
        )
        self.logger.info("Apt package lists updated successfully.")

    def upgrade(self, app_settings: AppSettings) -> None:
        """Upgrades all installed packages with 'apt-get upgrade'."""
        self.logger.info("Upgrading installed packages via 'apt-get upgrade'...")
        self._run_apt(
            ["apt-get", "upgrade", "-yq"], app_settings, "Failed to upgrade packages"
        )
        self.logger.info("Installed packages upgraded successfully.")

    def is_installed(self, package: str, app_settings: AppSettings) -> bool:
        """
        True only when dpkg reports `package` as fully installed. An unknown
        package makes dpkg-query exit non-zero, which counts as not installed.
        """
        try:
            result = run_command(
                ["dpkg-query", "-W", "-f=${db:Status-Status}", package],
                app_settings,
                capture_output=True,
                check=True,
                current_logger=self.logger,
            )
        except subprocess.CalledProcessError:
            return False
        return result.stdout.strip() == DPKG_INSTALLED_STATUS

    def install(
        self,
        packages: Union[List[str], str],
        app_settings: AppSettings,
    ) -> None:
        """
        Installs one or more packages using 'apt-get install'.

        Packages that dpkg already reports as installed are skipped; any other
        state, including half-installed, is handed to apt-get.

        Args:
            packages: A single package name or a list of package names.
            app_settings: The application settings.

        Raises:
            subprocess.CalledProcessError: If apt-get fails.
        """
        if not isinstance(packages, list):
            packages = [packages]

        packages_to_install = []
        for pkg_name in packages:
            if self.is_installed(pkg_name, app_settings):
                self.logger.info(
                    f"Package '{pkg_name}' is already installed. Skipping."
                )
            else:
                self.logger.info(
                    f"Marking package for installation: {pkg_name}"
                )
                packages_to_install.append(pkg_name)

        if not packages_to_install:
            self.logger.info("All requested packages are already installed.")
            return

        self.logger.info(
            f"Committing installation for: {', '.join(packages_to_install)}"
        )
        self._run_apt(
            ["apt-get", "install", "-yq"] + packages_to_install,
            app_settings,
            "Failed to install packages",
        )
        self.logger.info("Packages installed successfully.")

    def add_ppa(self, ppa: str, app_settings: AppSettings) -> None:
        """
        Registers a Launchpad PPA (e.g. 'ppa:ondrej/php') with
        'add-apt-repository' and refreshes the package lists.
        """
        self.logger.info(f"Adding repository: {ppa}")
        self._run_apt(
            ["add-apt-repository", "-y", ppa],
            app_settings,
            f"Failed to add repository '{ppa}'",
        )
        self.update(app_settings)
