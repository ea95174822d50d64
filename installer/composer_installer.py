# installer/composer_installer.py
# -*- coding: utf-8 -*-
"""
Downloads, verifies and runs the Composer installer, then installs the
resulting composer.phar as a system-wide command.

The installer script is checked against the SHA-384 digest published by
the Composer project before it is executed.
"""

import hashlib
import logging
from pathlib import Path
from typing import Optional

import requests

from common.command_utils import log_provisioner, run_command
from common.exceptions import InstallerIntegrityError
from common.file_utils import make_executable, move_file_elevated
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)

INSTALLER_FILENAME = "composer-setup.php"
PHAR_FILENAME = "composer.phar"


def download_installer(
    url: str,
    destination: Path,
    timeout: int,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Stream `url` into `destination`.

    A partially written file is removed before the error is re-raised.

    Raises:
        requests.exceptions.RequestException: On HTTP or network errors.
        OSError: If the file cannot be written.
    """
    logger_to_use = current_logger or module_logger
    logger_to_use.info(f"Downloading Composer installer from: {url}")
    try:
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with open(destination, "wb") as f:
                for chunk in response.iter_content(chunk_size=8192):
                    if chunk:
                        f.write(chunk)
    except (requests.exceptions.RequestException, OSError) as e:
        logger_to_use.error(f"Download of {url} failed: {e}")
        destination.unlink(missing_ok=True)
        raise
    logger_to_use.info(f"Composer installer saved to: {destination}")


def fetch_expected_digest(
    url: str,
    timeout: int,
    current_logger: Optional[logging.Logger] = None,
) -> str:
    """
    Return the first whitespace-separated token of the published checksum
    file, or an empty string if the file is empty.
    """
    logger_to_use = current_logger or module_logger
    logger_to_use.info(f"Fetching expected installer digest from: {url}")
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    tokens = response.text.split()
    return tokens[0] if tokens else ""


def sha384_of_file(path: Path) -> str:
    hasher = hashlib.sha384()
    with open(path, "rb") as f:
        for block in iter(lambda: f.read(65536), b""):
            hasher.update(block)
    return hasher.hexdigest()


def verify_installer(
    installer_path: Path,
    expected_digest: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Compare the installer's SHA-384 digest with `expected_digest`.

    Raises:
        InstallerIntegrityError: On mismatch, after deleting the installer.
    """
    logger_to_use = current_logger or module_logger
    symbols = app_settings.symbols
    actual_digest = sha384_of_file(installer_path)

    if actual_digest != expected_digest:
        log_provisioner(
            f"{symbols.get('error', '❌')} Installer corrupt",
            "error",
            logger_to_use,
            app_settings,
        )
        installer_path.unlink(missing_ok=True)
        raise InstallerIntegrityError(expected_digest, actual_digest)

    log_provisioner(
        f"{symbols.get('success', '✅')} Installer verified (SHA-384 {actual_digest[:16]}...).",
        "success",
        logger_to_use,
        app_settings,
    )


def install_composer(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Install Composer into `app_settings.composer.install_path`.

    The installer is downloaded into `composer.work_dir` (the current
    directory when unset), verified, executed with `php` and deleted. The
    produced composer.phar is moved into place as root and made executable.

    Raises:
        InstallerIntegrityError: If the digests differ.
        requests.exceptions.RequestException: If a download fails.
        subprocess.CalledProcessError: If php, mv or chmod fails.
    """
    logger_to_use = current_logger or module_logger
    symbols = app_settings.symbols
    composer = app_settings.composer
    work_dir = Path(composer.work_dir) if composer.work_dir else Path.cwd()
    installer_path = work_dir / INSTALLER_FILENAME

    log_provisioner(
        f"{symbols.get('package', '📦')} Installing Composer...",
        "info",
        logger_to_use,
        app_settings,
    )

    download_installer(
        composer.installer_url,
        installer_path,
        composer.download_timeout,
        logger_to_use,
    )
    try:
        expected_digest = fetch_expected_digest(
            composer.signature_url, composer.download_timeout, logger_to_use
        )
    except requests.exceptions.RequestException as e:
        logger_to_use.error(f"Could not fetch installer digest: {e}")
        installer_path.unlink(missing_ok=True)
        raise

    verify_installer(installer_path, expected_digest, app_settings, logger_to_use)

    try:
        run_command(
            ["php", INSTALLER_FILENAME],
            app_settings,
            current_logger=logger_to_use,
            cwd=str(work_dir),
        )
    finally:
        installer_path.unlink(missing_ok=True)

    move_file_elevated(
        str(work_dir / PHAR_FILENAME),
        composer.install_path,
        app_settings,
        logger_to_use,
    )
    make_executable(composer.install_path, app_settings, logger_to_use)

    log_provisioner(
        f"{symbols.get('success', '✅')} Composer installed at {composer.install_path}.",
        "success",
        logger_to_use,
        app_settings,
    )
