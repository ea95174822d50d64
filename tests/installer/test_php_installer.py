from unittest.mock import MagicMock, call

import pytest

from installer.php_installer import install_php


@pytest.fixture
def patched(mocker):
    manager = MagicMock()
    mock_apt_cls = mocker.patch("installer.php_installer.AptManager")
    manager.attach_mock(mock_apt_cls.return_value.add_ppa, "add_ppa")
    manager.attach_mock(mock_apt_cls.return_value.install, "install")
    for name in (
        "enable_apache_module",
        "enable_apache_conf",
        "check_apache_configuration",
        "restart_apache",
    ):
        manager.attach_mock(mocker.patch(f"installer.php_installer.{name}"), name)
    return manager


def test_install_php_sequence(patched, app_settings, mock_logger):
    install_php(app_settings, mock_logger)

    assert patched.mock_calls == [
        call.add_ppa("ppa:ondrej/php", app_settings),
        call.install(app_settings.php.packages, app_settings),
        call.enable_apache_module("php8.3", app_settings, mock_logger),
        call.enable_apache_conf("php8.3-fpm", app_settings, mock_logger),
        call.check_apache_configuration(app_settings, mock_logger),
        call.restart_apache(app_settings, mock_logger),
    ]


def test_install_php_uses_configured_version(patched, app_settings, mock_logger):
    app_settings.php.version = "8.2"

    install_php(app_settings, mock_logger)

    patched.enable_apache_module.assert_called_once_with(
        "php8.2", app_settings, mock_logger
    )
    patched.enable_apache_conf.assert_called_once_with(
        "php8.2-fpm", app_settings, mock_logger
    )


def test_install_php_default_packages(app_settings):
    assert "libapache2-mod-php" in app_settings.php.packages
    assert "php-mysql" in app_settings.php.packages
    assert "php-json" in app_settings.php.packages
