import subprocess
from unittest.mock import MagicMock, call

import pytest

from installer.apache_installer import (
    check_apache_configuration,
    enable_apache_conf,
    enable_apache_module,
    enable_apache_site,
    install_apache,
    is_apache_installed,
    restart_apache,
)


@pytest.fixture
def apache_settings(app_settings):
    app_settings.apache.service_name = "apache2"
    app_settings.apache.ufw_profile = "Apache Full"
    return app_settings


def test_install_apache_installs_starts_and_opens_firewall(
    apache_settings, mock_logger, mocker
):
    manager = MagicMock()
    mock_apt_cls = mocker.patch("installer.apache_installer.AptManager")
    manager.attach_mock(mock_apt_cls.return_value.install, "install")
    manager.attach_mock(
        mocker.patch("installer.apache_installer.systemctl"), "systemctl"
    )
    manager.attach_mock(
        mocker.patch("installer.apache_installer.allow_ufw_application"),
        "allow_ufw_application",
    )

    install_apache(apache_settings, mock_logger)

    mock_apt_cls.assert_called_once_with(logger=mock_logger)
    assert manager.mock_calls == [
        call.install(["apache2"], apache_settings),
        call.systemctl("start", "apache2", apache_settings, mock_logger),
        call.systemctl("enable", "apache2", apache_settings, mock_logger),
        call.allow_ufw_application(
            "Apache Full", apache_settings, mock_logger
        ),
    ]


def test_install_apache_stops_when_apt_fails(
    apache_settings, mock_logger, mocker
):

    mock_apt_cls = mocker.patch("installer.apache_installer.AptManager")
    mock_apt_cls.return_value.install.side_effect = (
        subprocess.CalledProcessError(100, ["apt-get"])
    )
    mock_systemctl = mocker.patch("installer.apache_installer.systemctl")

    with pytest.raises(subprocess.CalledProcessError):
        install_apache(apache_settings, mock_logger)

    mock_systemctl.assert_not_called()


@pytest.mark.parametrize("installed", [True, False])
def test_is_apache_installed(apache_settings, mock_logger, mocker, installed):
    mock_check = mocker.patch(
        "installer.apache_installer.check_package_installed",
        return_value=installed,
    )

    assert is_apache_installed(apache_settings, mock_logger) is installed
    mock_check.assert_called_once_with(
        "apache2", apache_settings, mock_logger
    )


@pytest.mark.parametrize(
    "helper,argument,expected",
    [
        (enable_apache_module, "rewrite", ["a2enmod", "rewrite"]),
        (enable_apache_conf, "php8.3-fpm", ["a2enconf", "php8.3-fpm"]),
        (
            enable_apache_site,
            "app.example.com.conf",
            ["a2ensite", "app.example.com.conf"],
        ),
    ],
)
def test_a2en_helpers(
    apache_settings, mock_logger, mocker, helper, argument, expected
):
    mock_run = mocker.patch("installer.apache_installer.run_elevated_command")

    helper(argument, apache_settings, mock_logger)

    mock_run.assert_called_once_with(
        expected, apache_settings, current_logger=mock_logger
    )


def test_check_apache_configuration(apache_settings, mock_logger, mocker):
    mock_run = mocker.patch("installer.apache_installer.run_elevated_command")

    check_apache_configuration(apache_settings, mock_logger)

    mock_run.assert_called_once_with(
        ["apache2ctl", "configtest"],
        apache_settings,
        current_logger=mock_logger,
    )


def test_restart_apache(apache_settings, mock_logger, mocker):
    mock_systemctl = mocker.patch("installer.apache_installer.systemctl")

    restart_apache(apache_settings, mock_logger)

    mock_systemctl.assert_called_once_with(
        "restart", "apache2", apache_settings, mock_logger
    )
