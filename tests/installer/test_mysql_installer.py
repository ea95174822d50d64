from installer.mysql_installer import SECURE_INSTALLATION_REMINDER, install_mysql


def test_install_mysql_installs_server_and_reminds(mocker, app_settings, mock_logger):
    mock_apt_cls = mocker.patch("installer.mysql_installer.AptManager")

    install_mysql(app_settings, mock_logger)

    mock_apt_cls.return_value.install.assert_called_once_with(
        ["mysql-server"], app_settings
    )
    reminder = mock_logger.warning.call_args.args[0]
    assert SECURE_INSTALLATION_REMINDER in reminder
    assert "mysql_secure_installation" in reminder


def test_install_mysql_never_runs_secure_installation(mocker, app_settings, mock_logger):
    mock_apt_cls = mocker.patch("installer.mysql_installer.AptManager")

    install_mysql(app_settings, mock_logger)

    installed = mock_apt_cls.return_value.install.call_args.args[0]
    assert "mysql_secure_installation" not in installed
