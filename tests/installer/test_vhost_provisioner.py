import subprocess
from unittest.mock import MagicMock, call

import pytest

from installer.vhost_provisioner import (
    document_root_escapes_web_root,
    document_root_for,
    provision_virtual_host,
    render_index_page,
    render_vhost_config,
    site_config_path_for,
)

EXPECTED_VHOST = (
    "<VirtualHost *:80>\n"
    "    ServerName app.example.com\n"
    "    ServerAlias *.app.example.com\n"
    "    DocumentRoot /var/www/app.example.com\n"
    "    <Directory /var/www/app.example.com>\n"
    "        AllowOverride All\n"
    "        Require all granted\n"
    "    </Directory>\n"
    "</VirtualHost>\n"
)


def test_paths_for_domain(app_settings):
    assert document_root_for("app.example.com", app_settings) == "/var/www/app.example.com"
    assert (
        site_config_path_for("app.example.com", app_settings)
        == "/etc/apache2/sites-available/app.example.com.conf"
    )


def test_render_vhost_config(app_settings):
    assert render_vhost_config("app.example.com", app_settings) == EXPECTED_VHOST


def test_render_vhost_config_custom_web_root(app_settings):
    app_settings.web_root = "/srv/www"

    rendered = render_vhost_config("shop.example.org", app_settings)

    assert "DocumentRoot /srv/www/shop.example.org\n" in rendered
    assert "<Directory /srv/www/shop.example.org>\n" in rendered
    assert "ServerAlias *.shop.example.org\n" in rendered


def test_render_index_page(app_settings):
    assert (
        render_index_page("app.example.com", app_settings)
        == "<?php echo 'This is the app.example.com subdomain.'; ?>\n"
    )


@pytest.fixture
def patched_steps(mocker):
    manager = MagicMock()
    for name in (
        "enable_apache_module",
        "restart_apache",
        "make_directory",
        "write_file_elevated",
        "enable_apache_site",
        "chown_recursive",
    ):
        manager.attach_mock(
            mocker.patch(f"installer.vhost_provisioner.{name}"), name
        )
    return manager


def test_provision_virtual_host_order(patched_steps, app_settings, mock_logger):
    provision_virtual_host("app.example.com", app_settings, mock_logger)

    assert patched_steps.mock_calls == [
        call.enable_apache_module("rewrite", app_settings, mock_logger),
        call.restart_apache(app_settings, mock_logger),
        call.make_directory("/var/www/app.example.com", app_settings, mock_logger),
        call.write_file_elevated(
            "/etc/apache2/sites-available/app.example.com.conf",
            EXPECTED_VHOST,
            app_settings,
            mock_logger,
        ),
        call.enable_apache_site("app.example.com.conf", app_settings, mock_logger),
        call.restart_apache(app_settings, mock_logger),
        call.write_file_elevated(
            "/var/www/app.example.com/index.php",
            "<?php echo 'This is the app.example.com subdomain.'; ?>\n",
            app_settings,
            mock_logger,
        ),
        call.chown_recursive(
            "/var/www/app.example.com",
            "www-data",
            "www-data",
            app_settings,
            mock_logger,
        ),
    ]


def test_provision_virtual_host_stops_on_failure(
    patched_steps, app_settings, mock_logger
):

    patched_steps.enable_apache_site.side_effect = subprocess.CalledProcessError(
        1, ["a2ensite"]
    )

    with pytest.raises(subprocess.CalledProcessError):
        provision_virtual_host("app.example.com", app_settings, mock_logger)

    patched_steps.chown_recursive.assert_not_called()
    assert patched_steps.write_file_elevated.call_count == 1


@pytest.mark.parametrize(
    "domain,escapes",
    [
        ("app.example.com", False),
        ("a-b.c", False),
        ("...", False),
        (".", True),
        ("..", True),
    ],
)
def test_document_root_escapes_web_root(app_settings, domain, escapes):
    assert document_root_escapes_web_root(domain, app_settings) is escapes


def test_provision_virtual_host_warns_when_root_leaves_web_root(
    patched_steps, app_settings, mock_logger
):
    provision_virtual_host("..", app_settings, mock_logger)

    warning = mock_logger.warning.call_args.args[0]
    assert "resolves to /var, outside /var/www" in warning
    patched_steps.chown_recursive.assert_called_once()


def test_provision_virtual_host_no_warning_for_regular_domain(
    patched_steps, app_settings, mock_logger
):
    provision_virtual_host("app.example.com", app_settings, mock_logger)

    mock_logger.warning.assert_not_called()
