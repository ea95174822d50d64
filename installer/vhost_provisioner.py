# installer/vhost_provisioner.py
# -*- coding: utf-8 -*-
"""
Creates the Apache virtual host for a domain: document root, site
definition, placeholder entry page and ownership.
"""
import logging
import os
from typing import Optional

from common.command_utils import log_provisioner
from common.file_utils import chown_recursive, make_directory, write_file_elevated
from installer.apache_installer import (
    enable_apache_module,
    enable_apache_site,
    restart_apache,
)
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.php"


def document_root_for(domain: str, app_settings: AppSettings) -> str:
    return os.path.join(app_settings.web_root, domain)


def document_root_escapes_web_root(domain: str, app_settings: AppSettings) -> bool:
    """
    True when the document root of `domain` does not normalise to a
    directory strictly below `web_root`, e.g. for "." or "..".
    """
    web_root = os.path.normpath(app_settings.web_root)
    document_root = os.path.normpath(document_root_for(domain, app_settings))
    return os.path.dirname(document_root) != web_root


def site_config_path_for(domain: str, app_settings: AppSettings) -> str:
    return os.path.join(app_settings.apache.sites_available_dir, f"{domain}.conf")


def render_vhost_config(domain: str, app_settings: AppSettings) -> str:
    """
    Render the virtual-host definition binding `domain` and `*.domain` to
    the domain's document root.
    """
    return app_settings.apache.vhost_template.format(
        domain=domain,
        document_root=document_root_for(domain, app_settings),
    )


def render_index_page(domain: str, app_settings: AppSettings) -> str:
    return app_settings.index_page_template.format(domain=domain)


def provision_virtual_host(
    domain: str,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Provision the Apache site for `domain`.

    Steps, in order: enable mod_rewrite and restart Apache, create the
    document root, write the site definition, enable the site, restart
    Apache, write the placeholder index.php and hand the document root to
    the web server account.

    Raises:
        subprocess.CalledProcessError: On the first failing command. Earlier
            steps are not undone.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_settings.symbols
    document_root = document_root_for(domain, app_settings)
    site_config_path = site_config_path_for(domain, app_settings)

    if document_root_escapes_web_root(domain, app_settings):
        log_provisioner(
            f"{symbols.get('warning', '')} Document root {document_root} resolves to {os.path.normpath(document_root)}, outside {app_settings.web_root}. Its ownership will be changed to {app_settings.web_user}:{app_settings.web_group}.",
            "warning",
            logger_to_use,
            app_settings,
        )

    log_provisioner(
        f"{symbols.get('gear', '⚙️')} Enabling Apache rewrite module...",
        "info",
        logger_to_use,
        app_settings,
    )
    enable_apache_module("rewrite", app_settings, logger_to_use)
    restart_apache(app_settings, logger_to_use)

    log_provisioner(
        f"{symbols.get('step', '➡️')} Creating document root {document_root}...",
        "info",
        logger_to_use,
        app_settings,
    )
    make_directory(document_root, app_settings, logger_to_use)

    log_provisioner(
        f"{symbols.get('step', '➡️')} Creating virtual host configuration {site_config_path}...",
        "info",
        logger_to_use,
        app_settings,
    )
    write_file_elevated(
        site_config_path,
        render_vhost_config(domain, app_settings),
        app_settings,
        logger_to_use,
    )

    log_provisioner(
        f"{symbols.get('step', '➡️')} Enabling virtual host {domain}.conf...",
        "info",
        logger_to_use,
        app_settings,
    )
    enable_apache_site(f"{domain}.conf", app_settings, logger_to_use)
    restart_apache(app_settings, logger_to_use)

    write_file_elevated(
        os.path.join(document_root, INDEX_FILENAME),
        render_index_page(domain, app_settings),
        app_settings,
        logger_to_use,
    )

    log_provisioner(
        f"{symbols.get('step', '➡️')} Setting ownership of {document_root} to {app_settings.web_user}:{app_settings.web_group}...",
        "info",
        logger_to_use,
        app_settings,
    )
    chown_recursive(
        document_root,
        app_settings.web_user,
        app_settings.web_group,
        app_settings,
        logger_to_use,
    )

    log_provisioner(
        f"{symbols.get('success', '✅')} Virtual host for {domain} is live.",
        "success",
        logger_to_use,
        app_settings,
    )
