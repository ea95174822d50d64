# setup/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for application configuration.

This module defines the structured settings for the LAMP host setup,
including defaults, type annotations, and descriptions.
It utilizes Pydantic for data validation and settings management.
"""

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from setup import config as static_config

# --- Default Static Values (can be overridden by config file/env/cli) ---
DOMAIN_DEFAULT: str = "app.example.com"
WEB_ROOT_DEFAULT: str = "/var/www"
WEB_USER_DEFAULT: str = "www-data"
WEB_GROUP_DEFAULT: str = "www-data"
LOG_PREFIX_DEFAULT: str = "[LAMP-SETUP]"

APACHE_SERVICE_DEFAULT: str = "apache2"
APACHE_SITES_AVAILABLE_DEFAULT: str = "/etc/apache2/sites-available"
UFW_APACHE_PROFILE_DEFAULT: str = "Apache Full"

PHP_VERSION_DEFAULT: str = "8.3"
PHP_PPA_DEFAULT: str = "ppa:ondrej/php"

COMPOSER_INSTALLER_URL_DEFAULT: str = "https://getcomposer.org/installer"
COMPOSER_SIGNATURE_URL_DEFAULT: str = (
    "https://composer.github.io/installer.sha384sum"
)
COMPOSER_INSTALL_PATH_DEFAULT: str = "/usr/local/bin/composer"

SYMBOLS_DEFAULT: Dict[str, str] = dict(static_config.SYMBOLS)

VHOST_TEMPLATE_DEFAULT: str = """\
<VirtualHost *:80>
    ServerName {domain}
    ServerAlias *.{domain}
    DocumentRoot {document_root}
    <Directory {document_root}>
        AllowOverride All
        Require all granted
    </Directory>
</VirtualHost>
"""

INDEX_PAGE_TEMPLATE_DEFAULT: str = (
    "<?php echo 'This is the {domain} subdomain.'; ?>\n"
)


class ApacheSettings(BaseModel):
    """Apache web server settings."""

    service_name: str = Field(default=APACHE_SERVICE_DEFAULT, description="systemd unit name of the web server.")
    sites_available_dir: str = Field(
        default=APACHE_SITES_AVAILABLE_DEFAULT,
        description="Directory holding virtual-host definitions.",
    )
    ufw_profile: str = Field(default=UFW_APACHE_PROFILE_DEFAULT, description="UFW application profile to allow.")
    vhost_template: str = Field(
        default=VHOST_TEMPLATE_DEFAULT,
        description="Template for the virtual-host file. Supports placeholders {domain} and {document_root}.",
    )


class PhpSettings(BaseModel):
    """PHP runtime settings."""

    version: str = Field(default=PHP_VERSION_DEFAULT, description="PHP version whose Apache module and FPM config are enabled.")
    ppa: str = Field(default=PHP_PPA_DEFAULT, description="Apt repository providing PHP packages.")
    packages: List[str] = Field(
        default_factory=lambda: list(static_config.PHP_PACKAGES),
        description="PHP packages and extensions to install.",
    )


class MysqlSettings(BaseModel):
    """MySQL server settings."""

    packages: List[str] = Field(default_factory=lambda: list(static_config.MYSQL_PACKAGES), description="MySQL packages to install.")


class ComposerSettings(BaseModel):
    """Composer bootstrap settings."""

    installer_url: str = Field(default=COMPOSER_INSTALLER_URL_DEFAULT, description="URL of the Composer installer script.")
    signature_url: str = Field(
        default=COMPOSER_SIGNATURE_URL_DEFAULT,
        description="URL of the expected SHA-384 digest of the installer.",
    )
    install_path: str = Field(default=COMPOSER_INSTALL_PATH_DEFAULT, description="Final location of the composer binary.")
    work_dir: Optional[Path] = Field(
        default=None,
        description="Directory the installer is downloaded into. Defaults to the current directory.",
    )
    download_timeout: int = Field(default=60, description="HTTP timeout in seconds for installer downloads.")


class AppSettings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_prefix="LAMP_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    domain_default: str = Field(default=DOMAIN_DEFAULT, description="Domain used when the prompt is left empty.")
    max_domain_attempts: Optional[int] = Field(
        default=None,
        description="Maximum invalid domain entries before giving up. None retries forever.",
    )
    web_root: str = Field(default=WEB_ROOT_DEFAULT, description="Parent directory of document roots.")
    web_user: str = Field(default=WEB_USER_DEFAULT, description="Owner of the document root.")
    web_group: str = Field(default=WEB_GROUP_DEFAULT, description="Group of the document root.")
    index_page_template: str = Field(
        default=INDEX_PAGE_TEMPLATE_DEFAULT,
        description="Template for the placeholder entry page. Supports placeholder {domain}.",
    )
    log_prefix: str = Field(default=LOG_PREFIX_DEFAULT,
                            description="Prefix for log messages from the installer script.")

    apache: ApacheSettings = Field(default_factory=ApacheSettings)
    php: PhpSettings = Field(default_factory=PhpSettings)
    mysql: MysqlSettings = Field(default_factory=MysqlSettings)
    composer: ComposerSettings = Field(default_factory=ComposerSettings)

    symbols: Dict[str, str] = Field(default_factory=lambda: dict(SYMBOLS_DEFAULT))
