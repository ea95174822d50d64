# setup/config.py
# -*- coding: utf-8 -*-
"""
Centralized static constants and definitions for the LAMP host setup.

This module defines truly static values for the setup scripts, such as
default package lists for apt installation, logging symbols and the
accepted domain pattern.

Mutable runtime configuration (like the domain, web root or Composer URLs)
is handled by 'setup/config_models.py' and 'setup/config_loader.py'.
"""

SCRIPT_VERSION: str = "1.0"

SYMBOLS: dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "step": "➡️",
    "gear": "⚙️",
    "package": "📦",
    "rocket": "🚀",
    "sparkles": "✨",
    "critical": "🔥",
    "debug": "🐛",
}

APACHE_PACKAGES: list[str] = ["apache2"]

PHP_PACKAGES: list[str] = [
    "php",
    "libapache2-mod-php",
    "php-mysql",
    "php-fpm",
    "php-curl",
    "php-gd",
    "php-mbstring",
    "php-xml",
    "php-zip",
    "php-bcmath",
    "php-json",
]

MYSQL_PACKAGES: list[str] = ["mysql-server"]

# Regex used to accept a domain typed at the prompt.
DOMAIN_PATTERN: str = r"^[a-zA-Z0-9.-]+$"
