"""
Installers for the LAMP stack.

Each module installs or configures one part of the host (Apache, PHP,
MySQL, the firewall, the virtual host and Composer) and raises on the
first failing command.
"""
