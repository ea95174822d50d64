#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Entry point for the LAMP host installer.

Run from the project root with root privileges, e.g.:
    sudo python3 install.py --domain app.example.com
"""

import sys

from setup.main_installer import main

if __name__ == "__main__":
    sys.exit(main())
