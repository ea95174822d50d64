# common/exceptions.py
# -*- coding: utf-8 -*-
"""
Exceptions raised by provisioning steps.

External command failures are not wrapped; they propagate as
subprocess.CalledProcessError from common.command_utils.
"""


class ProvisioningError(Exception):
    """Base class for errors that abort a provisioning run."""


class InstallerIntegrityError(ProvisioningError):
    """A downloaded installer did not match its published digest."""

    def __init__(self, expected: str, actual: str):
        super().__init__(
            f"Installer digest mismatch: expected {expected or '<empty>'}, got {actual}"
        )
        self.expected = expected
        self.actual = actual
