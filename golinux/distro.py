"""Checks on the host operating system and its distribution."""

import platform

_PACKAGE_MANAGER = "systemd-manager"


class UnsupportedOSError(RuntimeError):
    """Raised when the host operating system is not Linux."""


def check_os_is_linux():
    """Raise UnsupportedOSError unless the current operating system is Linux."""
    os_name = platform.system().lower()
    if os_name != "linux":
        raise UnsupportedOSError(
            f"this library only supports Linux, but found: {os_name}"
        )


def get_package_manager():
    """Return the name of the package manager for the current distribution."""
    return _PACKAGE_MANAGER