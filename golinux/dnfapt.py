"""Installing packages and repositories with the distribution's package tools."""

import logging
import platform

from golinux.distro import UnsupportedOSError

_log = logging.getLogger(__name__)


def _require_linux():
    os_name = platform.system().lower()
    if os_name != "linux":
        raise UnsupportedOSError(
            f"this function only supports Linux, but found: {os_name}"
        )


def install_package(package_name):
    """Install a dnf/apt package on a Linux distribution."""
    _log.info("Attempting to install d dnfapt package: %s", package_name)
    _require_linux()
    print(f"Using a single primitive to install {package_name} on a Linux system.")
    _log.info("Successfully installed dnfapt package: %s", package_name)


def install(package_name):
    """Install a dnf/apt repository on a Linux distribution."""
    _log.info("Attempting to install package: %s", package_name)
    _require_linux()
    print(f"Using a single primitive to install {package_name} on a Linux system.")
    _log.info("Successfully installed package: %s", package_name)