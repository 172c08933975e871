"""Lookup of named properties of the local Linux system."""

import platform
import subprocess

from golinux.executor import CommandError, run_cli_local

_PLATFORM_ALIASES = {
    "rhel": "redhat",
    "ol": "oracle",
    "amzn": "amazon",
    "sled": "suse",
}

_PLATFORM_FAMILIES = {
    "debian": "debian",
    "ubuntu": "debian",
    "linuxmint": "debian",
    "raspbian": "debian",
    "oracle": "rhel",
    "centos": "rhel",
    "redhat": "rhel",
    "scientific": "rhel",
    "enterpriseenterprise": "rhel",
    "amazon": "rhel",
    "xenserver": "rhel",
    "cloudlinux": "rhel",
    "ibm_powerkvm": "rhel",
    "rocky": "rhel",
    "almalinux": "rhel",
    "fedora": "fedora",
    "suse": "suse",
    "opensuse": "suse",
    "opensuse-leap": "suse",
    "opensuse-tumbleweed": "suse",
    "opensuse-tumbleweed-kubic": "suse",
    "sles": "suse",
    "gentoo": "gentoo",
    "slackware": "slackware",
    "arch": "arch",
    "manjaro": "arch",
    "exherbo": "exherbo",
    "alpine": "alpine",
    "coreos": "coreos",
    "solus": "solus",
    "neokylin": "neokylin",
    "anolis": "anolis",
}


class PropertyError(RuntimeError):
    """Raised when a property is unknown or cannot be retrieved."""


def _get_uuid(*_args):
    return run_cli_local("sudo cat /sys/class/dmi/id/product_uuid")


def _get_uname_m(*_args):
    completed = subprocess.run(
        ["uname", "-m"],
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        check=False,
    )
    output = (completed.stdout or b"").decode(errors="replace").strip()
    if completed.returncode != 0:
        raise CommandError(
            f"uname failed: {output}", output=output, returncode=completed.returncode
        )
    return output


def _platform():
    os_id = platform.freedesktop_os_release().get("ID", "").strip().lower()
    return _PLATFORM_ALIASES.get(os_id, os_id)


def _get_os_distro(*_args):
    return _platform()


def _get_os_family(*_args):
    return _PLATFORM_FAMILIES.get(_platform(), "")


_LINUX_PROPERTIES = {
    "uuid": _get_uuid,
    "uname": _get_uname_m,
    "osdistro": _get_os_distro,
    "osfamily": _get_os_family,
}


def get_linux_property_map():
    """Return the mapping of property names to their handler functions."""
    return _LINUX_PROPERTIES


def get_property_local(property, *args):
    """Return the named property of the local system, stripped of whitespace."""
    try:
        handler = _LINUX_PROPERTIES[property]
    except KeyError:
        raise PropertyError(f"unknown property requested: {property}") from None
    try:
        output = handler(*args)
    except (CommandError, OSError) as exc:
        raise PropertyError(f"error getting {property}: {exc}") from exc
    return output.strip()