"""Checks on the privileges of the current user."""

import grp
import os
import pwd

_SUDO_GROUPS = frozenset({"sudo", "wheel"})
_SUDO_GROUPS_EXTENDED = _SUDO_GROUPS | {"admin"}


class UserLookupError(RuntimeError):
    """Raised when the current user or their groups cannot be determined."""


def _group_names():
    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError as exc:
        raise UserLookupError(f"cannot determine current user: {exc}") from exc
    try:
        gids = os.getgrouplist(entry.pw_name, entry.pw_gid)
    except OSError as exc:
        raise UserLookupError(f"cannot get user groups: {exc}") from exc

    for gid in gids:
        try:
            yield grp.getgrgid(gid).gr_name
        except KeyError:
            # Unresolvable group ids occur on some systems; skip them.
            continue


def _is_member_and_not_root(groups):
    if os.geteuid() == 0:
        return False
    return any(name.lower() in groups for name in _group_names())


def can_be_sudo_and_is_not_root():
    """Return True if the user is not root and belongs to 'sudo' or 'wheel'."""
    return _is_member_and_not_root(_SUDO_GROUPS)


def can_be_sudo_and_is_not_root_extend():
    """Like can_be_sudo_and_is_not_root, also accepting the 'admin' group."""
    return _is_member_and_not_root(_SUDO_GROUPS_EXTENDED)