"""Creating and deleting files in privileged locations through sudo."""

import os

from golinux.executor import CommandError, run_cli_local
from golinux.user import UserLookupError, can_be_sudo_and_is_not_root


class SudoError(RuntimeError):
    """Raised when a sudo file operation is not permitted or fails."""


def _require_sudo():
    try:
        allowed = can_be_sudo_and_is_not_root()
    except UserLookupError as exc:
        raise SudoError("failed to check for sudo privileges") from exc
    if not allowed:
        raise SudoError("current user does not have sudo privileges")


def touch_as_sudo(file_path):
    """Create a file with ``sudo touch``; return True on success."""
    _require_sudo()
    try:
        run_cli_local(f"sudo touch {file_path}")
    except CommandError as exc:
        raise SudoError(f"failed to create file at {file_path} as sudo") from exc
    return True


def delete_as_sudo(file_path):
    """Delete a file with ``sudo rm -f``; return True if it is gone."""
    try:
        os.stat(file_path)
    except FileNotFoundError:
        return True
    except OSError:
        pass

    _require_sudo()
    try:
        run_cli_local(f"sudo rm -f {file_path}")
    except CommandError as exc:
        raise SudoError(f"failed to delete file at {file_path} as sudo") from exc
    return True