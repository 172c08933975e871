"""Running shell commands locally and on remote machines over SSH."""

import base64
import subprocess

_SSH_OPTIONS = "-o BatchMode=yes -o ConnectTimeout=5"


class CommandError(RuntimeError):
    """Raised when a local command cannot run or exits with a non-zero status."""

    def __init__(self, message, output="", returncode=None):
        super().__init__(message)
        self.output = output
        self.returncode = returncode


class SshError(RuntimeError):
    """Raised when an SSH check or a remote command fails."""

    def __init__(self, message, output=""):
        super().__init__(message)
        self.output = output


def run_cli_local(command):
    """Run a command line through ``sh -c`` and return its combined, trimmed output."""
    try:
        completed = subprocess.run(
            ["sh", "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"command failed: {exc}") from exc

    output = (completed.stdout or b"").decode(errors="replace").strip()
    if completed.returncode != 0:
        raise CommandError(
            f"command failed: {output}",
            output=output,
            returncode=completed.returncode,
        )
    return output


def is_vm_ssh_configured(vm_name):
    """Tell whether an alias resolves to a real host in the SSH configuration."""
    command = f"ssh -G {vm_name} | grep 'hostname ' | cut -d' ' -f2"
    try:
        resolved = run_cli_local(command)
    except CommandError as exc:
        raise SshError("failed to get resolved hostname", output=exc.output) from exc
    return resolved != vm_name and resolved != ""


def is_vm_ssh_reachable(vm_name):
    """Tell whether a configured alias accepts a non-interactive SSH connection."""
    try:
        configured = is_vm_ssh_configured(vm_name)
    except SshError as exc:
        raise SshError("failed to check vm configuration", output=exc.output) from exc
    if not configured:
        return False

    try:
        run_cli_local(f"ssh {_SSH_OPTIONS} {vm_name} 'exit'")
    except CommandError:
        return False
    return True


def run_cli_ssh(vm_name, cli):
    """Run a command line on a remote machine over SSH and return its output."""
    try:
        reachable = is_vm_ssh_reachable(vm_name)
    except SshError as exc:
        raise SshError(
            "failed to check VM SSH reachability", output=exc.output
        ) from exc
    if not reachable:
        raise SshError(f"vm '{vm_name}' is not SSH reachable")

    encoded = base64.b64encode(cli.encode()).decode("ascii")
    command = (
        f"ssh {_SSH_OPTIONS} {vm_name} "
        f"\"echo '{encoded}' | base64 --decode | sh\""
    )
    try:
        return run_cli_local(command)
    except CommandError as exc:
        raise SshError(
            f"failed to run remote command on '{vm_name}'", output=exc.output
        ) from exc