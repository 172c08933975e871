# golinux

Small helpers for working with Linux hosts from Python: running shell
commands locally or over SSH, checking whether the current user is in a
sudo group, creating and deleting files through `sudo`, and reading a few
properties of the local system.

The package has no third-party dependencies. It needs a POSIX system
(`golinux.user` uses `pwd` and `grp`). Several functions call `sh`, `ssh`,
`sudo`, `uname` and `base64` through `subprocess`.

## Install

```
pip install golinux
pip install "golinux[test]"   # with pytest for the test suite
```

## Modules

### `golinux.executor`

- `run_cli_local(command)` runs `sh -c command` and returns stdout and
  stderr together, stripped of surrounding whitespace. It raises
  `CommandError` if the command cannot be started or exits with a non-zero
  status. The error carries `output` and `returncode`.
- `is_vm_ssh_configured(vm_name)` runs `ssh -G vm_name` and returns `True`
  when the resolved `hostname` is non-empty and differs from the alias.
- `is_vm_ssh_reachable(vm_name)` returns `False` for an unconfigured alias.
  Otherwise it tries `ssh -o BatchMode=yes -o ConnectTimeout=5 vm_name 'exit'`
  and returns whether that succeeded.
- `run_cli_ssh(vm_name, cli)` checks reachability first. It then sends the
  command base64-encoded, decodes it on the remote side, pipes it to `sh`,
  and returns the output. It raises `SshError` when the VM is not reachable,
  when a check fails, or when the remote command fails.

### `golinux.user`

- `can_be_sudo_and_is_not_root()` returns `True` when the effective user is
  not root and belongs to a group named `sudo` or `wheel` (case-insensitive).
- `can_be_sudo_and_is_not_root_extend()` does the same check and also
  accepts `admin`, the macOS administrators group.
- Both raise `UserLookupError` if the current user or their groups cannot be
  looked up. Group ids that cannot be resolved are skipped.

These functions only check group membership. They do not ask `sudo`
whether it would actually grant privileges.

### `golinux.filex`

- `touch_as_sudo(file_path)` requires `can_be_sudo_and_is_not_root()`, runs
  `sudo touch file_path`, and returns `True`.
- `delete_as_sudo(file_path)` returns `True` at once if the path does not
  exist. Otherwise it performs the same sudo check, runs
  `sudo rm -f file_path`, and returns `True`.
- Both raise `SudoError` when the user lacks sudo group membership, when the
  membership check fails, or when the command fails.

The path is placed into a shell command line as given, without quoting.

### `golinux.properties`

`get_property_local(property, *args)` returns one of these properties as a
stripped string:

| name       | value                                                          |
|------------|----------------------------------------------------------------|
| `uuid`     | `sudo cat /sys/class/dmi/id/product_uuid`                      |
| `uname`    | output of `uname -m`                                           |
| `osdistro` | the `ID` from `/etc/os-release` (`rhel` becomes `redhat`, `ol` becomes `oracle`, `amzn` becomes `amazon`, `sled` becomes `suse`) |
| `osfamily` | the family of that distribution, such as `debian`, `rhel`, `suse` or `arch`, or an empty string if unknown |

An unknown name raises `PropertyError`, and so does a handler that fails.
Extra arguments are accepted and ignored. `get_linux_property_map()`
returns the mapping from names to handler functions.

### `golinux.distro`

- `check_os_is_linux()` raises `UnsupportedOSError` on any system other
  than Linux.
- `get_package_manager()` returns the fixed string `"systemd-manager"`.

### `golinux.dnfapt`

`install_package(package_name)` and `install(package_name)` log the
request and raise `UnsupportedOSError` on systems other than Linux. On Linux
they print a line naming the package.

## What it does not do

- `golinux.dnfapt` does not install packages or repositories. It does not
  call `dnf`, `apt` or any other package tool. It only checks the system and
  prints a message.
- `get_package_manager()` does not detect the distribution's package
  manager. It always returns the same placeholder name.
- There is no command-line program. The package is used as a library.

## Example

```python
from golinux.executor import CommandError, run_cli_local, run_cli_ssh
from golinux.properties import get_property_local

print(run_cli_local("uname -s"))
print(get_property_local("osfamily"))

try:
    run_cli_local("exit 3")
except CommandError as exc:
    print(exc.returncode)  # 3

print(run_cli_ssh("o1u", "head -n 1 /etc/os-release"))
```