"""Helpers for Linux hosts: local and SSH command execution, sudo group checks, sudo file operations and system properties."""

__version__ = "0.1.0"
__all__ = ["distro", "dnfapt", "executor", "filex", "properties", "user"]