[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golinux"
version = "0.1.0"
description = "Small helpers for Linux hosts: local and SSH command execution, sudo membership checks, privileged file operations and system properties."
requires-python = ">=3.10"
dependencies = []
keywords = ["linux", "ssh", "sudo", "shell", "system-administration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["golinux"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
