"""Detection of the host operating system and CPU architecture."""

from __future__ import annotations

import platform
import sys
from enum import Enum


class OSType(str, Enum):
    """Operating systems known by name."""

    MACOS = "darwin"
    WINDOWS = "windows"
    LINUX = "linux"

    def __str__(self) -> str:
        return self.value


class ArchType(str, Enum):
    """CPU architectures known by name."""

    AMD64 = "amd64"
    ARM64 = "arm64"

    def __str__(self) -> str:
        return self.value


_ARCH_ALIASES = {
    "x86_64": ArchType.AMD64,
    "amd64": ArchType.AMD64,
    "x64": ArchType.AMD64,
    "aarch64": ArchType.ARM64,
    "arm64": ArchType.ARM64,
    "i386": "386",
    "i686": "386",
    "x86": "386",
}


def get_os_type() -> OSType | str:
    """Return the host OS; unknown systems come back as a plain name."""
    name = sys.platform
    if name == "darwin":
        return OSType.MACOS
    if name in ("win32", "cygwin"):
        return OSType.WINDOWS
    if name.startswith("linux"):
        return OSType.LINUX
    return name


def get_arch_type() -> ArchType | str:
    """Return the host architecture; unknown ones come back as a plain name."""
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)