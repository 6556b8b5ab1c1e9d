"""Starting a fresh copy of the shell that launched the current process."""

from __future__ import annotations

import os
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Mapping, Optional


class Process(ABC):
    """Opens a new interactive shell like the one running as a given process."""

    @abstractmethod
    def open(self, pid: int) -> None:
        """Start the shell that process pid runs and wait for it to exit."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _run_shell(path: str, env: Optional[Mapping[str, str]] = None) -> None:
    try:
        subprocess.run([path], check=True, env=None if env is None else dict(env))
    except (OSError, subprocess.SubprocessError) as err:
        raise RuntimeError(f"open a new shell failed, err:{err}") from err


class LinuxProcess(Process):
    """Finds the shell through the /proc file system."""

    def open(self, pid: int) -> None:
        """Start the executable of process pid; raise RuntimeError on failure."""
        try:
            path = os.readlink(f"/proc/{pid}/exe")
        except OSError as err:
            raise RuntimeError(f"open a new shell failed, err:{err}") from err
        _run_shell(path)


class MacOSProcess(Process):
    """Finds the shell by asking ps for the command of the process."""

    def open(self, pid: int) -> None:
        """Start the command of process pid; raise RuntimeError on failure."""
        try:
            out = subprocess.check_output(["ps", "-p", str(pid), "-o", "command="])
        except (OSError, subprocess.SubprocessError) as err:
            raise RuntimeError(f"open a new shell failed, err:{err}") from err
        fields = out.decode("utf-8", "replace").split()
        if not fields:
            raise RuntimeError("not found shell")
        name = fields[0]
        if name.startswith("-"):
            name = name[1:]
        _run_shell(name, os.environ.copy())


class WindowsProcess(Process):
    """Finds the shell's executable path through tasklist and wmic."""

    def open(self, pid: int) -> None:
        """Start the executable of process pid.

        Failures of the lookup tools propagate as they are; a failure to
        start the shell raises RuntimeError.
        """
        subprocess.check_output(["tasklist", "/FI", f"PID eq {pid}", "/NH", "/FO", "CSV"])
        out = subprocess.check_output(
            [
                "wmic",
                "process",
                "where",
                f"ProcessId={pid}",
                "get",
                "ExecutablePath",
                "/format:list",
            ]
        )
        path = out.decode("utf-8", "replace").strip()
        prefix = "ExecutablePath="
        if path.startswith(prefix):
            path = path[len(prefix):]
        _run_shell(path, os.environ.copy())


_LINUX = LinuxProcess()
_MACOS = MacOSProcess()
_WINDOWS = WindowsProcess()


def get_process() -> Process:
    """Return the process opener for the host operating system."""
    if sys.platform == "darwin":
        return _MACOS
    if sys.platform in ("win32", "cygwin"):
        return _WINDOWS
    return _LINUX