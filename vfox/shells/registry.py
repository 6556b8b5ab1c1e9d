"""Lookup of supported shells by name."""

from __future__ import annotations

from vfox.shells.base import Shell
from vfox.shells.bash import Bash
from vfox.shells.fish import Fish
from vfox.shells.powershell import PowerShell
from vfox.shells.zsh import Zsh

_SHELLS: dict[str, Shell] = {
    "bash": Bash(),
    "zsh": Zsh(),
    "pwsh": PowerShell(),
    "fish": Fish(),
}


def new_shell(name: str) -> Shell | None:
    """Return the shell with this name, ignoring case; None if unsupported."""
    return _SHELLS.get(name.lower())