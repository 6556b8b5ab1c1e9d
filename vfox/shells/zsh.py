"""Zsh support: hook script and export commands (bash quoting)."""

from __future__ import annotations

from vfox.shells.bash import Bash

_ENV_CONTENT = "{{.EnvContent}}"
_REFRESH = 'eval "$("{{.SelfPath}}" env -s zsh)"'


def _register(array: str) -> str:
    return (
        f"(( ${{{array}[(I)_vfox_hook]}} )) || "
        f"{array}=(_vfox_hook ${array})"
    )


_ZSH_HOOK = "\n".join(
    [
        "",
        _ENV_CONTENT,
        "",
        "export __VFOX_PID=$$",
        "",
        "_vfox_hook() {",
        "    trap -- '' SIGINT",
        f"    {_REFRESH}",
        "    trap - SIGINT",
        "}",
        "",
        "typeset -ag precmd_functions chpwd_functions",
        _register("precmd_functions"),
        _register("chpwd_functions"),
        "",
        "trap 'vfox env --cleanup' EXIT",
        "",
    ]
)


class Zsh(Bash):
    """The zsh shell; it shares bash's quoting and export syntax."""

    name = "zsh"

    def activate(self) -> str:
        """Return the zsh hook script template."""
        return _ZSH_HOOK