"""Fish support: hook script, quoting and export commands."""

from __future__ import annotations

from vfox.shells.base import Shell

_ENV_CONTENT = "{{.EnvContent}}"
_SELF = '"{{.SelfPath}}"'
_REFRESH = f"{_SELF} env -s fish | source"


def _block(header: str, *body: str) -> list[str]:
    return [header, *(f"    {line}" for line in body), "end"]


_FISH_HOOK = "\n".join(
    [
        "",
        _ENV_CONTENT,
        "",
        "set -g __VFOX_PID $fish_pid",
        "",
        *_block(
            "function __vfox_export_eval --on-event fish_prompt",
            _REFRESH,
            *_block(
                'if test "$vfox_fish_mode" != disable_arrow',
                *_block(
                    "function __vfox_cd_hook --on-variable PWD",
                    'if test "$vfox_fish_mode" = eval_after_arrow',
                    "    set -g __vfox_export_again 0",
                    "else",
                    f"    {_REFRESH}",
                    "end",
                ),
            ),
        ),
        "",
        *_block(
            "function __vfox_export_eval_2 --on-event fish_preexec",
            *_block(
                "if set -q __vfox_export_again",
                "set -e __vfox_export_again",
                _REFRESH,
                "echo",
            ),
            "functions --erase __vfox_cd_hook",
        ),
        "",
        *_block(
            "function __vfox_cleanup_on_exit --on-process-exit $fish_pid",
            f"{_SELF} env --cleanup",
        ),
        "",
    ]
)


def _fish_token(byte: int) -> str:
    char = chr(byte)
    if byte == 9:
        return "'\\t'"
    if byte == 10:
        return "'\\n'"
    if byte == 13:
        return "'\\r'"
    if byte <= 0x1F:
        return f"'\\X{byte:02x}'"
    if char in "'\\":
        return "\\" + char
    if byte <= ord("~"):
        return char
    return f"'\\X{byte:02x}'"


_FISH_TOKENS = tuple(_fish_token(byte) for byte in range(256))


def fish_escape(text: str) -> str:
    """Quote text for fish; the result is always single-quoted ASCII."""
    body = "".join(_FISH_TOKENS[byte] for byte in text.encode("utf-8", "surrogateescape"))
    return f"'{body}'"


class Fish(Shell):
    """The fish shell."""

    name = "fish"

    def activate(self) -> str:
        """Return the fish hook script template."""
        return _FISH_HOOK

    def _export_var(self, key: str, value: str) -> str:
        if key == "PATH":
            paths = " ".join(fish_escape(path) for path in value.split(":"))
            return f"set -x -g PATH {paths};"
        return f"set -x -g {fish_escape(key)} {fish_escape(value)};"

    def _unset(self, key: str) -> str:
        return f"set -e -g {fish_escape(key)};"