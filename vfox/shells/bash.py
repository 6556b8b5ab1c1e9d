"""Bash support: hook script, quoting and export commands."""

from __future__ import annotations

from vfox.shells.base import Shell

_BASH_HOOK = """
{{.EnvContent}}

export __VFOX_PID=$$;

_vfox_hook() {
  local previous_exit_status=$?;
  trap -- '' SIGINT;
  eval "$("{{.SelfPath}}" env -s bash)";
  trap - SIGINT;
  return $previous_exit_status;
};
if ! [[ "${PROMPT_COMMAND[*]:-}" =~ _vfox_hook ]]; then
  if [[ "$(declare -p PROMPT_COMMAND 2>&1)" == "declare -a"* ]]; then
    PROMPT_COMMAND=(_vfox_hook "${PROMPT_COMMAND[@]}")
  else
    PROMPT_COMMAND="_vfox_hook${PROMPT_COMMAND:+;$PROMPT_COMMAND}"
  fi
fi

trap 'vfox env --cleanup' EXIT
"""

_TAB, _LF, _CR = 9, 10, 13


def _bash_token(byte: int) -> tuple[str, bool]:
    """Return the text for one byte and whether it forces $'...' quoting."""
    char = chr(byte)
    hexed = (f"\\x{byte:02x}", True)
    if byte == _TAB:
        return "\\t", True
    if byte == _LF:
        return "\\n", True
    if byte == _CR:
        return "\\r", True
    if byte <= 0x1F:
        return hexed
    if byte <= ord("&"):
        return char, True
    if char == "'":
        return "\\'", True
    if byte <= ord("+"):
        return char, True
    if byte <= ord("9"):
        return char, False
    if byte <= ord("?"):
        return char, True
    if byte <= ord("Z"):
        return char, False
    if char == "[":
        return char, True
    if char == "\\":
        return "\\\\", True
    if char == "_":
        return char, False
    if byte <= ord("~"):
        return char, True
    return hexed


_BASH_TOKENS = tuple(_bash_token(byte) for byte in range(256))


def bash_escape(text: str) -> str:
    """Quote text for bash.

    The result is wrapped in $'...' when any byte needs escaping; control
    characters become ANSI escapes and non-ASCII bytes hex codes, so the
    result is always a single ASCII line.
    """
    if not text:
        return "''"
    tokens = [_BASH_TOKENS[byte] for byte in text.encode("utf-8", "surrogateescape")]
    out = "".join(piece for piece, _ in tokens)
    if any(needs_quote for _, needs_quote in tokens):
        return f"$'{out}'"
    return out


class Bash(Shell):
    """The bash shell."""

    name = "bash"

    def activate(self) -> str:
        """Return the bash hook script template."""
        return _BASH_HOOK

    def _export_var(self, key: str, value: str) -> str:
        return f"export {bash_escape(key)}={bash_escape(value)};"

    def _unset(self, key: str) -> str:
        return f"unset {bash_escape(key)};"