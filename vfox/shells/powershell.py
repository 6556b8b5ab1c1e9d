"""PowerShell support: hook script, quoting and export commands."""

from __future__ import annotations

import re

from vfox.shells.base import Shell

_PWSH_HOOK = """
{{.EnvContent}}

<#
Due to a bug in PowerShell, we have to cleanup first when the shell open.
#>
& '{{.SelfPath}}' env --cleanup 2>$null | Out-Null;

$__VFOX_PID=$pid;
$originalPrompt = $function:prompt;

function prompt {
    $export = &"{{.SelfPath}}" env -s pwsh;
    if ($export) {
        Invoke-Expression -Command $export;
    }
    &$originalPrompt;
}

<#
 When PowerShell is closed via the window's close button, this event is not fired.
#>
Register-EngineEvent -SourceIdentifier PowerShell.Exiting -SupportEvent -Action {
    &"{{.SelfPath}}" env --cleanup;
}
"""

_QUOTED = re.compile(r"'.*'")


def _pwsh_token(byte: int) -> tuple[bytes, bool]:
    """Return the bytes for one input byte and whether it forces quoting."""
    raw = bytes([byte])
    hexed = (f"\\x{byte:02x}".encode("ascii"), True)
    if byte == 9:
        return b"`t", True
    if byte == 10:
        return b"`n", True
    if byte == 13:
        return b"`r", True
    if byte <= 0x1F:
        return hexed
    if byte == ord("'"):
        return b"`'", True
    if byte <= ord("+"):
        return raw, True
    if byte <= ord("Z"):
        return raw, False
    if byte == ord("_"):
        return raw, False
    if byte == 0x7F:
        return hexed
    return raw, True


_PWSH_TOKENS = tuple(_pwsh_token(byte) for byte in range(256))


def powershell_escape(text: str) -> str:
    """Quote text for PowerShell, wrapping it in '...' when needed."""
    if not text:
        return "''"
    tokens = [_PWSH_TOKENS[byte] for byte in text.encode("utf-8", "surrogateescape")]
    out = b"".join(piece for piece, _ in tokens).decode("utf-8", "surrogateescape")
    if any(needs_quote for _, needs_quote in tokens):
        return f"'{out}'"
    return out


class PowerShell(Shell):
    """The PowerShell (pwsh) shell."""

    name = "pwsh"

    def activate(self) -> str:
        """Return the PowerShell hook script template."""
        return _PWSH_HOOK

    def _export_var(self, key: str, value: str) -> str:
        escaped = powershell_escape(value)
        if not _QUOTED.search(escaped):
            escaped = f"'{escaped}'"
        return f"$env:{powershell_escape(key)}={escaped};"

    def _unset(self, key: str) -> str:
        return f"Remove-Item -Path 'env:/{powershell_escape(key)}';"