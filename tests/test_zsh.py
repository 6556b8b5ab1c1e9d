import pytest

from vfox.shells.bash import Bash
from vfox.shells.zsh import Zsh


@pytest.mark.parametrize(
    "envs",
    [
        {"FOO": "BAR"},
        {"JAVA_HOME": "/opt/java home"},
        {"X": None},
        {"A": "it's", "B": None, "C": "\u00e9"},
    ],
)
def test_export_matches_bash(envs):
    assert Zsh().export(envs) == Bash().export(envs)


def test_activate_uses_zsh_hook_arrays():
    hook = Zsh().activate()
    assert "precmd_functions" in hook
    assert "chpwd_functions" in hook
    assert "env -s zsh" in hook


def test_activate_differs_from_bash():
    assert Zsh().activate() != Bash().activate()
    assert "PROMPT_COMMAND" not in Zsh().activate()


def test_activate_keeps_template_placeholders():
    hook = Zsh().activate()
    assert "{{.SelfPath}}" in hook
    assert "{{.EnvContent}}" in hook