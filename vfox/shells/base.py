"""Common interface of the shells that can be hooked."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional

EnvVars = Mapping[str, Optional[str]]


class Shell(ABC):
    """A shell that can be hooked and given environment commands."""

    name: str = ""

    @abstractmethod
    def activate(self) -> str:
        """Return the hook script template for this shell."""

    def export(self, envs: EnvVars) -> str:
        """Return commands that set each variable, or unset it where the value is None."""
        return "".join(
            self._unset(key) if value is None else self._export_var(key, value)
            for key, value in envs.items()
        )

    @abstractmethod
    def _export_var(self, key: str, value: str) -> str:
        """Return the command that sets key to value."""

    @abstractmethod
    def _unset(self, key: str) -> str:
        """Return the command that removes key."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"