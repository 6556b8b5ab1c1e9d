"""Data types describing SDK packages, usage scopes and remote plugins."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Mapping


@dataclass
class Info:
    """One installable artefact: the main SDK or an additional file."""

    name: str
    version: str = ""
    path: str = ""
    note: str = ""
    checksum: Any = None

    def label(self) -> str:
        """Return the name@version label."""
        return f"{self.name}@{self.version}"

    def storage_path(self, parent_dir: str) -> str:
        """Return the directory this artefact is stored in under parent_dir."""
        if not self.version:
            return os.path.join(parent_dir, self.name)
        return os.path.join(parent_dir, f"{self.name}-{self.version}")


@dataclass
class Package:
    """A main SDK together with its additional artefacts."""

    main: Info
    additions: list[Info] = field(default_factory=list)


class UseScope(IntEnum):
    """Where a chosen SDK version takes effect."""

    GLOBAL = 0
    PROJECT = 1
    SESSION = 2

    def __str__(self) -> str:
        return self.name.lower()


class RecordSource(str, Enum):
    """Origin of a recorded version choice."""

    GLOBAL = "global"
    PROJECT = "project"
    SESSION = "session"

    def __str__(self) -> str:
        return self.value


@dataclass
class RemotePluginInfo:
    """A plugin entry listed by a remote repository."""

    filename: str = ""
    author: str = ""
    desc: str = ""
    name: str = ""
    version: str = ""
    sha256: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RemotePluginInfo":
        """Build from the repository's JSON object."""
        return cls(
            filename=data.get("name", ""),
            author=data.get("plugin_author", ""),
            desc=data.get("plugin_desc", ""),
            name=data.get("plugin_name", ""),
            version=data.get("plugin_version", ""),
            sha256=data.get("sha256", ""),
            url=data.get("url", ""),
        )


@dataclass
class Category:
    """A named group of remote plugins."""

    name: str = ""
    count: str = ""
    plugins: list[RemotePluginInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Category":
        """Build from the repository's JSON object."""
        return cls(
            name=data.get("category", ""),
            count=data.get("count", ""),
            plugins=[RemotePluginInfo.from_dict(item) for item in data.get("files") or []],
        )