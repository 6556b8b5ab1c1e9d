"""File operations confined to a root directory."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _join(root: str, path: str) -> str:
    parts = [part for part in (root, path) if part]
    if not parts:
        return ""
    return os.path.normpath(os.sep.join(parts))


@dataclass
class FileOperation:
    """File operations whose paths are taken relative to root_path."""

    root_path: str = ""

    def symlink(self, src: str, dest: str) -> bool:
        """Create dest as a symbolic link to src, both under root_path.

        Returns True; raises OSError when the link cannot be made.
        """
        os.symlink(_join(self.root_path, src), _join(self.root_path, dest))
        return True