"""File system helpers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def file_exists(filename: PathLike) -> bool:
    """Tell whether a path exists and can be examined."""
    try:
        os.stat(filename)
    except OSError:
        return False
    return True


def copy_file(src: PathLike, dst: PathLike) -> None:
    """Copy the contents of src into dst, creating or truncating dst."""
    with open(src, "rb") as source, open(dst, "wb") as target:
        shutil.copyfileobj(source, target)
        target.flush()
        os.fsync(target.fileno())


def move_files(src: PathLike, target_dir: PathLike) -> None:
    """Move a file, or every entry of a directory, into target_dir."""
    source = Path(src)
    target = Path(target_dir)
    if source.is_dir():
        for entry in source.iterdir():
            os.rename(entry, target / entry.name)
    else:
        # Raises FileNotFoundError when src is missing.
        source.stat()
        os.rename(source, target / source.name)