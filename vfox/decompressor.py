"""Unpacking of downloaded SDK archives (tar.gz, tar.xz and zip)."""

from __future__ import annotations

import os
import shutil
import tarfile
import zipfile
from abc import ABC, abstractmethod

_ZIP_UNIX = 3
_ZIP_READONLY = 0x01


class Decompressor(ABC):
    """Unpacks one archive file into a destination directory."""

    def __init__(self, src: str) -> None:
        self.src = src

    @abstractmethod
    def decompress(self, dest: str) -> None:
        """Unpack the archive into dest."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.src!r})"


def _strip_first_component(name: str) -> str:
    parts = name.split("/")
    if len(parts) > 1:
        parts = parts[1:]
    return "/".join(parts)


class _TarDecompressor(Decompressor):
    """Shared logic for compressed tar archives."""

    _mode = "r"

    def decompress(self, dest: str) -> None:
        """Unpack the archive into dest, dropping the top-level directory."""
        symlinks: list[tuple[str, str]] = []
        with tarfile.open(self.src, self._mode) as archive:
            for member in archive:
                fname = _strip_first_component(member.name)
                target = os.path.normpath(os.path.join(dest, fname))
                if member.isdir():
                    if not os.path.exists(target):
                        os.makedirs(target, 0o755, exist_ok=True)
                elif member.isreg():
                    try:
                        os.makedirs(os.path.dirname(target), 0o755, exist_ok=True)
                    except OSError:
                        pass
                    source = archive.extractfile(member)
                    fd = os.open(target, os.O_CREAT | os.O_RDWR, member.mode & 0o777)
                    with os.fdopen(fd, "wb") as out:
                        if source is not None:
                            with source:
                                shutil.copyfileobj(source, out)
                elif member.issym():
                    symlinks.append((member.linkname, target))
        for link_target, link_path in symlinks:
            os.symlink(link_target, link_path)


class GzipTarDecompressor(_TarDecompressor):
    """Unpacks .tar.gz and .tgz archives."""

    _mode = "r:gz"

    def decompress(self, dest: str) -> None:
        """Unpack the gzip-compressed tar archive into dest."""
        super().decompress(dest)


class XZTarDecompressor(_TarDecompressor):
    """Unpacks .tar.xz archives."""

    _mode = "r:xz"

    def decompress(self, dest: str) -> None:
        """Unpack the xz-compressed tar archive into dest."""
        super().decompress(dest)


def find_root_folder_in_zip(zip_file_path: str) -> str:
    """Return the single top-level name shared by all entries, or ""."""
    try:
        archive = zipfile.ZipFile(zip_file_path)
    except (OSError, zipfile.BadZipFile):
        return ""
    first_element = ""
    with archive:
        for name in archive.namelist():
            current = name.split("/")[0]
            if first_element and first_element != current:
                return ""
            if not first_element:
                first_element = current
    return first_element


def _zip_entry_mode(info: zipfile.ZipInfo) -> int:
    if info.create_system == _ZIP_UNIX and info.external_attr >> 16:
        return (info.external_attr >> 16) & 0o777
    if info.external_attr & _ZIP_READONLY:
        return 0o444
    return 0o666


class ZipDecompressor(Decompressor):
    """Unpacks .zip archives."""

    def decompress(self, dest: str) -> None:
        """Unpack into dest, dropping a common root folder if there is one."""
        root_folder = find_root_folder_in_zip(self.src)
        with zipfile.ZipFile(self.src) as archive:
            for info in archive.infolist():
                self._process_entry(archive, info, dest, root_folder)

    @staticmethod
    def _process_entry(
        archive: zipfile.ZipFile, info: zipfile.ZipInfo, dest: str, root_folder: str
    ) -> None:
        parts = info.filename.split("/")
        if len(parts) > 1 and root_folder:
            parts = parts[1:]
        fpath = os.path.normpath(os.path.join(dest, "/".join(parts)))
        if info.is_dir():
            os.makedirs(fpath, exist_ok=True)
            return
        fdir = os.path.dirname(fpath)
        if fdir:
            os.makedirs(fdir, exist_ok=True)
        fd = os.open(fpath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _zip_entry_mode(info))
        with os.fdopen(fd, "wb") as out, archive.open(info) as source:
            shutil.copyfileobj(source, out)


def new_decompressor(src: str) -> Decompressor | None:
    """Pick a decompressor from the file name; None if it is not an archive."""
    filename = os.path.basename(src)
    if filename.endswith(".tar.gz") or filename.endswith(".tgz"):
        return GzipTarDecompressor(src)
    if filename.endswith(".tar.xz"):
        return XZTarDecompressor(src)
    if filename.endswith(".zip"):
        return ZipDecompressor(src)
    return None