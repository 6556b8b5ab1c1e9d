import os

import pytest

from vfox.fileops import FileOperation


def test_symlink_under_root(tmp_path):
    (tmp_path / "target.txt").write_text("hello")
    ops = FileOperation(str(tmp_path))
    assert ops.symlink("target.txt", "link.txt") is True
    link = tmp_path / "link.txt"
    assert link.is_symlink()
    assert os.readlink(link) == str(tmp_path / "target.txt")
    assert link.read_text() == "hello"


def test_symlink_absolute_paths_are_joined_to_root(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "f").write_text("data")
    ops = FileOperation(str(tmp_path))
    assert ops.symlink("/a/f", "/a/g") is True
    assert (tmp_path / "a" / "g").read_text() == "data"


def test_symlink_with_empty_root(tmp_path):
    src = tmp_path / "src"
    src.write_text("x")
    dest = tmp_path / "dest"
    assert FileOperation().symlink(str(src), str(dest)) is True
    assert os.readlink(dest) == str(src)


def test_symlink_existing_destination_raises(tmp_path):
    (tmp_path / "a").write_text("1")
    (tmp_path / "b").write_text("2")
    ops = FileOperation(str(tmp_path))
    with pytest.raises(FileExistsError):
        ops.symlink("a", "b")
    assert (tmp_path / "b").read_text() == "2"


def test_symlink_missing_directory_raises(tmp_path):
    ops = FileOperation(str(tmp_path))
    with pytest.raises(FileNotFoundError):
        ops.symlink("a", "missing/dir/b")