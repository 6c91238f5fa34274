"""Unit tests for the FileRecord class."""

import os

import pytest

from osfind.file_record import FileRecord
from osfind.types import FileType


def test_file_record_attributes():
    record = FileRecord("a", "/tmp/x/a", inode=12, nlink=1, size=10)
    assert record.name == "a"
    assert record.path == "/tmp/x/a"
    assert record.inode == 12
    assert record.nlink == 1
    assert record.size == 10
    assert record.file_type is FileType.FILE
    assert not record.is_dir


def test_from_stat_regular_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"x" * 42)
    stat_info = os.lstat(path)

    record = FileRecord.from_stat("data.bin", str(path), stat_info)

    assert record.size == 42
    assert record.inode == stat_info.st_ino
    assert record.nlink == 1
    assert record.file_type is FileType.FILE


def test_from_stat_directory(tmp_path):
    record = FileRecord.from_stat(tmp_path.name, str(tmp_path), os.lstat(tmp_path))
    assert record.is_dir
    assert record.file_type is FileType.DIRECTORY


def test_from_stat_symlink_to_directory(tmp_path):
    """Test that a symlink to a directory is not classified as a directory."""
    link = tmp_path / "link"
    try:
        os.symlink(tmp_path, link)
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported")

    record = FileRecord.from_stat("link", str(link), os.lstat(link))
    assert record.file_type is FileType.SYMLINK
    assert not record.is_dir


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
def test_from_stat_other(tmp_path):
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)
    record = FileRecord.from_stat("pipe", str(fifo), os.lstat(fifo))
    assert record.file_type is FileType.OTHER
    assert not record.is_dir


def test_equality_and_repr():
    first = FileRecord("a", "/tmp/x/a", inode=12, nlink=1, size=10)
    second = FileRecord("a", "/tmp/x/a", inode=12, nlink=1, size=10)
    assert first == second
    assert hash(first) == hash(second)
    assert first != FileRecord("a", "/tmp/x/a", inode=12, nlink=2, size=10)
    assert first != "/tmp/x/a"
    assert repr(first) == "FileRecord(path='/tmp/x/a', inode=12, nlink=1, size=10, file_type='file')"
